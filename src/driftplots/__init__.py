"""Diagnostic plots for Doppler drift searches over spectrograms.

Two plots are provided: a zoomed heatmap around a cluster of candidate
detection points, and a waterfall of a channel window overlaid with a
linear drift line.  The geometry behind both (which window to display and
where the overlays go) is available separately from the rendering.

Public API
----------
.. autosummary::
    cluster_heatmap
    waterfall
    resolve_cluster_region
    resolve_drift_window
    drift_window
    cluster_range
    Border
    Region
    OverlaySelector
    DriftWindow
    PlotConfig
    Renderer
    MatplotlibRenderer
    extract_window
"""

import logging

from driftplots._config import LINE_NONE, PLOT_OPTION_ALIASES, PlotConfig
from driftplots._drift import (
    RATE_TOLERANCE,
    DriftWindow,
    channel_window,
    drift_slope,
    drift_trajectory,
    drift_window,
    resolve_drift_window,
)
from driftplots._errors import (
    DriftPlotError,
    EmptyInputError,
    InvalidBorderError,
    InvalidWindowError,
)
from driftplots._plots import cluster_heatmap, waterfall
from driftplots._region import (
    DEFAULT_OVERLAY,
    Border,
    OverlaySelector,
    Region,
    cluster_range,
    resolve_cluster_region,
    resolve_overlay,
)
from driftplots._render import MatplotlibRenderer, Renderer, extract_window

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_OVERLAY",
    "LINE_NONE",
    "PLOT_OPTION_ALIASES",
    "RATE_TOLERANCE",
    "Border",
    "DriftPlotError",
    "DriftWindow",
    "EmptyInputError",
    "InvalidBorderError",
    "InvalidWindowError",
    "MatplotlibRenderer",
    "OverlaySelector",
    "PlotConfig",
    "Region",
    "Renderer",
    "channel_window",
    "cluster_heatmap",
    "cluster_range",
    "drift_slope",
    "drift_trajectory",
    "drift_window",
    "extract_window",
    "resolve_cluster_region",
    "resolve_drift_window",
    "resolve_overlay",
    "waterfall",
]
