"""Cluster heatmaps and drift waterfalls.

Both plotting functions resolve their geometry first, then hand the window,
the values and the overlay coordinates to a :class:`~driftplots.Renderer`
and return whatever its ``heatmap`` call returned.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any

from driftplots._config import PLOT_OPTION_ALIASES, PlotConfig
from driftplots._drift import drift_window
from driftplots._region import DEFAULT_OVERLAY, as_spectrogram, resolve_cluster_region
from driftplots._render import MatplotlibRenderer, Renderer, extract_window

logger = logging.getLogger(__name__)

_CONFIG_FIELDS = frozenset(f.name for f in fields(PlotConfig))


def cluster_heatmap(
    points_or_region: Any,
    matrix: Any,
    border: Any = 0,
    *,
    overlay: Any = DEFAULT_OVERLAY,
    renderer: Renderer | None = None,
    ax: Any | None = None,
    config: PlotConfig | None = None,
    **kwargs: Any,
) -> Any:
    """Plot the region of *matrix* spanned by a cluster of points.

    Parameters
    ----------
    points_or_region : array_like or Region
        Cluster points as ``(channel, time)`` pairs, or a pre-built
        :class:`~driftplots.Region`.
    matrix : numpy.ndarray
        Spectrogram, channels along axis 0 and time steps along axis 1.
    border : int, pair of ints, or Border, optional
        Margin added around the cluster (default 0).
    overlay : bool, None, or array_like, optional
        ``True`` marks every cluster point, ``False``/``None`` marks nothing,
        anything else is the explicit list of points to mark.  Defaults to
        ``True`` for point input and ``False`` for region input.
    renderer : Renderer or None, optional
        Drawing backend (default :class:`~driftplots.MatplotlibRenderer`).
    ax : matplotlib.axes.Axes or None, optional
        Axes for the default renderer; ignored when *renderer* is given.
    config : PlotConfig or None, optional
        Base styling.
    **kwargs
        :class:`PlotConfig` fields or their short aliases (``cbar``, ``ms``,
        ``msw``, ``ma``, ``mc``); everything else is passed to the marker
        call and overrides the configured marker style.

    Returns
    -------
    Any
        The renderer's heatmap handle (matplotlib ``Axes`` by default).
    """
    options, marker_kwargs = _split_options(kwargs)
    cfg = PlotConfig.from_options(options, base=config)
    renderer = renderer if renderer is not None else MatplotlibRenderer(ax)

    values = as_spectrogram(matrix)
    region, selector = resolve_cluster_region(points_or_region, values, border, overlay)
    window = extract_window(values, region.channels, region.times)
    handle = renderer.heatmap(region.channels, region.times, window, colorbar=cfg.colorbar)

    if selector:
        style = cfg.marker_style()
        if "c" in marker_kwargs:
            style.pop("color")
        renderer.scatter(handle, selector.points, **{**style, **marker_kwargs})
    return handle


def waterfall(
    ftmatrix: Any,
    chan: float,
    rate: float,
    dfdt: float = 1,
    *,
    nchans: int = 0,
    lw: float | None = None,
    lc: str | None = None,
    ls: str | None = None,
    la: float | None = None,
    renderer: Renderer | None = None,
    ax: Any | None = None,
    config: PlotConfig | None = None,
    **kwargs: Any,
) -> Any:
    """Plot a channel window of *ftmatrix* with a linear drift line on top.

    The frequency axis is horizontal and time increases downward.  The
    window is centered on *chan*; the line starts at *chan* and moves
    ``rate / dfdt`` channels per time step.

    Parameters
    ----------
    ftmatrix : numpy.ndarray
        Spectrogram, channels along axis 0 and time steps along axis 1.
    chan : float
        Channel of the drift line at the first time step.
    rate : float
        Drift rate.  If in Hz/s, *dfdt* must be
        ``channel_width_hz / timestep_sec``; if in channels per time step,
        leave *dfdt* at 1.
    dfdt : float, optional
        Rate normalizer (default 1).
    nchans : int, optional
        Number of channels to plot.  ``0`` sizes the window so the line ends
        on the first or last plotted channel, or uses ``2 * ntime + 1``
        channels when ``rate`` is ~0.
    lw, lc, ls, la : optional
        Line width, color, style and alpha of the drift line.  ``ls="none"``
        suppresses the line.
    renderer : Renderer or None, optional
        Drawing backend (default :class:`~driftplots.MatplotlibRenderer`).
    ax : matplotlib.axes.Axes or None, optional
        Axes for the default renderer; ignored when *renderer* is given.
    config : PlotConfig or None, optional
        Base styling.
    **kwargs
        :class:`PlotConfig` fields or aliases; everything else is passed
        to the heatmap call and overrides the display defaults (``xlabel``,
        ``ylabel``, ``yflip``, ``widen``).

    Returns
    -------
    Any
        The renderer's heatmap handle (matplotlib ``Axes`` by default).

    Raises
    ------
    InvalidWindowError
        If *nchans* is negative or the drift parameters are not finite.
    """
    options, heatmap_kwargs = _split_options(kwargs)
    line_options = {"lw": lw, "lc": lc, "ls": ls, "la": la}
    options.update({k: v for k, v in line_options.items() if v is not None})
    cfg = PlotConfig.from_options(options, base=config)
    renderer = renderer if renderer is not None else MatplotlibRenderer(ax)

    values = as_spectrogram(ftmatrix)
    window = drift_window(values, chan, rate, dfdt, nchans)
    display = {
        "colorbar": cfg.colorbar,
        "xlabel": cfg.channel_label,
        "ylabel": cfg.time_label,
        "yflip": True,
        "widen": False,
        **heatmap_kwargs,
    }
    handle = renderer.heatmap(
        window.channels,
        window.times,
        extract_window(values, window.channels, window.times),
        **display,
    )

    if cfg.draws_line:
        renderer.line(handle, window.xy, **cfg.line_style_kwargs())
    else:
        logger.debug("drift line suppressed (line_style=%r)", cfg.line_style)
    return handle


def _split_options(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    options: dict[str, Any] = {}
    rest: dict[str, Any] = {}
    for key, value in kwargs.items():
        if key in PLOT_OPTION_ALIASES or key in _CONFIG_FIELDS:
            options[key] = value
        else:
            rest[key] = value
    return options, rest
