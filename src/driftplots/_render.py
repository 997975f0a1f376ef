"""Rendering collaborator for the diagnostic plots.

:class:`MatplotlibRenderer` is the default renderer.  It is imported lazily
so the resolvers can be used without matplotlib; any object implementing
the :class:`Renderer` protocol may be passed to the plotting functions
instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

import numpy as np

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Drawing primitives used by :func:`cluster_heatmap` and :func:`waterfall`."""

    def heatmap(
        self,
        x: range,
        y: range,
        values: np.ndarray,
        *,
        colorbar: bool = True,
        xlabel: str | None = None,
        ylabel: str | None = None,
        yflip: bool = False,
        widen: bool = False,
        **kwargs: Any,
    ) -> Any: ...

    def scatter(self, handle: Any, points: np.ndarray, **style: Any) -> Any: ...

    def line(self, handle: Any, xy: np.ndarray, **style: Any) -> Any: ...


def extract_window(matrix: np.ndarray, channels: range, times: range) -> np.ndarray:
    """Copy the ``channels x times`` window of *matrix*.

    Cells outside the matrix are filled with NaN instead of wrapping around,
    so regions grown past the matrix edges still display at their requested
    extent.

    Parameters
    ----------
    matrix : numpy.ndarray
        Spectrogram, channels along axis 0 and time steps along axis 1.
    channels, times : range
        Step-1 index ranges, possibly extending past the matrix.

    Returns
    -------
    numpy.ndarray
        Float array of shape ``(len(channels), len(times))``.
    """
    nchan, ntime = matrix.shape
    out = np.full((len(channels), len(times)), np.nan, dtype=float)

    c0, c1 = max(channels.start, 0), min(channels.stop, nchan)
    t0, t1 = max(times.start, 0), min(times.stop, ntime)
    if c0 < c1 and t0 < t1:
        out[c0 - channels.start : c1 - channels.start, t0 - times.start : t1 - times.start] = (
            matrix[c0:c1, t0:t1]
        )
    if (c0, c1, t0, t1) != (channels.start, channels.stop, times.start, times.stop):
        logger.debug(
            "plot window channels=%s times=%s extends past matrix of shape %s; padding with NaN",
            channels,
            times,
            matrix.shape,
        )
    return out


def _load_matplotlib():
    import matplotlib.pyplot as plt

    return plt


class MatplotlibRenderer:
    """Draw heatmaps, markers and lines on matplotlib axes.

    Parameters
    ----------
    ax : matplotlib.axes.Axes or None, optional
        Axes to draw on.  A new figure is created per heatmap when omitted.
    """

    def __init__(self, ax: Any | None = None) -> None:
        self.ax = ax

    def heatmap(
        self,
        x: range,
        y: range,
        values: np.ndarray,
        *,
        colorbar: bool = True,
        xlabel: str | None = None,
        ylabel: str | None = None,
        yflip: bool = False,
        widen: bool = False,
        **kwargs: Any,
    ) -> Any:
        """Draw *values* (shape ``(len(x), len(y))``) with cells centered on indices.

        Returns the axes the heatmap was drawn on.
        """
        ax = self.ax
        if ax is None:
            plt = _load_matplotlib()
            _, ax = plt.subplots()

        extent = (x.start - 0.5, x.stop - 0.5, y.start - 0.5, y.stop - 0.5)
        kwargs.setdefault("aspect", "auto")
        kwargs.setdefault("interpolation", "nearest")
        image = ax.imshow(values.T, origin="lower", extent=extent, **kwargs)
        if colorbar:
            ax.figure.colorbar(image, ax=ax)
        if xlabel is not None:
            ax.set_xlabel(xlabel)
        if ylabel is not None:
            ax.set_ylabel(ylabel)

        ax.set_xlim(extent[0], extent[1])
        ax.set_ylim(extent[2], extent[3])
        if yflip:
            ax.invert_yaxis()
        if not widen:
            ax.autoscale(False)
        return ax

    def scatter(self, handle: Any, points: np.ndarray, **style: Any) -> Any:
        pts = np.asarray(points)
        return handle.scatter(pts[:, 0], pts[:, 1], **style)

    def line(self, handle: Any, xy: np.ndarray | Sequence[Sequence[float]], **style: Any) -> Any:
        xy = np.asarray(xy, dtype=float)
        (artist,) = handle.plot(xy[:, 0], xy[:, 1], **style)
        return artist
