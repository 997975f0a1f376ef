"""Cluster region resolution.

Given the candidate points of a cluster (or a pre-built rectangular region)
and a symmetric border, :func:`resolve_cluster_region` decides which
sub-region of a spectrogram to display and which points to mark on top of
it.  Region bounds are never clamped to the matrix; the window extraction
layer in :mod:`driftplots._render` tolerates out-of-bounds cells.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np

from driftplots._errors import EmptyInputError, InvalidBorderError

logger = logging.getLogger(__name__)

#: Sentinel meaning "use the entry point's default overlay".
DEFAULT_OVERLAY: Any = object()


class Border(NamedTuple):
    """Non-negative ``(channel, time)`` margins added around a region."""

    channel: int = 0
    time: int = 0

    @classmethod
    def coerce(cls, value: Any) -> Border:
        """Normalize an ``int``, a pair, or a :class:`Border` to a :class:`Border`.

        Parameters
        ----------
        value : int, sequence of two ints, or Border
            A bare integer is applied to both axes.

        Returns
        -------
        Border

        Raises
        ------
        InvalidBorderError
            If *value* is not an integer or an integer pair, or if either
            margin is negative.

        Examples
        --------
        >>> Border.coerce(3)
        Border(channel=3, time=3)
        >>> Border.coerce((1, 2))
        Border(channel=1, time=2)
        """
        if isinstance(value, Border):
            margins = tuple(value)
        elif _is_integer(value):
            margins = (int(value), int(value))
        elif isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, str):
            if len(value) != 2 or not all(_is_integer(v) for v in value):
                msg = f"border must be an int or a pair of ints, got {value!r}"
                raise InvalidBorderError(msg)
            margins = (int(value[0]), int(value[1]))
        else:
            msg = f"border must be an int or a pair of ints, got {value!r}"
            raise InvalidBorderError(msg)

        if margins[0] < 0 or margins[1] < 0:
            msg = f"border margins must be >= 0, got {margins}"
            raise InvalidBorderError(msg)
        return cls(*margins)


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle of ``(channel, time)`` matrix cells.

    Parameters
    ----------
    channels : range
        Channel indices (axis 0), step 1.
    times : range
        Time-step indices (axis 1), step 1.
    """

    channels: range
    times: range

    def __post_init__(self) -> None:
        for name in ("channels", "times"):
            axis = getattr(self, name)
            if not isinstance(axis, range) or axis.step != 1:
                msg = f"Region.{name} must be a range with step 1, got {axis!r}"
                raise ValueError(msg)

    @classmethod
    def from_bounds(cls, channel_min: int, channel_max: int, time_min: int, time_max: int) -> Region:
        """Build a region from inclusive bounds."""
        return cls(range(channel_min, channel_max + 1), range(time_min, time_max + 1))

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.channels), len(self.times)

    def __len__(self) -> int:
        return len(self.channels) * len(self.times)

    def contains(self, point: Sequence[int]) -> bool:
        chan, time = point
        return chan in self.channels and time in self.times

    def expand(self, border: Any) -> Region:
        """Return this region grown by *border* on every side."""
        b = Border.coerce(border)
        return Region(
            range(self.channels.start - b.channel, self.channels.stop + b.channel),
            range(self.times.start - b.time, self.times.stop + b.time),
        )

    def points(self) -> np.ndarray:
        """Return every cell as an ``(N, 2)`` integer array, channel-major."""
        if len(self) == 0:
            return np.empty((0, 2), dtype=int)
        chans, times = np.meshgrid(
            np.arange(self.channels.start, self.channels.stop),
            np.arange(self.times.start, self.times.stop),
            indexing="ij",
        )
        return np.column_stack([chans.ravel(), times.ravel()])


@dataclass(frozen=True, eq=False)
class OverlaySelector:
    """Which points to mark on top of a cluster heatmap.

    ``kind`` is ``"none"``, ``"all"`` (every input point) or ``"explicit"``
    (a caller-supplied point list).
    """

    kind: str
    points: np.ndarray = field(default_factory=lambda: np.empty((0, 2), dtype=int))

    def __bool__(self) -> bool:
        return self.kind != "none"


def as_spectrogram(matrix: Any) -> np.ndarray:
    """Return *matrix* as an array, checking it is 2-D ``(channel, time)``."""
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        msg = f"matrix must be 2-D (channel, time), got {arr.ndim}-D"
        raise ValueError(msg)
    return arr


def as_point_set(points: Any, *, name: str = "points") -> np.ndarray:
    """Coerce a collection of ``(channel, time)`` pairs to an ``(N, 2)`` int array.

    Raises
    ------
    ValueError
        If *points* is not a collection of integer pairs.
    """
    arr = np.asarray(points)
    if arr.size == 0:
        return np.empty((0, 2), dtype=int)
    if arr.ndim == 1 and arr.shape[0] == 2:
        arr = arr.reshape(1, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        msg = f"{name} must be a collection of (channel, time) pairs, got shape {arr.shape}"
        raise ValueError(msg)
    if not np.issubdtype(arr.dtype, np.integer):
        if not np.issubdtype(arr.dtype, np.number) or not np.all(arr == np.round(arr)):
            msg = f"{name} must hold integer indices"
            raise ValueError(msg)
        arr = arr.astype(int)
    return arr


def cluster_range(points: Any, border: Any = 0) -> Region:
    """Return the smallest region enclosing *points*, grown by *border*.

    Parameters
    ----------
    points : array_like
        ``(N, 2)`` collection of ``(channel, time)`` pairs, ``N >= 1``.
    border : int, pair of ints, or Border, optional
        Margin added on each side of each axis (default 0).

    Returns
    -------
    Region

    Raises
    ------
    EmptyInputError
        If *points* is empty.

    Examples
    --------
    >>> cluster_range([(10, 5), (12, 7)], 2)
    Region(channels=range(8, 15), times=range(3, 10))
    """
    pts = as_point_set(points)
    if pts.shape[0] == 0:
        raise EmptyInputError("no points to plot")
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return Region.from_bounds(int(lo[0]), int(hi[0]), int(lo[1]), int(hi[1])).expand(border)


def resolve_cluster_region(
    points_or_region: Any,
    matrix: Any,
    border: Any = 0,
    overlay: Any = DEFAULT_OVERLAY,
    *,
    bounds: Callable[[np.ndarray, Border], Region] = cluster_range,
) -> tuple[Region, OverlaySelector]:
    """Resolve the region of *matrix* to display and the points to mark.

    Parameters
    ----------
    points_or_region : array_like or Region
        Cluster points as ``(channel, time)`` pairs, or a pre-built
        :class:`Region` (a pair of ``range`` objects is accepted too).
    matrix : numpy.ndarray
        Spectrogram, channels along axis 0 and time steps along axis 1.
    border : int, pair of ints, or Border, optional
        Margin added around the bounding region (default 0).
    overlay : bool, None, or array_like, optional
        ``True`` marks every input point, ``False``/``None`` marks nothing,
        anything else is the explicit list of points to mark.  Left unset,
        point input marks every point and region input marks nothing.
    bounds : callable, optional
        Bounding-region collaborator ``bounds(points, border) -> Region``.

    Returns
    -------
    region : Region
        Region to display, not clamped to the matrix.
    selector : OverlaySelector
        Points to mark on top of the heatmap.

    Raises
    ------
    EmptyInputError
        If the input point set or region is empty.
    InvalidBorderError
        If *border* is malformed or negative.
    """
    as_spectrogram(matrix)
    border = Border.coerce(border)
    region = _as_region(points_or_region)
    if region is not None:
        if len(region) == 0:
            raise EmptyInputError("no points to plot")
        corners = np.array(
            [(region.channels[0], region.times[0]), (region.channels[-1], region.times[-1])]
        )
        return _resolve(corners, region.points, border, overlay, False, bounds)
    points = as_point_set(points_or_region)
    return _resolve(points, lambda: points, border, overlay, True, bounds)


def resolve_overlay(overlay: Any, points: np.ndarray) -> OverlaySelector:
    """Resolve an overlay request against the input *points*."""
    if overlay is None:
        return OverlaySelector("none")
    if isinstance(overlay, (bool, np.bool_)):
        return OverlaySelector("all", points) if overlay else OverlaySelector("none")
    return OverlaySelector("explicit", as_point_set(overlay, name="overlay"))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _resolve(
    extent: np.ndarray,
    input_points: Callable[[], np.ndarray],
    border: Border,
    overlay: Any,
    default_overlay: bool,
    bounds: Callable[[np.ndarray, Border], Region],
) -> tuple[Region, OverlaySelector]:
    if extent.shape[0] == 0:
        raise EmptyInputError("no points to plot")
    region = bounds(extent, border)
    if overlay is DEFAULT_OVERLAY:
        overlay = default_overlay
    # input points are only materialized when all of them get marked
    marks_all = isinstance(overlay, (bool, np.bool_)) and bool(overlay)
    selector = resolve_overlay(overlay, input_points() if marks_all else extent)
    logger.debug(
        "cluster region channels=%s times=%s border=%s overlay=%s (%d points)",
        region.channels,
        region.times,
        tuple(border),
        selector.kind,
        selector.points.shape[0],
    )
    return region, selector


def _as_region(value: Any) -> Region | None:
    if isinstance(value, Region):
        return value
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and all(isinstance(axis, range) for axis in value)
    ):
        return Region(*value)
    return None


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))
