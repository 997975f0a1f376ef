"""Drift window resolution for waterfall plots.

A hypothesized linear drift starting at channel ``c0`` with rate ``r``
(normalized by ``dfdt``) sits at channel ``c0 + (r / dfdt) * t`` at time
step ``t``.  :func:`resolve_drift_window` picks the channel window that
keeps that line in view across the whole time axis and samples the line
once per time step.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.polynomial import polynomial as P

from driftplots._errors import InvalidWindowError
from driftplots._region import as_spectrogram

logger = logging.getLogger(__name__)

#: Slopes (channels per time step) at or below this magnitude count as zero.
RATE_TOLERANCE = 1e-9


@dataclass(frozen=True, eq=False)
class DriftWindow:
    """Resolved geometry of a waterfall plot.

    Attributes
    ----------
    channels : range
        Channel window to display.
    times : range
        Full time axis of the spectrogram.
    slope : float
        Drift in channels per time step.
    trajectory : numpy.ndarray
        Channel coordinate of the drift line at every time step.
    """

    channels: range
    times: range
    slope: float
    trajectory: np.ndarray

    @property
    def xy(self) -> np.ndarray:
        """``(T, 2)`` array of ``(channel, time)`` line vertices."""
        return np.column_stack([self.trajectory, np.arange(self.times.start, self.times.stop)])


def drift_slope(rate: float, rate_normalizer: float = 1) -> float:
    """Return ``rate / rate_normalizer`` in channels per time step.

    Raises
    ------
    InvalidWindowError
        If either value is non-finite or *rate_normalizer* is zero.
    """
    rate = float(rate)
    rate_normalizer = float(rate_normalizer)
    if not math.isfinite(rate):
        msg = f"rate must be finite, got {rate}"
        raise InvalidWindowError(msg)
    if not math.isfinite(rate_normalizer) or rate_normalizer == 0.0:
        msg = f"rate_normalizer must be finite and nonzero, got {rate_normalizer}"
        raise InvalidWindowError(msg)
    return rate / rate_normalizer


def channel_window(
    start_channel: float,
    slope: float,
    ntime: int,
    requested_width: int = 0,
) -> range:
    """Return the channel window for a drift line over *ntime* time steps.

    Parameters
    ----------
    start_channel : float
        Channel of the drift line at time step 0.
    slope : float
        Drift in channels per time step.
    ntime : int
        Number of time steps displayed.
    requested_width : int, optional
        Fixed number of channels.  ``0`` (the default) sizes the window
        from *slope*.

    Returns
    -------
    range
        Channel indices to display.

    Examples
    --------
    >>> channel_window(50, 2.0, 10)
    range(32, 69)
    >>> len(channel_window(50, 0.0, 100))
    201
    """
    center = math.floor(start_channel)
    if requested_width > 0:
        lo = center - requested_width // 2
        return range(lo, lo + requested_width)

    if abs(slope) <= RATE_TOLERANCE:
        width = 2 * ntime + 1
        lo = center - width // 2
        return range(lo, lo + width)

    max_offset = math.ceil(max(ntime - 1, 0) * abs(slope))
    return range(
        math.floor(start_channel - max_offset), math.ceil(start_channel + max_offset) + 1
    )


def drift_trajectory(start_channel: float, slope: float, ntime: int) -> np.ndarray:
    """Sample ``start_channel + slope * t`` for ``t = 0 .. ntime - 1``."""
    return P.polyval(np.arange(ntime, dtype=float), (float(start_channel), float(slope)))


def drift_window(
    matrix: Any,
    start_channel: float,
    rate: float,
    rate_normalizer: float = 1,
    requested_width: int = 0,
) -> DriftWindow:
    """Resolve the full :class:`DriftWindow` for a waterfall plot.

    See :func:`resolve_drift_window` for the parameters.
    """
    ftmatrix = as_spectrogram(matrix)
    if isinstance(requested_width, bool) or not isinstance(requested_width, (int, np.integer)):
        msg = f"requested_width must be an integer, got {requested_width!r}"
        raise InvalidWindowError(msg)
    if requested_width < 0:
        msg = f"requested_width must be >= 0, got {requested_width}"
        raise InvalidWindowError(msg)
    if not math.isfinite(float(start_channel)):
        msg = f"start_channel must be finite, got {start_channel}"
        raise InvalidWindowError(msg)

    slope = drift_slope(rate, rate_normalizer)
    ntime = ftmatrix.shape[1]
    channels = channel_window(start_channel, slope, ntime, int(requested_width))
    trajectory = drift_trajectory(start_channel, slope, ntime)
    logger.debug(
        "drift window channels=%s slope=%.6g ntime=%d requested_width=%d",
        channels,
        slope,
        ntime,
        requested_width,
    )
    return DriftWindow(channels, range(ntime), slope, trajectory)


def resolve_drift_window(
    matrix: Any,
    start_channel: float,
    rate: float,
    rate_normalizer: float = 1,
    requested_width: int = 0,
) -> tuple[range, np.ndarray]:
    """Resolve the channel window and drift-line samples for a waterfall plot.

    Parameters
    ----------
    matrix : numpy.ndarray
        Spectrogram, channels along axis 0 and time steps along axis 1.
    start_channel : float
        Channel of the drift line at time step 0; the window is centered on it.
    rate : float
        Drift rate.
    rate_normalizer : float, optional
        Divisor turning *rate* into channels per time step (default 1).
        If *rate* is in Hz/s this is ``channel_width_hz / timestep_sec``.
    requested_width : int, optional
        Number of channels to display.  ``0`` (the default) sizes the window
        so the drift line ends on its first or last channel, or uses
        ``2 * ntime + 1`` channels when the slope is ~0.

    Returns
    -------
    channels : range
        Channel indices to display (not clamped to the matrix).
    trajectory : numpy.ndarray
        Channel coordinate of the drift line at each time step.

    Raises
    ------
    InvalidWindowError
        If *requested_width* is negative or not an integer, or if the drift
        parameters are non-finite or *rate_normalizer* is zero.
    """
    window = drift_window(matrix, start_channel, rate, rate_normalizer, requested_width)
    return window.channels, window.trajectory
