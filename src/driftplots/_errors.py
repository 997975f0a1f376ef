"""Exception types raised by the region and drift-window resolvers."""

from __future__ import annotations


class DriftPlotError(ValueError):
    """Base class for invalid plotting inputs."""


class EmptyInputError(DriftPlotError):
    """Raised when a point set or region to plot contains no points."""


class InvalidWindowError(DriftPlotError):
    """Raised when drift-window parameters cannot define a channel window."""


class InvalidBorderError(DriftPlotError):
    """Raised when a border is negative or not an integer pair."""
