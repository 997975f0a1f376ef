"""Display configuration for the diagnostic plots.

This module defines :class:`PlotConfig`, a frozen dataclass holding the
styling defaults handed to the renderer, and :data:`PLOT_OPTION_ALIASES`,
the short Plots.jl-style keyword names accepted by the plotting functions.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

#: Line style value that suppresses the drift overlay line entirely.
LINE_NONE = "none"

#: Short option names -> :class:`PlotConfig` field names.
PLOT_OPTION_ALIASES: dict[str, str] = {
    "la": "line_alpha",
    "lc": "line_color",
    "ls": "line_style",
    "lw": "line_width",
    "ms": "marker_size",
    "msw": "marker_edge_width",
    "ma": "marker_alpha",
    "mc": "marker_color",
    "cbar": "colorbar",
}


@dataclass(frozen=True)
class PlotConfig:
    """Styling defaults for :func:`cluster_heatmap` and :func:`waterfall`.

    Parameters
    ----------
    colorbar : bool
        Draw a color bar next to the heatmap.
    channel_label : str
        Label of the frequency-channel axis in waterfall plots.
    time_label : str
        Label of the time axis in waterfall plots.
    marker_size : float
        Size of cluster point markers.  Commonly abbreviated as **ms**.
    marker_edge_width : float
        Marker edge width.  Commonly abbreviated as **msw**.
    marker_alpha : float
        Marker opacity in ``[0, 1]``.  Commonly abbreviated as **ma**.
    marker_color : str
        Marker color.  Commonly abbreviated as **mc**.
    line_width : float or None
        Drift line width; ``None`` keeps the renderer default.
        Commonly abbreviated as **lw**.
    line_color : str
        Drift line color.  Commonly abbreviated as **lc**.
    line_style : str or None
        Drift line style; ``None`` keeps the renderer default and
        ``"none"`` suppresses the line.  Commonly abbreviated as **ls**.
    line_alpha : float or None
        Drift line opacity; ``None`` keeps the renderer default.
        Commonly abbreviated as **la**.

    Examples
    --------
    >>> cfg = PlotConfig.from_options({"lc": "blue", "lw": "2"})
    >>> cfg.line_color, cfg.line_width
    ('blue', 2.0)
    """

    # ==================== HEATMAP ====================
    colorbar: bool = True
    """Draw a color bar next to the heatmap."""

    channel_label: str = "Fine Channel"
    """Frequency axis label used by waterfall plots."""

    time_label: str = "Time Step"
    """Time axis label used by waterfall plots."""

    # ==================== CLUSTER MARKERS ====================
    marker_size: float = 1.0
    """Size of cluster point markers."""

    marker_edge_width: float = 0.0
    """Marker edge width."""

    marker_alpha: float = 0.5
    """Marker opacity."""

    marker_color: str = "green"
    """Marker color."""

    # ==================== DRIFT LINE ====================
    line_width: float | None = None
    """Drift line width (``None`` = renderer default)."""

    line_color: str = "red"
    """Drift line color."""

    line_style: str | None = None
    """Drift line style (``None`` = renderer default, ``"none"`` = no line)."""

    line_alpha: float | None = None
    """Drift line opacity (``None`` = renderer default)."""

    def __post_init__(self) -> None:
        """Validate parameter constraints after initialization.

        Raises
        ------
        ValueError
            If any parameter is out of its valid range.
        """
        if not 0.0 <= self.marker_alpha <= 1.0:
            msg = f"marker_alpha must be in [0, 1], got {self.marker_alpha}"
            raise ValueError(msg)
        if self.line_alpha is not None and not 0.0 <= self.line_alpha <= 1.0:
            msg = f"line_alpha must be in [0, 1], got {self.line_alpha}"
            raise ValueError(msg)
        if self.marker_size <= 0:
            msg = f"marker_size must be > 0, got {self.marker_size}"
            raise ValueError(msg)
        if self.marker_edge_width < 0:
            msg = f"marker_edge_width must be >= 0, got {self.marker_edge_width}"
            raise ValueError(msg)
        if self.line_width is not None and self.line_width <= 0:
            msg = f"line_width must be > 0, got {self.line_width}"
            raise ValueError(msg)

    @property
    def draws_line(self) -> bool:
        """``False`` when the line style is the ``"none"`` sentinel."""
        return self.line_style != LINE_NONE

    @classmethod
    def from_options(cls, options: Any | None, base: PlotConfig | None = None) -> PlotConfig:
        """Construct a :class:`PlotConfig` from a dict with alias support.

        Parameters
        ----------
        options : dict or None
            Option values keyed by field name or by a short alias from
            :data:`PLOT_OPTION_ALIASES`.  Unknown keys are ignored.
        base : PlotConfig or None, optional
            Configuration supplying the values not present in *options*.

        Returns
        -------
        PlotConfig
            Validated configuration instance.

        Raises
        ------
        ValueError
            If a recognised option cannot be converted to its field type.

        Examples
        --------
        >>> PlotConfig.from_options({"ls": "none"}).draws_line
        False
        """
        base = base if base is not None else cls()
        if not isinstance(options, dict) or not options:
            return base

        data = base.to_metadata()
        for key, value in options.items():
            field = PLOT_OPTION_ALIASES.get(key, key)
            if field not in data:
                continue
            data[field] = _convert(field, value)
        return cls(**data)

    def marker_style(self) -> dict[str, Any]:
        """Return the scatter styling handed to the renderer."""
        return {
            "s": self.marker_size,
            "linewidths": self.marker_edge_width,
            "alpha": self.marker_alpha,
            "color": self.marker_color,
        }

    def line_style_kwargs(self) -> dict[str, Any]:
        """Return the line styling handed to the renderer, skipping unset values."""
        style: dict[str, Any] = {"color": self.line_color}
        if self.line_width is not None:
            style["linewidth"] = self.line_width
        if self.line_style is not None:
            style["linestyle"] = self.line_style
        if self.line_alpha is not None:
            style["alpha"] = self.line_alpha
        return style

    def to_metadata(self) -> dict[str, Any]:
        """Serialize all fields to a plain dictionary.

        Returns
        -------
        dict
            All configuration fields as a JSON-serializable dictionary.
        """
        return asdict(self)


_BOOL_FIELDS = {"colorbar"}
_FLOAT_FIELDS = {"marker_size", "marker_edge_width", "marker_alpha"}
_OPTIONAL_FLOAT_FIELDS = {"line_width", "line_alpha"}


def _convert(field: str, value: Any) -> Any:
    if field in _BOOL_FIELDS:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
    if field in _FLOAT_FIELDS:
        return float(value)
    if field in _OPTIONAL_FLOAT_FIELDS:
        return None if value is None else float(value)
    if field == "line_style":
        return None if value is None else str(value)
    return str(value)
