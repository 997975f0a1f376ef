"""Tests for cluster_heatmap and waterfall composition."""

from __future__ import annotations

import matplotlib.axes
import numpy as np
import pytest

from driftplots import (
    EmptyInputError,
    InvalidWindowError,
    PlotConfig,
    Region,
    cluster_heatmap,
    waterfall,
)


class TestClusterHeatmap:
    """Cluster heatmaps through a recording renderer."""

    def test_returns_renderer_handle(self, spectrogram, cluster_points, renderer):
        handle = cluster_heatmap(cluster_points, spectrogram, renderer=renderer)
        assert handle is renderer.handle

    def test_heatmap_window(self, spectrogram, renderer):
        cluster_heatmap([(10, 5), (12, 7)], spectrogram, 2, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["x"] == range(8, 15)
        assert heat["y"] == range(3, 10)
        np.testing.assert_array_equal(heat["values"], spectrogram[8:15, 3:10])
        assert heat["colorbar"] is True

    def test_marks_all_points_by_default(self, spectrogram, cluster_points, renderer):
        cluster_heatmap(cluster_points, spectrogram, renderer=renderer)
        (scatter,) = renderer.named("scatter")
        assert scatter["handle"] is renderer.handle
        np.testing.assert_array_equal(scatter["points"], cluster_points)
        assert scatter["color"] == "green"
        assert scatter["alpha"] == 0.5

    def test_overlay_false_draws_no_markers(self, spectrogram, cluster_points, renderer):
        cluster_heatmap(cluster_points, spectrogram, overlay=False, renderer=renderer)
        assert renderer.named("scatter") == []

    def test_explicit_overlay(self, spectrogram, cluster_points, renderer):
        cluster_heatmap(cluster_points, spectrogram, overlay=[(1, 1)], renderer=renderer)
        (scatter,) = renderer.named("scatter")
        np.testing.assert_array_equal(scatter["points"], [[1, 1]])

    def test_region_input_draws_no_markers(self, spectrogram, renderer):
        cluster_heatmap(Region.from_bounds(0, 3, 0, 3), spectrogram, 1, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["x"] == range(-1, 5)
        assert renderer.named("scatter") == []

    def test_marker_kwargs_override_style(self, spectrogram, cluster_points, renderer):
        cluster_heatmap(
            cluster_points, spectrogram, renderer=renderer, mc="magenta", marker="x", cbar=False
        )
        (heat,) = renderer.named("heatmap")
        (scatter,) = renderer.named("scatter")
        assert heat["colorbar"] is False
        assert scatter["color"] == "magenta"
        assert scatter["marker"] == "x"

    def test_c_replaces_configured_color(self, spectrogram, cluster_points, renderer):
        cluster_heatmap(cluster_points, spectrogram, renderer=renderer, c="blue")
        (scatter,) = renderer.named("scatter")
        assert scatter["c"] == "blue"
        assert "color" not in scatter

    def test_c_on_matplotlib(self, spectrogram, cluster_points):
        values = np.arange(len(cluster_points), dtype=float)
        ax = cluster_heatmap(cluster_points, spectrogram, c=values, cbar=False)
        assert len(ax.collections) == 1

    def test_config_base(self, spectrogram, cluster_points, renderer):
        cfg = PlotConfig(marker_size=9)
        cluster_heatmap(cluster_points, spectrogram, renderer=renderer, config=cfg)
        (scatter,) = renderer.named("scatter")
        assert scatter["s"] == 9

    def test_border_pads_past_matrix_edge(self, spectrogram, renderer):
        cluster_heatmap([(0, 0)], spectrogram, 2, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["values"].shape == (5, 5)
        assert np.isnan(heat["values"][:2]).all()
        assert heat["values"][2, 2] == spectrogram[0, 0]

    def test_empty_points_raise(self, spectrogram, renderer):
        with pytest.raises(EmptyInputError):
            cluster_heatmap([], spectrogram, renderer=renderer)
        assert renderer.calls == []

    def test_default_matplotlib_renderer(self, spectrogram, cluster_points):
        ax = cluster_heatmap(cluster_points, spectrogram, 1)
        assert isinstance(ax, matplotlib.axes.Axes)
        assert len(ax.collections) == 1


class TestWaterfall:
    """Drift waterfalls through a recording renderer."""

    def test_returns_renderer_handle(self, drifting_spectrogram, renderer):
        assert waterfall(drifting_spectrogram, 20, 1.0, renderer=renderer) is renderer.handle

    def test_heatmap_display_options(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 1.0, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["x"] == range(-19, 60)
        assert heat["y"] == range(40)
        assert heat["yflip"] is True
        assert heat["widen"] is False
        assert heat["xlabel"] == "Fine Channel"
        assert heat["ylabel"] == "Time Step"
        assert heat["values"].shape == (79, 40)

    def test_line_follows_drift(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 1.0, renderer=renderer)
        (line,) = renderer.named("line")
        xy = line["xy"]
        np.testing.assert_allclose(xy[:, 0], 20 + np.arange(40))
        np.testing.assert_array_equal(xy[:, 1], np.arange(40))
        assert line["color"] == "red"

    def test_line_styling(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 1.0, lw=3, lc="white", ls=":", la=0.2, renderer=renderer)
        (line,) = renderer.named("line")
        assert line["linewidth"] == 3.0
        assert line["color"] == "white"
        assert line["linestyle"] == ":"
        assert line["alpha"] == 0.2

    def test_ls_none_suppresses_line(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 1.0, ls="none", renderer=renderer)
        assert len(renderer.named("heatmap")) == 1
        assert renderer.named("line") == []

    def test_nchans(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 64, 1.0, nchans=16, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["x"] == range(56, 72)
        np.testing.assert_array_equal(heat["values"], drifting_spectrogram[56:72, :])

    def test_zero_rate_window(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 64, 0.0, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert len(heat["x"]) == 81

    def test_dfdt(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 2.5, 2.5, renderer=renderer)
        (line,) = renderer.named("line")
        np.testing.assert_allclose(line["xy"][-1], [59.0, 39.0])

    def test_extra_kwargs_reach_heatmap(self, drifting_spectrogram, renderer):
        waterfall(drifting_spectrogram, 20, 1.0, cmap="magma", cbar=False, renderer=renderer)
        (heat,) = renderer.named("heatmap")
        assert heat["cmap"] == "magma"
        assert heat["colorbar"] is False

    def test_caller_display_options_take_precedence(self, drifting_spectrogram, renderer):
        waterfall(
            drifting_spectrogram,
            20,
            1.0,
            xlabel="Frequency (Hz)",
            yflip=False,
            widen=True,
            renderer=renderer,
        )
        (heat,) = renderer.named("heatmap")
        assert heat["xlabel"] == "Frequency (Hz)"
        assert heat["ylabel"] == "Time Step"
        assert heat["yflip"] is False
        assert heat["widen"] is True

    def test_xlabel_override_on_matplotlib(self, drifting_spectrogram):
        ax = waterfall(drifting_spectrogram, 20, 1.0, xlabel="Frequency (Hz)", yflip=False)
        assert ax.get_xlabel() == "Frequency (Hz)"
        assert not ax.yaxis_inverted()

    def test_negative_nchans_raises(self, drifting_spectrogram, renderer):
        with pytest.raises(InvalidWindowError):
            waterfall(drifting_spectrogram, 20, 1.0, nchans=-1, renderer=renderer)
        assert renderer.calls == []

    def test_default_matplotlib_renderer(self, drifting_spectrogram):
        ax = waterfall(drifting_spectrogram, 20, 1.0)
        assert isinstance(ax, matplotlib.axes.Axes)
        assert ax.yaxis_inverted()
        assert len(ax.lines) == 1
        assert ax.get_xlim() == (-19.5, 59.5)
