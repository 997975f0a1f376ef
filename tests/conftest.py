"""Shared fixtures for the driftplots test suite."""

from __future__ import annotations

from typing import Any

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


class RecordingRenderer:
    """Renderer that records every primitive call instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.handle = object()

    def heatmap(self, x, y, values, **kwargs):
        self.calls.append(("heatmap", {"x": x, "y": y, "values": values, **kwargs}))
        return self.handle

    def scatter(self, handle, points, **style):
        self.calls.append(("scatter", {"handle": handle, "points": np.asarray(points), **style}))

    def line(self, handle, xy, **style):
        self.calls.append(("line", {"handle": handle, "xy": np.asarray(xy), **style}))

    def named(self, name: str) -> list[dict[str, Any]]:
        return [kwargs for call, kwargs in self.calls if call == name]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def spectrogram() -> np.ndarray:
    """64 channels x 32 time steps with values ``100 * channel + time``."""
    chans, times = np.meshgrid(np.arange(64), np.arange(32), indexing="ij")
    return (100 * chans + times).astype(float)


@pytest.fixture
def drifting_spectrogram() -> np.ndarray:
    """Noise floor with a +1 channel/step drifting tone starting at channel 20."""
    rng = np.random.default_rng(7)
    matrix = rng.exponential(1.0, size=(128, 40))
    for t in range(40):
        matrix[20 + t, t] += 50.0
    return matrix


@pytest.fixture
def cluster_points() -> np.ndarray:
    return np.array([(10, 5), (12, 7), (11, 6)], dtype=int)


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    import matplotlib.pyplot as plt

    plt.close("all")
