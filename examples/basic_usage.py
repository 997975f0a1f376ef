#!/usr/bin/env python3
"""Basic driftplots usage: resolve plot geometry without drawing.

This example builds a synthetic spectrogram with a drifting tone, then
prints the cluster region and the drift window that the plotting functions
would display.
"""

import numpy as np

from driftplots import resolve_cluster_region, resolve_drift_window

# Synthetic spectrogram: 512 channels x 100 time steps, tone drifting +0.5 ch/step
rng = np.random.default_rng(0)
ftmatrix = rng.exponential(1.0, size=(512, 100))
for t in range(100):
    ftmatrix[200 + t // 2, t] += 30.0

# Candidate hits along the tone, as a detector might report them
hits = [(200 + t // 2, t) for t in range(0, 100, 10)]

region, selector = resolve_cluster_region(hits, ftmatrix, border=(4, 2))
print(f"Cluster region: channels {region.channels}, times {region.times}")
print(f"Marking {selector.points.shape[0]} points ({selector.kind})")

channels, trajectory = resolve_drift_window(ftmatrix, 200, 0.5)
print(f"Drift window: channels {channels} ({len(channels)} channels)")
print(f"Line runs from channel {trajectory[0]:.1f} to {trajectory[-1]:.1f}")
