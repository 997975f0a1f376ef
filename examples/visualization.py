#!/usr/bin/env python3
"""Visualization: cluster heatmap and drift waterfall side by side.

Requires matplotlib: pip install matplotlib
"""

import numpy as np

from driftplots import cluster_heatmap, waterfall

# Spectrogram with a tone drifting -0.8 channels per step
rng = np.random.default_rng(123)
ftmatrix = rng.normal(0.0, 1.0, size=(1024, 60))
for t in range(60):
    ftmatrix[int(round(600 - 0.8 * t)), t] += 12.0

# Hits a clustering step might have produced
hits = [(int(round(600 - 0.8 * t)), t) for t in range(5, 40, 3)]

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("matplotlib not installed. Install with: pip install matplotlib")
    raise SystemExit(1) from None

fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

# Left: zoom on the cluster, hits marked in green
cluster_heatmap(hits, ftmatrix, (6, 3), ax=ax1, ms=12)
ax1.set_title(f"Cluster ({len(hits)} hits)")

# Right: full time axis with the hypothesized drift line
waterfall(ftmatrix, 600, -0.8, ax=ax2, lc="white", ls="--", lw=1.0, la=0.6)
ax2.set_title("Drift -0.8 ch/step")

fig.tight_layout()
fig.savefig("driftplots_visualization.png", dpi=150, bbox_inches="tight")
print("Saved driftplots_visualization.png")
plt.close(fig)
