#!/usr/bin/env python3
"""Drift-rate sweep: how the auto-sized window follows the rate.

Prints the resolved channel window for a range of drift rates given in
Hz/s, normalized by the channel width and time step of the spectrogram.
"""

import numpy as np

from driftplots import resolve_drift_window

channel_width_hz = 2.79
timestep_sec = 18.25
dfdt = channel_width_hz / timestep_sec

ftmatrix = np.zeros((4096, 16))

print(f"{'rate (Hz/s)':>12}  {'slope (ch/step)':>15}  {'window':>22}  {'width':>6}")
print("-" * 62)

for rate in [0.0, 0.01, -0.05, 0.1, -0.5, 1.0, 4.0]:
    channels, _ = resolve_drift_window(ftmatrix, 2048, rate, dfdt)
    print(
        f"{rate:>12.3f}  {rate / dfdt:>15.4f}  "
        f"{f'[{channels[0]}, {channels[-1]}]':>22}  {len(channels):>6d}"
    )
