#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
from typing import List, Optional, Tuple

from kairos.engines.bridge import unix_ms_from_micro_pulses
from kairos.engines.constants import GENESIS_TS, MU_PER_DAY


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kairos-klok[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "kairos-klok[diagnostics]"') from e


def float_day_start_ms(n: int) -> float:
    """Day n start the naive way: one float64 product of n, the day length and the breath."""
    return GENESIS_TS + n * 17491.270421 * (3 + math.sqrt(5)) * 1000


def build_series(np, max_day: int, samples: int) -> Tuple["np.ndarray", "np.ndarray"]:
    days = np.unique(np.geomspace(1, max_day, num=samples).astype(np.int64))
    drift = np.empty(days.shape, dtype=float)
    for i, n in enumerate(days):
        exact = unix_ms_from_micro_pulses(int(n) * MU_PER_DAY)
        drift[i] = float_day_start_ms(int(n)) - exact
    return days, drift


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot float64 drift of harmonic day boundaries against the exact bridge.")
    p.add_argument("--max-day", type=int, default=10**9)
    p.add_argument("--samples", type=int, default=400)
    p.add_argument("--outbase", default="kairos_drift", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    days, drift = build_series(np, args.max_day, args.samples)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.plot(days, drift, color="tab:red", linewidth=1.2, label="float64 - exact")
    ax.axhline(0.0, color="0.3", linewidth=0.8)
    ax.set_xscale("log")
    ax.set_xlabel("Harmonic days since genesis")
    ax.set_ylabel("Boundary error (ms)")
    ax.set_title("Day-boundary drift of a float implementation")
    ax.legend(loc="upper left", frameon=False)

    fig.savefig(args.outbase + ".png", dpi=150)
    plt.close(fig)
    print(f"Saved: {args.outbase}.png  (max |drift| = {float(np.abs(drift).max()):.3f} ms)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
