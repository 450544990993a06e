#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from kairos.engines.constants import BEATS_PER_DAY, MU_PER_DAY, MU_PER_PULSE, STEPS_PER_BEAT
from kairos.engines.grid import first_micro_of, grid_position_in_day


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kairos-klok[diagnostics]"') from e


def step_starts() -> List[int]:
    """Exact first within-day micro-pulse of every (beat, step), plus the day end."""
    out = [first_micro_of(b, s) for b in range(BEATS_PER_DAY) for s in range(STEPS_PER_BEAT)]
    out.append(MU_PER_DAY)
    return out


def unreachable_cells(starts: List[int]) -> List[Tuple[int, int]]:
    bad = []
    for i, mu in enumerate(starts[:-1]):
        b, s = divmod(i, STEPS_PER_BEAT)
        pos = grid_position_in_day(mu)
        if (pos.beat, pos.step) != (b, s):
            bad.append((b, s))
    return bad


def coverage_stats(np, starts: List[int]) -> dict:
    # lengths fit comfortably in float64; the boundaries themselves stay Python ints
    starts_arr = np.array(starts, dtype=np.int64)
    step_len = np.diff(starts_arr) / MU_PER_PULSE
    beat_len = np.diff(starts_arr[::STEPS_PER_BEAT]) / MU_PER_PULSE
    return {
        "steps": int(step_len.size),
        "step_min": float(step_len.min()),
        "step_max": float(step_len.max()),
        "step_mean": float(step_len.mean()),
        "beat_min": float(beat_len.min()),
        "beat_max": float(beat_len.max()),
        "beat_mean": float(beat_len.mean()),
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check that every (beat, step) cell is reachable and report cell lengths in pulses.")
    p.add_argument("--beats", action="store_true", help="Also print the start pulse of every beat.")
    args = p.parse_args(argv)

    np = _need_numpy()
    starts = step_starts()
    bad = unreachable_cells(starts)
    st = coverage_stats(np, starts)

    print(f"cells checked : {st['steps']}")
    print(f"step length   : min {st['step_min']:.6f}  max {st['step_max']:.6f}  mean {st['step_mean']:.6f} pulses")
    print(f"beat length   : min {st['beat_min']:.6f}  max {st['beat_max']:.6f}  mean {st['beat_mean']:.6f} pulses")
    if args.beats:
        for b in range(BEATS_PER_DAY):
            print(f"  beat {b:2d} starts at {starts[b * STEPS_PER_BEAT] / MU_PER_PULSE:12.6f}")

    if bad:
        print(f"Unreachable cells: {bad}")
        return 1
    print("All cells reachable.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
