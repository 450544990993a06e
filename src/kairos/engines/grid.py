"""
kairos.engines.grid
-------------------
Maps micro-pulse positions onto the semantic 36 x 44 x 11 grid.

The harmonic day (17491.270421 pulses) is longer than the grid day (17424
grid-pulses). Positions are rescaled proportionally with an integer
multiply-then-divide so beat boundaries follow the true day; dividing the raw
count by the grid constants would drift by ~67 pulses per day.
"""

from __future__ import annotations

from typing import Dict

from ..core.types import GridPosition
from .constants import (
    BEATS_PER_DAY,
    MU_PER_DAY,
    MU_PER_GRID_BEAT,
    MU_PER_GRID_DAY,
    MU_PER_GRID_STEP,
    MU_PER_PULSE,
    STEPS_PER_BEAT,
)


def micro_into_day(mu: int) -> int:
    """Reduce an absolute count into [0, MU_PER_DAY)."""
    return mu % MU_PER_DAY


def grid_micro(mu_in_day: int) -> int:
    """
    Proportional rescale of a within-day position onto the grid day.

    floor(mu_in_day * MU_PER_GRID_DAY / MU_PER_DAY); Python ints are unbounded,
    so the ~2**68 intermediate product cannot overflow.
    """
    return (mu_in_day * MU_PER_GRID_DAY) // MU_PER_DAY


def grid_position_in_day(mu_in_day: int) -> GridPosition:
    g = grid_micro(mu_in_day)
    beat, mu_in_beat = divmod(g, MU_PER_GRID_BEAT)
    step, mu_in_step = divmod(mu_in_beat, MU_PER_GRID_STEP)
    step = min(max(0, step), STEPS_PER_BEAT - 1)
    return GridPosition(
        beat=beat,
        step=step,
        micro_in_step=mu_in_step,
        fraction_in_step=mu_in_step / MU_PER_GRID_STEP,
    )


def grid_position(mu: int) -> GridPosition:
    """Absolute micro-pulses since genesis -> (beat, step, fraction)."""
    return grid_position_in_day(micro_into_day(mu))


def first_micro_of(beat: int, step: int = 0) -> int:
    """Smallest within-day micro-pulse that maps to (beat, step)."""
    target = beat * MU_PER_GRID_BEAT + step * MU_PER_GRID_STEP
    return -((-target * MU_PER_DAY) // MU_PER_GRID_DAY)


# ------------------------------------------------------------
# Whole-pulse helpers (pulse floored, clamped at 0)
# ------------------------------------------------------------

def _micro_in_day_from_pulse(pulse: int) -> int:
    return micro_into_day(max(0, pulse) * MU_PER_PULSE)


def beat_index_from_pulse(pulse: int) -> int:
    return grid_position_in_day(_micro_in_day_from_pulse(pulse)).beat


def step_index_from_pulse(pulse: int) -> int:
    return grid_position_in_day(_micro_in_day_from_pulse(pulse)).step


def fraction_into_step_from_pulse(pulse: int) -> float:
    return grid_position_in_day(_micro_in_day_from_pulse(pulse)).fraction_in_step


def pulses_into_beat_from_pulse(pulse: int) -> int:
    """Whole grid pulses into the current beat (0..483)."""
    g = grid_micro(_micro_in_day_from_pulse(pulse))
    return (g % MU_PER_GRID_BEAT) // MU_PER_PULSE


# ------------------------------------------------------------
# Labels
# ------------------------------------------------------------

def step_index_from_fraction(step_pct_across_beat: float) -> int:
    """Map a [0,1] fraction of a beat to a 0-based step index (0..43)."""
    x = min(max(step_pct_across_beat, 0.0), 1.0)
    return max(0, min(STEPS_PER_BEAT - 1, int(x * STEPS_PER_BEAT)))


def step_pct_across_beat(pos: GridPosition) -> float:
    """Fraction of the beat elapsed, clamped to [0, 1) (never exactly 1.0)."""
    v = (pos.step + pos.fraction_in_step) / STEPS_PER_BEAT
    v = min(max(v, 0.0), 1.0)
    return 1.0 - 1e-12 if v >= 1.0 else v


def display_beat_step(beat: int, step: int) -> Dict[str, object]:
    """1-based display label, e.g. beat 0 step 4 -> '01:05'."""
    beat1, step1 = beat + 1, step + 1
    return {"beat1": beat1, "step1": step1, "label": f"{beat1:02d}:{step1:02d}"}


def format_beat_step(beat: int, step: int) -> str:
    """Legacy 0-based label, e.g. '0:04'."""
    b = max(0, min(BEATS_PER_DAY - 1, int(beat)))
    s = max(0, min(STEPS_PER_BEAT - 1, int(step)))
    return f"{b}:{s:02d}"
