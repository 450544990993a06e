from __future__ import annotations

from ..core.types import KaiMoment
from .bridge import micro_pulses_since_genesis, pulse_from_micro, MsT
from .calendar import eternal_coordinates
from .grid import grid_position, step_pct_across_beat


def moment_from_micro_pulses(mu: int) -> KaiMoment:
    """Genesis-anchored snapshot of one micro-pulse count (no sunrise involved)."""
    pos = grid_position(mu)
    cal = eternal_coordinates(mu)
    return KaiMoment(
        micro_pulse=mu,
        pulse=pulse_from_micro(mu),
        beat=pos.beat,
        step=pos.step,
        step_pct_across_beat=step_pct_across_beat(pos),
        weekday=cal.day_name,
        calendar=cal,
    )


def moment_from_unix_ms(unix_ms: MsT) -> KaiMoment:
    return moment_from_micro_pulses(micro_pulses_since_genesis(unix_ms))
