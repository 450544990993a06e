from __future__ import annotations

from ..core.types import SolarWindow
from .constants import ARC_NAMES, ARCS_PER_DAY, BEATS_PER_DAY, MU_PER_DAY


def arc_index(window: SolarWindow) -> int:
    """Which of the 6 equal arcs of the window contains window.now (0..5)."""
    mu_into = (window.now - window.last) % MU_PER_DAY
    return min(ARCS_PER_DAY - 1, (mu_into * ARCS_PER_DAY) // window.span)


def arc_name(window: SolarWindow) -> str:
    return ARC_NAMES[arc_index(window)]


def arc_index_from_beat(beat: int) -> int:
    """Arc of a grid beat: every 6 beats form one arc."""
    return max(0, min(ARCS_PER_DAY - 1, beat // (BEATS_PER_DAY // ARCS_PER_DAY)))
