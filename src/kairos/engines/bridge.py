"""
kairos.engines.bridge
---------------------
The phi bridge between Chronos (Unix ms) and Kairos (micro-pulses since genesis).

Forward conversion floors to a whole micro-pulse, so it is monotonic and the
integer count is the canonical value. The reverse direction is display-only:
it rounds to the nearest ms (ties to even) and is never fed back into math.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_EVEN, localcontext
from typing import Union

from .constants import (
    BREATH_MS,
    BREATH_SEC,
    BRIDGE_CONTEXT,
    GENESIS_TS,
    MU_PER_PULSE,
)

MsT = Union[int, Decimal]


def micro_pulses_since_genesis(unix_ms: MsT) -> int:
    """
    Unix ms -> exact integer micro-pulses since genesis (floored).

    Negative before genesis; callers computing day indices clamp at zero.
    """
    with localcontext(BRIDGE_CONTEXT):
        delta_s = (Decimal(unix_ms) - GENESIS_TS) / 1000
        pulses = delta_s / BREATH_SEC
        micro = pulses * MU_PER_PULSE
        return int(micro.to_integral_value(rounding=ROUND_FLOOR))


def unix_ms_from_micro_pulses(mu: int) -> int:
    """Micro-pulses since genesis -> Unix ms, rounded half-even (UI only)."""
    with localcontext(BRIDGE_CONTEXT):
        pulses = Decimal(mu) / MU_PER_PULSE
        seconds = pulses * BREATH_SEC
        ms = seconds * 1000 + GENESIS_TS
        return int(ms.to_integral_value(rounding=ROUND_HALF_EVEN))


def unix_ms_from_pulse(pulse: int) -> int:
    """Whole pulse index (+/-) -> Unix ms of its start (UI only)."""
    return unix_ms_from_micro_pulses(pulse * MU_PER_PULSE)


def pulse_from_micro(mu: int) -> int:
    """Whole pulses, floored (Euclidean for negative counts)."""
    return mu // MU_PER_PULSE


def pulses_since_genesis(unix_ms: MsT) -> int:
    return pulse_from_micro(micro_pulses_since_genesis(unix_ms))


def ms_until_next_pulse(mu: int) -> float:
    """
    Milliseconds from mu to the next whole-pulse boundary, in (0, breath].

    Presentation timers re-poll on this delay rather than a fixed interval.
    """
    remaining = MU_PER_PULSE - (mu % MU_PER_PULSE)
    with localcontext(BRIDGE_CONTEXT):
        return float(Decimal(remaining) / MU_PER_PULSE * BREATH_MS)
