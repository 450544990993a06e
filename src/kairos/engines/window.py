"""
kairos.engines.window
---------------------
Selects the active sunrise-to-sunrise window. Both modes return windows that
span exactly MU_PER_DAY micro-pulses.

  daily    today's UTC midnight + offset is the candidate boundary
  genesis  the first boundary at/after genesis, tiled by whole harmonic days
"""

from __future__ import annotations

import enum
import logging
from decimal import Decimal, localcontext

from ..core.errors import WindowInvariantError
from ..core.time import utc_midnight_ms
from ..core.types import SolarWindow
from .bridge import MsT, micro_pulses_since_genesis
from .constants import BRIDGE_CONTEXT, GENESIS_TS, MU_PER_DAY

logger = logging.getLogger(__name__)


class WindowMode(str, enum.Enum):
    DAILY = "daily"
    GENESIS = "genesis"


def _boundary_mu(midnight_ms: int, offset_sec: Decimal) -> int:
    with localcontext(BRIDGE_CONTEXT):
        ms = Decimal(midnight_ms) + offset_sec * 1000
    return micro_pulses_since_genesis(ms)


def first_genesis_sunrise(offset_sec: Decimal) -> int:
    """First sunrise boundary at or after genesis, in micro-pulses."""
    candidate = _boundary_mu(utc_midnight_ms(GENESIS_TS), offset_sec)
    genesis = micro_pulses_since_genesis(GENESIS_TS)
    return candidate + MU_PER_DAY if candidate < genesis else candidate


def daily_window(now_ms: MsT, offset_sec: Decimal) -> SolarWindow:
    mu_now = micro_pulses_since_genesis(now_ms)
    candidate = _boundary_mu(utc_midnight_ms(now_ms), offset_sec)
    if mu_now < candidate:
        return SolarWindow(last=candidate - MU_PER_DAY, next=candidate, now=mu_now)
    return SolarWindow(last=candidate, next=candidate + MU_PER_DAY, now=mu_now)


def genesis_window(now_ms: MsT, offset_sec: Decimal) -> SolarWindow:
    first = first_genesis_sunrise(offset_sec)
    mu_now = micro_pulses_since_genesis(now_ms)
    k = (mu_now - first) // MU_PER_DAY   # floors toward -inf before the anchor
    last = first + k * MU_PER_DAY
    return SolarWindow(last=last, next=last + MU_PER_DAY, now=mu_now)


def select_window(now_ms: MsT, offset_sec: Decimal, mode: WindowMode = WindowMode.DAILY) -> SolarWindow:
    if mode is WindowMode.GENESIS:
        w = genesis_window(now_ms, offset_sec)
    else:
        w = daily_window(now_ms, offset_sec)
    if w.span != MU_PER_DAY:
        raise WindowInvariantError(f"window span {w.span} != {MU_PER_DAY}")
    logger.debug("%s window [%d, %d) now=%d", mode.value, w.last, w.next, w.now)
    return w
