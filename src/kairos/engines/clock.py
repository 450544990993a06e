"""
kairos.engines.clock
--------------------
The orchestrator. Binds the offset store, the window mode and a "now"
provider, and exposes the whole output surface consumed by presentation code.

Every reading is a pure function of (now, persisted offset, constants); the
clock holds no other state, so concurrent callers need no coordination.
"""

from __future__ import annotations

import time
from datetime import tzinfo
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, Optional

from ..core.store import MemoryOffsetStore, OffsetStore
from ..core.time import Instant, to_unix_ms
from ..core.types import (
    CalendarCoordinates,
    DisplayCounters,
    KaiMoment,
    PulseToday,
    SolarWindow,
)
from . import arcs, calendar, grid
from .bridge import (
    MsT,
    micro_pulses_since_genesis,
    ms_until_next_pulse,
    pulse_from_micro,
    unix_ms_from_micro_pulses,
)
from .constants import MU_PER_PULSE
from .moment import moment_from_micro_pulses
from .sunrise import OffsetInput, SunriseOffset
from .window import WindowMode, first_genesis_sunrise, select_window

NowFn = Callable[[], int]


def system_now_ms() -> int:
    return time.time_ns() // 1_000_000


class SovereignClock:
    def __init__(
        self,
        store: Optional[OffsetStore] = None,
        mode: WindowMode = WindowMode.DAILY,
        now: NowFn = system_now_ms,
    ):
        self.store = store if store is not None else MemoryOffsetStore()
        self.mode = WindowMode(mode)
        self.now = now
        self.sunrise = SunriseOffset(self.store)

    def _ms(self, at: Optional[Instant]) -> MsT:
        # One coercion feeds both frames; sub-ms Decimal fractions are kept
        return to_unix_ms(at) if at is not None else self.now()

    # ---------------------------------------------------------
    # Eternal (genesis-anchored)
    # ---------------------------------------------------------

    def micro_pulse_eternal(self, at: Optional[Instant] = None) -> int:
        return micro_pulses_since_genesis(self._ms(at))

    def pulse_eternal(self, at: Optional[Instant] = None) -> int:
        return pulse_from_micro(self.micro_pulse_eternal(at))

    def eternal_counters(self, at: Optional[Instant] = None) -> CalendarCoordinates:
        return calendar.eternal_coordinates(self.micro_pulse_eternal(at))

    def moment(self, at: Optional[Instant] = None) -> KaiMoment:
        return moment_from_micro_pulses(self.micro_pulse_eternal(at))

    def ms_until_next_pulse(self, at: Optional[Instant] = None) -> float:
        return ms_until_next_pulse(self.micro_pulse_eternal(at))

    # ---------------------------------------------------------
    # Solar (sunrise-anchored)
    # ---------------------------------------------------------

    def sunrise_offset(self) -> Decimal:
        return self.sunrise.get()

    def solar_window(self, at: Optional[Instant] = None) -> SolarWindow:
        return select_window(self._ms(at), self.sunrise.get(), self.mode)

    def solar_window_ms(self, at: Optional[Instant] = None) -> Dict[str, int]:
        """Window boundaries as Unix ms (UI only, rounded)."""
        w = self.solar_window(at)
        return {
            "last_sunrise_ms": unix_ms_from_micro_pulses(w.last),
            "next_sunrise_ms": unix_ms_from_micro_pulses(w.next),
        }

    def genesis_sunrise_mu(self) -> int:
        return first_genesis_sunrise(self.sunrise.get())

    def pulse_today(self, at: Optional[Instant] = None) -> PulseToday:
        w = self.solar_window(at)
        mu_into = w.micro_into_day
        pos = grid.grid_position_in_day(mu_into)
        day_pct = min(max(Fraction(mu_into, w.span), 0), 1) * 100
        return PulseToday(
            pulse_today=mu_into // MU_PER_PULSE,
            pulse_today_continuous=float(Fraction(mu_into, MU_PER_PULSE)),
            beat=pos.beat,
            step=pos.step,
            day_percent=float(day_pct),
            percent_into_step=pos.percent_into_step,
        )

    def solar_counters(self, at: Optional[Instant] = None) -> CalendarCoordinates:
        w = self.solar_window(at)
        return calendar.solar_coordinates(w, self.genesis_sunrise_mu())

    def display_counters(self, at: Optional[Instant] = None) -> DisplayCounters:
        ms = self._ms(at)
        return DisplayCounters(solar=self.solar_counters(ms), eternal=self.eternal_counters(ms))

    def solar_arc_name(self, at: Optional[Instant] = None) -> str:
        return arcs.arc_name(self.solar_window(at))

    # ---------------------------------------------------------
    # Writes
    # ---------------------------------------------------------

    def set_sunrise_offset(self, sec: OffsetInput) -> Decimal:
        return self.sunrise.set(sec, now_ms=self.now())

    def set_sunrise_now(self, at: Optional[Instant] = None) -> Decimal:
        return self.sunrise.set_to_now(self._ms(at))

    def set_sunrise_from_local(
        self, text: str, at: Optional[Instant] = None, tz: Optional[tzinfo] = None
    ) -> Optional[Decimal]:
        return self.sunrise.set_from_local(text, self._ms(at), tz)

    # ---------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "store": type(self.store).__name__,
            "sunrise_offset_sec": str(self.sunrise.get()),
        }

    def explain(self, at: Optional[Instant] = None) -> Dict[str, Any]:
        ms = self._ms(at)
        w = self.solar_window(ms)
        return {
            "unix_ms": ms,
            "micro_pulse": w.now,
            "window": {"last": w.last, "next": w.next},
            "pulse_today": self.pulse_today(ms),
            "arc": arcs.arc_name(w),
            "solar": self.solar_counters(ms),
            "eternal": self.eternal_counters(ms),
            "clock": self.info(),
        }
