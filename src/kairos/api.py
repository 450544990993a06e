from __future__ import annotations

from dataclasses import replace
from datetime import tzinfo
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from .attributes import compute_attributes, list_attributes
from .config import ClockConfig
from .core.errors import ClockNotInitializedError
from .core.time import Instant
from .core.types import CalendarCoordinates, DisplayCounters, KaiMoment, PulseToday, SolarWindow
from .engines.clock import SovereignClock
from .engines.factory import make_clock as _make_clock
from .engines.sunrise import OffsetInput

_clock: Optional[SovereignClock] = None

def set_clock(clock: SovereignClock) -> None:
    global _clock
    _clock = clock

def get_clock() -> SovereignClock:
    if _clock is None:
        raise ClockNotInitializedError("Kairos clock not initialized")
    return _clock

def configure(config: Optional[ClockConfig] = None) -> SovereignClock:
    """Rebuild the module-level clock (from the environment when config is None)."""
    clock = _make_clock(config)
    set_clock(clock)
    return clock

def make_clock(config: Optional[ClockConfig] = None) -> SovereignClock:
    return _make_clock(config)

def clock_info() -> Dict[str, Any]:
    return get_clock().info()

def attribute_names() -> List[str]:
    return list_attributes()

# ============================================================
# Readings
# ============================================================

def micro_pulse_eternal(at: Optional[Instant] = None) -> int:
    return get_clock().micro_pulse_eternal(at)

def pulse_eternal(at: Optional[Instant] = None) -> int:
    return get_clock().pulse_eternal(at)

def pulse_today(at: Optional[Instant] = None) -> PulseToday:
    return get_clock().pulse_today(at)

def solar_window(at: Optional[Instant] = None) -> SolarWindow:
    return get_clock().solar_window(at)

def solar_counters(at: Optional[Instant] = None) -> CalendarCoordinates:
    return get_clock().solar_counters(at)

def eternal_counters(at: Optional[Instant] = None) -> CalendarCoordinates:
    return get_clock().eternal_counters(at)

def display_counters(at: Optional[Instant] = None) -> DisplayCounters:
    return get_clock().display_counters(at)

def solar_arc_name(at: Optional[Instant] = None) -> str:
    return get_clock().solar_arc_name(at)

def ms_until_next_pulse(at: Optional[Instant] = None) -> float:
    return get_clock().ms_until_next_pulse(at)

def moment_info(at: Optional[Instant] = None, *, attributes: Sequence[str] = ()) -> KaiMoment:
    m = get_clock().moment(at)
    if attributes:
        m = replace(m, attributes=compute_attributes(m, attributes))
    return m

def explain(at: Optional[Instant] = None) -> Dict[str, Any]:
    return get_clock().explain(at)

# ============================================================
# Sunrise offset
# ============================================================

def sunrise_offset() -> Decimal:
    return get_clock().sunrise_offset()

def set_sunrise_offset(sec: OffsetInput) -> Decimal:
    return get_clock().set_sunrise_offset(sec)

def set_sunrise_now(at: Optional[Instant] = None) -> Decimal:
    return get_clock().set_sunrise_now(at)

def set_sunrise_from_local(text: str, at: Optional[Instant] = None, tz: Optional[tzinfo] = None) -> Optional[Decimal]:
    return get_clock().set_sunrise_from_local(text, at, tz)
