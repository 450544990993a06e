"""kairos public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize the default clock on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    micro_pulse_eternal,
    pulse_eternal,
    pulse_today,
    solar_window,
    solar_counters,
    eternal_counters,
    display_counters,
    solar_arc_name,
    ms_until_next_pulse,
    moment_info,
    explain,
    sunrise_offset,
    set_sunrise_offset,
    set_sunrise_now,
    set_sunrise_from_local,
    configure,
    make_clock,
    set_clock,
    get_clock,
    clock_info,
    attribute_names,
)
from .config import ClockConfig
from .core.types import CalendarCoordinates, KaiMoment, PulseToday, SolarWindow
from .engines.window import WindowMode

__all__ = [
    "micro_pulse_eternal",
    "pulse_eternal",
    "pulse_today",
    "solar_window",
    "solar_counters",
    "eternal_counters",
    "display_counters",
    "solar_arc_name",
    "ms_until_next_pulse",
    "moment_info",
    "explain",
    "sunrise_offset",
    "set_sunrise_offset",
    "set_sunrise_now",
    "set_sunrise_from_local",
    "configure",
    "make_clock",
    "set_clock",
    "get_clock",
    "clock_info",
    "attribute_names",
    "ClockConfig",
    "CalendarCoordinates",
    "KaiMoment",
    "PulseToday",
    "SolarWindow",
    "WindowMode",
]
