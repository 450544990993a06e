from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional

Frame = Literal["solar", "eternal"]


@dataclass(frozen=True)
class GridPosition:
    """Position of a micro-pulse count on the 36 x 44 x 11 semantic grid."""
    beat: int                # 0..35
    step: int                # 0..43
    micro_in_step: int       # grid micro-pulses into the step, 0..(11e6 - 1)
    fraction_in_step: float  # [0, 1), display only

    @property
    def percent_into_step(self) -> float:
        return self.fraction_in_step * 100.0


@dataclass(frozen=True)
class SolarWindow:
    """Active sunrise-to-sunrise window, all values in micro-pulses since genesis."""
    last: int
    next: int
    now: int

    @property
    def span(self) -> int:
        return self.next - self.last

    @property
    def micro_into_day(self) -> int:
        return self.now - self.last


@dataclass(frozen=True)
class CalendarCoordinates:
    """
    Kairos calendar position of one absolute day index.

    Fields ending in 0 are the 0-based logic coordinates; the properties ending
    in 1 are the 1-based display mirrors.
    """
    frame: Frame
    day_index: int       # 0-based days since genesis (or since the first solar sunrise)
    year_index: int
    month_index0: int    # 0..7
    day_in_month0: int   # 0..41
    week_in_month0: int  # 0..6
    day_of_week0: int    # 0..5
    day_in_year0: int    # 0..335
    week_in_year0: int   # 0..55
    day_name: str
    month_name: str

    @property
    def day1(self) -> int:
        return self.day_index + 1

    @property
    def month1(self) -> int:
        return self.month_index0 + 1

    @property
    def day_in_month1(self) -> int:
        return self.day_in_month0 + 1

    @property
    def week_in_month1(self) -> int:
        return self.week_in_month0 + 1

    @property
    def day_of_week1(self) -> int:
        return self.day_of_week0 + 1

    @property
    def day_in_year1(self) -> int:
        return self.day_in_year0 + 1


@dataclass(frozen=True)
class DisplayCounters:
    solar: CalendarCoordinates
    eternal: CalendarCoordinates

    @property
    def display(self) -> CalendarCoordinates:
        # UI renders the eternal frame by default
        return self.eternal


@dataclass(frozen=True)
class PulseToday:
    """Solar-aligned reading of the current day."""
    pulse_today: int                 # whole pulses since the last sunrise
    pulse_today_continuous: float    # display only
    beat: int                        # 0..35
    step: int                        # 0..43
    day_percent: float               # 0..100
    percent_into_step: float         # 0..100


@dataclass(frozen=True)
class KaiMoment:
    micro_pulse: int
    pulse: int
    beat: int
    step: int
    step_pct_across_beat: float      # [0, 1)
    weekday: str
    calendar: CalendarCoordinates
    attributes: Optional[Dict[str, Any]] = None
