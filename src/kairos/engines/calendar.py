"""
kairos.engines.calendar
-----------------------
Day index -> Kairos calendar coordinates (6-day weeks, 7-week months,
8-month years of 336 days). The same modular arithmetic serves both frames;
only the day index fed in differs:

  eternal  whole harmonic days since genesis
  solar    whole harmonic days from the first genesis sunrise to the active window
"""

from __future__ import annotations

from ..core.types import CalendarCoordinates, Frame, SolarWindow
from .constants import (
    DAY_NAMES,
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    MONTH_NAMES,
    MU_PER_DAY,
    MU_PER_PULSE,
)


def day_in_year(day_index: int) -> int:
    """0..335 for any integer (negative day indices wrap forward)."""
    return ((day_index % DAYS_PER_YEAR) + DAYS_PER_YEAR) % DAYS_PER_YEAR


def coordinates(day_index: int, frame: Frame = "eternal") -> CalendarCoordinates:
    d_year = day_in_year(day_index)
    month0, d_month = divmod(d_year, DAYS_PER_MONTH)
    week0, dow0 = divmod(d_month, DAYS_PER_WEEK)
    return CalendarCoordinates(
        frame=frame,
        day_index=day_index,
        year_index=day_index // DAYS_PER_YEAR,
        month_index0=month0,
        day_in_month0=d_month,
        week_in_month0=week0,
        day_of_week0=dow0,
        day_in_year0=d_year,
        week_in_year0=d_year // DAYS_PER_WEEK,
        day_name=DAY_NAMES[dow0],
        month_name=MONTH_NAMES[month0],
    )


def eternal_day_index(mu: int) -> int:
    """Whole harmonic days since genesis; counts before genesis clamp to day 0."""
    return max(0, mu) // MU_PER_DAY


def solar_day_index(window: SolarWindow, first_sunrise_mu: int) -> int:
    """Whole harmonic days from the first genesis sunrise to the window start."""
    return max(0, window.last - first_sunrise_mu) // MU_PER_DAY


def eternal_coordinates(mu: int) -> CalendarCoordinates:
    return coordinates(eternal_day_index(mu), "eternal")


def solar_coordinates(window: SolarWindow, first_sunrise_mu: int) -> CalendarCoordinates:
    return coordinates(solar_day_index(window, first_sunrise_mu), "solar")


def calendar_from_pulse(pulse: int) -> CalendarCoordinates:
    """Eternal coordinates of a whole pulse number."""
    return eternal_coordinates(pulse * MU_PER_PULSE)
