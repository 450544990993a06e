from __future__ import annotations
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from decimal import Decimal
import math
import re
from typing import Optional, Union

from .errors import InvalidInstantError

Instant = Union[int, float, Decimal, datetime, str]

MS_PER_SECOND = 1000
MS_PER_DAY = 86_400_000

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Signed ISO with optional seconds/fraction and Z/+hh:mm/-hh:mm
_SIGNED_ISO = re.compile(
    r"^([+-]?\d{4,})-(\d{2})-(\d{2})T(\d{2}):(\d{2})"
    r"(?::(\d{2})(?:\.(\d{1,9}))?)?(Z|[+-]\d{2}:\d{2})$"
)


def days_from_civil(y: int, m: int, d: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date (any year, incl. <= 0)."""
    if m <= 2:
        y -= 1
    era = y // 400
    yoe = y - era * 400
    mp = m + 9 if m <= 2 else m - 3
    doy = (153 * mp + 2) // 5 + d - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def civil_from_days(z: int) -> date:
    """Inverse of days_from_civil (limited to datetime.date's year range)."""
    return date(1970, 1, 1) + timedelta(days=z)


def parse_iso_ms(s: str) -> int:
    """
    Parse an ISO-8601 instant into Unix ms (UTC).

    Accepts signed/extended years (e.g. "-0044-03-15T12:00Z"), which datetime
    cannot represent; everything else falls back to datetime.fromisoformat.
    Fractions finer than a millisecond are rounded to the nearest ms.
    """
    m = _SIGNED_ISO.match(s.strip())
    if m is None:
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidInstantError(f"Invalid ISO datetime: {s!r}") from e
        return datetime_to_ms(dt)

    y, mo, d, hh, mm, ss, frac, tz = m.groups()
    ms = 0
    if frac:
        nanos = int((frac + "000000000")[:9])
        ms = (nanos + 500_000) // 1_000_000
    tod = ((int(hh) * 60 + int(mm)) * 60 + int(ss or 0)) * MS_PER_SECOND + ms

    offset_min = 0
    if tz != "Z":
        sign = -1 if tz[0] == "-" else 1
        tzh, tzm = tz[1:].split(":")
        offset_min = sign * (int(tzh) * 60 + int(tzm))

    local = days_from_civil(int(y), int(mo), int(d)) * MS_PER_DAY + tod
    return local - offset_min * 60_000


def datetime_to_ms(dt: datetime) -> int:
    """Aware datetime -> Unix ms. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    delta = dt - _UNIX_EPOCH
    return (delta.days * 86_400 + delta.seconds) * MS_PER_SECOND + delta.microseconds // 1000


def ms_to_datetime(ms: Union[int, Decimal]) -> datetime:
    """Unix ms -> aware UTC datetime (sub-ms fractions floor)."""
    return _UNIX_EPOCH + timedelta(milliseconds=math.floor(ms))


def to_unix_ms(value: Instant) -> Union[int, Decimal]:
    """
    Coerce an instant to Unix milliseconds.

    Integers and Decimals pass through (Decimals may carry sub-ms fractions);
    floats are truncated to whole ms; datetimes and ISO strings are converted.
    """
    if isinstance(value, bool):
        raise InvalidInstantError("bool is not an instant")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidInstantError(f"Invalid ms epoch: {value}")
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInstantError(f"Invalid ms epoch: {value}")
        return math.trunc(value)
    if isinstance(value, datetime):
        return datetime_to_ms(value)
    if isinstance(value, str):
        return parse_iso_ms(value)
    raise InvalidInstantError(f"Unsupported instant type: {type(value).__name__}")


def utc_midnight_ms(ms: Union[int, Decimal]) -> int:
    """Unix ms of 00:00 UTC on the UTC calendar day containing ms (fractions floor)."""
    return (math.floor(ms) // MS_PER_DAY) * MS_PER_DAY


def local_time_ms(ms: Union[int, Decimal], hh: int, mm: int, ss: int, tz: Optional[tzinfo] = None) -> int:
    """
    Unix ms of wall time hh:mm:ss on the local calendar day containing ms.

    tz=None means the host's local zone.
    """
    now = ms_to_datetime(ms).astimezone(tz)
    local = datetime.combine(now.date(), time(hh, mm, ss), tzinfo=now.tzinfo)
    if tz is None:
        # Re-resolve so the host zone's DST rule for that wall time applies
        local = local.replace(tzinfo=None).astimezone()
    return datetime_to_ms(local)
