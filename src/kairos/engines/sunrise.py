"""
kairos.engines.sunrise
----------------------
The sunrise offset: seconds after UTC midnight, kept as an exact decimal
string in the offset store and normalized into [0, 86400). It is user-set,
never computed from geography.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import tzinfo
from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from ..core.store import OffsetStore
from ..core.time import local_time_ms, ms_to_datetime, utc_midnight_ms
from .bridge import MsT
from .constants import BRIDGE_CONTEXT, SECONDS_PER_UTC_DAY

logger = logging.getLogger(__name__)

KEY_OFFSET_SEC = "kai.sunrise.offsetSec"
KEY_ANCHOR_ISO = "kai.sunrise.anchorISO"

_HHMM_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.(\d+))?)?$")

OffsetInput = Union[int, str, Decimal]


def normalize_offset(sec: OffsetInput) -> Decimal:
    """((sec mod 86400) + 86400) mod 86400, exact."""
    with localcontext(BRIDGE_CONTEXT):
        d = Decimal(sec)
        return ((d % SECONDS_PER_UTC_DAY) + SECONDS_PER_UTC_DAY) % SECONDS_PER_UTC_DAY


def parse_offset(raw: Optional[str]) -> Decimal:
    """Persisted string -> offset; absent or malformed values read as 0."""
    if raw is None or raw == "":
        return Decimal(0)
    try:
        d = Decimal(raw)
        if d.is_finite():
            return normalize_offset(d)
    except InvalidOperation:
        pass
    logger.warning("Malformed sunrise offset %r; using 0", raw)
    return Decimal(0)


@dataclass(frozen=True)
class LocalTime:
    hh: int
    mm: int
    ss: int
    frac: Decimal

    @property
    def seconds(self) -> Decimal:
        return Decimal(self.hh * 3600 + self.mm * 60 + self.ss) + self.frac


def parse_local_time(text: str) -> Optional[LocalTime]:
    """
    Parse HH:MM[:SS[.fraction]]; out-of-range fields are clamped
    (hours to 0..23, minutes and seconds to 0..59). None if no match.
    """
    m = _HHMM_RE.match(text.strip())
    if m is None:
        return None
    hh = min(23, max(0, int(m.group(1))))
    mm = min(59, max(0, int(m.group(2))))
    ss = min(59, max(0, int(m.group(3)))) if m.group(3) else 0
    frac = Decimal("0." + m.group(4)) if m.group(4) else Decimal(0)
    return LocalTime(hh, mm, ss, frac)


class SunriseOffset:
    """Read/write access to the persisted offset through an OffsetStore."""

    def __init__(self, store: OffsetStore):
        self.store = store

    def get(self) -> Decimal:
        return parse_offset(self.store.get(KEY_OFFSET_SEC))

    def set(self, sec: OffsetInput, *, now_ms: MsT) -> Decimal:
        normalized = normalize_offset(sec)
        self.store.set(KEY_OFFSET_SEC, str(normalized))
        self.store.set(KEY_ANCHOR_ISO, ms_to_datetime(now_ms).isoformat().replace("+00:00", "Z"))
        logger.debug("Sunrise offset set to %s s", normalized)
        return normalized

    def set_to_now(self, now_ms: MsT) -> Decimal:
        """The sun rose now: offset = now - today's UTC midnight."""
        sec = Decimal(now_ms - utc_midnight_ms(now_ms)) / 1000
        return self.set(sec, now_ms=now_ms)

    def set_from_local(self, text: str, now_ms: MsT, tz: Optional[tzinfo] = None) -> Optional[Decimal]:
        """
        Offset from a local wall time on today's local date.

        A string that does not match HH:MM[:SS[.fff]] leaves the offset
        unchanged and returns None.
        """
        t = parse_local_time(text)
        if t is None:
            logger.debug("Ignoring malformed sunrise time %r", text)
            return None
        candidate_ms = Decimal(local_time_ms(now_ms, t.hh, t.mm, t.ss, tz)) + t.frac * 1000
        sec = (candidate_ms - utc_midnight_ms(now_ms)) / 1000
        return self.set(sec, now_ms=now_ms)
