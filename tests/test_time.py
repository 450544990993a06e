# tests/test_time.py

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from kairos.core.errors import InvalidInstantError
from kairos.core.time import (
    civil_from_days,
    days_from_civil,
    local_time_ms,
    parse_iso_ms,
    to_unix_ms,
    utc_midnight_ms,
)

from conftest import NEW_YEAR_1AM_MS, NEW_YEAR_MIDNIGHT_MS


def test_days_from_civil():
    assert days_from_civil(1970, 1, 1) == 0
    assert days_from_civil(2000, 3, 1) == 11017
    assert days_from_civil(1969, 12, 31) == -1
    assert civil_from_days(11017).isoformat() == "2000-03-01"


@pytest.mark.parametrize(
    "s,ms",
    [
        ("2025-01-01T01:00:00Z", NEW_YEAR_1AM_MS),
        ("2025-01-01T01:00Z", NEW_YEAR_1AM_MS),
        ("2025-01-01T03:00:00+02:00", NEW_YEAR_1AM_MS),
        ("2025-01-01T01:00:00.0005Z", NEW_YEAR_1AM_MS + 1),
        ("1970-01-01T00:00:00Z", 0),
        ("2025-01-01", NEW_YEAR_MIDNIGHT_MS),
    ],
)
def test_parse_iso(s, ms):
    assert parse_iso_ms(s) == ms


def test_parse_iso_signed_year():
    expected = days_from_civil(-44, 3, 15) * 86_400_000 + 12 * 3_600_000
    assert parse_iso_ms("-0044-03-15T12:00Z") == expected
    assert expected < 0


def test_parse_iso_rejects_garbage():
    with pytest.raises(InvalidInstantError):
        parse_iso_ms("not a date")


def test_to_unix_ms():
    assert to_unix_ms(42) == 42
    assert to_unix_ms(1.9) == 1
    assert to_unix_ms(-1.9) == -1
    assert to_unix_ms(Decimal("0.5")) == Decimal("0.5")
    assert to_unix_ms(datetime(2025, 1, 1, 1, tzinfo=timezone.utc)) == NEW_YEAR_1AM_MS
    assert to_unix_ms(datetime(2025, 1, 1, 1)) == NEW_YEAR_1AM_MS
    assert to_unix_ms("2025-01-01T01:00:00Z") == NEW_YEAR_1AM_MS


@pytest.mark.parametrize("bad", [True, float("nan"), float("inf"), Decimal("NaN"), [], None])
def test_to_unix_ms_rejects(bad):
    with pytest.raises(InvalidInstantError):
        to_unix_ms(bad)


def test_utc_midnight():
    assert utc_midnight_ms(NEW_YEAR_1AM_MS) == NEW_YEAR_MIDNIGHT_MS
    assert utc_midnight_ms(NEW_YEAR_MIDNIGHT_MS) == NEW_YEAR_MIDNIGHT_MS
    assert utc_midnight_ms(-1) == -86_400_000
    assert utc_midnight_ms(Decimal("-0.5")) == -86_400_000
    assert utc_midnight_ms(Decimal("0.5")) == 0


def test_local_time_ms_explicit_zone():
    assert local_time_ms(NEW_YEAR_1AM_MS, 6, 12, 0, timezone.utc) == NEW_YEAR_MIDNIGHT_MS + 22_320_000
