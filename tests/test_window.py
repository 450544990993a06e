# tests/test_window.py

import random
from decimal import Decimal

import pytest

from kairos.core.errors import WindowInvariantError
from kairos.core.types import SolarWindow
from kairos.engines import window
from kairos.engines.bridge import micro_pulses_since_genesis, unix_ms_from_micro_pulses
from kairos.engines.constants import GENESIS_TS, MU_PER_DAY
from kairos.engines.window import WindowMode

from conftest import NEW_YEAR_1AM_MS, NEW_YEAR_MIDNIGHT_MS

GENESIS_MIDNIGHT_MS = 1715299200000


def test_daily_after_boundary():
    w = window.daily_window(NEW_YEAR_1AM_MS, Decimal(0))
    assert w.last == micro_pulses_since_genesis(NEW_YEAR_MIDNIGHT_MS)
    assert w.span == MU_PER_DAY
    assert w.last <= w.now < w.next


def test_daily_before_boundary_uses_previous_day():
    w = window.daily_window(NEW_YEAR_1AM_MS, Decimal(21600))
    assert w.next == micro_pulses_since_genesis(NEW_YEAR_MIDNIGHT_MS + 21_600_000)
    assert w.last == w.next - MU_PER_DAY
    assert w.last <= w.now < w.next


def test_first_genesis_sunrise():
    # midnight + 0 is before genesis: moved one harmonic day forward
    assert window.first_genesis_sunrise(Decimal(0)) == micro_pulses_since_genesis(GENESIS_MIDNIGHT_MS) + MU_PER_DAY
    # exactly at genesis is kept
    assert window.first_genesis_sunrise(Decimal("24341.888")) == 0
    assert window.first_genesis_sunrise(Decimal(30000)) == micro_pulses_since_genesis(GENESIS_MIDNIGHT_MS + 30_000_000)


def test_genesis_tiling_lands_on_whole_days():
    first = window.first_genesis_sunrise(Decimal(30000))
    now_ms = unix_ms_from_micro_pulses(first + 3 * MU_PER_DAY + 10**9)
    w = window.genesis_window(now_ms, Decimal(30000))
    assert w.last == first + 3 * MU_PER_DAY
    assert w.next == first + 4 * MU_PER_DAY


def test_genesis_tiling_before_anchor_floors_toward_minus_infinity():
    first = window.first_genesis_sunrise(Decimal(30000))
    w = window.genesis_window(GENESIS_TS - 10 * 86_400_000, Decimal(30000))
    assert (w.last - first) % MU_PER_DAY == 0
    assert w.last < first
    assert w.last <= w.now < w.next


@pytest.mark.parametrize("mode", list(WindowMode))
def test_span_invariant_and_containment(mode):
    rng = random.Random(11)
    for _ in range(500):
        now_ms = rng.randint(GENESIS_TS - 10**11, GENESIS_TS + 10**12)
        offset = Decimal(rng.randint(0, 86_399_999)) / 1000
        w = window.select_window(now_ms, offset, mode)
        assert w.next - w.last == MU_PER_DAY
        assert w.last <= w.now < w.next


def test_select_window_defaults_to_daily():
    assert window.select_window(NEW_YEAR_1AM_MS, Decimal(0)) == window.daily_window(NEW_YEAR_1AM_MS, Decimal(0))


def test_span_violation_raises(monkeypatch):
    monkeypatch.setattr(window, "daily_window", lambda now_ms, off: SolarWindow(last=0, next=5, now=1))
    with pytest.raises(WindowInvariantError):
        window.select_window(NEW_YEAR_1AM_MS, Decimal(0), WindowMode.DAILY)
