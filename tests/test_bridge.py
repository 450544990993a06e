# tests/test_bridge.py

import random
from decimal import Decimal

import pytest

from kairos.engines import bridge
from kairos.engines.constants import BREATH_MS, BREATH_SEC, GENESIS_TS, MU_PER_DAY, MU_PER_PULSE


def test_breath_is_three_plus_sqrt5():
    assert str(BREATH_SEC).startswith("5.236067977499789696409173668731276235440618359611525724270897")
    # 64 significant digits
    assert len(BREATH_SEC.as_tuple().digits) == 64


def test_genesis_is_zero():
    assert bridge.micro_pulses_since_genesis(GENESIS_TS) == 0
    assert bridge.unix_ms_from_micro_pulses(0) == GENESIS_TS


def test_one_ms_and_one_second():
    # 1000 / (3 + sqrt 5) = 190.983005625...
    assert bridge.micro_pulses_since_genesis(GENESIS_TS + 1) == 190
    assert bridge.micro_pulses_since_genesis(GENESIS_TS + 1000) == 190_983


def test_floor_before_genesis_is_negative():
    assert bridge.micro_pulses_since_genesis(GENESIS_TS - 1) == -191
    assert bridge.pulse_from_micro(-1) == -1


def test_decimal_instants_are_accepted():
    assert bridge.micro_pulses_since_genesis(Decimal(GENESIS_TS) + Decimal("0.5")) == 95


def test_monotonic():
    rng = random.Random(7)
    ts = sorted(rng.randint(GENESIS_TS - 10**12, GENESIS_TS + 10**13) for _ in range(2000))
    mus = [bridge.micro_pulses_since_genesis(t) for t in ts]
    assert all(a <= b for a, b in zip(mus, mus[1:]))


def test_round_trip_returns_same_ms():
    rng = random.Random(42)
    for _ in range(2000):
        t = rng.randint(-2 * 10**12, 10**13)
        mu = bridge.micro_pulses_since_genesis(t)
        assert bridge.unix_ms_from_micro_pulses(mu) == t


def test_round_trip_converges_after_one_iteration():
    t = 1760000000123
    mu1 = bridge.micro_pulses_since_genesis(t)
    t2 = bridge.unix_ms_from_micro_pulses(mu1)
    mu2 = bridge.micro_pulses_since_genesis(t2)
    mu3 = bridge.micro_pulses_since_genesis(bridge.unix_ms_from_micro_pulses(mu2))
    assert abs(t2 - t) <= float(BREATH_MS)
    assert mu2 == mu3


def test_whole_pulses():
    assert bridge.pulses_since_genesis(GENESIS_TS + 5236) == 0
    assert bridge.pulses_since_genesis(GENESIS_TS + 5237) == 1
    assert bridge.unix_ms_from_pulse(1) == GENESIS_TS + 5236


def test_day_length_in_micro_is_exact():
    start = bridge.unix_ms_from_micro_pulses(0)
    end = bridge.unix_ms_from_micro_pulses(MU_PER_DAY)
    # ~91585481.3 ms per harmonic day
    assert end - start == 91585481


def test_ms_until_next_pulse():
    assert bridge.ms_until_next_pulse(0) == pytest.approx(5236.0679775, abs=1e-6)
    assert bridge.ms_until_next_pulse(MU_PER_PULSE // 2) == pytest.approx(2618.0339887, abs=1e-6)
    assert bridge.ms_until_next_pulse(MU_PER_PULSE - 1) > 0
