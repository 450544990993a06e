# tests/test_clock_api.py

from decimal import Decimal

import pytest

import kairos
from kairos import api
from kairos.core.errors import ClockNotInitializedError
from kairos.core.store import JsonFileOffsetStore
from kairos.engines.bridge import micro_pulses_since_genesis
from kairos.engines.constants import BREATH_MS, GENESIS_TS, MU_PER_DAY, MU_PER_PULSE

from conftest import NEW_YEAR_1AM_MS, NEW_YEAR_MIDNIGHT_MS


def test_pulse_today_with_zero_offset(clock):
    t = clock.pulse_today()
    assert t.pulse_today == 687
    assert (t.beat, t.step) == (1, 18)
    assert 3.9 < t.day_percent < 4.0
    assert 0.0 <= t.percent_into_step < 100.0
    assert int(t.pulse_today_continuous) == t.pulse_today


def test_window_boundaries_in_ms(clock):
    ms = clock.solar_window_ms()
    assert ms["last_sunrise_ms"] == NEW_YEAR_MIDNIGHT_MS
    assert abs(ms["next_sunrise_ms"] - NEW_YEAR_MIDNIGHT_MS - 91_585_481) <= 1


def test_arc_follows_offset(clock):
    assert clock.solar_arc_name() == "Ignition Ark"
    clock.set_sunrise_offset(21600)
    # 5 h before the 06:00 UTC boundary, so late in yesterday's window
    assert clock.solar_arc_name() == "Purifikation Ark"


def test_eternal_counters(clock):
    c = clock.eternal_counters()
    assert c.day_index == 222
    assert (c.day_name, c.month_name, c.day_in_month1, c.week_in_month1) == ("Solhara", "Umbriel", 13, 3)


def test_solar_counters_both_modes(clock, genesis_clock):
    assert clock.solar_counters().day_index == 221
    assert clock.solar_counters().day_name == "Kaelith"
    w = genesis_clock.solar_window()
    assert w.last == genesis_clock.genesis_sunrise_mu() + 221 * MU_PER_DAY
    assert genesis_clock.solar_counters().day_index == 221


def test_display_counters_prefer_eternal(clock):
    d = clock.display_counters()
    assert d.display is d.eternal
    assert d.solar.frame == "solar"


def test_moment(clock):
    m = clock.moment()
    assert m.pulse == m.micro_pulse // MU_PER_PULSE
    assert m.weekday == "Solhara"
    assert m.beat == 14
    assert 0.0 <= m.step_pct_across_beat < 1.0
    assert m.attributes is None


def test_sub_ms_instant(clock):
    assert clock.micro_pulse_eternal(Decimal(GENESIS_TS) + Decimal("0.5")) == 95


def test_decimal_instant_feeds_both_frames(clock):
    at = Decimal(GENESIS_TS) + Decimal("0.5")
    assert clock.solar_window(at).now == clock.micro_pulse_eternal(at) == 95


def test_negative_fractional_instant_floors_to_previous_day(clock):
    at = Decimal("-0.5")
    w = clock.solar_window(at)
    assert w.now == micro_pulses_since_genesis(at)
    assert w.last == micro_pulses_since_genesis(-86_400_000)
    assert w.last <= w.now < w.next


def test_ms_until_next_pulse(clock):
    assert 0.0 < clock.ms_until_next_pulse() <= BREATH_MS
    assert clock.ms_until_next_pulse(GENESIS_TS) == pytest.approx(float(BREATH_MS))


def test_set_sunrise_now_restarts_the_day(clock):
    assert clock.set_sunrise_now() == Decimal(3600)
    w = clock.solar_window()
    assert w.last == w.now == micro_pulses_since_genesis(NEW_YEAR_1AM_MS)
    assert clock.pulse_today().pulse_today == 0


def test_set_sunrise_from_local_rejects_garbage(clock):
    clock.set_sunrise_offset(100)
    assert clock.set_sunrise_from_local("dawn") is None
    assert clock.sunrise_offset() == Decimal(100)


def test_info_and_explain(clock):
    assert clock.info() == {"mode": "daily", "store": "MemoryOffsetStore", "sunrise_offset_sec": "0"}
    e = clock.explain()
    assert e["unix_ms"] == NEW_YEAR_1AM_MS
    assert e["arc"] == "Ignition Ark"
    assert e["window"]["next"] - e["window"]["last"] == MU_PER_DAY


def test_api_delegates_to_installed_clock(installed_clock):
    assert kairos.pulse_today() == installed_clock.pulse_today()
    assert kairos.micro_pulse_eternal() == installed_clock.micro_pulse_eternal()
    assert kairos.pulse_eternal(GENESIS_TS) == 0
    assert kairos.solar_window() == installed_clock.solar_window()
    assert kairos.clock_info()["mode"] == "daily"
    kairos.set_sunrise_offset("-0.5")
    assert kairos.sunrise_offset() == Decimal("86399.5")


def test_moment_info_attributes(installed_clock):
    m = kairos.moment_info(attributes=("chakra", "beat_arc", "week_spiral", "month_desc", "labels"))
    a = m.attributes
    assert a["chakra_day"] == "Root"
    assert a["beat_arc"] == "Harmonization Ark"
    assert a["week_spiral"] == "Radiant Will"
    assert a["month_desc"].startswith("Divine remembrance")
    assert a["beat_step"].startswith("14:")
    assert a["beat_step_display"].startswith("15:")


def test_unknown_attribute(installed_clock):
    with pytest.raises(KeyError):
        kairos.moment_info(attributes=("horoscope",))


def test_attribute_names():
    assert {"chakra", "beat_arc", "week_spiral", "month_desc", "labels"} <= set(kairos.attribute_names())


def test_uninitialized_clock_raises(monkeypatch):
    monkeypatch.setattr(api, "_clock", None)
    with pytest.raises(ClockNotInitializedError):
        kairos.get_clock()
    with pytest.raises(RuntimeError):
        kairos.pulse_eternal()


def test_configure_swaps_store(installed_clock, tmp_path):
    clock = kairos.configure(kairos.ClockConfig(state_path=tmp_path / "state.json", window_mode=kairos.WindowMode.GENESIS))
    assert kairos.get_clock() is clock
    assert isinstance(clock.store, JsonFileOffsetStore)
    assert kairos.clock_info()["mode"] == "genesis"
