# tests/conftest.py

import pytest

import kairos
from kairos import api
from kairos.core.store import MemoryOffsetStore
from kairos.engines.clock import SovereignClock
from kairos.engines.window import WindowMode

# 2025-01-01T01:00:00Z
NEW_YEAR_1AM_MS = 1735693200000
NEW_YEAR_MIDNIGHT_MS = 1735689600000


@pytest.fixture
def store():
    return MemoryOffsetStore()


@pytest.fixture
def fixed_now():
    return NEW_YEAR_1AM_MS


@pytest.fixture
def clock(store, fixed_now):
    return SovereignClock(store=store, mode=WindowMode.DAILY, now=lambda: fixed_now)


@pytest.fixture
def genesis_clock(store, fixed_now):
    return SovereignClock(store=store, mode=WindowMode.GENESIS, now=lambda: fixed_now)


@pytest.fixture
def installed_clock(clock):
    """Swap the module-level clock for the fixed one, restoring it afterwards."""
    previous = api._clock
    kairos.set_clock(clock)
    yield clock
    api._clock = previous
