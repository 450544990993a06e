"""
kairos.engines.factory
----------------------
Transforms a pure data ClockConfig into a live SovereignClock.
"""

from __future__ import annotations

from typing import Optional

from ..config import ClockConfig
from ..core.store import JsonFileOffsetStore, MemoryOffsetStore, OffsetStore
from .clock import NowFn, SovereignClock, system_now_ms


def build_store(config: ClockConfig) -> OffsetStore:
    if config.state_path is not None:
        return JsonFileOffsetStore(config.state_path)
    return MemoryOffsetStore()


def make_clock(config: Optional[ClockConfig] = None, *, now: NowFn = system_now_ms) -> SovereignClock:
    """The universal entry point."""
    config = config if config is not None else ClockConfig.from_env()
    return SovereignClock(store=build_store(config), mode=config.window_mode, now=now)
