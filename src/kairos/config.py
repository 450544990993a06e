"""
kairos.config
-------------
Static clock configuration, read from the environment:

  KAIROS_WINDOW_MODE  daily | genesis   (default: daily)
  KAIROS_STATE_FILE   JSON file holding the sunrise offset (default: in-memory)
  KAIROS_LOG_LEVEL    logging level name (default: WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from .core.errors import ConfigError
from .engines.window import WindowMode

ENV_WINDOW_MODE = "KAIROS_WINDOW_MODE"
ENV_STATE_FILE = "KAIROS_STATE_FILE"
ENV_LOG_LEVEL = "KAIROS_LOG_LEVEL"


def parse_window_mode(value: str) -> WindowMode:
    try:
        return WindowMode(value.strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in WindowMode)
        raise ConfigError(f"Unknown window mode {value!r}. Available: {choices}") from None


@dataclass(frozen=True)
class ClockConfig:
    window_mode: WindowMode = WindowMode.DAILY
    state_path: Optional[Path] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ClockConfig":
        env = os.environ if env is None else env
        mode = parse_window_mode(env.get(ENV_WINDOW_MODE) or WindowMode.DAILY.value)
        state = env.get(ENV_STATE_FILE)
        level = (env.get(ENV_LOG_LEVEL) or "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level {level!r}")
        return cls(window_mode=mode, state_path=Path(state) if state else None, log_level=level)

    def tweak(self, **kwargs) -> "ClockConfig":
        return replace(self, **kwargs)
