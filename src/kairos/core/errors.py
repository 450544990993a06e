class KairosError(Exception):
    """Base error."""

class ConfigError(KairosError):
    """Raised when the clock configuration cannot be interpreted."""

class ClockNotInitializedError(KairosError, RuntimeError):
    """Raised when the module-level clock is used before bootstrap."""

class InvalidInstantError(KairosError, ValueError):
    """Raised when an instant (ms, datetime or ISO string) cannot be parsed."""

class WindowInvariantError(KairosError):
    """Raised when a solar window does not span exactly one harmonic day."""
