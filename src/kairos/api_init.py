"""Default clock bootstrap (import side-effect)."""
from .api import set_clock
from .engines.factory import make_clock

set_clock(make_clock())
