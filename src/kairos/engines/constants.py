"""
kairos.engines.constants
------------------------
Canon constants. Every length the engine computes with is an exact integer of
micro-pulses (1 pulse = 1_000_000 micro-pulses); the breath itself is only
ever touched through BREATH_SEC at fixed decimal precision.
"""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_EVEN

# ------------------------------------------------------------
# Breath (3 + sqrt 5 seconds)
# ------------------------------------------------------------

DECIMAL_PRECISION = 64
BRIDGE_CONTEXT = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)

SQRT5 = BRIDGE_CONTEXT.sqrt(Decimal(5))
BREATH_SEC = BRIDGE_CONTEXT.add(Decimal(3), SQRT5)
BREATH_MS = BRIDGE_CONTEXT.multiply(BREATH_SEC, Decimal(1000))

# display-only conveniences
BREATH_SEC_FLOAT = float(BREATH_SEC)
BREATH_MS_ROUNDED = round(BREATH_SEC_FLOAT * 1000)   # 5236
BREATH_HZ = 1.0 / BREATH_SEC_FLOAT

# ------------------------------------------------------------
# Genesis
# ------------------------------------------------------------

GENESIS_TS = 1715323541888             # 2024-05-10T06:45:41.888Z (Unix ms)

# Greenwich sunrise after genesis; informative, not used by the engine.
SOLAR_GENESIS_UTC_TS = 1715400806000   # 2024-05-11T04:13:26.000Z

# ------------------------------------------------------------
# Harmonic day and semantic grid
# ------------------------------------------------------------

MU_PER_PULSE = 1_000_000

HARMONIC_DAY_PULSES = Decimal("17491.270421")
MU_PER_DAY = 17_491_270_421

BEATS_PER_DAY = 36
STEPS_PER_BEAT = 44
PULSES_PER_STEP = 11
PULSES_PER_BEAT = PULSES_PER_STEP * STEPS_PER_BEAT      # 484
GRID_PULSES_PER_DAY = PULSES_PER_BEAT * BEATS_PER_DAY   # 17,424

MU_PER_GRID_STEP = PULSES_PER_STEP * MU_PER_PULSE       # 11e6
MU_PER_GRID_BEAT = PULSES_PER_BEAT * MU_PER_PULSE       # 484e6
MU_PER_GRID_DAY = GRID_PULSES_PER_DAY * MU_PER_PULSE    # 17,424e6

# seconds in one harmonic day (~91585.48); documentation only
DAY_SECONDS = BRIDGE_CONTEXT.multiply(HARMONIC_DAY_PULSES, BREATH_SEC)

# ------------------------------------------------------------
# Calendar: 6-day weeks, 7-week months, 8-month years
# ------------------------------------------------------------

DAYS_PER_WEEK = 6
WEEKS_PER_MONTH = 7
DAYS_PER_MONTH = DAYS_PER_WEEK * WEEKS_PER_MONTH    # 42
MONTHS_PER_YEAR = 8
DAYS_PER_YEAR = DAYS_PER_MONTH * MONTHS_PER_YEAR    # 336

ARCS_PER_DAY = 6

# Wall-clock day, only for the human-facing sunrise offset
SECONDS_PER_UTC_DAY = 86_400

# ------------------------------------------------------------
# Names
# ------------------------------------------------------------

DAY_NAMES = (
    "Solhara",
    "Aquaris",
    "Flamora",
    "Verdari",
    "Sonari",
    "Kaelith",
)

MONTH_NAMES = (
    "Aethon",
    "Virelai",
    "Solari",
    "Amarin",
    "Kaelus",
    "Umbriel",
    "Noctura",
    "Liora",
)

ARC_NAMES = (
    "Ignition Ark",
    "Integration Ark",
    "Harmonization Ark",
    "Reflektion Ark",
    "Purifikation Ark",
    "Dream Ark",
)
