from __future__ import annotations
from typing import Any, Dict

from ..engines.arcs import arc_index_from_beat
from ..engines.constants import ARC_NAMES
from ..engines.grid import display_beat_step, format_beat_step
from .registry import register_attribute

DAY_TO_CHAKRA = {
    "Solhara": "Root",
    "Aquaris": "Sacral",
    "Flamora": "Solar Plexus",
    "Verdari": "Heart",
    "Sonari": "Throat",
    "Kaelith": "Crown",
}

ARC_DESC = {
    "Ignition Ark": "Resurrection, will, awakening",
    "Integration Ark": "Emotional grounding, emergence",
    "Harmonization Ark": "Radiance, balance, coherent action",
    "Reflektion Ark": "Union, compassion, spoken resonance",
    "Purifikation Ark": "Truth, remembrance, etheric light",
    "Dream Ark": "Divine memory, lucid integration, dreaming awake",
}

MONTH_DESC = {
    "Aethon": "Resurrection fire: Root awakening",
    "Virelai": "Waters of becoming: Emotional emergence",
    "Solari": "Solar ignition: Radiant embodiment",
    "Amarin": "Heart bloom: Sacred balance",
    "Kaelus": "Voice of stars: Resonant expression",
    "Umbriel": "Divine remembrance: Krown alignment",
    "Noctura": "Light spiral: Selestial flow",
    "Liora": "Eternal mirror: Infinite now",
}

# one per week of the month
WEEK_SPIRALS = (
    ("Awakening Flame", "Root fire of ignition, will, resurrektion"),
    ("Flowing Heart", "Emotional waters, intimasy, surrender"),
    ("Radiant Will", "Solar klarity, aligned konfidence, embodiment"),
    ("Harmonic Voice", "Spoken truth, vibration, koherense in sound"),
    ("Inner Mirror", "Reflektion, purifikation, self-seeing"),
    ("Dreamfire Memory", "Lusid vision, divine memory, encoded light"),
    ("Krowned Light", "Integration, sovereignty, harmonik ascension"),
)

def chakra(m) -> Dict[str, Any]:
    return {"chakra_day": DAY_TO_CHAKRA[m.weekday]}

def beat_arc(m) -> Dict[str, Any]:
    name = ARC_NAMES[arc_index_from_beat(m.beat)]
    return {"beat_arc": name, "beat_arc_desc": ARC_DESC[name]}

def week_spiral(m) -> Dict[str, Any]:
    name, desc = WEEK_SPIRALS[m.calendar.week_in_month0]
    return {"week_spiral": name, "week_spiral_desc": desc}

def month_desc(m) -> Dict[str, Any]:
    return {"month_desc": MONTH_DESC[m.calendar.month_name]}

def labels(m) -> Dict[str, Any]:
    return {
        "beat_step": format_beat_step(m.beat, m.step),
        "beat_step_display": display_beat_step(m.beat, m.step)["label"],
    }

register_attribute("chakra", chakra)
register_attribute("beat_arc", beat_arc)
register_attribute("week_spiral", week_spiral)
register_attribute("month_desc", month_desc)
register_attribute("labels", labels)
