"""Encoders for wheelchair surface, track and smoothness restrictions.

Values are encoded as their 1-based position in the tables below, ordered
from most to least accessible. Unrecognized names encode to -1.
"""

from typing import Dict, Tuple

UNKNOWN_TYPE = -1

SURFACE_TYPES: Tuple[str, ...] = (
    "paved",
    "asphalt",
    "concrete",
    "paving_stones",
    "concrete:plates",
    "cobblestone:flattened",
    "sett",
    "concrete:lanes",
    "cobblestone",
    "unpaved",
    "compacted",
    "fine_gravel",
    "metal",
    "wood",
    "grass_paver",
    "gravel",
    "pebblestone",
    "ground",
    "dirt",
    "earth",
    "grass",
    "mud",
    "sand",
    "ice",
    "salt",
    "snow",
)

TRACK_TYPES: Tuple[str, ...] = ("grade1", "grade2", "grade3", "grade4", "grade5")

SMOOTHNESS_TYPES: Tuple[str, ...] = (
    "excellent",
    "good",
    "intermediate",
    "bad",
    "very_bad",
    "horrible",
    "very_horrible",
    "impassable",
)


def _index(values: Tuple[str, ...]) -> Dict[str, int]:
    return {name: position for position, name in enumerate(values, start=1)}


_SURFACE_INDEX = _index(SURFACE_TYPES)
_TRACK_INDEX = _index(TRACK_TYPES)
_SMOOTHNESS_INDEX = _index(SMOOTHNESS_TYPES)


def get_surface_type(name: str) -> int:
    return _SURFACE_INDEX.get(name.strip().lower(), UNKNOWN_TYPE)


def get_track_type(name: str) -> int:
    return _TRACK_INDEX.get(name.strip().lower(), UNKNOWN_TYPE)


def get_smoothness_type(name: str) -> int:
    return _SMOOTHNESS_INDEX.get(name.strip().lower(), UNKNOWN_TYPE)
