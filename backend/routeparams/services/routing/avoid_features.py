"""Bit flags for road features a route can avoid."""

from typing import Dict

from routeparams.services.routing.profile_types import ProfileCategory, get_category


class AvoidFeatureFlags:
    """One bit per avoidable feature."""

    HIGHWAYS = 0x1
    TOLLWAYS = 0x2
    FERRIES = 0x4
    FORDS = 0x8
    STEPS = 0x10


FEATURE_FLAGS: Dict[str, int] = {
    "highways": AvoidFeatureFlags.HIGHWAYS,
    "tollways": AvoidFeatureFlags.TOLLWAYS,
    "ferries": AvoidFeatureFlags.FERRIES,
    "fords": AvoidFeatureFlags.FORDS,
    "steps": AvoidFeatureFlags.STEPS,
}

DRIVING_FEATURES = (
    AvoidFeatureFlags.HIGHWAYS
    | AvoidFeatureFlags.TOLLWAYS
    | AvoidFeatureFlags.FERRIES
    | AvoidFeatureFlags.FORDS
)
CYCLING_FEATURES = AvoidFeatureFlags.STEPS | AvoidFeatureFlags.FERRIES | AvoidFeatureFlags.FORDS
WALKING_FEATURES = AvoidFeatureFlags.STEPS | AvoidFeatureFlags.FERRIES | AvoidFeatureFlags.FORDS
WHEELCHAIR_FEATURES = WALKING_FEATURES

FEATURES_BY_CATEGORY: Dict[ProfileCategory, int] = {
    ProfileCategory.DRIVING: DRIVING_FEATURES,
    ProfileCategory.HEAVY_VEHICLE: DRIVING_FEATURES,
    ProfileCategory.CYCLING: CYCLING_FEATURES,
    ProfileCategory.WALKING: WALKING_FEATURES,
    ProfileCategory.WHEELCHAIR: WHEELCHAIR_FEATURES,
    ProfileCategory.OTHER: 0,
}


def get_from_string(name: str) -> int:
    """Look up the flag for a feature name; 0 means unknown."""
    return FEATURE_FLAGS.get(name.lower(), 0)


def is_valid(profile_type: int, flags: int) -> bool:
    """Check that every bit in ``flags`` is avoidable for the profile."""
    allowed = FEATURES_BY_CATEGORY[get_category(profile_type)]
    return flags != 0 and (allowed & flags) == flags
