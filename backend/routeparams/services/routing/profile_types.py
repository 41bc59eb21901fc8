"""Routing profile identifiers and their categories."""

from enum import Enum
from typing import Dict


class ProfileCategory(str, Enum):
    """Closed set of profile categories used for parameter dispatch."""

    DRIVING = "driving"
    HEAVY_VEHICLE = "heavy_vehicle"
    CYCLING = "cycling"
    WALKING = "walking"
    WHEELCHAIR = "wheelchair"
    OTHER = "other"


class RoutingProfileType:
    """Internal integer ids of the routing profiles."""

    UNKNOWN = 0

    DRIVING_CAR = 1
    DRIVING_HGV = 2
    DRIVING_EMERGENCY = 3
    DRIVING_CAROFFROAD = 4
    DRIVING_SEGWAY = 5
    DRIVING_ELECTRIC_CAR = 6
    DRIVING_MOTORCYCLE = 7
    DRIVING_TRAFFIC = 8

    CYCLING_REGULAR = 10
    CYCLING_MOUNTAIN = 11
    CYCLING_ROAD = 12
    CYCLING_TOUR = 14
    CYCLING_ELECTRIC = 17

    FOOT_WALKING = 20
    FOOT_HIKING = 21
    FOOT_JOGGING = 24

    WHEELCHAIR = 30


PROFILE_NAMES: Dict[int, str] = {
    RoutingProfileType.DRIVING_CAR: "driving-car",
    RoutingProfileType.DRIVING_HGV: "driving-hgv",
    RoutingProfileType.DRIVING_EMERGENCY: "driving-emergency",
    RoutingProfileType.DRIVING_CAROFFROAD: "driving-offroad",
    RoutingProfileType.DRIVING_SEGWAY: "driving-segway",
    RoutingProfileType.DRIVING_ELECTRIC_CAR: "driving-ecar",
    RoutingProfileType.DRIVING_MOTORCYCLE: "driving-motorcycle",
    RoutingProfileType.DRIVING_TRAFFIC: "driving-traffic",
    RoutingProfileType.CYCLING_REGULAR: "cycling-regular",
    RoutingProfileType.CYCLING_MOUNTAIN: "cycling-mountain",
    RoutingProfileType.CYCLING_ROAD: "cycling-road",
    RoutingProfileType.CYCLING_TOUR: "cycling-tour",
    RoutingProfileType.CYCLING_ELECTRIC: "cycling-electric",
    RoutingProfileType.FOOT_WALKING: "foot-walking",
    RoutingProfileType.FOOT_HIKING: "foot-hiking",
    RoutingProfileType.FOOT_JOGGING: "foot-jogging",
    RoutingProfileType.WHEELCHAIR: "wheelchair",
}

PROFILE_TYPES: Dict[str, int] = {name: profile for profile, name in PROFILE_NAMES.items()}

HEAVY_VEHICLE_PROFILES = frozenset({
    RoutingProfileType.DRIVING_HGV,
    RoutingProfileType.DRIVING_EMERGENCY,
    RoutingProfileType.DRIVING_CAROFFROAD,
})


def get_from_string(name: str) -> int:
    """Resolve an API profile name, returning UNKNOWN when not recognized."""
    return PROFILE_TYPES.get(name.lower(), RoutingProfileType.UNKNOWN)


def get_name(profile_type: int) -> str:
    return PROFILE_NAMES.get(profile_type, "unknown")


def get_category(profile_type: int) -> ProfileCategory:
    """Resolve the single category a profile type belongs to."""
    if profile_type in HEAVY_VEHICLE_PROFILES:
        return ProfileCategory.HEAVY_VEHICLE
    if profile_type not in PROFILE_NAMES:
        return ProfileCategory.OTHER
    if profile_type < 10:
        return ProfileCategory.DRIVING
    if profile_type < 20:
        return ProfileCategory.CYCLING
    if profile_type < 30:
        return ProfileCategory.WALKING
    if profile_type == RoutingProfileType.WHEELCHAIR:
        return ProfileCategory.WHEELCHAIR
    return ProfileCategory.OTHER


def is_driving(profile_type: int) -> bool:
    """Heavy vehicles are driving profiles too."""
    return get_category(profile_type) in (ProfileCategory.DRIVING, ProfileCategory.HEAVY_VEHICLE)


def is_heavy_vehicle(profile_type: int) -> bool:
    return get_category(profile_type) == ProfileCategory.HEAVY_VEHICLE


def is_cycling(profile_type: int) -> bool:
    return get_category(profile_type) == ProfileCategory.CYCLING


def is_walking(profile_type: int) -> bool:
    return get_category(profile_type) == ProfileCategory.WALKING


def is_wheelchair(profile_type: int) -> bool:
    return get_category(profile_type) == ProfileCategory.WHEELCHAIR
