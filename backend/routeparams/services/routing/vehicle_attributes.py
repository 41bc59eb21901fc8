"""Heavy vehicle type ids and load characteristic flags."""

from typing import Dict


class HeavyVehicleAttributes:
    """Vehicle type bits; UNKNOWN is the sentinel for an unspecified type."""

    UNKNOWN = 0
    GOODS = 1
    HGV = 2
    BUS = 4
    AGRICULTURE = 8
    FORESTRY = 16
    DELIVERY = 32


class VehicleLoadCharacteristicsFlags:
    NONE = 0
    HAZMAT = 0x1


VEHICLE_TYPES: Dict[str, int] = {
    "goods": HeavyVehicleAttributes.GOODS,
    "hgv": HeavyVehicleAttributes.HGV,
    "bus": HeavyVehicleAttributes.BUS,
    "agricultural": HeavyVehicleAttributes.AGRICULTURE,
    "forestry": HeavyVehicleAttributes.FORESTRY,
    "delivery": HeavyVehicleAttributes.DELIVERY,
}


def get_from_string(name: str) -> int:
    return VEHICLE_TYPES.get(name.lower(), HeavyVehicleAttributes.UNKNOWN)
