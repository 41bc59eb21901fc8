"""Translation of API request parameters into typed routing parameters."""

import logging
import math
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon, shape

from routeparams.core.error_codes import ErrorCodeRegistry
from routeparams.core.exceptions import (
    IncompatibleParameterException,
    InvalidJSONFormatException,
    ParameterValueException,
    UnknownParameterValueException,
)
from routeparams.schemas.routing import (
    RequestProfileParamsRestrictions,
    RequestProfileParamsWeightings,
    RouteRequest,
)
from routeparams.services.routing import (
    avoid_features,
    profile_types,
    vehicle_attributes,
    wheelchair_types,
)
from routeparams.services.routing.borders import AvoidBordersMode
from routeparams.services.routing.parameters import (
    CyclingParameters,
    ProfileParameters,
    ProfileWeighting,
    VehicleParameters,
    WalkingParameters,
    WheelchairParameters,
    variant_for,
)
from routeparams.services.routing.profile_types import ProfileCategory
from routeparams.services.routing.vehicle_attributes import (
    HeavyVehicleAttributes,
    VehicleLoadCharacteristicsFlags,
)

logger = logging.getLogger(__name__)

APIValue = Union[Enum, str]

AVOID_POLYGONS = "avoid_polygons"


class GenericHandler:
    """
    Converts request parameters shared by the routing endpoints.

    Every failure is raised immediately as a typed ``ParameterError`` whose
    numeric code comes from the injected error code registry.
    """

    def __init__(self, error_codes: Optional[ErrorCodeRegistry] = None):
        self.error_codes = error_codes if error_codes is not None else ErrorCodeRegistry()

    def get_error_code(self, name: str) -> int:
        return self.error_codes.get_code(name)

    # =========================================================================
    # Enum / flag conversion
    # =========================================================================

    def convert_api_enum(self, value: APIValue) -> str:
        """API representation of an enumerated value."""
        if isinstance(value, Enum):
            return str(value.value)
        return str(value)

    def convert_api_enum_list_to_strings(self, values: Iterable[APIValue]) -> List[str]:
        return [self.convert_api_enum(value) for value in values]

    def convert_route_profile_type(self, profile: APIValue) -> int:
        name = self.convert_api_enum(profile)
        profile_type = profile_types.get_from_string(name)
        if profile_type == profile_types.RoutingProfileType.UNKNOWN:
            raise UnknownParameterValueException(
                self.get_error_code("INVALID_PARAMETER_VALUE"), "profile", name
            )
        return profile_type

    def convert_vehicle_type(self, vehicle_type: Optional[APIValue], profile_type: int) -> int:
        """
        Resolve the heavy vehicle type id.

        A missing vehicle type maps to the UNKNOWN sentinel. A supplied one is
        only allowed for heavy vehicle profiles.
        """
        if vehicle_type is None:
            return HeavyVehicleAttributes.UNKNOWN

        name = self.convert_api_enum(vehicle_type)
        if not profile_types.is_heavy_vehicle(profile_type):
            raise IncompatibleParameterException(
                self.get_error_code("INVALID_PARAMETER_VALUE"),
                "vehicle_type", name,
                "profile", profile_types.get_name(profile_type),
            )

        return vehicle_attributes.get_from_string(name)

    def convert_avoid_borders(self, avoid_borders: Optional[APIValue]) -> Optional[AvoidBordersMode]:
        """Map the border policy; None stays None so "unset" differs from "none"."""
        if avoid_borders is None:
            return None

        name = self.convert_api_enum(avoid_borders).lower()
        if name == "all":
            return AvoidBordersMode.ALL
        if name == "controlled":
            return AvoidBordersMode.CONTROLLED
        return AvoidBordersMode.NONE

    def convert_feature_types(self, features: Iterable[APIValue], profile_type: int) -> int:
        flags = 0
        for feature in features:
            name = self.convert_api_enum(feature)
            flag = avoid_features.get_from_string(name)
            if flag == 0:
                raise UnknownParameterValueException(
                    self.get_error_code("INVALID_PARAMETER_VALUE"), "avoid_features", name
                )

            if not avoid_features.is_valid(profile_type, flag):
                raise IncompatibleParameterException(
                    self.get_error_code("INVALID_PARAMETER_VALUE"),
                    "avoid_features", name,
                    "profile", profile_types.get_name(profile_type),
                )

            flags |= flag

        return flags

    # =========================================================================
    # Avoid polygons
    # =========================================================================

    def convert_avoid_areas(self, geojson: Dict[str, Any]) -> List[Polygon]:
        """
        Normalize a GeoJSON Polygon or MultiPolygon into a list of polygons.

        MultiPolygon members keep their original order.
        """
        try:
            geometry = shape(_to_strict_geojson(geojson))
        except (KeyError, TypeError, ValueError, AttributeError, IndexError, ShapelyError) as e:
            logger.debug(f"Unparseable {AVOID_POLYGONS}: {e}")
            raise InvalidJSONFormatException(
                self.get_error_code("INVALID_JSON_FORMAT"), AVOID_POLYGONS
            ) from e

        if geometry.is_empty:
            raise InvalidJSONFormatException(
                self.get_error_code("INVALID_JSON_FORMAT"), AVOID_POLYGONS
            )

        if isinstance(geometry, Polygon):
            return [geometry]
        if isinstance(geometry, MultiPolygon):
            return list(geometry.geoms)

        raise ParameterValueException(
            self.get_error_code("INVALID_PARAMETER_VALUE"), AVOID_POLYGONS
        )

    # =========================================================================
    # Profile parameters
    # =========================================================================

    def convert_parameters(self, request: RouteRequest, profile_type: int) -> ProfileParameters:
        """
        Build the profile specific parameters of a route request.

        Restrictions are validated against the variant of the profile's
        category before conversion; weightings are layered on afterwards.
        """
        options = request.options
        category = profile_types.get_category(profile_type)
        params = ProfileParameters()

        if options.vehicle_type is not None:
            self.convert_vehicle_type(options.vehicle_type, profile_type)

        profile_params = options.profile_params
        if profile_params is None:
            return params

        if profile_params.has_restrictions():
            restrictions = profile_params.restrictions
            self.validate_restrictions_for_profile(restrictions, profile_type)

            converters: Dict[ProfileCategory, Callable[[], ProfileParameters]] = {
                ProfileCategory.CYCLING: lambda: self._convert_cycling_parameters(restrictions),
                ProfileCategory.HEAVY_VEHICLE: lambda: self._convert_heavy_vehicle_parameters(
                    restrictions, options.vehicle_type
                ),
                ProfileCategory.WALKING: lambda: self._convert_walking_parameters(restrictions),
                ProfileCategory.WHEELCHAIR: lambda: self._convert_wheelchair_parameters(restrictions),
            }
            converter = converters.get(category)
            if converter is not None:
                params = converter()

        if profile_params.has_weightings():
            self._apply_weightings(profile_params.weightings, params)

        logger.debug(
            f"Converted {params.variant} parameters for {profile_types.get_name(profile_type)}: "
            f"{params.restriction_values()}"
        )
        return params

    def validate_restrictions_for_profile(
        self, restrictions: RequestProfileParamsRestrictions, profile_type: int
    ) -> None:
        """Reject restrictions the profile's variant does not accept, all at once."""
        valid_restrictions = variant_for(profile_types.get_category(profile_type)).valid_restrictions

        invalid = [
            name for name in restrictions.get_set_restrictions()
            if name not in valid_restrictions
        ]

        if invalid:
            raise IncompatibleParameterException(
                self.get_error_code("UNKNOWN_PARAMETER"),
                "restrictions", ", ".join(invalid),
                "profile", profile_types.get_name(profile_type),
            )

    def _convert_cycling_parameters(self, restrictions: RequestProfileParamsRestrictions) -> CyclingParameters:
        params = CyclingParameters()
        if restrictions.gradient is not None:
            params.maximum_gradient = restrictions.gradient
        if restrictions.trail_difficulty is not None:
            params.maximum_trail_difficulty = restrictions.trail_difficulty
        return params

    def _convert_walking_parameters(self, restrictions: RequestProfileParamsRestrictions) -> WalkingParameters:
        params = WalkingParameters()
        if restrictions.gradient is not None:
            params.maximum_gradient = restrictions.gradient
        if restrictions.trail_difficulty is not None:
            params.maximum_trail_difficulty = restrictions.trail_difficulty
        return params

    def _convert_heavy_vehicle_parameters(
        self,
        restrictions: RequestProfileParamsRestrictions,
        vehicle_type: Optional[APIValue],
    ) -> VehicleParameters:
        params = VehicleParameters()

        # Dimensions only apply to a known vehicle type
        if vehicle_type is None or self.convert_api_enum(vehicle_type) == "unknown":
            return params

        if restrictions.length is not None:
            params.length = restrictions.length
        if restrictions.width is not None:
            params.width = restrictions.width
        if restrictions.height is not None:
            params.height = restrictions.height
        if restrictions.weight is not None:
            params.weight = restrictions.weight
        if restrictions.axleload is not None:
            params.axleload = restrictions.axleload

        load_characteristics = VehicleLoadCharacteristicsFlags.NONE
        if restrictions.hazmat:
            load_characteristics |= VehicleLoadCharacteristicsFlags.HAZMAT

        if load_characteristics != VehicleLoadCharacteristicsFlags.NONE:
            params.load_characteristics = load_characteristics

        return params

    def _convert_wheelchair_parameters(
        self, restrictions: RequestProfileParamsRestrictions
    ) -> WheelchairParameters:
        params = WheelchairParameters()

        if restrictions.surface_type is not None:
            params.surface_type = self._encode_wheelchair_type(
                "surface_type", restrictions.surface_type, wheelchair_types.get_surface_type
            )
        if restrictions.track_type is not None:
            params.track_type = self._encode_wheelchair_type(
                "track_type", restrictions.track_type, wheelchair_types.get_track_type
            )
        if restrictions.smoothness_type is not None:
            params.smoothness_type = self._encode_wheelchair_type(
                "smoothness_type", restrictions.smoothness_type, wheelchair_types.get_smoothness_type
            )
        if restrictions.maximum_sloped_kerb is not None:
            params.maximum_sloped_kerb = restrictions.maximum_sloped_kerb
        if restrictions.maximum_incline is not None:
            params.maximum_incline = restrictions.maximum_incline
        if restrictions.minimum_width is not None:
            params.minimum_width = restrictions.minimum_width

        return params

    def _encode_wheelchair_type(self, name: str, value: str, encode: Callable[[str], int]) -> int:
        encoded = encode(value)
        if encoded == wheelchair_types.UNKNOWN_TYPE:
            raise UnknownParameterValueException(
                self.get_error_code("INVALID_PARAMETER_VALUE"), name, value
            )
        return encoded

    def _apply_weightings(
        self, weightings: RequestProfileParamsWeightings, params: ProfileParameters
    ) -> ProfileParameters:
        """
        Append the requested weightings in order green, quiet, steepness.

        A weighting that cannot be applied is recorded on ``params`` and
        skipped; the remaining ones are still applied.
        """
        pending = []
        if weightings.green is not None:
            pending.append(("green", "factor", "{:.2f}", weightings.green))
        if weightings.quiet is not None:
            pending.append(("quiet", "factor", "{:.2f}", weightings.quiet))
        if weightings.steepness_difficulty is not None:
            pending.append(("steepness_difficulty", "level", "{:d}", weightings.steepness_difficulty))

        for name, key, fmt, value in pending:
            try:
                weighting = ProfileWeighting(name=name)
                weighting.add_parameter(key, fmt.format(value))
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping weighting {name}={value!r}: {e}")
                params.weighting_errors.append(f"{name}: {e}")
                continue
            params.add(weighting)

        return params


def _to_strict_geojson(geojson: Dict[str, Any]) -> Dict[str, Any]:
    """Re-encode loosely typed GeoJSON into plain str / nested float lists."""
    geometry_type = geojson["type"]
    if not isinstance(geometry_type, str):
        raise TypeError(f"GeoJSON type must be a string, got {type(geometry_type).__name__}")
    return {
        "type": geometry_type,
        "coordinates": _strict_coordinates(geojson["coordinates"]),
    }


def _strict_coordinates(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_strict_coordinates(item) for item in value]
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Invalid coordinate value: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Coordinate value is not finite: {value!r}")
    return number
