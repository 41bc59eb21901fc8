"""Tests for restriction validation and profile parameter assembly.

Tests cover:
1. Restriction validation per profile category
2. Cycling, walking, heavy vehicle and wheelchair conversion
3. Heavy vehicle restrictions without a vehicle type
4. Weighting application and recorded weighting failures
"""

from typing import Optional

import pytest

from routeparams.core.exceptions import (
    IncompatibleParameterException,
    UnknownParameterValueException,
)
from routeparams.schemas.routing import (
    RequestProfileParams,
    RequestProfileParamsRestrictions,
    RequestProfileParamsWeightings,
    RouteRequest,
    RouteRequestOptions,
    RoutingProfile,
    VehicleType,
)
from routeparams.services.requests import RouteRequestHandler
from routeparams.services.routing import wheelchair_types
from routeparams.services.routing.parameters import (
    CyclingParameters,
    ProfileParameters,
    VehicleParameters,
    WalkingParameters,
    WheelchairParameters,
)
from routeparams.services.routing.profile_types import RoutingProfileType
from routeparams.services.routing.vehicle_attributes import VehicleLoadCharacteristicsFlags


COORDINATES = [[8.681495, 49.41461], [8.687872, 49.420318]]


def make_request(
    profile: RoutingProfile,
    restrictions: Optional[dict] = None,
    weightings: Optional[RequestProfileParamsWeightings] = None,
    vehicle_type: Optional[VehicleType] = None,
) -> RouteRequest:
    profile_params = None
    if restrictions is not None or weightings is not None:
        profile_params = RequestProfileParams(
            restrictions=(
                RequestProfileParamsRestrictions(**restrictions)
                if restrictions is not None else None
            ),
            weightings=weightings,
        )
    return RouteRequest(
        profile=profile,
        coordinates=COORDINATES,
        options=RouteRequestOptions(vehicle_type=vehicle_type, profile_params=profile_params),
    )


@pytest.fixture
def handler():
    return RouteRequestHandler()


def convert(handler, request: RouteRequest) -> ProfileParameters:
    return handler.convert_parameters(request, handler.convert_route_profile_type(request.profile))


# =============================================================================
# Restriction Validation
# =============================================================================

class TestRestrictionValidation:
    """Tests for restriction names allowed per profile."""

    def test_unmatched_profile_rejects_all_restrictions(self, handler):
        """driving-car has no restriction variant, so every field is listed."""
        request = make_request(
            RoutingProfile.DRIVING_CAR,
            {"gradient": 5, "length": 2.5, "maximum_incline": 6},
        )

        with pytest.raises(IncompatibleParameterException) as exc_info:
            convert(handler, request)

        assert exc_info.value.code == 2012
        assert exc_info.value.parameters == [
            ("restrictions", "gradient, length, maximum_incline"),
            ("profile", "driving-car"),
        ]

    def test_unknown_profile_type_rejects_restrictions(self, handler):
        restrictions = RequestProfileParamsRestrictions(gradient=3)

        with pytest.raises(IncompatibleParameterException):
            handler.validate_restrictions_for_profile(restrictions, RoutingProfileType.UNKNOWN)

    def test_all_invalid_names_are_reported(self, handler):
        """Validation aggregates instead of failing on the first name."""
        restrictions = RequestProfileParamsRestrictions(
            gradient=4, length=10.0, hazmat=True, surface_type="asphalt"
        )

        with pytest.raises(IncompatibleParameterException) as exc_info:
            handler.validate_restrictions_for_profile(restrictions, RoutingProfileType.CYCLING_REGULAR)

        assert exc_info.value.parameters[0] == ("restrictions", "length, hazmat, surface_type")
        assert exc_info.value.parameters[1] == ("profile", "cycling-regular")

    @pytest.mark.parametrize("profile_type,restrictions", [
        (RoutingProfileType.CYCLING_MOUNTAIN, {"gradient": 10, "trail_difficulty": 3}),
        (RoutingProfileType.FOOT_HIKING, {"trail_difficulty": 2}),
        (RoutingProfileType.DRIVING_HGV, {"length": 12.0, "axleload": 8.0, "hazmat": False}),
        (RoutingProfileType.WHEELCHAIR, {"maximum_incline": 6, "minimum_width": 0.9}),
    ])
    def test_valid_restrictions_pass(self, handler, profile_type, restrictions):
        handler.validate_restrictions_for_profile(
            RequestProfileParamsRestrictions(**restrictions), profile_type
        )

    def test_null_restrictions_are_not_set(self):
        restrictions = RequestProfileParamsRestrictions(gradient=None, height=3.5)

        assert restrictions.get_set_restrictions() == ["height"]

    def test_empty_restrictions_on_car_give_base_parameters(self, handler):
        params = convert(handler, make_request(RoutingProfile.DRIVING_CAR, {}))

        assert type(params) is ProfileParameters
        assert params.restriction_values() == {}

    def test_variant_restriction_lists_are_fixed(self):
        assert ProfileParameters.valid_restrictions == ()
        assert CyclingParameters.valid_restrictions == ("gradient", "trail_difficulty")
        assert isinstance(VehicleParameters.valid_restrictions, tuple)


# =============================================================================
# Profile Conversion
# =============================================================================

class TestProfileConversion:
    """Tests for copying present restrictions into the variant."""

    def test_no_profile_params_gives_base(self, handler):
        params = convert(handler, make_request(RoutingProfile.CYCLING_REGULAR))

        assert type(params) is ProfileParameters
        assert not params.has_weightings()

    def test_cycling_sets_only_present_fields(self, handler):
        params = convert(handler, make_request(RoutingProfile.CYCLING_ROAD, {"gradient": 5}))

        assert isinstance(params, CyclingParameters)
        assert params.restriction_values() == {"maximum_gradient": 5}
        assert params.maximum_trail_difficulty is None

    def test_walking(self, handler):
        params = convert(
            handler,
            make_request(RoutingProfile.FOOT_WALKING, {"gradient": 12, "trail_difficulty": 1}),
        )

        assert isinstance(params, WalkingParameters)
        assert params.restriction_values() == {"maximum_gradient": 12, "maximum_trail_difficulty": 1}

    def test_wheelchair(self, handler):
        params = convert(handler, make_request(RoutingProfile.WHEELCHAIR, {
            "surface_type": "cobblestone:flattened",
            "track_type": "grade2",
            "smoothness_type": "good",
            "maximum_sloped_kerb": 0.06,
            "maximum_incline": 6,
            "minimum_width": 1.2,
        }))

        assert isinstance(params, WheelchairParameters)
        assert params.surface_type == wheelchair_types.get_surface_type("cobblestone:flattened")
        assert params.surface_type > 0
        assert params.track_type == 2
        assert params.smoothness_type == 2
        assert params.maximum_sloped_kerb == 0.06
        assert params.maximum_incline == 6
        assert params.minimum_width == 1.2

    def test_wheelchair_partial(self, handler):
        params = convert(handler, make_request(RoutingProfile.WHEELCHAIR, {"minimum_width": 0.9}))

        assert params.restriction_values() == {"minimum_width": 0.9}

    def test_wheelchair_unknown_surface_fails(self, handler):
        request = make_request(RoutingProfile.WHEELCHAIR, {"surface_type": "lava"})

        with pytest.raises(UnknownParameterValueException) as exc_info:
            convert(handler, request)

        assert exc_info.value.parameters == [("surface_type", "lava")]


# =============================================================================
# Heavy Vehicle Conversion
# =============================================================================

class TestHeavyVehicleConversion:
    """Tests for heavy vehicle restrictions and the vehicle type interaction."""

    def test_dimensions_dropped_without_vehicle_type(self, handler):
        """Restrictions validate but are ignored when no vehicle type is given."""
        params = convert(handler, make_request(RoutingProfile.DRIVING_HGV, {"length": 2.5}))

        assert isinstance(params, VehicleParameters)
        assert params.length is None
        assert params.restriction_values() == {}

    def test_dimensions_dropped_for_unknown_vehicle_type(self, handler):
        request = make_request(
            RoutingProfile.DRIVING_HGV,
            {"height": 4.0, "hazmat": True},
            vehicle_type=VehicleType.UNKNOWN,
        )

        params = convert(handler, request)

        assert params.restriction_values() == {}

    def test_dimensions_applied_with_vehicle_type(self, handler):
        request = make_request(
            RoutingProfile.DRIVING_HGV,
            {"length": 16.5, "width": 2.55, "height": 4.0, "weight": 40.0, "axleload": 11.5},
            vehicle_type=VehicleType.HGV,
        )

        params = convert(handler, request)

        assert params.restriction_values() == {
            "length": 16.5,
            "width": 2.55,
            "height": 4.0,
            "weight": 40.0,
            "axleload": 11.5,
        }
        assert params.load_characteristics is None

    def test_hazmat_sets_only_hazmat_bit(self, handler):
        request = make_request(
            RoutingProfile.DRIVING_HGV,
            {"hazmat": True},
            vehicle_type=VehicleType.GOODS,
        )

        params = convert(handler, request)

        assert params.load_characteristics == VehicleLoadCharacteristicsFlags.HAZMAT

    def test_hazmat_false_leaves_load_unset(self, handler):
        request = make_request(
            RoutingProfile.DRIVING_HGV,
            {"hazmat": False, "weight": 7.5},
            vehicle_type=VehicleType.DELIVERY,
        )

        params = convert(handler, request)

        assert params.load_characteristics is None
        assert params.weight == 7.5

    @pytest.mark.parametrize("profile", [
        RoutingProfile.DRIVING_CAR,
        RoutingProfile.CYCLING_REGULAR,
        RoutingProfile.FOOT_WALKING,
        RoutingProfile.WHEELCHAIR,
    ])
    def test_vehicle_type_on_non_heavy_profile_fails(self, handler, profile):
        """Fails whether or not restrictions are present."""
        with pytest.raises(IncompatibleParameterException):
            convert(handler, make_request(profile, vehicle_type=VehicleType.HGV))

        with pytest.raises(IncompatibleParameterException):
            convert(handler, make_request(profile, {}, vehicle_type=VehicleType.HGV))


# =============================================================================
# Weightings
# =============================================================================

class TestWeightings:
    """Tests for weighting application."""

    def test_weightings_applied_in_order(self, handler):
        weightings = RequestProfileParamsWeightings(green=0.3, quiet=1, steepness_difficulty=2)
        request = make_request(RoutingProfile.CYCLING_REGULAR, {"gradient": 6}, weightings)

        params = convert(handler, request)

        assert isinstance(params, CyclingParameters)
        assert [w.name for w in params.weightings] == ["green", "quiet", "steepness_difficulty"]
        assert params.weightings[0].parameters == {"factor": "0.30"}
        assert params.weightings[1].parameters == {"factor": "1.00"}
        assert params.weightings[2].parameters == {"level": "2"}
        assert params.weighting_errors == []

    def test_weightings_without_restrictions(self, handler):
        weightings = RequestProfileParamsWeightings(quiet=0.756)

        params = convert(handler, make_request(RoutingProfile.FOOT_HIKING, weightings=weightings))

        assert type(params) is ProfileParameters
        assert params.weightings[0].name == "quiet"
        assert params.weightings[0].parameters["factor"] == "0.76"

    def test_absent_weightings_are_skipped(self, handler):
        weightings = RequestProfileParamsWeightings(steepness_difficulty=0)

        params = convert(handler, make_request(RoutingProfile.CYCLING_MOUNTAIN, weightings=weightings))

        assert [w.name for w in params.weightings] == ["steepness_difficulty"]
        assert params.weightings[0].parameters == {"level": "0"}

    def test_failed_weighting_is_recorded_and_others_applied(self, handler):
        """A weighting that cannot be formatted does not abort assembly."""
        weightings = RequestProfileParamsWeightings.model_construct(
            green=0.5, quiet=None, steepness_difficulty=1.5
        )
        request = make_request(RoutingProfile.CYCLING_REGULAR, {"gradient": 4}, weightings)

        params = convert(handler, request)

        assert isinstance(params, CyclingParameters)
        assert params.maximum_gradient == 4
        assert [w.name for w in params.weightings] == ["green"]
        assert len(params.weighting_errors) == 1
        assert params.weighting_errors[0].startswith("steepness_difficulty")
