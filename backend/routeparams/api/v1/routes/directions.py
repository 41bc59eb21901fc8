"""Route parameter conversion endpoints."""

import logging

from fastapi import APIRouter, Request
from shapely.geometry import mapping

from routeparams.schemas.common import GeoJSONPolygon
from routeparams.schemas.routing import (
    ProfileParametersResponse,
    ProfileWeightingResponse,
    RouteParametersResponse,
    RouteRequest,
    RouteRequestBody,
    RoutingProfile,
)
from routeparams.services.requests import route_request_handler
from routeparams.services.routing.search_parameters import RouteSearchParameters

logger = logging.getLogger(__name__)

router = APIRouter()


def get_request_id(request: Request) -> str:
    """Get request ID from request state."""
    return getattr(request.state, "request_id", "unknown")


def build_parameters_response(
    route_request: RouteRequest, search_params: RouteSearchParameters
) -> RouteParametersResponse:
    """Render converted search parameters for the API."""
    profile_params = search_params.profile_parameters

    params_response = None
    if profile_params is not None:
        params_response = ProfileParametersResponse(
            variant=profile_params.variant,
            restrictions=profile_params.restriction_values(),
            weightings=[
                ProfileWeightingResponse(name=w.name, parameters=w.parameters)
                for w in profile_params.weightings
            ],
            weighting_errors=profile_params.weighting_errors,
        )

    return RouteParametersResponse(
        profile=route_request.profile.value,
        profile_type=search_params.profile_type,
        vehicle_type=search_params.vehicle_type,
        avoid_features=search_params.avoid_features,
        avoid_borders=search_params.avoid_borders.value if search_params.avoid_borders else None,
        avoid_polygons=[GeoJSONPolygon(**mapping(polygon)) for polygon in search_params.avoid_areas],
        profile_params=params_response,
    )


@router.post("/{profile}/parameters", response_model=RouteParametersResponse)
async def convert_route_parameters(
    profile: RoutingProfile,
    body: RouteRequestBody,
    request: Request,
) -> RouteParametersResponse:
    """
    Validate and convert the options of a route request.

    Returns the typed parameters a route search would use:
    - Avoid feature flags and border policy
    - Avoid polygons normalized to simple polygons
    - Profile specific restrictions and weightings

    Parameter errors answer 400 with a numeric error code.
    """
    request_id = get_request_id(request)
    route_request = body.with_profile(profile)

    search_params = route_request_handler.convert_route_request(route_request)
    logger.debug(f"[{request_id}] Converted parameters for {profile.value}")

    return build_parameters_response(route_request, search_params)
