# Pydantic schemas
from routeparams.schemas.common import GeoJSONPolygon, HealthResponse
from routeparams.schemas.routing import (
    AvoidBorders,
    AvoidFeatures,
    RequestProfileParams,
    RequestProfileParamsRestrictions,
    RequestProfileParamsWeightings,
    RouteParametersResponse,
    RouteRequest,
    RouteRequestBody,
    RouteRequestOptions,
    RoutingProfile,
    VehicleType,
)

__all__ = [
    "GeoJSONPolygon",
    "HealthResponse",
    "AvoidBorders",
    "AvoidFeatures",
    "RequestProfileParams",
    "RequestProfileParamsRestrictions",
    "RequestProfileParamsWeightings",
    "RouteParametersResponse",
    "RouteRequest",
    "RouteRequestBody",
    "RouteRequestOptions",
    "RoutingProfile",
    "VehicleType",
]
