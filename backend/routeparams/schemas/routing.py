"""Routing request and response schemas."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from routeparams.schemas.common import GeoJSONPolygon


class RoutingProfile(str, Enum):
    """Routing profile selected by the caller."""

    DRIVING_CAR = "driving-car"
    DRIVING_HGV = "driving-hgv"
    CYCLING_REGULAR = "cycling-regular"
    CYCLING_ROAD = "cycling-road"
    CYCLING_MOUNTAIN = "cycling-mountain"
    CYCLING_ELECTRIC = "cycling-electric"
    FOOT_WALKING = "foot-walking"
    FOOT_HIKING = "foot-hiking"
    WHEELCHAIR = "wheelchair"


class VehicleType(str, Enum):
    """Type of heavy vehicle."""

    HGV = "hgv"
    BUS = "bus"
    AGRICULTURAL = "agricultural"
    DELIVERY = "delivery"
    FORESTRY = "forestry"
    GOODS = "goods"
    UNKNOWN = "unknown"


class AvoidFeatures(str, Enum):
    """Road features the route should avoid."""

    HIGHWAYS = "highways"
    TOLLWAYS = "tollways"
    FERRIES = "ferries"
    FORDS = "fords"
    STEPS = "steps"


class AvoidBorders(str, Enum):
    """Border crossing policy."""

    ALL = "all"
    CONTROLLED = "controlled"
    NONE = "none"


class RequestProfileParamsRestrictions(BaseModel):
    """Hard restrictions. A restriction is set when its value is not null."""

    model_config = ConfigDict(extra="forbid")

    # Cycling and walking
    gradient: Optional[int] = Field(None, ge=1, le=35, description="Maximum steepness in percent")
    trail_difficulty: Optional[int] = Field(None, ge=0, le=6, description="Maximum trail difficulty")

    # Heavy vehicles
    length: Optional[float] = Field(None, gt=0, description="Vehicle length in metres")
    width: Optional[float] = Field(None, gt=0, description="Vehicle width in metres")
    height: Optional[float] = Field(None, gt=0, description="Vehicle height in metres")
    weight: Optional[float] = Field(None, gt=0, description="Vehicle weight in tonnes")
    axleload: Optional[float] = Field(None, gt=0, description="Axle load in tonnes")
    hazmat: Optional[bool] = Field(None, description="Vehicle carries hazardous materials")

    # Wheelchair
    surface_type: Optional[str] = Field(None, description="Minimum surface type, e.g. 'cobblestone:flattened'")
    track_type: Optional[str] = Field(None, description="Minimum track grade, e.g. 'grade1'")
    smoothness_type: Optional[str] = Field(None, description="Minimum smoothness, e.g. 'good'")
    maximum_sloped_kerb: Optional[float] = Field(None, ge=0, description="Maximum kerb height in metres")
    maximum_incline: Optional[int] = Field(None, ge=0, description="Maximum incline in percent")
    minimum_width: Optional[float] = Field(None, gt=0, description="Minimum path width in metres")

    def get_set_restrictions(self) -> List[str]:
        """Names of restrictions the caller supplied, in declaration order."""
        return [
            name for name in type(self).model_fields
            if getattr(self, name) is not None
        ]


class RequestProfileParamsWeightings(BaseModel):
    """Soft preferences applied on top of the restrictions."""

    model_config = ConfigDict(extra="forbid")

    green: Optional[float] = Field(None, ge=0, le=1, description="Preference for green areas")
    quiet: Optional[float] = Field(None, ge=0, le=1, description="Preference for quiet ways")
    steepness_difficulty: Optional[int] = Field(None, ge=0, le=3, description="Fitness level for hills")


class RequestProfileParams(BaseModel):
    """Profile specific restrictions and weightings."""

    restrictions: Optional[RequestProfileParamsRestrictions] = None
    weightings: Optional[RequestProfileParamsWeightings] = None

    def has_restrictions(self) -> bool:
        return self.restrictions is not None

    def has_weightings(self) -> bool:
        return self.weightings is not None


class RouteRequestOptions(BaseModel):
    """Additional routing options."""

    avoid_features: Optional[List[AvoidFeatures]] = Field(
        default=None,
        description="Features to avoid",
    )
    avoid_borders: Optional[AvoidBorders] = Field(
        default=None,
        description="Border crossing policy",
    )
    vehicle_type: Optional[VehicleType] = Field(
        default=None,
        description="Heavy vehicle type, only for driving-hgv",
    )
    profile_params: Optional[RequestProfileParams] = Field(
        default=None,
        description="Profile restrictions and weightings",
    )
    avoid_polygons: Optional[Dict[str, Any]] = Field(
        default=None,
        description="GeoJSON Polygon or MultiPolygon to avoid",
    )


class RouteRequest(BaseModel):
    """Request for route parameter conversion."""

    profile: RoutingProfile = Field(..., description="Routing profile")
    coordinates: List[List[float]] = Field(
        ...,
        min_length=2,
        description="Waypoints as [longitude, latitude]",
    )
    options: RouteRequestOptions = Field(
        default_factory=RouteRequestOptions,
        description="Routing options",
    )


class RouteRequestBody(BaseModel):
    """Request body when the profile comes from the URL path."""

    coordinates: List[List[float]] = Field(
        ...,
        min_length=2,
        description="Waypoints as [longitude, latitude]",
    )
    options: RouteRequestOptions = Field(
        default_factory=RouteRequestOptions,
        description="Routing options",
    )

    def with_profile(self, profile: RoutingProfile) -> RouteRequest:
        return RouteRequest(profile=profile, coordinates=self.coordinates, options=self.options)


class ProfileWeightingResponse(BaseModel):
    name: str
    parameters: Dict[str, str] = Field(default_factory=dict)


class ProfileParametersResponse(BaseModel):
    """Converted profile parameters."""

    variant: str = Field(..., description="Parameter variant (base, cycling, walking, vehicle, wheelchair)")
    restrictions: Dict[str, Any] = Field(default_factory=dict, description="Restrictions that were set")
    weightings: List[ProfileWeightingResponse] = Field(default_factory=list)
    weighting_errors: List[str] = Field(default_factory=list)


class RouteParametersResponse(BaseModel):
    """Converted route search parameters."""

    profile: str = Field(..., description="Profile name")
    profile_type: int = Field(..., description="Internal profile id")
    vehicle_type: int = Field(default=0, description="Internal vehicle type id")
    avoid_features: int = Field(default=0, description="Combined avoid feature flags")
    avoid_borders: Optional[str] = Field(default=None, description="Border crossing policy")
    avoid_polygons: List[GeoJSONPolygon] = Field(default_factory=list)
    profile_params: Optional[ProfileParametersResponse] = None
