"""Converted parameters handed to the route search."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import Polygon

from routeparams.services.routing.borders import AvoidBordersMode
from routeparams.services.routing.parameters import ProfileParameters
from routeparams.services.routing.profile_types import RoutingProfileType
from routeparams.services.routing.vehicle_attributes import HeavyVehicleAttributes


class RouteSearchParameters(BaseModel):
    """Everything the search engine needs besides the coordinates."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    profile_type: int = RoutingProfileType.UNKNOWN
    vehicle_type: int = HeavyVehicleAttributes.UNKNOWN
    avoid_features: int = 0
    avoid_borders: Optional[AvoidBordersMode] = None
    avoid_areas: List[Polygon] = Field(default_factory=list)
    profile_parameters: Optional[ProfileParameters] = None

    def has_avoid_areas(self) -> bool:
        return len(self.avoid_areas) > 0
