"""Conversion of complete route requests."""

import logging
from typing import Optional

from routeparams.core.error_codes import ErrorCodeRegistry
from routeparams.schemas.routing import RouteRequest
from routeparams.services.requests.generic_handler import GenericHandler
from routeparams.services.routing.profile_types import get_name
from routeparams.services.routing.search_parameters import RouteSearchParameters

logger = logging.getLogger(__name__)


class RouteRequestHandler(GenericHandler):
    """Builds route search parameters using the routing error codes."""

    def __init__(self, error_codes: Optional[ErrorCodeRegistry] = None):
        super().__init__(error_codes if error_codes is not None else ErrorCodeRegistry.routing())

    def convert_route_request(self, request: RouteRequest) -> RouteSearchParameters:
        profile_type = self.convert_route_profile_type(request.profile)
        options = request.options

        search_params = RouteSearchParameters(profile_type=profile_type)

        if options.vehicle_type is not None:
            search_params.vehicle_type = self.convert_vehicle_type(options.vehicle_type, profile_type)

        if options.avoid_features:
            search_params.avoid_features = self.convert_feature_types(options.avoid_features, profile_type)

        if options.avoid_borders is not None:
            search_params.avoid_borders = self.convert_avoid_borders(options.avoid_borders)

        if options.avoid_polygons is not None:
            search_params.avoid_areas = self.convert_avoid_areas(options.avoid_polygons)

        search_params.profile_parameters = self.convert_parameters(request, profile_type)

        logger.info(
            f"Converted {get_name(profile_type)} request: "
            f"vehicle_type={search_params.vehicle_type} "
            f"avoid_features={search_params.avoid_features} "
            f"avoid_areas={len(search_params.avoid_areas)}"
        )

        return search_params


# Singleton instance
route_request_handler = RouteRequestHandler()
