"""Request parameter handlers."""

from routeparams.services.requests.generic_handler import GenericHandler
from routeparams.services.requests.route_handler import RouteRequestHandler, route_request_handler

__all__ = [
    "GenericHandler",
    "RouteRequestHandler",
    "route_request_handler",
]
