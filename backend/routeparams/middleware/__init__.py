"""Middleware modules for request processing."""

from routeparams.middleware.request_logging import RequestLoggingMiddleware, setup_logging

__all__ = [
    "RequestLoggingMiddleware",
    "setup_logging",
]
