"""API v1 router aggregation."""

from fastapi import APIRouter

from routeparams.api.v1.routes import directions, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(directions.router, prefix="/directions", tags=["Directions"])
