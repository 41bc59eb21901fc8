"""Common schemas used across the application."""

from typing import List

from pydantic import BaseModel, Field


class GeoJSONPolygon(BaseModel):
    """GeoJSON Polygon geometry."""

    type: str = "Polygon"
    coordinates: List[List[List[float]]] = Field(
        ..., description="Array of linear rings"
    )


class HealthResponse(BaseModel):
    """Service liveness."""

    status: str = "healthy"
    service: str = ""
    environment: str = ""
