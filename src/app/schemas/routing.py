"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OptimizePoint(BaseModel):
    id: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class RouteOptimizeRequest(BaseModel):
    points: List[OptimizePoint] = Field(
        ...,
        min_length=2,
        description="Places to visit. The first point is the fixed start of the route.",
    )


class RouteOptimizeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order: List[str]
    distance_km: float = Field(..., alias="distanceKm")
    polyline: Optional[str] = None
    metadata: dict = Field(default_factory=dict)
