"""Map export request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlaceModel(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    notes: Optional[str] = None


class MapsExportRequest(BaseModel):
    places: List[PlaceModel]
    format: Literal["geojson", "kml"]
    order: Optional[List[str]] = Field(
        default=None,
        description="Optimized visiting order (place ids). When given, a route line is included.",
    )


class MapsExportResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    content: str
    mime_type: str = Field(..., alias="mimeType")
