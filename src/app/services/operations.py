"""Runs typed operations against the service layer."""

from __future__ import annotations

from ..models.domain import Place
from ..schemas.maps import MapsExportRequest, MapsExportResponse
from ..schemas.operations import (
    MapsExportOperation,
    MapsExportResult,
    OperationResult,
    RouteOptimizeOperation,
    RouteOptimizeResult,
)
from .caching import ResultCache
from .export import export_places
from .routing.service import optimize_route


def export_map(payload: MapsExportRequest) -> MapsExportResponse:
    places = [
        Place(id=place.id, name=place.name, lat=place.lat, lon=place.lon, notes=place.notes)
        for place in payload.places
    ]
    exported = export_places(places, payload.format, payload.order)
    return MapsExportResponse(filename=exported.filename, content=exported.content, mime_type=exported.mime_type)


def run_operation(
    operation: RouteOptimizeOperation | MapsExportOperation,
    *,
    cache: ResultCache | None = None,
) -> OperationResult:
    if isinstance(operation, RouteOptimizeOperation):
        return RouteOptimizeResult(output=optimize_route(operation.input, cache=cache))
    if isinstance(operation, MapsExportOperation):
        return MapsExportResult(output=export_map(operation.input))
    raise TypeError(f"Unsupported operation type {type(operation).__name__}")
