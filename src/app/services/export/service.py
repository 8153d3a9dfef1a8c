"""Map export orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from ...models.domain import Place
from ..routing.models import InvalidInput
from .geojson import to_geojson_string
from .kml import to_kml_string

logger = logging.getLogger(__name__)

ExportFormat = Literal["geojson", "kml"]


@dataclass(slots=True)
class ExportedFile:
    filename: str
    content: str
    mime_type: str


def order_places(places: Sequence[Place], order: Sequence[str]) -> list[Place]:
    """Arrange places by ``order``, which must reference every place id exactly once."""
    by_id = {place.id: place for place in places}
    if len(by_id) != len(places):
        raise InvalidInput("Place identifiers must be unique to apply a route order.")
    if len(order) != len(places) or set(order) != set(by_id):
        raise InvalidInput("Route order must reference exactly the exported place identifiers.")
    return [by_id[place_id] for place_id in order]


def export_places(
    places: Sequence[Place],
    export_format: ExportFormat,
    order: Sequence[str] | None = None,
) -> ExportedFile:
    ordered = order is not None
    if ordered:
        places = order_places(places, order)

    logger.info(f"Exporting {len(places)} places as {export_format} (ordered={ordered})")

    if export_format == "geojson":
        return ExportedFile(
            filename="map.geojson",
            content=to_geojson_string(places, ordered=ordered),
            mime_type="application/geo+json",
        )
    if export_format == "kml":
        return ExportedFile(
            filename="map.kml",
            content=to_kml_string(places, ordered=ordered),
            mime_type="application/vnd.google-earth.kml+xml",
        )
    raise ValueError(f"Unsupported export format '{export_format}'.")
