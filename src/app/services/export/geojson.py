"""GeoJSON export utilities."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from shapely.geometry import LineString, Point, mapping

from ...models.domain import Place


def place_to_feature(place: Place, sequence: int | None = None) -> Dict[str, Any]:
    """Convert a place to a GeoJSON Point feature (lon, lat axis order)."""
    properties: Dict[str, Any] = {"id": place.id, "name": place.name, "notes": place.notes or ""}
    if sequence is not None:
        properties["sequence"] = sequence
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": mapping(Point(place.lon, place.lat)),
    }


def route_to_feature(places: Sequence[Place]) -> Dict[str, Any]:
    """Convert an ordered list of places to a LineString feature."""
    if len(places) < 2:
        raise ValueError("LineString must have at least 2 coordinates")
    line = LineString([(place.lon, place.lat) for place in places])
    return {
        "type": "Feature",
        "properties": {"name": "route", "stops": len(places)},
        "geometry": mapping(line),
    }


def build_feature_collection(places: Sequence[Place], *, ordered: bool = False) -> Dict[str, Any]:
    """Build a FeatureCollection of places.

    When ``ordered`` is set the places are taken as a visiting order: each
    feature gets a 1-based ``sequence`` and a route line is appended.
    """
    features: List[Dict[str, Any]] = [
        place_to_feature(place, sequence=index if ordered else None)
        for index, place in enumerate(places, start=1)
    ]
    if ordered and len(places) >= 2:
        features.append(route_to_feature(places))
    return {"type": "FeatureCollection", "features": features}


def to_geojson_string(places: Sequence[Place], *, ordered: bool = False) -> str:
    return json.dumps(build_feature_collection(places, ordered=ordered), indent=2, ensure_ascii=False)
