"""KML export utilities."""

from __future__ import annotations

from typing import Sequence
from xml.sax.saxutils import escape

from ...models.domain import Place

KML_NAMESPACE = "http://www.opengis.net/kml/2.2"


def _placemark(place: Place) -> str:
    description = f"<description>{escape(place.notes)}</description>" if place.notes else ""
    return (
        f"<Placemark><name>{escape(place.name)}</name>{description}"
        f"<Point><coordinates>{place.lon},{place.lat},0</coordinates></Point></Placemark>"
    )


def _route_placemark(places: Sequence[Place]) -> str:
    coordinates = " ".join(f"{place.lon},{place.lat},0" for place in places)
    return f"<Placemark><name>route</name><LineString><coordinates>{coordinates}</coordinates></LineString></Placemark>"


def to_kml_string(places: Sequence[Place], *, ordered: bool = False) -> str:
    """Render places as a KML document, with a route line when ``ordered``."""
    placemarks = [_placemark(place) for place in places]
    if ordered and len(places) >= 2:
        placemarks.append(_route_placemark(places))
    body = "\n".join(placemarks)
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<kml xmlns="{KML_NAMESPACE}"><Document>\n{body}\n</Document></kml>'
