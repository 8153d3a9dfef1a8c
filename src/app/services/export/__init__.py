"""Export services."""

from .geojson import build_feature_collection, to_geojson_string
from .kml import to_kml_string
from .service import ExportedFile, export_places, order_places

__all__ = [
    "build_feature_collection",
    "to_geojson_string",
    "to_kml_string",
    "ExportedFile",
    "export_places",
    "order_places",
]
