"""Domain models for places handled by the export collaborators."""

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Place:
    """A named place with coordinates, as returned by place discovery."""

    id: str
    name: str
    lat: float
    lon: float
    notes: Optional[str] = None
