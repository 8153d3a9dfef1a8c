"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


class InvalidInput(ValueError):
    """Raised when a point list cannot be sequenced."""


@dataclass(frozen=True, slots=True)
class Point:
    id: str
    lat: float
    lon: float


@dataclass(slots=True)
class RouteSequence:
    order: List[str]
    distance_km: float
    polyline: str
    initial_distance_km: float
    passes: int
