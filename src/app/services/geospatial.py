"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push a marginally past 1 for antipodal points.
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def path_length_km(coordinates: Sequence[tuple[float, float]]) -> float:
    """Length of the open path through (lat, lon) pairs, without a return leg."""

    total = 0.0
    for (lat1, lon1), (lat2, lon2) in zip(coordinates, coordinates[1:]):
        total += haversine_km(lat1, lon1, lat2, lon2)
    return total


def distance_matrix_km(coordinates: Sequence[tuple[float, float]]) -> list[list[float]]:
    """Symmetric pairwise Haversine matrix with a zero diagonal."""

    n = len(coordinates)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        lat1, lon1 = coordinates[i]
        for j in range(i + 1, n):
            lat2, lon2 = coordinates[j]
            distance = haversine_km(lat1, lon1, lat2, lon2)
            matrix[i][j] = distance
            matrix[j][i] = distance
    return matrix
