"""Visit-order sequencing for a single open route.

The first point is the fixed start. A greedy nearest-neighbor tour is built
from it, then refined with 2-opt segment reversals until a full pass finds no
improving move or the pass cap is reached. Distances are great-circle
(Haversine) kilometers over the open path; no return leg is added.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from ...config import settings
from ..geospatial import distance_matrix_km
from .models import InvalidInput, Point, RouteSequence
from .polyline import encode_polyline

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SequencerOptions:
    max_passes: int = field(default_factory=lambda: settings.two_opt_max_passes)
    epsilon_km: float = field(default_factory=lambda: settings.two_opt_epsilon_km)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_points(points: Sequence[Point]) -> None:
    """Raise InvalidInput unless the points can be sequenced."""

    if len(points) < 2:
        raise InvalidInput(f"At least 2 points are required for route optimization, got {len(points)}.")

    seen: set[str] = set()
    for position, point in enumerate(points):
        if not isinstance(point.id, str):
            raise InvalidInput(f"Point at position {position} has a non-string identifier.")
        if point.id in seen:
            raise InvalidInput(f"Duplicate point identifier '{point.id}'.")
        seen.add(point.id)

        # Range comparisons reject NaN and inf, and work on ints too large for a float.
        if not _is_number(point.lat) or not -90.0 <= point.lat <= 90.0:
            raise InvalidInput(f"Point '{point.id}' latitude must be a finite number in [-90, 90].")
        if not _is_number(point.lon) or not -180.0 <= point.lon <= 180.0:
            raise InvalidInput(f"Point '{point.id}' longitude must be a finite number in [-180, 180].")


def tour_length_km(order: Sequence[int], matrix: Sequence[Sequence[float]]) -> float:
    """Open-path length of an index order over a precomputed distance matrix."""

    total = 0.0
    for current, following in zip(order, order[1:]):
        total += matrix[current][following]
    return total


def nearest_neighbor_order(matrix: Sequence[Sequence[float]]) -> list[int]:
    """Greedy tour from index 0.

    Candidates are scanned in ascending index order and only a strictly
    shorter distance replaces the current best, so ties go to the lowest index.
    """

    n = len(matrix)
    visited = [False] * n
    visited[0] = True
    order = [0]
    current = 0

    for _ in range(n - 1):
        best_index = -1
        best_distance = math.inf
        row = matrix[current]
        for candidate in range(n):
            if visited[candidate]:
                continue
            if row[candidate] < best_distance:
                best_index = candidate
                best_distance = row[candidate]
        visited[best_index] = True
        order.append(best_index)
        current = best_index

    return order


def two_opt_order(
    order: Sequence[int],
    matrix: Sequence[Sequence[float]],
    *,
    max_passes: int,
    epsilon_km: float,
) -> tuple[list[int], int]:
    """Refine an open path with 2-opt reversals of ``order[i..k]``.

    Only pairs with ``1 <= i < k <= n - 2`` are tried, so both endpoints stay
    in place. A reversal is kept when it shortens the path by more than
    ``epsilon_km``. Returns the improved order and the number of passes run.
    """

    best = list(order)
    n = len(best)
    passes = 0
    improved = True

    while improved and passes < max_passes:
        improved = False
        passes += 1
        for i in range(1, n - 2):
            for k in range(i + 1, n - 1):
                a, b = best[i - 1], best[i]
                c, d = best[k], best[k + 1]
                delta = matrix[a][c] + matrix[b][d] - matrix[a][b] - matrix[c][d]
                if delta < -epsilon_km:
                    best[i : k + 1] = best[i : k + 1][::-1]
                    improved = True

    if improved:
        logger.debug(f"2-opt stopped at the pass cap ({max_passes}) with improvements still available")
    return best, passes


class RouteSequencer:
    """Builds a short open visiting order over a list of points."""

    def __init__(self, options: SequencerOptions | None = None) -> None:
        self.options = options or SequencerOptions()

    def optimize(self, points: Sequence[Point]) -> RouteSequence:
        validate_points(points)

        coordinates = [(point.lat, point.lon) for point in points]
        matrix = distance_matrix_km(coordinates)

        initial = nearest_neighbor_order(matrix)
        initial_distance = tour_length_km(initial, matrix)

        refined, passes = two_opt_order(
            initial,
            matrix,
            max_passes=self.options.max_passes,
            epsilon_km=self.options.epsilon_km,
        )
        distance = tour_length_km(refined, matrix)

        logger.debug(
            f"Sequenced {len(points)} points: nearest-neighbor {initial_distance:.3f} km, "
            f"2-opt {distance:.3f} km after {passes} pass(es)"
        )

        return RouteSequence(
            order=[points[index].id for index in refined],
            distance_km=distance,
            polyline=encode_polyline(coordinates[index] for index in refined),
            initial_distance_km=initial_distance,
            passes=passes,
        )


def optimize_points(points: Sequence[Point], options: SequencerOptions | None = None) -> RouteSequence:
    """Sequence ``points`` with a one-off RouteSequencer."""

    return RouteSequencer(options).optimize(points)
