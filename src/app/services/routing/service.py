"""Routing orchestration service."""

from __future__ import annotations

import hashlib
import json
import logging
import threading
import time
from dataclasses import asdict

from ...config import settings
from ...schemas.routing import RouteOptimizeRequest, RouteOptimizeResponse
from ..caching import InMemoryTTLCache, ResultCache
from .models import InvalidInput, Point, RouteSequence
from .sequencer import RouteSequencer

logger = logging.getLogger(__name__)

_route_cache: InMemoryTTLCache | None = None
_route_cache_lock = threading.Lock()


def get_route_cache() -> ResultCache:
    """Return the process-wide result cache, creating it on first use."""
    global _route_cache
    with _route_cache_lock:
        if _route_cache is None:
            _route_cache = InMemoryTTLCache(max_entries=settings.route_cache_max_entries)
    return _route_cache


def _to_points(payload: RouteOptimizeRequest) -> list[Point]:
    return [Point(id=point.id, lat=point.lat, lon=point.lon) for point in payload.points]


def route_fingerprint(points: list[Point], sequencer: RouteSequencer) -> str:
    """Stable cache key over the ordered points and the sequencer options."""
    material = {
        "points": [[point.id, point.lat, point.lon] for point in points],
        "max_passes": sequencer.options.max_passes,
        "epsilon_km": sequencer.options.epsilon_km,
    }
    digest = hashlib.sha256(json.dumps(material, separators=(",", ":")).encode("utf-8")).hexdigest()
    return f"route:{digest}"


def _build_response(sequence: RouteSequence, *, cache_hit: bool) -> RouteOptimizeResponse:
    return RouteOptimizeResponse(
        order=list(sequence.order),
        distance_km=sequence.distance_km,
        polyline=sequence.polyline,
        metadata={
            "initial_distance_km": sequence.initial_distance_km,
            "passes": sequence.passes,
            "cache_hit": cache_hit,
        },
    )


def optimize_route(
    payload: RouteOptimizeRequest,
    *,
    cache: ResultCache | None = None,
    sequencer: RouteSequencer | None = None,
) -> RouteOptimizeResponse:
    points = _to_points(payload)
    if len(points) > settings.max_route_points:
        raise InvalidInput(
            f"Too many points for route optimization: {len(points)} (maximum {settings.max_route_points})."
        )

    sequencer = sequencer or RouteSequencer()
    ttl = settings.route_cache_ttl_seconds
    key = route_fingerprint(points, sequencer) if cache is not None and ttl > 0 else None

    if key is not None:
        cached = cache.get(key)
        if cached is not None:
            logger.info(f"Route cache hit for {len(points)} points")
            return _build_response(RouteSequence(**cached), cache_hit=True)

    started = time.perf_counter()
    sequence = sequencer.optimize(points)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        f"Optimized route over {len(points)} points in {elapsed_ms:.1f} ms: "
        f"{sequence.initial_distance_km:.3f} km -> {sequence.distance_km:.3f} km "
        f"({sequence.passes} 2-opt pass(es))"
    )

    if key is not None:
        cache.set(key, asdict(sequence), ttl)

    return _build_response(sequence, cache_hit=False)
