import pytest

from src.app.schemas.routing import RouteOptimizeRequest
from src.app.services.caching import InMemoryTTLCache
from src.app.services.routing import service as routing_service
from src.app.services.routing.models import InvalidInput
from src.app.services.routing.sequencer import RouteSequencer, SequencerOptions

PARIS_PAYLOAD = {
    "points": [
        {"id": "A", "lat": 48.8566, "lon": 2.3522},
        {"id": "B", "lat": 48.8584, "lon": 2.2945},
        {"id": "C", "lat": 48.8530, "lon": 2.3499},
    ]
}


def test_optimize_route_without_cache():
    request = RouteOptimizeRequest.model_validate(PARIS_PAYLOAD)
    response = routing_service.optimize_route(request)

    assert response.order[0] == "A"
    assert sorted(response.order) == ["A", "B", "C"]
    assert response.polyline
    assert response.metadata["cache_hit"] is False
    assert response.metadata["passes"] >= 1


def test_optimize_route_uses_cache():
    cache = InMemoryTTLCache()
    request = RouteOptimizeRequest.model_validate(PARIS_PAYLOAD)

    first = routing_service.optimize_route(request, cache=cache)
    second = routing_service.optimize_route(request, cache=cache)

    assert first.metadata["cache_hit"] is False
    assert second.metadata["cache_hit"] is True
    assert second.order == first.order
    assert second.distance_km == first.distance_km
    assert second.polyline == first.polyline
    assert len(cache) == 1


def test_cache_disabled_when_ttl_is_zero(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "route_cache_ttl_seconds", 0)
    cache = InMemoryTTLCache()
    request = RouteOptimizeRequest.model_validate(PARIS_PAYLOAD)

    routing_service.optimize_route(request, cache=cache)
    response = routing_service.optimize_route(request, cache=cache)

    assert response.metadata["cache_hit"] is False
    assert len(cache) == 0


def test_fingerprint_depends_on_order_and_options():
    request = RouteOptimizeRequest.model_validate(PARIS_PAYLOAD)
    points = routing_service._to_points(request)
    default = RouteSequencer()

    assert routing_service.route_fingerprint(points, default) == routing_service.route_fingerprint(points, default)
    assert routing_service.route_fingerprint(points, default) != routing_service.route_fingerprint(
        list(reversed(points)), default
    )
    assert routing_service.route_fingerprint(points, default) != routing_service.route_fingerprint(
        points, RouteSequencer(SequencerOptions(max_passes=5, epsilon_km=1e-4))
    )


def test_point_ceiling_is_enforced(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(routing_service.settings, "max_route_points", 2)
    request = RouteOptimizeRequest.model_validate(PARIS_PAYLOAD)

    with pytest.raises(InvalidInput, match="Too many points"):
        routing_service.optimize_route(request)


def test_duplicate_ids_raise_invalid_input():
    payload = {
        "points": [
            {"id": "A", "lat": 48.8566, "lon": 2.3522},
            {"id": "A", "lat": 48.8584, "lon": 2.2945},
        ]
    }
    request = RouteOptimizeRequest.model_validate(payload)

    with pytest.raises(InvalidInput):
        routing_service.optimize_route(request)


def test_route_cache_is_created_once_across_threads(monkeypatch: pytest.MonkeyPatch):
    from concurrent.futures import ThreadPoolExecutor

    monkeypatch.setattr(routing_service, "_route_cache", None)
    with ThreadPoolExecutor(max_workers=8) as pool:
        caches = list(pool.map(lambda _: routing_service.get_route_cache(), range(32)))

    assert all(cache is caches[0] for cache in caches)
