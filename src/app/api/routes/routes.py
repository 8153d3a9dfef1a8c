"""Routing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.routing import RouteOptimizeRequest, RouteOptimizeResponse
from ...services.caching import ResultCache
from ...services.routing.service import get_route_cache, optimize_route

router = APIRouter(prefix="/routes", tags=["routes"])


@router.post("/optimize", response_model=RouteOptimizeResponse, status_code=status.HTTP_200_OK)
def optimize(payload: RouteOptimizeRequest, cache: ResultCache = Depends(get_route_cache)) -> RouteOptimizeResponse:
    try:
        return optimize_route(payload, cache=cache)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error optimizing route: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {str(exc)}"
        ) from exc
