"""Typed operation endpoint."""

import logging
from typing import Annotated, Union

from fastapi import APIRouter, Body, Depends, HTTPException, status

from ...schemas.operations import (
    MapsExportOperation,
    MapsExportResult,
    RouteOptimizeOperation,
    RouteOptimizeResult,
)
from ...services.caching import ResultCache
from ...services.operations import run_operation
from ...services.routing.service import get_route_cache

router = APIRouter(tags=["operations"])


@router.post(
    "/operations",
    response_model=Union[RouteOptimizeResult, MapsExportResult],
    status_code=status.HTTP_200_OK,
)
def call_operation(
    operation: Annotated[Union[RouteOptimizeOperation, MapsExportOperation], Body(discriminator="kind")],
    cache: ResultCache = Depends(get_route_cache),
):
    try:
        return run_operation(operation, cache=cache)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error running operation {operation.kind}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to run operation {operation.kind}: {str(exc)}"
        ) from exc
