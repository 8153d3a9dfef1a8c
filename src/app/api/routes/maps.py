"""Map export endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.maps import MapsExportRequest, MapsExportResponse
from ...services.operations import export_map

router = APIRouter(prefix="/maps", tags=["maps"])


@router.post("/export", response_model=MapsExportResponse, status_code=status.HTTP_200_OK)
def export(payload: MapsExportRequest) -> MapsExportResponse:
    """Export places as GeoJSON or KML, with a route line when an order is given."""
    try:
        return export_map(payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error exporting map: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to export map: {str(exc)}"
        ) from exc
