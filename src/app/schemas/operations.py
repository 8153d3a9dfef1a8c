"""Typed operation envelopes.

Each operation kind has its own input and output schema; the set of kinds is
closed and selected by the ``kind`` discriminator.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .maps import MapsExportRequest, MapsExportResponse
from .routing import RouteOptimizeRequest, RouteOptimizeResponse


class RouteOptimizeOperation(BaseModel):
    kind: Literal["route.optimize"] = "route.optimize"
    input: RouteOptimizeRequest


class MapsExportOperation(BaseModel):
    kind: Literal["maps.export"] = "maps.export"
    input: MapsExportRequest


Operation = Annotated[
    Union[RouteOptimizeOperation, MapsExportOperation],
    Field(discriminator="kind"),
]


class RouteOptimizeResult(BaseModel):
    kind: Literal["route.optimize"] = "route.optimize"
    output: RouteOptimizeResponse


class MapsExportResult(BaseModel):
    kind: Literal["maps.export"] = "maps.export"
    output: MapsExportResponse


OperationResult = Union[RouteOptimizeResult, MapsExportResult]
