"""Pydantic schemas for the REST API."""

from gridfinity.web.schemas.common import (
    DrawerSchema,
    ExclusionZoneSchema,
    HalfSizeModeEnum,
    PrinterSchema,
    UnitEnum,
)
from gridfinity.web.schemas.requests import CalculateFromConfigRequest, CalculateRequest
from gridfinity.web.schemas.responses import (
    CalculationResultSchema,
    ErrorResponseSchema,
    LayoutItemSchema,
    PrinterListSchema,
    PrinterPresetSchema,
    TotalsSchema,
)

__all__ = [
    # Common
    "DrawerSchema",
    "ExclusionZoneSchema",
    "HalfSizeModeEnum",
    "PrinterSchema",
    "UnitEnum",
    # Requests
    "CalculateFromConfigRequest",
    "CalculateRequest",
    # Responses
    "CalculationResultSchema",
    "ErrorResponseSchema",
    "LayoutItemSchema",
    "PrinterListSchema",
    "PrinterPresetSchema",
    "TotalsSchema",
]
