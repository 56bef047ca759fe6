"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from gridfinity.web.schemas.common import DrawerSchema, HalfSizeModeEnum, PrinterSchema


class CalculateRequest(BaseModel):
    """Request for calculating a drawer layout."""

    drawer: DrawerSchema = Field(..., description="Drawer dimensions")
    printer: PrinterSchema = Field(
        default_factory=PrinterSchema, description="Printer bed to print pieces on"
    )
    half_size_mode: HalfSizeModeEnum = Field(
        default=HalfSizeModeEnum.FULL_SIZE, description="How half-size cells are used"
    )
    prefer_uniform_baseplates: bool = Field(
        default=False, description="Prefer few distinct baseplate sizes"
    )
    num_drawers: int = Field(default=1, ge=1, le=100, description="Number of identical drawers")


class CalculateFromConfigRequest(BaseModel):
    """Request for calculating a layout from a full plan configuration."""

    config: dict[str, Any] = Field(..., description="Plan configuration JSON")
