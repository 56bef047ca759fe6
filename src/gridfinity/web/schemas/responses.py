"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutItemSchema(BaseModel):
    """One placed piece."""

    x: float = Field(..., description="Left edge in grid cells")
    y: float = Field(..., description="Top edge in grid cells")
    width: float = Field(..., description="Width in grid cells")
    height: float = Field(..., description="Height in grid cells")
    type: str = Field(..., description="baseplate, spacer or half-size")
    label: str = Field(..., description="Size label as shown in the piece counts")
    pixel_x: float = Field(..., description="Left edge in mm")
    pixel_y: float = Field(..., description="Top edge in mm")
    pixel_width: float = Field(..., description="Width in mm")
    pixel_height: float = Field(..., description="Height in mm")


class TotalsSchema(BaseModel):
    """Piece counts across all planned drawers."""

    baseplates: dict[str, int] = Field(default_factory=dict)
    spacers: dict[str, int] = Field(default_factory=dict)
    half_size_bins: dict[str, int] = Field(default_factory=dict)
    pieces: int = Field(default=0, description="Total number of pieces")


class CalculationResultSchema(BaseModel):
    """Response for a drawer calculation."""

    is_valid: bool = Field(..., description="Whether the calculation ran")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    num_drawers: int = Field(default=1, description="Number of identical drawers")
    baseplates: dict[str, int] = Field(
        default_factory=dict, description="Baseplate counts per drawer by size"
    )
    spacers: dict[str, int] = Field(
        default_factory=dict, description="Spacer counts per drawer by size"
    )
    half_size_bins: dict[str, int] = Field(
        default_factory=dict, description="Half-size piece counts per drawer by size"
    )
    layout: list[LayoutItemSchema] = Field(
        default_factory=list, description="Placed pieces for one drawer"
    )
    totals: TotalsSchema = Field(default_factory=TotalsSchema)


class PrinterPresetSchema(BaseModel):
    """A built-in printer preset."""

    name: str = Field(..., description="Preset name")
    x: float = Field(..., description="Bed width in mm")
    y: float = Field(..., description="Bed depth in mm")
    z: float | None = Field(default=None, description="Build height in mm")
    build_volume: str = Field(..., description="Formatted build volume")


class PrinterListSchema(BaseModel):
    """Response listing printer presets."""

    printers: list[PrinterPresetSchema] = Field(default_factory=list)
    default: str = Field(..., description="Preset selected when none is given")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
