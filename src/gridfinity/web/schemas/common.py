"""Common Pydantic schemas shared across requests and responses."""

from enum import Enum

from pydantic import BaseModel, Field


class UnitEnum(str, Enum):
    """Drawer dimension units."""

    INCH = "inch"
    MM = "mm"


class HalfSizeModeEnum(str, Enum):
    """Half-size cell usage options."""

    FULL_SIZE = "full_size"
    HALF_SIZE_ONLY = "half_size_only"
    PREFER_HALF_SIZE_FOR_GAPS = "prefer_half_size_for_gaps"


class DrawerSchema(BaseModel):
    """Drawer interior dimensions."""

    width: float = Field(..., gt=0, description="Drawer width")
    height: float = Field(..., gt=0, description="Drawer depth")
    unit: UnitEnum = Field(default=UnitEnum.INCH, description="Unit of width and height")


class ExclusionZoneSchema(BaseModel):
    """Unusable printer bed margins in millimetres."""

    front: float = Field(default=0.0, ge=0, description="Front margin in mm")
    back: float = Field(default=0.0, ge=0, description="Back margin in mm")
    left: float = Field(default=0.0, ge=0, description="Left margin in mm")
    right: float = Field(default=0.0, ge=0, description="Right margin in mm")


class PrinterSchema(BaseModel):
    """Printer selection: a preset name, or a custom bed size in millimetres.

    A custom bed (``x`` and ``y``) takes priority over ``preset``. With
    neither, the 256mm fallback bed is used.
    """

    preset: str | None = Field(default=None, description="Printer preset name")
    x: float | None = Field(default=None, gt=0, description="Bed width in mm")
    y: float | None = Field(default=None, gt=0, description="Bed depth in mm")
    z: float | None = Field(default=None, gt=0, description="Build height in mm")
    exclusion_zone: ExclusionZoneSchema | None = Field(
        default=None, description="Unusable bed margins"
    )
