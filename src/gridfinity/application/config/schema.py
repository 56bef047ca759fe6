"""Pydantic configuration schema models for drawer plans.

This module defines the schema for JSON plan files. It uses Pydantic v2 for
validation and serialization. Enums are reused from the domain layer so the
file format and the calculator agree on values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gridfinity.application.printers import PRINTER_PRESETS
from gridfinity.domain.value_objects import HalfSizeMode, LengthUnit

# Supported schema versions for configuration files
# Version 1.0: Drawer, printer, options and display settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class DrawerConfig(BaseModel):
    """Drawer interior dimensions.

    Attributes:
        width: Drawer width in ``unit``.
        height: Drawer depth in ``unit``.
        unit: ``inch`` (default) or ``mm``; aliases such as ``in`` are accepted.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Drawer width")
    height: float = Field(..., gt=0, description="Drawer depth")
    unit: LengthUnit = Field(default=LengthUnit.INCH, description="Unit of width and height")

    @field_validator("unit", mode="before")
    @classmethod
    def parse_unit(cls, v: Any) -> LengthUnit:
        return LengthUnit.parse(v)


class ExclusionZoneConfig(BaseModel):
    """Unusable margins on each edge of the printer bed, in millimetres."""

    model_config = ConfigDict(extra="forbid")

    front: float = Field(default=0.0, ge=0)
    back: float = Field(default=0.0, ge=0)
    left: float = Field(default=0.0, ge=0)
    right: float = Field(default=0.0, ge=0)


class PrinterConfig(BaseModel):
    """Printer selection.

    Either name a ``preset`` or give a custom bed with ``x`` and ``y``.
    Leaving everything unset selects the 256mm fallback bed.

    Attributes:
        preset: Name of a built-in printer preset.
        x: Custom bed width in millimetres.
        y: Custom bed depth in millimetres.
        z: Custom build height in millimetres.
        exclusion_zone: Optional bed margins, applied to presets too.
    """

    model_config = ConfigDict(extra="forbid")

    preset: str | None = Field(default=None, description="Printer preset name")
    x: float | None = Field(default=None, gt=0, description="Bed width in mm")
    y: float | None = Field(default=None, gt=0, description="Bed depth in mm")
    z: float | None = Field(default=None, gt=0, description="Build height in mm")
    exclusion_zone: ExclusionZoneConfig | None = None

    @field_validator("preset")
    @classmethod
    def validate_preset(cls, v: str | None) -> str | None:
        if v is not None and v not in PRINTER_PRESETS:
            raise ValueError(
                f"Unknown printer preset '{v}'. "
                f"Available presets: {', '.join(PRINTER_PRESETS)}"
            )
        return v

    @model_validator(mode="after")
    def validate_bed(self) -> "PrinterConfig":
        has_custom = self.x is not None or self.y is not None
        if self.preset is not None and has_custom:
            raise ValueError("Specify either a printer preset or custom x/y, not both")
        if has_custom and (self.x is None or self.y is None):
            raise ValueError("Custom printer requires both x and y")
        zone = self.exclusion_zone
        if zone is not None and self.x is not None and self.y is not None:
            if zone.left + zone.right >= self.x:
                raise ValueError("Left and right exclusion zones leave no usable bed width")
            if zone.front + zone.back >= self.y:
                raise ValueError("Front and back exclusion zones leave no usable bed depth")
        return self


class OptionsConfig(BaseModel):
    """Layout options.

    ``half_size_mode`` is the preferred form. The legacy ``use_half_size`` and
    ``prefer_half_size`` flags are still read, with ``use_half_size`` taking
    precedence, but may not be combined with ``half_size_mode``.
    """

    model_config = ConfigDict(extra="forbid")

    half_size_mode: HalfSizeMode | None = None
    use_half_size: bool = False
    prefer_half_size: bool = False
    prefer_uniform_baseplates: bool = False

    @model_validator(mode="after")
    def validate_mode(self) -> "OptionsConfig":
        if self.half_size_mode is not None and (self.use_half_size or self.prefer_half_size):
            raise ValueError(
                "Use either half_size_mode or the use_half_size/prefer_half_size flags, not both"
            )
        return self

    @property
    def resolved_mode(self) -> HalfSizeMode:
        if self.half_size_mode is not None:
            return self.half_size_mode
        return HalfSizeMode.from_flags(self.use_half_size, self.prefer_half_size)


class DisplayConfig(BaseModel):
    """Display preferences.

    Attributes:
        use_mm: Show dimensions in millimetres instead of inches.
    """

    model_config = ConfigDict(extra="forbid")

    use_mm: bool = False


class PlannerConfiguration(BaseModel):
    """Root configuration model for a drawer plan.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        drawer: Drawer dimensions
        printer: Printer preset or custom bed
        options: Half-size and uniform-baseplate options
        num_drawers: Number of identical drawers
        display: Display preferences

    Example:
        >>> config = PlannerConfiguration(
        ...     schema_version="1.0",
        ...     drawer=DrawerConfig(width=22.5, height=16.5),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    drawer: DrawerConfig
    printer: PrinterConfig = Field(default_factory=PrinterConfig)
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    num_drawers: int = Field(default=1, ge=1, description="Number of identical drawers")
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
