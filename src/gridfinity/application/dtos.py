"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridfinity.domain import (
    DrawerSize,
    ExclusionZone,
    GridfinityResult,
    HalfSizeMode,
    LengthUnit,
    PrinterSize,
)


@dataclass
class ExclusionZoneInput:
    """Input DTO for printer bed margins in millimetres."""

    front: float = 0.0
    back: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        for name in ("front", "back", "left", "right"):
            if getattr(self, name) < 0:
                errors.append(f"Exclusion zone {name} cannot be negative")
        return errors

    @property
    def is_empty(self) -> bool:
        return not (self.front or self.back or self.left or self.right)

    def to_exclusion_zone(self) -> ExclusionZone:
        return ExclusionZone(
            front=self.front, back=self.back, left=self.left, right=self.right
        )


@dataclass
class CalculationInput:
    """Input DTO for one drawer calculation.

    Attributes:
        drawer_width: Drawer width in ``drawer_unit``.
        drawer_height: Drawer depth in ``drawer_unit``.
        drawer_unit: Unit of the drawer dimensions, inches by default.
        printer_x: Printer bed width in millimetres.
        printer_y: Printer bed depth in millimetres.
        printer_z: Printer build height in millimetres (informational).
        exclusion_zone: Optional bed margins.
        half_size_mode: How half-size cells are used.
        prefer_uniform_baseplates: Prefer few distinct baseplate sizes.
        num_drawers: Number of identical drawers to plan for.
    """

    drawer_width: float
    drawer_height: float
    drawer_unit: LengthUnit = LengthUnit.INCH
    printer_x: float = 256.0
    printer_y: float = 256.0
    printer_z: float | None = 256.0
    exclusion_zone: ExclusionZoneInput | None = None
    half_size_mode: HalfSizeMode = HalfSizeMode.FULL_SIZE
    prefer_uniform_baseplates: bool = False
    num_drawers: int = 1

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.drawer_width <= 0:
            errors.append("Drawer width must be positive")
        if self.drawer_height <= 0:
            errors.append("Drawer height must be positive")
        if self.printer_x <= 0:
            errors.append("Printer bed width must be positive")
        if self.printer_y <= 0:
            errors.append("Printer bed depth must be positive")
        if self.num_drawers < 1:
            errors.append("Must plan for at least 1 drawer")
        if self.exclusion_zone is not None:
            zone_errors = self.exclusion_zone.validate()
            errors.extend(zone_errors)
            zone = self.exclusion_zone
            if not zone_errors and self.printer_x > 0 and zone.left + zone.right >= self.printer_x:
                errors.append("Left and right exclusion zones leave no usable bed width")
            if not zone_errors and self.printer_y > 0 and zone.front + zone.back >= self.printer_y:
                errors.append("Front and back exclusion zones leave no usable bed depth")
        return errors

    def to_drawer_size(self) -> DrawerSize:
        """Convert to DrawerSize value object."""
        return DrawerSize(
            width=self.drawer_width, height=self.drawer_height, unit=self.drawer_unit
        )

    def to_printer_size(self) -> PrinterSize:
        """Convert to PrinterSize value object."""
        zone = None
        if self.exclusion_zone is not None and not self.exclusion_zone.is_empty:
            zone = self.exclusion_zone.to_exclusion_zone()
        return PrinterSize(
            x=self.printer_x,
            y=self.printer_y,
            z=self.printer_z,
            exclusion_zone=zone,
        )


def _scale(counts: dict[str, int], factor: int) -> dict[str, int]:
    return {label: count * factor for label, count in counts.items()}


@dataclass
class CalculationOutput:
    """Output DTO containing one drawer's layout and batch totals.

    Attributes:
        result: Layout and tallies for a single drawer.
        num_drawers: Number of identical drawers planned for.
        errors: List of error messages if the calculation was rejected.
    """

    result: GridfinityResult = field(default_factory=GridfinityResult.empty)
    num_drawers: int = 1
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the calculation ran."""
        return len(self.errors) == 0

    def total_baseplates(self) -> dict[str, int]:
        return _scale(self.result.baseplates, self.num_drawers)

    def total_spacers(self) -> dict[str, int]:
        return _scale(self.result.spacers, self.num_drawers)

    def total_half_size_bins(self) -> dict[str, int]:
        return _scale(self.result.half_size_bins, self.num_drawers)

    @property
    def total_pieces(self) -> int:
        return self.result.total_pieces * self.num_drawers
