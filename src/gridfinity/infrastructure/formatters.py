"""Output formatters, exporters and dimension display helpers."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from gridfinity.application.dtos import CalculationOutput
from gridfinity.domain import GridfinityResult, LengthUnit, PrinterSize
from gridfinity.domain.services.units import unit_converter


def format_dimension(
    value: float,
    unit: str | LengthUnit = LengthUnit.MM,
    precision: int | None = None,
) -> str:
    """Format a length for display.

    Millimetres get no decimals and an ``mm`` suffix; inches get one decimal
    and a ``"`` suffix, unless ``precision`` says otherwise.

    Examples:
        >>> format_dimension(256)
        '256mm'
        >>> format_dimension(22.5, "inch")
        '22.5"'
    """
    length_unit = LengthUnit.parse(unit)
    if precision is None:
        precision = 0 if length_unit is LengthUnit.MM else 1
    suffix = "mm" if length_unit is LengthUnit.MM else '"'
    return f"{value:.{precision}f}{suffix}"


def format_build_volume(printer: PrinterSize | None, use_mm: bool = True) -> str:
    """Format a printer's build volume as ``X × Y × Z``.

    A missing ``z`` is shown as the bed width.
    """
    if printer is None:
        return ""
    z = printer.z if printer.z else printer.x
    unit = LengthUnit.MM if use_mm else LengthUnit.INCH
    values = [printer.x, printer.y, z]
    if not use_mm:
        values = [unit_converter.mm_to_inches(v) for v in values]
    return " × ".join(format_dimension(v, unit) for v in values)


@dataclass(frozen=True)
class ParsedDimension:
    """A length read from user input."""

    value: float
    unit: LengthUnit


_DIMENSION_RE = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)\s*(mm|in|\")?$", re.IGNORECASE)


def parse_dimension(
    text: str | float | int,
    default_unit: str | LengthUnit = LengthUnit.MM,
) -> ParsedDimension:
    """Parse ``"22.5in"``, ``"571mm"``, ``'10"'`` or a bare number.

    Raises:
        ValueError: If the text is not a number with an optional unit.
    """
    if isinstance(text, (int, float)):
        return ParsedDimension(value=float(text), unit=LengthUnit.parse(default_unit))

    match = _DIMENSION_RE.match(str(text).strip())
    if not match:
        raise ValueError(f"Invalid dimension format: {text}")

    unit = match.group(2)
    return ParsedDimension(
        value=float(match.group(1)),
        unit=LengthUnit.parse(unit) if unit else LengthUnit.parse(default_unit),
    )


@dataclass(frozen=True)
class DimensionValidation:
    valid: bool
    error: str | None = None


def validate_dimension(
    value: float,
    min_value: float = 10,
    max_value: float = 1000,
    allow_zero: bool = False,
) -> DimensionValidation:
    """Check a millimetre value against a range.

    Defaults accept 10mm to 1000mm, the range used for printer beds.
    """
    if not allow_zero and value <= 0:
        return DimensionValidation(False, "Dimension must be greater than zero")
    if allow_zero and value == 0:
        return DimensionValidation(True)
    if value < min_value:
        return DimensionValidation(
            False, f"Dimension must be at least {format_dimension(min_value)}"
        )
    if value > max_value:
        return DimensionValidation(
            False, f"Dimension must not exceed {format_dimension(max_value)}"
        )
    return DimensionValidation(True)


class ResultFormatter:
    """Formats calculation results as a plain-text report.

    Counts are shown per drawer and, when planning several drawers, for the
    whole batch. With ``use_mm`` off the drawer size and spacer sizes are
    shown in inches; baseplate and half-size labels are in cells either way.
    """

    def __init__(self, use_mm: bool = True) -> None:
        self.use_mm = use_mm

    def _length(self, mm: float) -> str:
        if self.use_mm:
            return format_dimension(mm, LengthUnit.MM, precision=1)
        inches = unit_converter.mm_to_inches(mm)
        return format_dimension(inches, LengthUnit.INCH, precision=2)

    def _spacer_label(self, label: str) -> str:
        if self.use_mm:
            return label
        width, height = (parse_dimension(part).value for part in label.split(" x "))
        return f"{self._length(width)} x {self._length(height)}"

    def format(self, output: CalculationOutput) -> str:
        if not output.is_valid:
            return "\n".join(["Errors:"] + [f"  - {error}" for error in output.errors])

        result = output.result
        if result.is_empty:
            return "No layout: drawer dimensions must be positive."

        num = output.num_drawers
        lines = [
            f"RESULTS FOR {num} DRAWER{'S' if num > 1 else ''}",
            "=" * 60,
            self._drawer_line(result),
        ]
        sections = [
            ("BASEPLATES", result.baseplates, output.total_baseplates()),
            ("HALF-SIZE PIECES", result.half_size_bins, output.total_half_size_bins()),
            ("SPACERS", result.spacers, output.total_spacers()),
        ]
        for title, per_drawer, totals in sections:
            if not per_drawer:
                continue
            lines.append("")
            lines.append(title)
            lines.append(f"{'Size':<24} {'Per drawer':>10} {'Total':>10}")
            lines.append("-" * 60)
            for label, count in per_drawer.items():
                shown = self._spacer_label(label) if title == "SPACERS" else label
                lines.append(f"{shown:<24} {count:>10} {totals[label]:>10}")

        lines.append("")
        lines.append("-" * 60)
        lines.append(f"Pieces per drawer: {result.total_pieces}")
        if num > 1:
            lines.append(f"Pieces in total:   {output.total_pieces}")
        return "\n".join(lines)

    def _drawer_line(self, result: GridfinityResult) -> str:
        width = max(item.right_edge for item in result.layout)
        height = max(item.bottom_edge for item in result.layout)
        return f"Drawer: {self._length(width)} x {self._length(height)}"


class JsonExporter:
    """Exports calculation results as JSON using the camelCase wire names."""

    def to_dict(self, output: CalculationOutput) -> dict[str, Any]:
        if not output.is_valid:
            return {"errors": list(output.errors)}
        data = output.result.to_dict()
        data["numDrawers"] = output.num_drawers
        data["totals"] = {
            "baseplates": output.total_baseplates(),
            "spacers": output.total_spacers(),
            "halfSizeBins": output.total_half_size_bins(),
        }
        return data

    def export(self, output: CalculationOutput) -> str:
        """Export calculation output as JSON string."""
        return json.dumps(self.to_dict(output), indent=2)
