"""Millimetre/inch conversion through the precise arithmetic layer."""

from __future__ import annotations

from gridfinity.domain.precise_math import Number, PreciseMath, precise_math
from gridfinity.domain.value_objects import INCH_TO_MM, LengthUnit


class UnitConverter:
    """Converts lengths between millimetres and inches.

    Units may be given as :class:`LengthUnit` members or any alias accepted
    by :meth:`LengthUnit.parse`; anything else raises
    :class:`~gridfinity.domain.value_objects.UnsupportedUnitError`.
    """

    def __init__(self, math: PreciseMath | None = None) -> None:
        self.math = math or precise_math

    def to_mm(self, value: Number, from_unit: "str | LengthUnit") -> float:
        unit = LengthUnit.parse(from_unit)
        if unit is LengthUnit.MM:
            return float(value)
        return self.math.multiply(value, INCH_TO_MM)

    def from_mm(self, value: Number, to_unit: "str | LengthUnit") -> float:
        unit = LengthUnit.parse(to_unit)
        if unit is LengthUnit.MM:
            return float(value)
        return self.math.divide(value, INCH_TO_MM)

    def convert(
        self,
        value: Number,
        from_unit: "str | LengthUnit",
        to_unit: "str | LengthUnit",
    ) -> float:
        """Convert ``value`` between any two supported units."""
        source = LengthUnit.parse(from_unit)
        target = LengthUnit.parse(to_unit)
        if source is target:
            return float(value)
        return self.from_mm(self.to_mm(value, source), target)

    def inches_to_mm(self, inches: Number) -> float:
        return self.to_mm(inches, LengthUnit.INCH)

    def mm_to_inches(self, mm: Number) -> float:
        return self.from_mm(mm, LengthUnit.INCH)


unit_converter = UnitConverter()


def to_mm(value: Number, from_unit: "str | LengthUnit" = LengthUnit.INCH) -> float:
    """Module-level shortcut for :meth:`UnitConverter.to_mm`."""
    return unit_converter.to_mm(value, from_unit)


def from_mm(value: Number, to_unit: "str | LengthUnit" = LengthUnit.INCH) -> float:
    """Module-level shortcut for :meth:`UnitConverter.from_mm`."""
    return unit_converter.from_mm(value, to_unit)
