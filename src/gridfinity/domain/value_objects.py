"""Value objects for drawer tiling calculations.

All dataclasses are frozen. Positions and sizes of placed pieces are carried
twice: in grid-cell units (``x``, ``y``, ``width``, ``height``) and in
absolute millimetres (``pixel_*``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gridfinity.domain.precise_math import precise_math

FULL_GRID_SIZE = 42  # mm
HALF_GRID_SIZE = 21  # mm
INCH_TO_MM = 25.4
DEFAULT_TOLERANCE = 0.01  # mm


def format_number(value: float | int) -> str:
    """Render a number the way labels expect: ``5`` not ``5.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class UnsupportedUnitError(ValueError):
    """Raised when a length unit is not millimetres or inches."""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Unsupported unit: {unit}")


class LengthUnit(str, Enum):
    """Length units accepted by the planner."""

    MM = "mm"
    INCH = "inch"

    @classmethod
    def parse(cls, value: "str | LengthUnit") -> "LengthUnit":
        """Resolve a unit name or alias.

        Raises:
            UnsupportedUnitError: If the name is not a known alias.
        """
        if isinstance(value, LengthUnit):
            return value
        if not isinstance(value, str):
            raise UnsupportedUnitError(value)
        unit = _UNIT_ALIASES.get(value.strip().lower())
        if unit is None:
            raise UnsupportedUnitError(value)
        return unit


_UNIT_ALIASES: dict[str, LengthUnit] = {
    "mm": LengthUnit.MM,
    "millimeter": LengthUnit.MM,
    "millimeters": LengthUnit.MM,
    "inch": LengthUnit.INCH,
    "inches": LengthUnit.INCH,
    "in": LengthUnit.INCH,
    '"': LengthUnit.INCH,
}


class PieceType(str, Enum):
    """Kinds of printable pieces in a drawer layout."""

    BASEPLATE = "baseplate"
    SPACER = "spacer"
    HALF_SIZE = "half-size"


class HalfSizeMode(str, Enum):
    """How half-size (21mm) cells are used.

    - FULL_SIZE: 42mm grid everywhere, leftovers become spacers.
    - HALF_SIZE_ONLY: the whole drawer is gridded at 21mm.
    - PREFER_HALF_SIZE_FOR_GAPS: 42mm grid, leftovers filled with
      half-size cells where at least one cell fits.
    """

    FULL_SIZE = "full_size"
    HALF_SIZE_ONLY = "half_size_only"
    PREFER_HALF_SIZE_FOR_GAPS = "prefer_half_size_for_gaps"

    @classmethod
    def from_flags(cls, use_half_size: bool, prefer_half_size: bool) -> "HalfSizeMode":
        """Collapse the two legacy booleans. ``use_half_size`` wins."""
        if use_half_size:
            return cls.HALF_SIZE_ONLY
        if prefer_half_size:
            return cls.PREFER_HALF_SIZE_FOR_GAPS
        return cls.FULL_SIZE

    @property
    def grid_size(self) -> int:
        """Cell size in millimetres for the main drawer area."""
        return HALF_GRID_SIZE if self is HalfSizeMode.HALF_SIZE_ONLY else FULL_GRID_SIZE


@dataclass(frozen=True)
class DrawerSize:
    """Drawer interior, in inches unless ``unit`` says otherwise.

    Millimetre drawers are kept in millimetres so the calculator never
    round-trips them through a binary inch value.

    Non-positive sizes are allowed here; the calculator answers them with an
    empty result.
    """

    width: float
    height: float
    unit: LengthUnit = LengthUnit.INCH


@dataclass(frozen=True)
class ExclusionZone:
    """Unusable margins on each edge of a printer bed, in millimetres."""

    front: float = 0.0
    back: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def __post_init__(self) -> None:
        for name in ("front", "back", "left", "right"):
            if getattr(self, name) < 0:
                raise ValueError(f"Exclusion zone {name} must be non-negative")


@dataclass(frozen=True)
class PrinterSize:
    """Printer build volume in millimetres.

    Attributes:
        x: Bed width.
        y: Bed depth.
        z: Build height (unused by the 2D tiling).
        exclusion_zone: Optional per-edge margins subtracted from the bed.
    """

    x: float
    y: float
    z: float | None = None
    exclusion_zone: ExclusionZone | None = None

    @property
    def effective_x(self) -> float:
        """Usable bed width after left/right exclusions."""
        if self.exclusion_zone is None:
            return self.x
        zone = self.exclusion_zone
        return precise_math.subtract(self.x, precise_math.add(zone.left, zone.right))

    @property
    def effective_y(self) -> float:
        """Usable bed depth after front/back exclusions."""
        if self.exclusion_zone is None:
            return self.y
        zone = self.exclusion_zone
        return precise_math.subtract(self.y, precise_math.add(zone.front, zone.back))


@dataclass(frozen=True)
class LayoutItem:
    """A placed piece.

    ``x``/``y``/``width``/``height`` are in cells of the grid the piece was
    laid out on (spacers carry fractional cell sizes). ``pixel_*`` values are
    absolute millimetres from the drawer's top-left corner.
    """

    x: float
    y: float
    width: float
    height: float
    type: PieceType
    pixel_x: float
    pixel_y: float
    pixel_width: float
    pixel_height: float

    @property
    def right_edge(self) -> float:
        return self.pixel_x + self.pixel_width

    @property
    def bottom_edge(self) -> float:
        return self.pixel_y + self.pixel_height

    @property
    def area(self) -> float:
        """Area in square millimetres."""
        return self.pixel_width * self.pixel_height

    @property
    def size_label(self) -> str:
        """``WxH`` label in cell units, e.g. ``5x4``."""
        return f"{format_number(self.width)}x{format_number(self.height)}"

    def overlaps(self, other: "LayoutItem", tolerance: float = 1e-6) -> bool:
        """Axis-aligned overlap test; touching edges do not overlap."""
        return (
            self.pixel_x < other.right_edge - tolerance
            and other.pixel_x < self.right_edge - tolerance
            and self.pixel_y < other.bottom_edge - tolerance
            and other.pixel_y < self.bottom_edge - tolerance
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase wire field names."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "type": self.type.value,
            "pixelX": self.pixel_x,
            "pixelY": self.pixel_y,
            "pixelWidth": self.pixel_width,
            "pixelHeight": self.pixel_height,
        }


@dataclass(frozen=True)
class GridfinityResult:
    """Outcome of one drawer calculation.

    Attributes:
        baseplates: ``"WxH"`` label -> count of full-grid baseplates.
        spacers: ``"Wmm x Hmm"`` label -> count of spacers.
        half_size_bins: ``"WxH"`` label -> count of half-size pieces.
        layout: Every placed piece, in placement order.
    """

    baseplates: dict[str, int] = field(default_factory=dict)
    spacers: dict[str, int] = field(default_factory=dict)
    half_size_bins: dict[str, int] = field(default_factory=dict)
    layout: tuple[LayoutItem, ...] = ()

    @classmethod
    def empty(cls) -> "GridfinityResult":
        """The "no solution" result for degenerate drawers."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.layout

    @property
    def total_pieces(self) -> int:
        return len(self.layout)

    @property
    def covered_area(self) -> float:
        """Sum of piece areas in square millimetres."""
        return sum(item.area for item in self.layout)

    def items_of_type(self, piece_type: PieceType) -> list[LayoutItem]:
        return [item for item in self.layout if item.type is piece_type]

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseplates": dict(self.baseplates),
            "spacers": dict(self.spacers),
            "halfSizeBins": dict(self.half_size_bins),
            "layout": [item.to_dict() for item in self.layout],
        }
