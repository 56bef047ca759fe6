"""Domain layer - drawer tiling core."""

from .precise_math import MathConfig, PreciseMath, precise_math
from .services import (
    GridCalculator,
    HalfSizeFiller,
    RectanglePartitioner,
    ResultAggregator,
    SpacerSplitter,
    UniformAllocator,
    UnitConverter,
    calculate_grids,
)
from .value_objects import (
    DEFAULT_TOLERANCE,
    FULL_GRID_SIZE,
    HALF_GRID_SIZE,
    INCH_TO_MM,
    DrawerSize,
    ExclusionZone,
    GridfinityResult,
    HalfSizeMode,
    LayoutItem,
    LengthUnit,
    PieceType,
    PrinterSize,
    UnsupportedUnitError,
    format_number,
)

__all__ = [
    "DEFAULT_TOLERANCE",
    "FULL_GRID_SIZE",
    "HALF_GRID_SIZE",
    "INCH_TO_MM",
    "DrawerSize",
    "ExclusionZone",
    "GridCalculator",
    "GridfinityResult",
    "HalfSizeFiller",
    "HalfSizeMode",
    "LayoutItem",
    "LengthUnit",
    "MathConfig",
    "PieceType",
    "PreciseMath",
    "PrinterSize",
    "RectanglePartitioner",
    "ResultAggregator",
    "SpacerSplitter",
    "UniformAllocator",
    "UnitConverter",
    "UnsupportedUnitError",
    "calculate_grids",
    "format_number",
    "precise_math",
]
