"""Domain services for drawer tiling.

- Unit conversion
- Whole-cell partitioning and the uniform division search
- Spacer regions and splitting
- Half-size filling and merging
- Result tallies and the calculation pipeline
"""

from .aggregator import ResultAggregator
from .calculator import GridCalculator, calculate_grids
from .half_size import HalfSizeFill, HalfSizeFiller
from .partitioner import GridDimensions, RectanglePartitioner, compute_grid_dimensions
from .spacers import SpacerSplitter
from .uniform import (
    UniformAllocator,
    UniformLayout,
    calculate_smart_baseplates,
    find_divisions,
    score_division,
)
from .units import UnitConverter, from_mm, to_mm, unit_converter

__all__ = [
    "GridCalculator",
    "GridDimensions",
    "HalfSizeFill",
    "HalfSizeFiller",
    "RectanglePartitioner",
    "ResultAggregator",
    "SpacerSplitter",
    "UniformAllocator",
    "UniformLayout",
    "UnitConverter",
    "calculate_grids",
    "calculate_smart_baseplates",
    "compute_grid_dimensions",
    "find_divisions",
    "from_mm",
    "score_division",
    "to_mm",
    "unit_converter",
]
