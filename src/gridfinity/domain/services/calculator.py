"""Drawer tiling calculation.

:func:`calculate_grids` is the plain-data entry point; :class:`GridCalculator`
does the work and accepts injected collaborators for testing.

The pipeline for one drawer:

1. Convert the drawer to millimetres (millimetre drawers pass through).
2. Work out whole cells, printer limits and edge leftovers.
3. Place baseplates (uniform search when asked for, otherwise row-major
   partitioning). In half-size-only mode the partitioner places 21mm pieces.
4. Cut the edge leftovers into printable spacers.
5. In prefer-half-size mode, fill spacers with 21mm cells and merge them.
6. Tally the layout.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.services.aggregator import ResultAggregator
from gridfinity.domain.services.half_size import HalfSizeFiller
from gridfinity.domain.services.partitioner import (
    GridDimensions,
    RectanglePartitioner,
    compute_grid_dimensions,
)
from gridfinity.domain.services.spacers import SpacerSplitter
from gridfinity.domain.services.uniform import UniformAllocator
from gridfinity.domain.services.units import UnitConverter
from gridfinity.domain.value_objects import (
    DrawerSize,
    ExclusionZone,
    GridfinityResult,
    HalfSizeMode,
    LayoutItem,
    LengthUnit,
    PieceType,
    PrinterSize,
)

logger = logging.getLogger(__name__)


class GridCalculator:
    """Computes baseplate, spacer and half-size layouts for a drawer.

    Args:
        math: Arithmetic layer shared by every collaborator.
        converter: Inch/millimetre converter.
        partitioner: Row-major whole-cell partitioner.
        splitter: Spacer builder/splitter.
        filler: Half-size filler and combiner.
        uniform: Uniform division search.
        aggregator: Result tally builder.
    """

    def __init__(
        self,
        math: PreciseMath | None = None,
        converter: UnitConverter | None = None,
        partitioner: RectanglePartitioner | None = None,
        splitter: SpacerSplitter | None = None,
        filler: HalfSizeFiller | None = None,
        uniform: UniformAllocator | None = None,
        aggregator: ResultAggregator | None = None,
    ) -> None:
        self.math = math or precise_math
        self.converter = converter or UnitConverter(self.math)
        self.partitioner = partitioner or RectanglePartitioner(self.math)
        self.splitter = splitter or SpacerSplitter(self.math)
        self.filler = filler or HalfSizeFiller(self.math, self.splitter)
        self.uniform = uniform or UniformAllocator(self.math)
        self.aggregator = aggregator or ResultAggregator(self.math)

    def calculate(
        self,
        drawer: DrawerSize | None,
        printer: PrinterSize,
        mode: HalfSizeMode = HalfSizeMode.FULL_SIZE,
        prefer_uniform_baseplates: bool = False,
    ) -> GridfinityResult:
        """Lay out one drawer.

        Args:
            drawer: Drawer interior in its own unit. ``None`` or a
                non-positive side yields :meth:`GridfinityResult.empty`.
            printer: Printer bed in millimetres.
            mode: How half-size cells are used.
            prefer_uniform_baseplates: Search for few distinct plate sizes
                instead of filling greedily. Ignored in half-size-only mode.

        Returns:
            Tallies plus every placed piece.
        """
        if drawer is None or drawer.width <= 0 or drawer.height <= 0:
            logger.debug("Degenerate drawer %s; returning empty result", drawer)
            return GridfinityResult.empty()

        width_mm = self.converter.to_mm(drawer.width, drawer.unit)
        height_mm = self.converter.to_mm(drawer.height, drawer.unit)
        grid_size = mode.grid_size
        dims = compute_grid_dimensions(width_mm, height_mm, printer, grid_size, self.math)

        logger.debug(
            "Drawer %sx%s mm: %dx%d cells of %d mm, max plate %dx%d, leftovers %sx%s mm",
            width_mm,
            height_mm,
            dims.grid_count_x,
            dims.grid_count_y,
            grid_size,
            dims.max_plate_x,
            dims.max_plate_y,
            dims.remaining_width,
            dims.remaining_height,
        )

        plates = self._place_plates(dims, mode, prefer_uniform_baseplates)
        spacers = self.splitter.build_spacers(dims)

        layout: list[LayoutItem] = list(plates)
        if mode is HalfSizeMode.PREFER_HALF_SIZE_FOR_GAPS and dims.bed_fits_half_cell:
            cells: list[LayoutItem] = []
            residuals: list[LayoutItem] = []
            for spacer in spacers:
                fill = self.filler.fill(spacer)
                cells.extend(fill.bins)
                residuals.extend(fill.remaining_spacers)
            layout.extend(
                self.filler.combine(cells, dims.max_print_size_x, dims.max_print_size_y)
            )
            layout.extend(residuals)
        else:
            layout.extend(spacers)

        return self.aggregator.aggregate(layout, grid_size)

    def _place_plates(
        self, dims: GridDimensions, mode: HalfSizeMode, prefer_uniform: bool
    ) -> tuple[LayoutItem, ...]:
        if mode is HalfSizeMode.HALF_SIZE_ONLY:
            return self.partitioner.partition(dims, PieceType.HALF_SIZE)

        if prefer_uniform and dims.printer_fits_a_cell:
            plates = self.uniform.allocate(
                dims.grid_count_x,
                dims.grid_count_y,
                dims.max_plate_x,
                dims.max_plate_y,
                dims.grid_size,
            )
            if plates is not None:
                return plates
            logger.debug("Falling back to row-major partitioning")

        return self.partitioner.partition(dims, PieceType.BASEPLATE)


def _coerce_drawer(drawer: DrawerSize | Mapping[str, Any] | None) -> DrawerSize | None:
    if drawer is None or isinstance(drawer, DrawerSize):
        return drawer
    return DrawerSize(
        width=drawer["width"],
        height=drawer["height"],
        unit=LengthUnit.parse(drawer.get("unit", LengthUnit.INCH)),
    )


def _coerce_printer(printer: PrinterSize | Mapping[str, Any]) -> PrinterSize:
    if isinstance(printer, PrinterSize):
        return printer
    zone = printer.get("exclusionZone", printer.get("exclusion_zone"))
    if zone is not None and not isinstance(zone, ExclusionZone):
        zone = ExclusionZone(
            front=zone.get("front", 0.0),
            back=zone.get("back", 0.0),
            left=zone.get("left", 0.0),
            right=zone.get("right", 0.0),
        )
    return PrinterSize(x=printer["x"], y=printer["y"], z=printer.get("z"), exclusion_zone=zone)


_default_calculator = GridCalculator()


def calculate_grids(
    drawer_size: DrawerSize | Mapping[str, Any] | None,
    printer_size: PrinterSize | Mapping[str, Any],
    use_half_size: bool,
    prefer_half_size: bool,
    prefer_uniform_baseplates: bool = False,
) -> GridfinityResult:
    """Lay out a drawer from plain values.

    ``drawer_size`` is ``{"width", "height", "unit"?}`` (inches unless a
    ``unit`` is given) and ``printer_size`` is
    ``{"x", "y", "z"?, "exclusionZone"?}`` in millimetres; the matching
    dataclasses are accepted too. ``use_half_size`` takes precedence over
    ``prefer_half_size``.

    Example:
        >>> result = calculate_grids({"width": 22.5, "height": 16.5},
        ...                          {"x": 256, "y": 256, "z": 256}, False, False)
        >>> sorted(result.baseplates.items())
        [('1x3', 1), ('1x6', 1), ('6x3', 2), ('6x6', 2)]
    """
    return _default_calculator.calculate(
        _coerce_drawer(drawer_size),
        _coerce_printer(printer_size),
        HalfSizeMode.from_flags(use_half_size, prefer_half_size),
        prefer_uniform_baseplates,
    )
