"""Row-major partitioning of a drawer's whole grid cells into printable pieces.

The partitioner only ever sees whole cells. Millimetre leftovers along the
right and bottom edges are described by :class:`GridDimensions` and turned
into spacer regions elsewhere.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.value_objects import (
    HALF_GRID_SIZE,
    LayoutItem,
    PieceType,
    PrinterSize,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridDimensions:
    """Grid geometry for one calculation.

    Attributes:
        grid_size: Cell size in millimetres (42 or 21).
        drawer_width: Drawer width in millimetres.
        drawer_height: Drawer height in millimetres.
        grid_count_x: Whole cells across the drawer.
        grid_count_y: Whole cells down the drawer.
        max_plate_x: Most cells one printed piece may span horizontally.
        max_plate_y: Most cells one printed piece may span vertically.
        remaining_width: Millimetres right of the last whole cell.
        remaining_height: Millimetres below the last whole cell.
        bed_width: Usable printer bed width in millimetres.
        bed_height: Usable printer bed depth in millimetres.
    """

    grid_size: int
    drawer_width: float
    drawer_height: float
    grid_count_x: int
    grid_count_y: int
    max_plate_x: int
    max_plate_y: int
    remaining_width: float
    remaining_height: float
    bed_width: float = 0.0
    bed_height: float = 0.0

    @property
    def max_print_size_x(self) -> int:
        """Largest printable piece width in millimetres (multiple of grid size)."""
        return self.max_plate_x * self.grid_size

    @property
    def max_print_size_y(self) -> int:
        """Largest printable piece height in millimetres (multiple of grid size)."""
        return self.max_plate_y * self.grid_size

    @property
    def printer_fits_a_cell(self) -> bool:
        return self.max_plate_x > 0 and self.max_plate_y > 0

    @property
    def spacer_limit_x(self) -> float:
        """Widest spacer piece: the plate limit, or the bed when no cell fits."""
        return self.max_print_size_x or self.bed_width

    @property
    def spacer_limit_y(self) -> float:
        """Deepest spacer piece: the plate limit, or the bed when no cell fits."""
        return self.max_print_size_y or self.bed_height

    @property
    def bed_fits_half_cell(self) -> bool:
        return self.bed_width >= HALF_GRID_SIZE and self.bed_height >= HALF_GRID_SIZE


def compute_grid_dimensions(
    drawer_width: float,
    drawer_height: float,
    printer: PrinterSize,
    grid_size: int,
    math: PreciseMath | None = None,
) -> GridDimensions:
    """Work out cell counts, printer limits and edge leftovers.

    When the printer cannot hold a single cell on either axis (after
    exclusion zones) no whole cells are assigned at all, so the whole
    drawer is left over for spacer coverage.
    """
    math = math or precise_math

    max_plate_x = max(0, int(math.floor(math.divide(printer.effective_x, grid_size))))
    max_plate_y = max(0, int(math.floor(math.divide(printer.effective_y, grid_size))))

    if max_plate_x == 0 or max_plate_y == 0:
        logger.debug(
            "Printer %sx%s mm cannot hold a %d mm cell; no whole cells placed",
            printer.effective_x,
            printer.effective_y,
            grid_size,
        )
        grid_count_x = 0
        grid_count_y = 0
    else:
        grid_count_x = int(math.floor(math.divide(drawer_width, grid_size)))
        grid_count_y = int(math.floor(math.divide(drawer_height, grid_size)))

    remaining_width = math.subtract(drawer_width, math.multiply(grid_count_x, grid_size))
    remaining_height = math.subtract(
        drawer_height, math.multiply(grid_count_y, grid_size)
    )

    return GridDimensions(
        grid_size=grid_size,
        drawer_width=drawer_width,
        drawer_height=drawer_height,
        grid_count_x=grid_count_x,
        grid_count_y=grid_count_y,
        max_plate_x=max_plate_x,
        max_plate_y=max_plate_y,
        remaining_width=remaining_width,
        remaining_height=remaining_height,
        bed_width=printer.effective_x,
        bed_height=printer.effective_y,
    )


class RectanglePartitioner:
    """Tiles whole grid cells with pieces no larger than the printer allows.

    Pieces are laid out row-major: ``y`` steps by ``max_plate_y`` and, within
    each band, ``x`` steps by ``max_plate_x``. Pieces on the right and bottom
    edges are trimmed to the cells that remain.
    """

    def __init__(self, math: PreciseMath | None = None) -> None:
        self.math = math or precise_math

    def partition(
        self,
        dims: GridDimensions,
        piece_type: PieceType = PieceType.BASEPLATE,
    ) -> tuple[LayoutItem, ...]:
        if not dims.printer_fits_a_cell:
            return ()

        items: list[LayoutItem] = []
        for y in range(0, dims.grid_count_y, dims.max_plate_y):
            height = min(dims.max_plate_y, dims.grid_count_y - y)
            for x in range(0, dims.grid_count_x, dims.max_plate_x):
                width = min(dims.max_plate_x, dims.grid_count_x - x)
                items.append(
                    self.place(x, y, width, height, dims.grid_size, piece_type)
                )

        logger.debug(
            "Partitioned %dx%d cells into %d pieces (max %dx%d)",
            dims.grid_count_x,
            dims.grid_count_y,
            len(items),
            dims.max_plate_x,
            dims.max_plate_y,
        )
        return tuple(items)

    def place(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        grid_size: int,
        piece_type: PieceType = PieceType.BASEPLATE,
    ) -> LayoutItem:
        """Build a grid-aligned piece from cell coordinates."""
        return LayoutItem(
            x=x,
            y=y,
            width=width,
            height=height,
            type=piece_type,
            pixel_x=self.math.multiply(x, grid_size),
            pixel_y=self.math.multiply(y, grid_size),
            pixel_width=self.math.multiply(width, grid_size),
            pixel_height=self.math.multiply(height, grid_size),
        )
