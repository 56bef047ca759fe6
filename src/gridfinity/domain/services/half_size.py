"""Half-size (21mm) filling of spacer regions and greedy merging of the cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.services.spacers import SpacerSplitter
from gridfinity.domain.value_objects import (
    FULL_GRID_SIZE,
    HALF_GRID_SIZE,
    LayoutItem,
    PieceType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HalfSizeFill:
    """Half-size cells cut from a spacer and what is left of it.

    Attributes:
        bins: One 21mm cell per grid position that fits inside the spacer.
        remaining_spacers: At most two residual spacers narrower than a
            half cell (right strip first, then bottom strip).
    """

    bins: tuple[LayoutItem, ...]
    remaining_spacers: tuple[LayoutItem, ...]


class HalfSizeFiller:
    """Replaces spacers with half-size cells and merges them back together.

    Used when the main drawer area is on the 42mm grid and leftover space
    should be covered with 21mm pieces wherever one fits. Cell coordinates
    of the produced pieces are therefore in 42mm units (a half cell is
    ``0.5`` wide).
    """

    def __init__(
        self,
        math: PreciseMath | None = None,
        splitter: SpacerSplitter | None = None,
    ) -> None:
        self.math = math or precise_math
        self.splitter = splitter or SpacerSplitter(self.math)

    def fill(self, spacer: LayoutItem) -> HalfSizeFill:
        """Cover ``spacer`` with as many half-size cells as fit.

        A dimension of exactly 21mm holds one cell. The right residual spans
        the spacer's full height; the bottom residual spans only the width
        covered by cells, so the pieces tile the spacer exactly.
        """
        m = self.math
        cols = int(m.floor(m.divide(spacer.pixel_width, HALF_GRID_SIZE)))
        rows = int(m.floor(m.divide(spacer.pixel_height, HALF_GRID_SIZE)))
        rem_width = m.mod(spacer.pixel_width, HALF_GRID_SIZE)
        rem_height = m.mod(spacer.pixel_height, HALF_GRID_SIZE)

        bins = [
            self._half_cell(spacer, col, row)
            for col in range(cols)
            for row in range(rows)
        ]

        covered_width = m.multiply(cols, HALF_GRID_SIZE)
        covered_height = m.multiply(rows, HALF_GRID_SIZE)
        residuals: list[LayoutItem] = []
        if rem_width > 0:
            residuals.append(
                self.splitter.make_spacer(
                    m.add(spacer.pixel_x, covered_width),
                    spacer.pixel_y,
                    rem_width,
                    spacer.pixel_height,
                    FULL_GRID_SIZE,
                )
            )
        if rem_height > 0 and covered_width > 0:
            residuals.append(
                self.splitter.make_spacer(
                    spacer.pixel_x,
                    m.add(spacer.pixel_y, covered_height),
                    covered_width,
                    rem_height,
                    FULL_GRID_SIZE,
                )
            )

        return HalfSizeFill(bins=tuple(bins), remaining_spacers=tuple(residuals))

    def _half_cell(self, spacer: LayoutItem, col: int, row: int) -> LayoutItem:
        m = self.math
        pixel_x = m.add(spacer.pixel_x, m.multiply(col, HALF_GRID_SIZE))
        pixel_y = m.add(spacer.pixel_y, m.multiply(row, HALF_GRID_SIZE))
        return LayoutItem(
            x=m.divide(pixel_x, FULL_GRID_SIZE),
            y=m.divide(pixel_y, FULL_GRID_SIZE),
            width=0.5,
            height=0.5,
            type=PieceType.HALF_SIZE,
            pixel_x=pixel_x,
            pixel_y=pixel_y,
            pixel_width=float(HALF_GRID_SIZE),
            pixel_height=float(HALF_GRID_SIZE),
        )

    def combine(
        self,
        bins: list[LayoutItem] | tuple[LayoutItem, ...],
        max_width: float,
        max_height: float,
    ) -> list[LayoutItem]:
        """Greedily merge half-size cells into larger printable rectangles.

        First pass: cells sorted by ``(pixel_x, pixel_y)`` are stacked into
        columns while the column stays within ``max_height``. Second pass:
        columns sorted by ``(pixel_y, pixel_x)`` are joined left to right
        within each row when they share a height and the run stays within
        ``max_width``.
        """
        columns = self._merge_vertically(bins, max_height)
        merged = self._merge_horizontally(columns, max_width)
        logger.debug("Combined %d half-size cells into %d pieces", len(bins), len(merged))
        return merged

    def _merge_vertically(
        self, bins: list[LayoutItem] | tuple[LayoutItem, ...], max_height: float
    ) -> list[LayoutItem]:
        m = self.math
        columns: list[LayoutItem] = []
        current: LayoutItem | None = None
        for cell in sorted(bins, key=lambda item: (item.pixel_x, item.pixel_y)):
            if current is None:
                current = replace(cell, width=0.5, height=0.5)
            elif (
                m.equal(current.pixel_x, cell.pixel_x)
                and m.equal(m.add(current.pixel_y, current.pixel_height), cell.pixel_y)
                and m.less_or_equal(m.add(current.pixel_height, HALF_GRID_SIZE), max_height)
            ):
                current = replace(
                    current,
                    pixel_height=m.add(current.pixel_height, cell.pixel_height),
                    height=m.add(current.height, 0.5),
                )
            else:
                columns.append(current)
                current = replace(cell, width=0.5, height=0.5)
        if current is not None:
            columns.append(current)
        return columns

    def _merge_horizontally(self, columns: list[LayoutItem], max_width: float) -> list[LayoutItem]:
        result: list[LayoutItem] = []
        row: list[LayoutItem] = []
        row_y: float | None = None
        for column in sorted(columns, key=lambda item: (item.pixel_y, item.pixel_x)):
            if row_y is None or not self.math.equal(column.pixel_y, row_y):
                result.extend(self._merge_row(row, max_width))
                row = [column]
                row_y = column.pixel_y
            else:
                row.append(column)
        result.extend(self._merge_row(row, max_width))
        return result

    def _merge_row(self, row: list[LayoutItem], max_width: float) -> list[LayoutItem]:
        m = self.math
        merged: list[LayoutItem] = []
        current: LayoutItem | None = None
        for piece in row:
            if current is None:
                current = piece
            elif (
                m.equal(m.add(current.pixel_x, current.pixel_width), piece.pixel_x)
                and m.equal(current.height, piece.height)
                and m.less_or_equal(m.add(current.pixel_width, piece.pixel_width), max_width)
            ):
                current = replace(
                    current,
                    pixel_width=m.add(current.pixel_width, piece.pixel_width),
                    width=m.add(current.width, piece.width),
                )
            else:
                merged.append(current)
                current = piece
        if current is not None:
            merged.append(current)
        return merged
