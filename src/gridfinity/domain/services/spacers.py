"""Spacer regions for the millimetre leftovers around the whole-cell grid."""

from __future__ import annotations

import logging

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.services.partitioner import GridDimensions
from gridfinity.domain.value_objects import DEFAULT_TOLERANCE, LayoutItem, PieceType

logger = logging.getLogger(__name__)


class SpacerSplitter:
    """Builds spacer pieces and cuts them down to printable sizes.

    Spacer ``width``/``height`` are expressed in cells of the active grid
    (``pixel_size / grid_size``) and are left unrounded so labels derived from
    them reproduce the millimetre size exactly.
    """

    def __init__(self, math: PreciseMath | None = None) -> None:
        self.math = math or precise_math

    def make_spacer(
        self,
        pixel_x: float,
        pixel_y: float,
        pixel_width: float,
        pixel_height: float,
        grid_size: int,
    ) -> LayoutItem:
        m = self.math
        return LayoutItem(
            x=m.divide(pixel_x, grid_size),
            y=m.divide(pixel_y, grid_size),
            width=m.divide(pixel_width, grid_size),
            height=m.divide(pixel_height, grid_size),
            type=PieceType.SPACER,
            pixel_x=float(pixel_x),
            pixel_y=float(pixel_y),
            pixel_width=float(pixel_width),
            pixel_height=float(pixel_height),
        )

    def leftover_regions(self, dims: GridDimensions) -> list[LayoutItem]:
        """Return the unsplit right strip, bottom strip and corner regions.

        A region is produced only when its remainder is not approximately
        zero and it has a non-zero area.
        """
        m = self.math
        grid = dims.grid_size
        has_width = not m.is_effectively_zero(dims.remaining_width, DEFAULT_TOLERANCE)
        has_height = not m.is_effectively_zero(dims.remaining_height, DEFAULT_TOLERANCE)
        grid_width = m.multiply(dims.grid_count_x, grid)
        grid_height = m.multiply(dims.grid_count_y, grid)

        candidates = []
        if has_width:
            candidates.append(
                (grid_width, 0, dims.remaining_width, grid_height)
            )
        if has_height:
            candidates.append(
                (0, grid_height, grid_width, dims.remaining_height)
            )
        if has_width and has_height:
            candidates.append(
                (grid_width, grid_height, dims.remaining_width, dims.remaining_height)
            )

        return [
            self.make_spacer(x, y, width, height, grid)
            for x, y, width, height in candidates
            if width > 0 and height > 0
        ]

    def split(
        self,
        spacer: LayoutItem,
        max_width: float,
        max_height: float,
        grid_size: int,
    ) -> list[LayoutItem]:
        """Cut ``spacer`` into pieces no larger than ``max_width`` x ``max_height``.

        Tiles come out in a fixed order: full-size tiles row by row, then the
        right-edge column, then the bottom-edge row, then the corner. An axis
        whose limit is not positive is left uncut.

        Args:
            spacer: Region to cut, positioned in drawer millimetres.
            max_width: Largest printable width in millimetres.
            max_height: Largest printable height in millimetres.
            grid_size: Active grid size, used for cell-unit fields.

        Returns:
            Pieces that tile ``spacer`` exactly.
        """
        m = self.math
        if max_width <= 0:
            max_width = spacer.pixel_width
        if max_height <= 0:
            max_height = spacer.pixel_height

        full_cols = int(m.floor(m.divide(spacer.pixel_width, max_width)))
        full_rows = int(m.floor(m.divide(spacer.pixel_height, max_height)))
        rem_width = m.mod(spacer.pixel_width, max_width)
        rem_height = m.mod(spacer.pixel_height, max_height)

        def piece(offset_x: float, offset_y: float, width: float, height: float) -> LayoutItem:
            return self.make_spacer(
                m.add(spacer.pixel_x, offset_x),
                m.add(spacer.pixel_y, offset_y),
                width,
                height,
                grid_size,
            )

        pieces: list[LayoutItem] = []
        for row in range(full_rows):
            for col in range(full_cols):
                pieces.append(
                    piece(
                        m.multiply(col, max_width),
                        m.multiply(row, max_height),
                        max_width,
                        max_height,
                    )
                )

        if rem_width > 0:
            for row in range(full_rows):
                pieces.append(
                    piece(
                        m.multiply(full_cols, max_width),
                        m.multiply(row, max_height),
                        rem_width,
                        max_height,
                    )
                )

        if rem_height > 0:
            for col in range(full_cols):
                pieces.append(
                    piece(
                        m.multiply(col, max_width),
                        m.multiply(full_rows, max_height),
                        max_width,
                        rem_height,
                    )
                )

        if rem_width > 0 and rem_height > 0:
            pieces.append(
                piece(
                    m.multiply(full_cols, max_width),
                    m.multiply(full_rows, max_height),
                    rem_width,
                    rem_height,
                )
            )

        if len(pieces) > 1:
            logger.debug(
                "Split %sx%s mm spacer into %d pieces",
                spacer.pixel_width,
                spacer.pixel_height,
                len(pieces),
            )
        return pieces

    def build_spacers(self, dims: GridDimensions) -> list[LayoutItem]:
        """Leftover regions of ``dims``, each cut to the printer's limits.

        On an axis where the printer cannot hold a whole cell the pieces are
        cut to the usable bed instead.
        """
        pieces: list[LayoutItem] = []
        for region in self.leftover_regions(dims):
            pieces.extend(
                self.split(
                    region,
                    dims.spacer_limit_x,
                    dims.spacer_limit_y,
                    dims.grid_size,
                )
            )
        return pieces
