"""Unit tests for spacer regions and spacer splitting.

These tests verify:
- Leftover regions are produced only for non-negligible remainders
- Splitting emits full tiles, then the right column, bottom row and corner
- Unsplit axes when the printer limit is not positive
- Cell-unit fields are millimetres divided by the active grid size
"""

import pytest

from gridfinity.domain import PieceType, PrinterSize, SpacerSplitter
from gridfinity.domain.services import compute_grid_dimensions


def _pixels(items) -> list[tuple[float, float, float, float]]:
    return [(i.pixel_x, i.pixel_y, i.pixel_width, i.pixel_height) for i in items]


@pytest.fixture
def splitter() -> SpacerSplitter:
    return SpacerSplitter()


class TestLeftoverRegions:
    """Tests for SpacerSplitter.leftover_regions."""

    def test_right_bottom_and_corner(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        dims = compute_grid_dimensions(571.5, 419.1, printer_256, 42)

        regions = splitter.leftover_regions(dims)

        assert _pixels(regions) == [
            (546, 0, 25.5, 378),
            (0, 378, 546, 41.1),
            (546, 378, 25.5, 41.1),
        ]
        assert all(region.type is PieceType.SPACER for region in regions)

    def test_no_regions_for_exact_fit(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        dims = compute_grid_dimensions(420, 420, printer_256, 42)
        assert splitter.leftover_regions(dims) == []

    def test_only_right_strip(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        dims = compute_grid_dimensions(430, 420, printer_256, 42)
        assert _pixels(splitter.leftover_regions(dims)) == [(420, 0, 10, 420)]

    def test_negligible_remainder_ignored(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        dims = compute_grid_dimensions(420.005, 430, printer_256, 42)
        assert _pixels(splitter.leftover_regions(dims)) == [(0, 420, 420, 10)]

    def test_whole_drawer_when_printer_too_small(self, splitter: SpacerSplitter) -> None:
        dims = compute_grid_dimensions(254, 254, PrinterSize(x=30, y=30), 42)
        assert _pixels(splitter.leftover_regions(dims)) == [(0, 0, 254, 254)]

    def test_zero_area_strips_skipped(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        """A drawer narrower than a cell has no right strip of zero height."""
        dims = compute_grid_dimensions(30, 30, printer_256, 42)
        assert _pixels(splitter.leftover_regions(dims)) == [(0, 0, 30, 30)]


class TestSplit:
    """Tests for SpacerSplitter.split."""

    def test_tall_strip(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(546, 0, 25.5, 378, 42)

        pieces = splitter.split(spacer, 252, 252, 42)

        assert _pixels(pieces) == [(546, 0, 25.5, 252), (546, 252, 25.5, 126)]

    def test_wide_strip(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(0, 378, 546, 41.1, 42)

        pieces = splitter.split(spacer, 252, 252, 42)

        assert _pixels(pieces) == [
            (0, 378, 252, 41.1),
            (252, 378, 252, 41.1),
            (504, 378, 42, 41.1),
        ]

    def test_emission_order(self, splitter: SpacerSplitter) -> None:
        """Full tiles row by row, then right column, bottom row, corner."""
        spacer = splitter.make_spacer(0, 0, 600, 600, 42)

        pieces = splitter.split(spacer, 252, 252, 42)

        assert _pixels(pieces) == [
            (0, 0, 252, 252),
            (252, 0, 252, 252),
            (0, 252, 252, 252),
            (252, 252, 252, 252),
            (504, 0, 96, 252),
            (504, 252, 96, 252),
            (0, 504, 252, 96),
            (252, 504, 252, 96),
            (504, 504, 96, 96),
        ]

    def test_fits_without_cutting(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(10, 20, 100, 50, 42)
        assert splitter.split(spacer, 252, 252, 42) == [spacer]

    def test_non_positive_limit_leaves_axis_uncut(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(0, 0, 500, 300, 42)

        pieces = splitter.split(spacer, 0, 200, 42)

        assert _pixels(pieces) == [(0, 0, 500, 200), (0, 200, 500, 100)]

    def test_pieces_tile_the_spacer(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(0, 0, 517.3, 301.9, 42)

        pieces = splitter.split(spacer, 210, 126, 42)

        assert sum(p.area for p in pieces) == pytest.approx(517.3 * 301.9)
        assert all(p.pixel_width <= 210 and p.pixel_height <= 126 for p in pieces)
        for i, a in enumerate(pieces):
            for b in pieces[i + 1 :]:
                assert not a.overlaps(b)


class TestMakeSpacer:
    """Tests for spacer cell units."""

    def test_cell_units_follow_grid_size(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(546, 0, 25.5, 252, 42)

        assert spacer.x == 13
        assert spacer.height == 6
        assert spacer.width == pytest.approx(25.5 / 42)

    def test_half_grid_units(self, splitter: SpacerSplitter) -> None:
        spacer = splitter.make_spacer(252, 0, 2, 252, 21)

        assert spacer.x == 12
        assert spacer.height == 12


class TestBuildSpacers:
    """Tests for SpacerSplitter.build_spacers."""

    def test_kitchen_drawer(
        self, splitter: SpacerSplitter, printer_256: PrinterSize
    ) -> None:
        dims = compute_grid_dimensions(571.5, 419.1, printer_256, 42)

        spacers = splitter.build_spacers(dims)

        assert _pixels(spacers) == [
            (546, 0, 25.5, 252),
            (546, 252, 25.5, 126),
            (0, 378, 252, 41.1),
            (252, 378, 252, 41.1),
            (504, 378, 42, 41.1),
            (546, 378, 25.5, 41.1),
        ]

    def test_whole_drawer_is_cut_to_the_bed(self, splitter: SpacerSplitter) -> None:
        """With no whole cell on the bed, pieces are cut to the bed itself."""
        dims = compute_grid_dimensions(254, 254, PrinterSize(x=30, y=30), 42)

        pieces = splitter.build_spacers(dims)

        assert len(pieces) == 81
        assert _pixels(pieces[:2]) == [(0, 0, 30, 30), (30, 0, 30, 30)]
        assert _pixels(pieces[-1:]) == [(240, 240, 14, 14)]
        assert all(p.pixel_width <= 30 and p.pixel_height <= 30 for p in pieces)

    def test_narrow_bed_cuts_only_the_short_axis(self, splitter: SpacerSplitter) -> None:
        dims = compute_grid_dimensions(254, 254, PrinterSize(x=40, y=300), 42)

        pieces = splitter.build_spacers(dims)

        assert all(p.pixel_width <= 40 and p.pixel_height <= 294 for p in pieces)
        assert sum(p.area for p in pieces) == pytest.approx(254 * 254)
