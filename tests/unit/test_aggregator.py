"""Unit tests for layout tallies."""

from gridfinity.domain import (
    HalfSizeFiller,
    LayoutItem,
    PieceType,
    RectanglePartitioner,
    ResultAggregator,
    SpacerSplitter,
)


class TestResultAggregator:
    """Tests for ResultAggregator."""

    def test_counts_by_label_in_first_seen_order(self) -> None:
        partitioner = RectanglePartitioner()
        splitter = SpacerSplitter()
        layout = [
            partitioner.place(0, 0, 6, 6, 42),
            partitioner.place(6, 0, 1, 6, 42),
            partitioner.place(7, 0, 6, 6, 42),
            splitter.make_spacer(546, 0, 25.5, 252, 42),
            splitter.make_spacer(0, 378, 252, 41.1, 42),
            splitter.make_spacer(252, 378, 252, 41.1, 42),
        ]

        result = ResultAggregator().aggregate(layout, 42)

        assert list(result.baseplates.items()) == [("6x6", 2), ("1x6", 1)]
        assert list(result.spacers.items()) == [
            ("25.5mm x 252mm", 1),
            ("252mm x 41.1mm", 2),
        ]
        assert result.half_size_bins == {}
        assert result.layout == tuple(layout)

    def test_spacer_labels_on_half_grid(self) -> None:
        """Labels reproduce the millimetre size on the 21mm grid too."""
        spacer = SpacerSplitter().make_spacer(252, 0, 2, 252, 21)

        assert ResultAggregator().spacer_label(spacer, 21) == "2mm x 252mm"

    def test_half_size_pieces(self) -> None:
        filler = HalfSizeFiller()
        cells = filler.fill(SpacerSplitter().make_spacer(0, 0, 42, 21, 42)).bins
        merged = filler.combine(cells, 252, 252)

        result = ResultAggregator().aggregate(merged, 42)

        assert result.half_size_bins == {"1x0.5": 1}
        assert result.baseplates == {}

    def test_empty_layout(self) -> None:
        result = ResultAggregator().aggregate([], 42)
        assert result.is_empty
        assert result.baseplates == {}

    def test_half_size_plates_tallied_separately(self) -> None:
        plate = LayoutItem(0, 0, 12, 12, PieceType.HALF_SIZE, 0, 0, 252, 252)

        result = ResultAggregator().aggregate([plate], 21)

        assert result.half_size_bins == {"12x12": 1}
