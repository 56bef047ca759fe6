"""Tallies of placed pieces by size label."""

from __future__ import annotations

from collections import Counter

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.value_objects import (
    GridfinityResult,
    LayoutItem,
    PieceType,
    format_number,
)


class ResultAggregator:
    """Turns a finished layout into a :class:`GridfinityResult`.

    Labels follow first appearance in the layout:

    - baseplates: ``"WxH"`` in cells;
    - spacers: ``"{W}mm x {H}mm"`` rounded to two decimals;
    - half-size pieces: ``"WxH"`` in the cell units they were placed with.
    """

    def __init__(self, math: PreciseMath | None = None) -> None:
        self.math = math or precise_math

    def spacer_label(self, item: LayoutItem, grid_size: int) -> str:
        m = self.math
        width = m.round(m.multiply(item.width, grid_size), 2)
        height = m.round(m.multiply(item.height, grid_size), 2)
        return f"{format_number(width)}mm x {format_number(height)}mm"

    def aggregate(self, layout: list[LayoutItem] | tuple[LayoutItem, ...], grid_size: int) -> GridfinityResult:
        baseplates: Counter[str] = Counter()
        spacers: Counter[str] = Counter()
        half_size_bins: Counter[str] = Counter()

        for item in layout:
            if item.type is PieceType.BASEPLATE:
                baseplates[item.size_label] += 1
            elif item.type is PieceType.SPACER:
                spacers[self.spacer_label(item, grid_size)] += 1
            else:
                half_size_bins[item.size_label] += 1

        return GridfinityResult(
            baseplates=dict(baseplates),
            spacers=dict(spacers),
            half_size_bins=dict(half_size_bins),
            layout=tuple(layout),
        )
