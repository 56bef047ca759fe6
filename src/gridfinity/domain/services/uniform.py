"""Search for baseplate layouts with few distinct piece sizes.

Each axis is divided into runs of cells (for example 13 cells at a printer
limit of 6 becomes ``[5, 5, 3]`` rather than ``[6, 6, 1]``). Candidate
divisions are scored, every X/Y pairing is scored again for the number of
distinct ``WxH`` plates it yields, and the lowest score wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridfinity.domain.precise_math import PreciseMath, precise_math
from gridfinity.domain.value_objects import LayoutItem, PieceType

logger = logging.getLogger(__name__)

PIECE_PENALTY = 10
SIZE_VARIETY_PENALTY = 20
PLATE_TYPE_PENALTY = 15
SMALL_PIECE_RATIO = 0.4
SMALL_PIECE_PENALTY = 5
PREFERRED_SIZES = frozenset({3, 4, 5})
PREFERRED_SIZE_BONUS = 2
MIN_PIECE_SIZE = 2


def find_divisions(length: int, max_size: int, min_size: int = MIN_PIECE_SIZE) -> list[list[int]]:
    """List ways to split ``length`` cells into runs of at most ``max_size``.

    For every base size from ``max_size`` down to ``min_size``:

    - an exact fit gives ``[base] * n``;
    - a remainder of at least ``min_size`` gives ``[base] * n + [remainder]``;
    - otherwise, with more than one full piece, the run is rebalanced on
      ``base - 1`` when that leaves no remainder or a usable one.

    Duplicates are dropped, keeping the order in which divisions were found.
    """
    if length <= 0:
        return []

    divisions: list[list[int]] = []
    seen: set[tuple[int, ...]] = set()

    def record(division: list[int]) -> None:
        key = tuple(division)
        if key not in seen:
            seen.add(key)
            divisions.append(division)

    for base in range(max_size, min_size - 1, -1):
        full, remainder = divmod(length, base)
        if full == 0:
            continue
        if remainder == 0:
            record([base] * full)
        elif remainder >= min_size:
            record([base] * full + [remainder])
        elif full > 1 and base - 1 >= min_size:
            smaller = base - 1
            count, leftover = divmod(length, smaller)
            if leftover == 0:
                record([smaller] * count)
            elif leftover >= min_size:
                record([smaller] * count + [leftover])

    return divisions


def score_division(division: list[int], max_size: int) -> float:
    """Score one axis division. Lower is better."""
    score = float(PIECE_PENALTY * len(division))
    score += SIZE_VARIETY_PENALTY * len(set(division))
    small_limit = SMALL_PIECE_RATIO * max_size
    for piece in division:
        if piece < small_limit:
            score += (small_limit - piece) * SMALL_PIECE_PENALTY
        if piece in PREFERRED_SIZES:
            score -= PREFERRED_SIZE_BONUS
    return score


@dataclass(frozen=True)
class UniformLayout:
    """Chosen X and Y divisions with their combined score."""

    divisions_x: tuple[int, ...]
    divisions_y: tuple[int, ...]
    score: float

    @property
    def plate_types(self) -> set[tuple[int, int]]:
        return {(w, h) for w in self.divisions_x for h in self.divisions_y}


def calculate_smart_baseplates(
    grid_count_x: int,
    grid_count_y: int,
    max_plate_x: int,
    max_plate_y: int,
) -> UniformLayout | None:
    """Pick the best pairing of X and Y divisions.

    Pairs are visited X-outer, Y-inner and only a strictly lower score
    replaces the current best, so ties keep the first pairing found.

    Returns:
        The winning layout, or ``None`` when either axis has no division.
    """
    options_x = find_divisions(grid_count_x, max_plate_x)
    options_y = find_divisions(grid_count_y, max_plate_y)
    if not options_x or not options_y:
        return None

    best: UniformLayout | None = None
    for division_x in options_x:
        score_x = score_division(division_x, max_plate_x)
        for division_y in options_y:
            candidate = UniformLayout(tuple(division_x), tuple(division_y), 0.0)
            score = (
                score_x
                + score_division(division_y, max_plate_y)
                + PLATE_TYPE_PENALTY * len(candidate.plate_types)
            )
            if best is None or score < best.score:
                best = UniformLayout(candidate.divisions_x, candidate.divisions_y, score)
    return best


class UniformAllocator:
    """Lays out baseplates from the best uniform division, when one exists."""

    def __init__(self, math: PreciseMath | None = None) -> None:
        self.math = math or precise_math

    def allocate(
        self,
        grid_count_x: int,
        grid_count_y: int,
        max_plate_x: int,
        max_plate_y: int,
        grid_size: int,
    ) -> tuple[LayoutItem, ...] | None:
        """Return baseplates for the winning division, row by row.

        ``None`` tells the caller to fall back to plain partitioning.
        """
        layout = calculate_smart_baseplates(grid_count_x, grid_count_y, max_plate_x, max_plate_y)
        if layout is None:
            logger.debug(
                "No uniform division for %dx%d cells (max %dx%d)",
                grid_count_x,
                grid_count_y,
                max_plate_x,
                max_plate_y,
            )
            return None

        logger.debug(
            "Uniform division X=%s Y=%s (score %.1f)",
            list(layout.divisions_x),
            list(layout.divisions_y),
            layout.score,
        )
        m = self.math
        items: list[LayoutItem] = []
        y = 0
        for height in layout.divisions_y:
            x = 0
            for width in layout.divisions_x:
                items.append(
                    LayoutItem(
                        x=x,
                        y=y,
                        width=width,
                        height=height,
                        type=PieceType.BASEPLATE,
                        pixel_x=m.multiply(x, grid_size),
                        pixel_y=m.multiply(y, grid_size),
                        pixel_width=m.multiply(width, grid_size),
                        pixel_height=m.multiply(height, grid_size),
                    )
                )
                x += width
            y += height
        return tuple(items)
