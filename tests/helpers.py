"""Test helpers shared across modules."""

from __future__ import annotations

import itertools

from hilbertfrac.quadrants import QuadrantTable


def index_bits(index: int, depth: int) -> list[int]:
    """Mantissa bits of index / 4**depth"""
    width = 2 * depth
    return [(index >> (width - 1 - i)) & 1 for i in range(width)]


# Every 2x2 arrangement of the labels 0..3
ALL_TABLES = [
    QuadrantTable([list(p[:2]), list(p[2:])])
    for p in itertools.permutations(range(4))
]

# Cells visited in order by the depth-2 Hilbert curve, (row, col), row 0 on top
DEPTH_2_CELLS = [
    (3, 0), (3, 1), (2, 1), (2, 0),
    (1, 0), (0, 0), (0, 1), (1, 1),
    (1, 2), (0, 2), (0, 3), (1, 3),
    (2, 3), (2, 2), (3, 2), (3, 3),
]
