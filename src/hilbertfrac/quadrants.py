"""
Quadrant index tables

A table is a 2x2 grid holding the labels 0..3 exactly once. The label
is the order in which the Hilbert curve visits that quadrant; the grid
position is where the quadrant sits inside its parent square. Row 0 is
the top row, column 0 the left column.
"""

from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .errors import InvalidLabel, InvalidTable

Position = Tuple[int, int]

LABELS = (0, 1, 2, 3)

QUADRANT_NAMES = {
    (0, 0): "top-left",
    (0, 1): "top-right",
    (1, 0): "bottom-left",
    (1, 1): "bottom-right",
}


class QuadrantTable:
    """
    Immutable 2x2 arrangement of quadrant labels.

    Supports lookup by position (``table[row, col]``) and the inverse
    lookup from label to position (``table.position_of(label)``).
    """

    __slots__ = ("_grid", "_positions")

    def __init__(self, rows: Sequence[Sequence[int]]):
        """
        Build a table from row-major label values.

        Args:
            rows: Two rows of two labels, e.g. ``[[1, 2], [0, 3]]``

        Raises:
            InvalidTable: If the grid is not 2x2 or labels repeat
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.shape != (2, 2):
            raise InvalidTable(f"Expected shape (2, 2), got {grid.shape}")
        if sorted(grid.ravel().tolist()) != list(LABELS):
            raise InvalidTable(f"Table must hold each label 0..3 once, got {grid.tolist()}")

        grid.setflags(write=False)
        self._grid = grid

        # Inverse lookup: label -> (row, col)
        positions: List[Position] = [(0, 0)] * 4
        for row in range(2):
            for col in range(2):
                positions[int(grid[row, col])] = (row, col)
        self._positions = tuple(positions)

    def __getitem__(self, position: Position) -> int:
        row, col = position
        return int(self._grid[row, col])

    def position_of(self, label: int) -> Position:
        """Return the (row, col) slot that holds ``label``"""
        if label not in LABELS:
            raise InvalidLabel(f"Label must be in 0..3, got {label!r}")
        return self._positions[label]

    def rows(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        return tuple(tuple(int(v) for v in row) for row in self._grid)

    def as_array(self) -> np.ndarray:
        """Read-only numpy view of the grid"""
        return self._grid

    def __iter__(self) -> Iterator[Tuple[Position, int]]:
        for row in range(2):
            for col in range(2):
                yield (row, col), int(self._grid[row, col])

    def __eq__(self, other) -> bool:
        if not isinstance(other, QuadrantTable):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    def __hash__(self) -> int:
        return hash(self._grid.tobytes())

    def __repr__(self) -> str:
        return f"QuadrantTable({[list(r) for r in self.rows()]})"

    def __str__(self) -> str:
        (a, b), (c, d) = self.rows()
        return f"{a} {b}\n{c} {d}"


# Canonical Hilbert base orientation: bottom-left, top-left, top-right,
# bottom-right.
ROOT_TABLE = QuadrantTable([[1, 2], [0, 3]])

# Same layout, used unchanged at every level by the fixed-table mode.
FIXED_TABLE = ROOT_TABLE
