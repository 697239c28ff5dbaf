"""
Rotation/reflection of quadrant tables between recursion levels.

The first and last quadrants of a Hilbert curve are traversed in a
mirrored orientation so that the sub-curve inside them joins its
neighbours. Entering quadrant 0 flips the table across its
anti-diagonal (top-right to bottom-left); entering quadrant 3 transposes
it across its main diagonal. Quadrants 1 and 2 keep the parent
orientation.
"""

from typing import Callable, Dict, Optional

import numpy as np

from .errors import InvalidLabel
from .quadrants import LABELS, QuadrantTable


def _flip_anti_diagonal(grid: np.ndarray) -> np.ndarray:
    # new[r][c] = old[1 - c][1 - r]
    return grid[::-1, ::-1].T


def _transpose(grid: np.ndarray) -> np.ndarray:
    # new[r][c] = old[c][r]
    return grid.T


# label just selected -> grid reflection applied before descending
REFLECTIONS: Dict[int, Optional[Callable[[np.ndarray], np.ndarray]]] = {
    0: _flip_anti_diagonal,
    1: None,
    2: None,
    3: _transpose,
}


def transform(table: QuadrantTable, label: int) -> QuadrantTable:
    """
    Compute the table for the next level down.

    Args:
        table: Table in effect at the current level
        label: Label of the quadrant the target point falls into

    Returns:
        Table used to subdivide the selected quadrant

    Raises:
        InvalidLabel: If label is not in 0..3

    Example:
        >>> transform(ROOT_TABLE, 0)
        QuadrantTable([[3, 2], [0, 1]])
    """
    if label not in LABELS:
        raise InvalidLabel(f"Label must be in 0..3, got {label!r}")

    reflect = REFLECTIONS[label]
    if reflect is None:
        # Middle quadrants keep the parent orientation
        return table
    return QuadrantTable(reflect(table.as_array()))


def is_identity(label: int) -> bool:
    """True when selecting ``label`` leaves the table unchanged"""
    if label not in LABELS:
        raise InvalidLabel(f"Label must be in 0..3, got {label!r}")
    return REFLECTIONS[label] is None
