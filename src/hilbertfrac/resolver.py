"""
Recursive quadrant resolution of a binary fraction.

Each level consumes the next two mantissa bits. Their value is the
label of the quadrant holding the target point; the table in effect
says where that quadrant sits. Descending into it applies the rotation
transform so the sub-square is traversed in Hilbert order.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidDepth
from .fraction import Bits, pad_bits
from .log import get_logger
from .quadrants import FIXED_TABLE, ROOT_TABLE, Position, QuadrantTable
from .rotation import transform

logger = get_logger(__name__)


class Selection(NamedTuple):
    """Quadrant chosen at one recursion level"""
    level: int
    label: int
    position: Position


SelectionPath = List[Selection]


@dataclass(frozen=True)
class Square:
    """
    Node of the implicit subdivision tree.

    ``cell`` is the square's (row, col) in the 2^level x 2^level grid,
    ``table`` the arrangement used to subdivide it further.
    """
    level: int
    label: Optional[int]
    position: Optional[Position]
    cell: Tuple[int, int]
    is_on_path: bool
    table: QuadrantTable


def is_integral(value) -> bool:
    """True for ints, numpy integers and other Integral types, but not bools"""
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_depth(depth) -> int:
    if not is_integral(depth) or depth < 0:
        raise InvalidDepth(depth)
    return int(depth)


def _next_table(table: QuadrantTable, label: int, rotate: bool) -> QuadrantTable:
    return transform(table, label) if rotate else table


def _labels(bits: Bits, depth: int) -> List[int]:
    # Missing bits read as an infinite tail of zeros
    padded = pad_bits(bits, 2 * depth)
    return [(int(padded[2 * i]) << 1) | int(padded[2 * i + 1]) for i in range(depth)]


def resolve(bits: Bits, max_depth: int, rotate: bool = True) -> SelectionPath:
    """
    Resolve a fraction's mantissa to its per-level quadrant selections.

    Args:
        bits: Mantissa bits, most significant first; zero-padded to 2*max_depth
        max_depth: Number of levels to resolve (0 gives an empty path)
        rotate: Hilbert order when True. False keeps the root table at
            every level, which yields a plain quadtree order, not a
            Hilbert curve.

    Returns:
        One Selection per level, level 0 first

    Raises:
        InvalidDepth: If max_depth is negative or not an integer
        InvalidBit: If bits holds anything other than 0/1

    Example:
        >>> [(s.level, s.label) for s in resolve([0, 0, 1, 1], 2)]
        [(0, 0), (1, 3)]
    """
    depth = _check_depth(max_depth)
    table = ROOT_TABLE if rotate else FIXED_TABLE
    path: SelectionPath = []

    for level, label in enumerate(_labels(bits, depth)):
        position = table.position_of(label)
        path.append(Selection(level, label, position))
        logger.debug("level %d: label %d at %s", level, label, position)
        table = _next_table(table, label, rotate)

    return path


def tables_along(labels: Sequence[int], rotate: bool = True) -> List[QuadrantTable]:
    """
    Tables in effect at each level when descending through ``labels``.

    Returns len(labels) + 1 tables: the root table first, then the
    table after each selection.
    """
    table = ROOT_TABLE if rotate else FIXED_TABLE
    tables = [table]
    for label in labels:
        table = _next_table(table, label, rotate)
        tables.append(table)
    return tables


def locate(path: SelectionPath) -> Tuple[int, int]:
    """
    Grid cell addressed by a selection path.

    Returns:
        (row, col) in the 2^len(path) x 2^len(path) grid, row 0 at the top
    """
    row = col = 0
    for selection in path:
        r, c = selection.position
        row = (row << 1) | r
        col = (col << 1) | c
    return row, col


def iter_squares(bits: Bits, depth: int, rotate: bool = True) -> Iterator[Square]:
    """
    Walk the subdivision tree along the target point's path.

    Yields the root square, then for every level the four children of
    the on-path square, in row-major grid order. Squares are produced
    lazily; nothing is retained between levels.
    """
    path = resolve(bits, depth, rotate=rotate)
    table = ROOT_TABLE if rotate else FIXED_TABLE
    cell = (0, 0)
    yield Square(0, None, None, cell, True, table)

    for selection in path:
        for position, label in table:
            child_cell = ((cell[0] << 1) | position[0], (cell[1] << 1) | position[1])
            yield Square(
                level=selection.level + 1,
                label=label,
                position=position,
                cell=child_cell,
                is_on_path=label == selection.label,
                table=_next_table(table, label, rotate),
            )
        cell = ((cell[0] << 1) | selection.position[0], (cell[1] << 1) | selection.position[1])
        table = _next_table(table, selection.label, rotate)
