"""Tests for the recursive quadrant resolver."""

import numpy as np
import pytest

from hilbertfrac.errors import InvalidBit, InvalidDepth, InvalidLabel
from hilbertfrac.quadrants import ROOT_TABLE
from hilbertfrac.resolver import Selection, iter_squares, locate, resolve, tables_along
from hilbertfrac.rotation import transform

from .helpers import DEPTH_2_CELLS, index_bits

SAMPLE_BITS = [
    [],
    [1],
    [0, 0, 1, 1],
    [1, 0, 0, 1, 1, 1, 0, 1],
    [1, 1, 0, 1, 0, 0, 1, 0, 1, 1],
]


def cells(depth, rotate=True):
    return [
        locate(resolve(index_bits(index, depth), depth, rotate=rotate))
        for index in range(4 ** depth)
    ]


class TestScenario:
    def test_path(self):
        path = resolve([0, 0, 1, 1], 2)
        assert [(s.level, s.label) for s in path] == [(0, 0), (1, 3)]

    def test_positions_follow_rotated_table(self):
        first, second = resolve([0, 0, 1, 1], 2)
        assert first.position == ROOT_TABLE.position_of(0) == (1, 0)
        assert second.position == transform(ROOT_TABLE, 0).position_of(3) == (0, 0)
        assert locate([first, second]) == (2, 0)

    def test_selection_fields(self):
        assert resolve([1, 0], 1) == [Selection(level=0, label=2, position=(0, 1))]


class TestProperties:
    @pytest.mark.parametrize("bits", SAMPLE_BITS)
    def test_depth_zero_is_empty(self, bits):
        assert resolve(bits, 0) == []

    @pytest.mark.parametrize("bits", SAMPLE_BITS)
    def test_deterministic(self, bits):
        assert resolve(bits, 4) == resolve(bits, 4)

    @pytest.mark.parametrize("bits", SAMPLE_BITS)
    @pytest.mark.parametrize("depth", range(5))
    def test_prefix_stability(self, bits, depth):
        shorter = resolve(bits, depth)
        longer = resolve(bits, depth + 1)
        assert longer[:depth] == shorter
        assert len(longer) == depth + 1
        assert longer[-1].level == depth

    def test_missing_bits_are_zero(self):
        assert resolve([], 2) == resolve([0, 0, 0, 0], 2)
        assert resolve([1], 2) == resolve([1, 0, 0, 0], 2)

    def test_extra_bits_are_ignored(self):
        assert resolve([0, 1, 1, 0, 1, 1], 2) == resolve([0, 1, 1, 0], 2)

    def test_accepts_numpy_bits(self):
        assert resolve(np.array([0, 0, 1, 1], dtype=np.uint8), 2) == resolve([0, 0, 1, 1], 2)


class TestErrors:
    @pytest.mark.parametrize("depth", [-1, -10, 1.5, True, "2"])
    def test_invalid_depth(self, depth):
        with pytest.raises(InvalidDepth):
            resolve([0, 1], depth)

    def test_invalid_bit(self):
        with pytest.raises(InvalidBit):
            resolve([0, 2], 1)

    def test_bit_error_is_not_a_label_error(self):
        with pytest.raises(InvalidBit) as excinfo:
            resolve([3], 1)
        assert not isinstance(excinfo.value, InvalidLabel)

    @pytest.mark.parametrize("depth", [np.int64(2), np.int32(2), np.uint8(2)])
    def test_numpy_integer_depth(self, depth):
        assert resolve([0, 0, 1, 1], depth) == resolve([0, 0, 1, 1], 2)


class TestCurve:
    def test_depth_2_order(self):
        assert cells(2) == DEPTH_2_CELLS

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    def test_continuous(self, depth):
        visited = cells(depth)
        for a, b in zip(visited, visited[1:]):
            assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    def test_visits_every_cell_once(self, depth):
        visited = cells(depth)
        assert len(set(visited)) == 4 ** depth

    @pytest.mark.parametrize("depth", [1, 2, 3])
    def test_starts_bottom_left_ends_bottom_right(self, depth):
        visited = cells(depth)
        size = 2 ** depth
        assert visited[0] == (size - 1, 0)
        assert visited[-1] == (size - 1, size - 1)

    def test_fixed_table_mode_is_not_hilbert(self):
        visited = cells(2, rotate=False)
        assert len(set(visited)) == 16
        # label 0 then 3 lands in (3, 1); label 1 then 0 jumps up to (1, 0)
        assert visited[3] == (3, 1)
        assert visited[4] == (1, 0)

    def test_fixed_table_mode_never_rotates(self):
        for selection in resolve([0, 0, 1, 1, 0, 0], 3, rotate=False):
            assert selection.position == ROOT_TABLE.position_of(selection.label)


class TestTablesAlong:
    def test_root_first(self):
        assert tables_along([]) == [ROOT_TABLE]

    def test_applies_transform_per_label(self):
        tables = tables_along([0, 3, 1])
        assert len(tables) == 4
        assert tables[1] == transform(ROOT_TABLE, 0)
        assert tables[2] == transform(tables[1], 3)
        assert tables[3] == tables[2]

    def test_fixed_table(self):
        assert tables_along([0, 3], rotate=False) == [ROOT_TABLE] * 3


class TestSquares:
    def test_tree_shape(self):
        squares = list(iter_squares([0, 0, 1, 1], 2))
        assert len(squares) == 1 + 4 * 2
        root = squares[0]
        assert root.level == 0 and root.is_on_path and root.table == ROOT_TABLE

    def test_one_square_on_path_per_level(self):
        bits = [1, 0, 0, 1, 1, 1]
        path = resolve(bits, 3)
        squares = list(iter_squares(bits, 3))
        for level in (1, 2, 3):
            children = [s for s in squares if s.level == level]
            assert sorted(s.label for s in children) == [0, 1, 2, 3]
            on_path = [s for s in children if s.is_on_path]
            assert len(on_path) == 1
            assert on_path[0].label == path[level - 1].label
            assert on_path[0].cell == locate(path[:level])

    def test_child_tables_are_transformed(self):
        squares = list(iter_squares([0, 0], 1))
        for square in squares[1:]:
            assert square.table == transform(ROOT_TABLE, square.label)

    def test_depth_zero_yields_root_only(self):
        assert [s.level for s in iter_squares([1, 1], 0)] == [0]
