"""Grid model construction, validation and queries."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import is_won
from backend.models.grid import Grid


class TestGridConstruction:
    def test_from_flat_row_major(self) -> None:
        g = Grid.from_flat(3, [1, 2, 3, 0, 0, 0, 3, 2, 1])
        assert g.tiles == [[1, 2, 3], [0, 0, 0], [3, 2, 1]]
        assert g.get_tile(2, 0) == 3

    def test_flat_round_trip(self) -> None:
        flat = [0, 1, 2, 3]
        assert Grid.from_flat(2, flat).flat() == flat

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="Expected 9 tiles"):
            Grid.from_flat(3, [0] * 8)

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(ValueError, match="Row 1 has 3 tiles"):
            Grid(size=2, tiles=[[0, 0], [0, 0, 0]])

    def test_too_small_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            Grid.from_flat(1, [0])

    @pytest.mark.parametrize("bad", [-1, 1.5, "1", None, True])
    def test_invalid_tag_rejected(self, bad: object) -> None:
        with pytest.raises(ValueError, match="Invalid tile tag"):
            Grid.from_flat(2, [0, 0, 0, bad])  # type: ignore[list-item]

    def test_blank(self) -> None:
        assert Grid.blank(3).flat() == [0] * 9


class TestGridQueries:
    def test_counts(self) -> None:
        g = Grid.from_flat(3, [1, 0, 2, 0, 1, 0, 0, 0, 3])
        assert g.non_blank_count() == 4
        assert g.types() == {1, 2, 3}
        assert g.tile_counts() == {0: 5, 1: 2, 2: 1, 3: 1}

    def test_coordinates_row_major(self) -> None:
        assert list(Grid.blank(2).coordinates()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_uniform(self) -> None:
        assert Grid.from_flat(2, [1, 1, 1, 1]).is_uniform()
        assert not Grid.from_flat(2, [1, 1, 1, 0]).is_uniform()

    def test_copy_is_independent(self) -> None:
        g = Grid.from_flat(2, [1, 0, 0, 0])
        c = g.copy()
        c.tiles[0][0] = 2
        assert g.get_tile(0, 0) == 1
        assert c != g


class TestWinDetection:
    def test_equal_grids_win(self) -> None:
        a = Grid.from_flat(3, [1, 0, 0, 0, 2, 0, 0, 0, 0])
        assert is_won(a, a.copy())

    def test_single_difference_does_not_win(self) -> None:
        a = Grid.from_flat(3, [1, 0, 0, 0, 2, 0, 0, 0, 0])
        b = Grid.from_flat(3, [1, 0, 0, 0, 2, 0, 0, 0, 1])
        assert not is_won(a, b)

    def test_different_sizes_do_not_win(self) -> None:
        assert not is_won(Grid.blank(2), Grid.blank(3))
