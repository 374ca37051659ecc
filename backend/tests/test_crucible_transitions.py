from __future__ import annotations

import numpy as np
import pytest

from crucible.planning.grid import CostGrid
from crucible.planning.state import Direction, RunRegime, SearchState, origin_state, successors


def _moves(state: SearchState, grid: CostGrid, regime: RunRegime) -> dict[Direction, tuple[SearchState, int]]:
    return {nxt.direction: (nxt, cost) for nxt, cost in successors(state, grid, regime)}


def test_direction_opposites_pair_up() -> None:
    for direction in Direction:
        assert direction.opposite().opposite() is direction
        assert direction.opposite() is not direction
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.LEFT.opposite() is Direction.RIGHT


def test_origin_moves_are_single_steps_in_bounds() -> None:
    grid = CostGrid(np.ones((3, 3), dtype=np.int64))
    moves = _moves(origin_state((0, 0)), grid, RunRegime(4, 10))
    assert set(moves) == {Direction.DOWN, Direction.RIGHT}
    assert moves[Direction.DOWN] == (SearchState((1, 0), Direction.DOWN, 1), 1)
    assert moves[Direction.RIGHT] == (SearchState((0, 1), Direction.RIGHT, 1), 1)


def test_origin_in_middle_allows_all_four_directions() -> None:
    grid = CostGrid(np.ones((3, 3), dtype=np.int64))
    moves = _moves(origin_state((1, 1)), grid, RunRegime(1, 3))
    assert set(moves) == set(Direction)


def test_reversal_is_never_offered() -> None:
    grid = CostGrid(np.ones((5, 5), dtype=np.int64))
    for direction in Direction:
        state = SearchState((2, 2), direction, 1)
        moves = _moves(state, grid, RunRegime(1, 3))
        assert direction.opposite() not in moves


def test_straight_run_stops_at_max_run() -> None:
    grid = CostGrid(np.ones((3, 3), dtype=np.int64))
    moves = _moves(SearchState((1, 1), Direction.RIGHT, 3), grid, RunRegime(1, 3))
    assert set(moves) == {Direction.UP, Direction.DOWN}
    assert moves[Direction.UP][0] == SearchState((0, 1), Direction.UP, 1)


def test_straight_step_increments_run_and_costs_one_cell() -> None:
    costs = np.arange(25, dtype=np.int64).reshape(5, 5)
    grid = CostGrid(costs)
    moves = _moves(SearchState((2, 1), Direction.RIGHT, 2), grid, RunRegime(1, 3))
    assert moves[Direction.RIGHT] == (SearchState((2, 2), Direction.RIGHT, 3), 12)


def test_turn_commits_min_run_cells_and_sums_their_costs() -> None:
    costs = np.arange(25, dtype=np.int64).reshape(5, 5)
    grid = CostGrid(costs)
    moves = _moves(SearchState((0, 4), Direction.RIGHT, 4), grid, RunRegime(4, 10))
    assert set(moves) == {Direction.DOWN}
    nxt, cost = moves[Direction.DOWN]
    assert nxt == SearchState((4, 4), Direction.DOWN, 4)
    assert cost == 9 + 14 + 19 + 24


def test_turn_leaving_the_grid_is_pruned() -> None:
    grid = CostGrid(np.ones((3, 3), dtype=np.int64))
    moves = _moves(SearchState((0, 1), Direction.RIGHT, 1), grid, RunRegime(4, 10))
    assert set(moves) == {Direction.RIGHT}
    assert moves[Direction.RIGHT][0] == SearchState((0, 2), Direction.RIGHT, 2)


def test_states_are_hashable_values() -> None:
    a = SearchState((1, 2), Direction.UP, 2)
    b = SearchState((1, 2), Direction.UP, 2)
    assert a == b
    assert len({a, b}) == 1
    assert origin_state((0, 0)).is_origin
    assert not a.is_origin


@pytest.mark.parametrize("window", [(0, 3), (4, 3), (-1, -1)])
def test_run_regime_rejects_bad_windows(window: tuple[int, int]) -> None:
    with pytest.raises(ValueError):
        RunRegime(*window)
