from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple

from crucible.planning.grid import Coordinate, CostGrid


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class RunRegime:
    """Allowed length window for straight runs; turning commits to ``min_run`` cells."""

    min_run: int
    max_run: int

    def __post_init__(self) -> None:
        if self.min_run < 1:
            raise ValueError(f"min_run must be >= 1, got {self.min_run}")
        if self.max_run < self.min_run:
            raise ValueError(f"max_run={self.max_run} is below min_run={self.min_run}")


class SearchState(NamedTuple):
    coord: Coordinate
    direction: Direction | None
    run: int

    @property
    def is_origin(self) -> bool:
        return self.direction is None


def origin_state(coord: Coordinate) -> SearchState:
    return SearchState(coord=coord, direction=None, run=0)


def _walk(grid: CostGrid, start: Coordinate, direction: Direction, steps: int) -> tuple[Coordinate, int] | None:
    """Step ``steps`` cells from ``start``; None once any entered cell leaves the grid."""
    dr, dc = direction.delta
    r, c = start
    total = 0
    for _ in range(steps):
        r += dr
        c += dc
        cell_cost = grid.cost((r, c))
        if cell_cost is None:
            return None
        total += cell_cost
    return (r, c), total


def successors(state: SearchState, grid: CostGrid, regime: RunRegime) -> Iterator[tuple[SearchState, int]]:
    """Yield ``(next_state, transition_cost)`` for every legal move out of ``state``."""
    for direction in Direction:
        if state.direction is None:
            # First move from the origin is a single step in any direction.
            steps = 1
            run = 1
        elif direction is state.direction.opposite():
            continue
        elif direction is state.direction:
            if state.run >= regime.max_run:
                continue
            steps = 1
            run = state.run + 1
        else:
            steps = regime.min_run
            run = regime.min_run

        walked = _walk(grid, state.coord, direction, steps)
        if walked is None:
            continue
        coord, cost = walked
        yield SearchState(coord=coord, direction=direction, run=run), cost
