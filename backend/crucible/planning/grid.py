from __future__ import annotations

from typing import Sequence

import numpy as np

from crucible.core.errors import InvalidGridError


Coordinate = tuple[int, int]  # (row, col)


class CostGrid:
    """Read-only row/col -> cost lookup over a rectangular integer array."""

    def __init__(self, costs: np.ndarray | Sequence[Sequence[int]]) -> None:
        try:
            arr = np.asarray(costs)
        except ValueError as exc:
            raise InvalidGridError("grid rows must all have the same length") from exc
        if arr.ndim != 2:
            raise InvalidGridError(f"grid must be 2D, got shape {arr.shape}")
        if arr.size == 0:
            raise InvalidGridError("grid is empty")
        if not np.issubdtype(arr.dtype, np.integer):
            raise InvalidGridError(f"grid costs must be integers, got dtype {arr.dtype}")
        if int(arr.min()) < 0:
            raise InvalidGridError("grid costs must be non-negative")
        self._costs = arr.astype(np.int64, copy=True)
        self._costs.setflags(write=False)
        self.rows, self.cols = (int(v) for v in self._costs.shape)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def top_left(self) -> Coordinate:
        return 0, 0

    @property
    def bottom_right(self) -> Coordinate:
        return self.rows - 1, self.cols - 1

    def in_bounds(self, coord: Coordinate) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def cost(self, coord: Coordinate) -> int | None:
        if not self.in_bounds(coord):
            return None
        r, c = coord
        return int(self._costs[r, c])
