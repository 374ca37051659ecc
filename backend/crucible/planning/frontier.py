from __future__ import annotations

import heapq
import itertools

from crucible.core.errors import SearchInvariantError
from crucible.planning.grid import Coordinate
from crucible.planning.state import SearchState


class Frontier:
    """Min-heap of pending states keyed by tentative cumulative cost."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SearchState]] = []
        self._seq = itertools.count()
        self.pushed = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, state: SearchState, cost: int) -> None:
        # Sequence number breaks cost ties so states themselves are never compared.
        heapq.heappush(self._heap, (cost, next(self._seq), state))
        self.pushed += 1

    def pop(self) -> tuple[SearchState, int]:
        cost, _, state = heapq.heappop(self._heap)
        return state, cost


class ExploredLedger:
    """Finalized minimal cost per state. Each state is written exactly once."""

    def __init__(self, *, max_run: int) -> None:
        self.max_run = max_run
        self._costs: dict[SearchState, int] = {}

    def __contains__(self, state: object) -> bool:
        return state in self._costs

    def __len__(self) -> int:
        return len(self._costs)

    def finalize(self, state: SearchState, cost: int) -> None:
        if state in self._costs:
            raise SearchInvariantError(f"state finalized twice: {state}")
        if not 0 <= state.run <= self.max_run:
            raise SearchInvariantError(f"run length {state.run} outside [0, {self.max_run}] for {state}")
        if state.direction is None and state.run != 0:
            raise SearchInvariantError(f"state without direction must have run 0: {state}")
        if state.direction is not None and state.run == 0:
            raise SearchInvariantError(f"directed state with zero run: {state}")
        if cost < 0:
            raise SearchInvariantError(f"negative finalized cost {cost} for {state}")
        self._costs[state] = cost

    def cost_of(self, state: SearchState) -> int | None:
        return self._costs.get(state)

    def min_cost_at(self, coord: Coordinate) -> int | None:
        costs = [cost for state, cost in self._costs.items() if state.coord == coord]
        return min(costs) if costs else None
