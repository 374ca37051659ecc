from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from crucible.core.errors import (
    STATUS_DESTINATION_OUT_OF_BOUNDS,
    STATUS_NOT_REACHABLE,
    STATUS_OK,
    STATUS_ORIGIN_OUT_OF_BOUNDS,
)
from crucible.planning.frontier import ExploredLedger, Frontier
from crucible.planning.grid import Coordinate, CostGrid
from crucible.planning.state import RunRegime, origin_state, successors


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    status: str
    cost: int | None
    origin: Coordinate
    destination: Coordinate
    regime: RunRegime
    explain: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def to_payload(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "cost": self.cost,
            "origin": list(self.origin),
            "destination": list(self.destination),
            "min_run": self.regime.min_run,
            "max_run": self.regime.max_run,
            "explain": dict(self.explain),
        }


def explore(grid: CostGrid, regime: RunRegime, origin: Coordinate) -> tuple[ExploredLedger, dict[str, int]]:
    """Run Dijkstra over (coord, direction, run) states until the frontier drains."""
    frontier = Frontier()
    ledger = ExploredLedger(max_run=regime.max_run)
    frontier.push(origin_state(origin), 0)

    popped = 0
    stale = 0
    while frontier:
        state, cost = frontier.pop()
        popped += 1
        if state in ledger:
            stale += 1
            continue
        ledger.finalize(state, cost)

        for nxt, step_cost in successors(state, grid, regime):
            if nxt in ledger:
                continue
            frontier.push(nxt, cost + step_cost)

    stats = {
        "pushed": frontier.pushed,
        "popped": popped,
        "stale": stale,
        "finalized": len(ledger),
    }
    return ledger, stats


def extract_min_cost(ledger: ExploredLedger, destination: Coordinate) -> int | None:
    """Cheapest finalized cost at ``destination`` across every direction and run length."""
    return ledger.min_cost_at(destination)


def find_min_cost(
    grid: CostGrid | np.ndarray | Sequence[Sequence[int]],
    min_run: int,
    max_run: int,
    *,
    origin: Coordinate | None = None,
    destination: Coordinate | None = None,
) -> SearchOutcome:
    if not isinstance(grid, CostGrid):
        grid = CostGrid(grid)
    regime = RunRegime(min_run=int(min_run), max_run=int(max_run))
    origin = tuple(origin) if origin is not None else grid.top_left
    destination = tuple(destination) if destination is not None else grid.bottom_right

    if not grid.in_bounds(origin):
        return SearchOutcome(
            status=STATUS_ORIGIN_OUT_OF_BOUNDS,
            cost=None,
            origin=origin,
            destination=destination,
            regime=regime,
            explain={"grid_shape": list(grid.shape)},
        )
    if not grid.in_bounds(destination):
        return SearchOutcome(
            status=STATUS_DESTINATION_OUT_OF_BOUNDS,
            cost=None,
            origin=origin,
            destination=destination,
            regime=regime,
            explain={"grid_shape": list(grid.shape)},
        )

    t0 = time.perf_counter()
    ledger, stats = explore(grid, regime, origin)
    best = extract_min_cost(ledger, destination)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    explain: dict[str, Any] = {
        "grid_shape": list(grid.shape),
        **stats,
        "runtime_ms": round(elapsed_ms, 3),
    }
    logger.debug(
        "search %s->%s regime=(%d,%d) pushed=%d popped=%d stale=%d finalized=%d",
        origin,
        destination,
        regime.min_run,
        regime.max_run,
        stats["pushed"],
        stats["popped"],
        stats["stale"],
        stats["finalized"],
    )
    if best is None:
        logger.info(
            "destination %s not reachable from %s under regime (%d,%d)",
            destination,
            origin,
            regime.min_run,
            regime.max_run,
        )
        return SearchOutcome(
            status=STATUS_NOT_REACHABLE,
            cost=None,
            origin=origin,
            destination=destination,
            regime=regime,
            explain=explain,
        )
    return SearchOutcome(
        status=STATUS_OK,
        cost=int(best),
        origin=origin,
        destination=destination,
        regime=regime,
        explain=explain,
    )
