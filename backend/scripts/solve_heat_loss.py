from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from crucible.core.config import REGIME_NAMES, Settings, get_settings
from crucible.core.errors import GridNotFoundError, InvalidGridError, error_payload
from crucible.core.grid_io import load_cost_grid
from crucible.core.schemas import Coord, RegimeSpec, SolveRequest
from crucible.planning.grid import CostGrid
from crucible.planning.reporting import outcome_payload, render_outcome
from crucible.planning.search import SearchOutcome, find_min_cost


EXIT_OK = 0
EXIT_UNREACHABLE = 1
EXIT_INVALID = 2


def _parse_rc(raw: str | None) -> Coord | None:
    if raw is None:
        return None
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"expected 'row,col', got: {raw}")
    return Coord(row=int(parts[0]), col=int(parts[1]))


def _resolve_regimes(args: argparse.Namespace, settings: Settings) -> dict[str, RegimeSpec]:
    if args.min_run is not None or args.max_run is not None:
        if args.min_run is None or args.max_run is None:
            raise ValueError("--min-run and --max-run must be given together")
        return {"custom": RegimeSpec(min_run=args.min_run, max_run=args.max_run)}
    names = list(REGIME_NAMES) if args.regime == "both" else [args.regime or settings.default_regime]
    regimes: dict[str, RegimeSpec] = {}
    for name in names:
        lo, hi = settings.regime(name)
        regimes[name] = RegimeSpec(min_run=lo, max_run=hi)
    return regimes


def build_request(args: argparse.Namespace, settings: Settings) -> SolveRequest:
    input_path = Path(args.input)
    if not input_path.is_absolute() and not input_path.exists():
        input_path = settings.inputs_root / input_path
    return SolveRequest(
        input_path=input_path,
        regimes=_resolve_regimes(args, settings),
        origin=_parse_rc(args.origin),
        destination=_parse_rc(args.destination),
        as_json=bool(args.json),
    )


def run_request(request: SolveRequest, settings: Settings) -> list[tuple[str, SearchOutcome]]:
    grid = CostGrid(load_cost_grid(request.input_path, max_cells=settings.max_grid_cells))
    origin = request.origin.as_tuple() if request.origin else None
    destination = request.destination.as_tuple() if request.destination else None
    results: list[tuple[str, SearchOutcome]] = []
    for name, spec in request.regimes.items():
        outcome = find_min_cost(
            grid,
            spec.min_run,
            spec.max_run,
            origin=origin,
            destination=destination,
        )
        results.append((name, outcome))
    return results


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minimum-cost crucible route through a cost grid")
    parser.add_argument("input", type=str, help="grid file (digit rows or space-separated integers)")
    parser.add_argument("--regime", type=str, choices=[*REGIME_NAMES, "both"], default=None)
    parser.add_argument("--min-run", type=int, default=None, help="cells committed on every turn")
    parser.add_argument("--max-run", type=int, default=None, help="longest allowed straight run")
    parser.add_argument("--origin", type=str, default=None, help="row,col (default top-left)")
    parser.add_argument("--destination", type=str, default=None, help="row,col (default bottom-right)")
    parser.add_argument("--json", action="store_true", help="print a JSON report")
    return parser.parse_args(argv)


def _emit_error(code: str, message: str, *, as_json: bool, status: int = 422) -> None:
    if as_json:
        print(json.dumps(error_payload(code=code, status=status, message=message), ensure_ascii=False, indent=2))
    else:
        print(f"error: {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = build_request(args, settings)
    except (ValueError, ValidationError) as exc:
        _emit_error("invalid_request", str(exc), as_json=bool(args.json))
        return EXIT_INVALID

    try:
        results = run_request(request, settings)
    except InvalidGridError as exc:
        status = 404 if isinstance(exc, GridNotFoundError) else 422
        _emit_error("invalid_grid", str(exc), as_json=request.as_json, status=status)
        return EXIT_INVALID

    if request.as_json:
        report = {
            "input": request.input_path.as_posix(),
            "results": [outcome_payload(outcome, label=name) for name, outcome in results],
        }
        print(json.dumps(report, ensure_ascii=False, indent=2))
    else:
        for name, outcome in results:
            print(render_outcome(outcome, label=name))

    return EXIT_OK if all(outcome.ok for _, outcome in results) else EXIT_UNREACHABLE


if __name__ == "__main__":
    raise SystemExit(main())
