from __future__ import annotations

from typing import Any

from crucible.core.errors import STATUS_NOT_REACHABLE, error_payload, status_message
from crucible.planning.search import SearchOutcome


def _regime_label(outcome: SearchOutcome) -> str:
    return f"runs {outcome.regime.min_run}..{outcome.regime.max_run}"


def render_outcome(outcome: SearchOutcome, *, label: str | None = None) -> str:
    prefix = f"[{label}] " if label else ""
    route = f"{outcome.origin} -> {outcome.destination}"
    if outcome.ok:
        return f"{prefix}min cost {outcome.cost} for {route} ({_regime_label(outcome)})"
    return f"{prefix}{status_message(outcome.status)}: {route} ({_regime_label(outcome)})"


def outcome_payload(outcome: SearchOutcome, *, label: str | None = None) -> dict[str, Any]:
    payload = outcome.to_payload()
    if label:
        payload["regime"] = label
    if not outcome.ok:
        # Not-reachable is a normal outcome; bad coordinates are request errors.
        status_code = 404 if outcome.status == STATUS_NOT_REACHABLE else 422
        payload["error"] = error_payload(
            code=outcome.status,
            status=status_code,
            detail={
                "origin": list(outcome.origin),
                "destination": list(outcome.destination),
                "grid_shape": outcome.explain.get("grid_shape"),
            },
        )
    return payload
