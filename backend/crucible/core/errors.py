from __future__ import annotations

from typing import Any


class InvalidGridError(ValueError):
    """Raised when raw input cannot be turned into a rectangular cost grid."""


class GridNotFoundError(InvalidGridError):
    """Grid input path does not exist."""


class SearchInvariantError(RuntimeError):
    """Internal search state broke an invariant; always a programming error."""


STATUS_OK = "ok"
STATUS_NOT_REACHABLE = "not_reachable"
STATUS_ORIGIN_OUT_OF_BOUNDS = "origin_out_of_bounds"
STATUS_DESTINATION_OUT_OF_BOUNDS = "destination_out_of_bounds"

_STATUS_MESSAGES = {
    STATUS_NOT_REACHABLE: "Destination is not reachable under the run-length regime",
    STATUS_ORIGIN_OUT_OF_BOUNDS: "Origin lies outside the grid",
    STATUS_DESTINATION_OUT_OF_BOUNDS: "Destination lies outside the grid",
    "invalid_grid": "Grid input is invalid",
    "invalid_request": "Request validation failed",
}


def status_message(code: str) -> str:
    return _STATUS_MESSAGES.get(code, "Search failed")


def error_payload(*, code: str, status: int, message: str | None = None, detail: Any = None) -> dict[str, Any]:
    return {
        "code": code,
        "status": status,
        "message": message if message is not None else status_message(code),
        "detail": detail,
    }
