from __future__ import annotations

from pathlib import Path

import numpy as np

from crucible.core.errors import GridNotFoundError, InvalidGridError


def _split_row(line: str, *, compact: bool) -> list[str]:
    if compact:
        return list(line)
    return line.split()


def _parse_cell(token: str, *, line_no: int, col: int) -> int:
    try:
        value = int(token)
    except ValueError as exc:
        raise InvalidGridError(f"non-numeric cell {token!r} at line {line_no}, column {col + 1}") from exc
    if value < 0:
        raise InvalidGridError(f"negative cost {value} at line {line_no}, column {col + 1}")
    return value


def parse_cost_grid(text: str, *, max_cells: int | None = None) -> np.ndarray:
    """Parse a cost grid from text.

    Rows without whitespace are read one digit per cell (``2413432311323``);
    rows containing whitespace are read as space-separated integers, which
    allows multi-digit costs. The layout is decided once for the whole input.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not any(lines):
        raise InvalidGridError("grid is empty")

    compact = not any(len(line.split()) > 1 for line in lines)
    rows: list[list[int]] = []
    width: int | None = None
    for idx, line in enumerate(lines):
        line_no = idx + 1
        if not line:
            raise InvalidGridError(f"blank row at line {line_no}")
        tokens = _split_row(line, compact=compact)
        if width is None:
            width = len(tokens)
        elif len(tokens) != width:
            raise InvalidGridError(f"ragged row at line {line_no}: expected {width} cells, got {len(tokens)}")
        rows.append([_parse_cell(tok, line_no=line_no, col=col) for col, tok in enumerate(tokens)])

    cells = len(rows) * int(width or 0)
    if max_cells is not None and cells > max_cells:
        raise InvalidGridError(f"grid has {cells} cells, limit is {max_cells}")
    return np.asarray(rows, dtype=np.int64)


def load_cost_grid(path: Path, *, max_cells: int | None = None) -> np.ndarray:
    if not path.exists():
        raise GridNotFoundError(f"grid file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InvalidGridError(f"cannot read grid file {path}: {exc}") from exc
    return parse_cost_grid(text, max_cells=max_cells)
