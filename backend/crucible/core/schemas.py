from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class Coord(BaseModel):
    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col


class RegimeSpec(BaseModel):
    min_run: int = Field(ge=1)
    max_run: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_window(self) -> "RegimeSpec":
        if self.min_run > self.max_run:
            raise ValueError(f"min_run={self.min_run} exceeds max_run={self.max_run}")
        return self


class SolveRequest(BaseModel):
    input_path: Path
    regimes: dict[str, RegimeSpec] = Field(default_factory=dict)
    origin: Coord | None = None
    destination: Coord | None = None
    as_json: bool = False
