from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


REGIME_NAMES = ("standard", "ultra")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CRUCIBLE_",
        extra="ignore",
        env_file=Path(__file__).resolve().parents[2] / ".env",
        env_file_encoding="utf-8",
    )

    project_root: Path = Path(__file__).resolve().parents[3]
    inputs_root: Path = project_root / "inputs"
    standard_min_run: int = 1
    standard_max_run: int = 3
    ultra_min_run: int = 4
    ultra_max_run: int = 10
    default_regime: str = "standard"
    max_grid_cells: int = 1_000_000
    log_level: str = "INFO"

    def regime(self, name: str) -> tuple[int, int]:
        key = name.strip().lower()
        if key == "standard":
            return self.standard_min_run, self.standard_max_run
        if key == "ultra":
            return self.ultra_min_run, self.ultra_max_run
        raise ValueError(f"Unsupported regime '{name}', expected one of {list(REGIME_NAMES)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    settings = Settings()
    provided = set(settings.model_fields_set)

    # Keep derived paths synced with project_root unless explicitly overridden.
    if "inputs_root" not in provided:
        settings.inputs_root = settings.project_root / "inputs"
    return settings
