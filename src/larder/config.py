"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global application settings loaded from environment variables or .env files."""

    pantry_path: Path = Field(
        default=Path("pantry.csv"),
        description="Pantry records file used by load/save.",
    )
    grocery_path: Path = Field(
        default=Path("groceryList.csv"),
        description="Grocery list records file used by load/save.",
    )
    grocery_category: str = Field(
        default="Grocery",
        description="Category tag given to grocery items proposed from recipe shortfalls.",
    )
    log_level: str = Field(default="WARNING", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )

    model_config = ConfigDict(frozen=True)


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (pantry_path := _env("LARDER_PANTRY_PATH")):
        payload["pantry_path"] = Path(pantry_path)
    if (grocery_path := _env("LARDER_GROCERY_PATH")):
        payload["grocery_path"] = Path(grocery_path)
    if (grocery_category := _env("LARDER_GROCERY_CATEGORY")):
        payload["grocery_category"] = grocery_category
    if (log_level := _env("LARDER_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("LARDER_LOG_FORMAT")):
        payload["log_format"] = log_format
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
