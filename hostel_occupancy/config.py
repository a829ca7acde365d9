"""Application configuration loaded from config.yaml + environment variables."""

from __future__ import annotations

import os

import yaml
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings

_CONFIG_PATH = Path(os.environ.get(
    "HOSTEL_OCCUPANCY_CONFIG",
    Path(__file__).resolve().parent.parent / "config.yaml",
))


def _load_yaml() -> dict:
    if _CONFIG_PATH.exists():
        with open(_CONFIG_PATH) as f:
            return yaml.safe_load(f) or {}
    return {}


_yaml = _load_yaml()


class OccupancyConfig(BaseSettings):
    # None means rooms take any number of occupants
    room_occupant_limit: int | None = Field(default=None, gt=0)


class LoggingConfig(BaseSettings):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///data/occupancy.db"
    occupancy: OccupancyConfig = Field(default_factory=OccupancyConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "HOSTEL_"}


def get_settings() -> Settings:
    """Build Settings by merging YAML defaults with env overrides."""
    y = _yaml
    occ = OccupancyConfig(**y.get("occupancy", {}))
    log = LoggingConfig(**y.get("logging", {}))
    overrides = {}
    db_url = y.get("database", {}).get("url")
    if db_url:
        overrides["database_url"] = db_url
    return Settings(occupancy=occ, logging=log, **overrides)
