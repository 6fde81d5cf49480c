"""Load application settings from a TOML file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any
import tomllib

from db import DEFAULT_DB_URL

CONFIG_PATH_ENV_VAR = "PARK_VOTING_CONFIG"
LOG_LEVEL_ENV_VAR = "PARK_VOTING_LOG_LEVEL"
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "park-images.json"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Settings shared by the API server and the CLI jobs."""

    database_url: str = DEFAULT_DB_URL
    catalog_path: Path = DEFAULT_CATALOG_PATH
    host: str = "127.0.0.1"
    port: int = 3001
    recent_votes_limit: int = 10
    rankings_limit: int | None = 20
    log_level: str = "INFO"
    file_path: Path | None = None

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_app_config(config_path: Path | None = None) -> AppConfig:
    """Load settings from ``config_path`` or ``$PARK_VOTING_CONFIG``.

    With neither set the defaults are returned. The log level may be
    overridden with ``$PARK_VOTING_LOG_LEVEL``.
    """
    if config_path is None:
        env_path = os.getenv(CONFIG_PATH_ENV_VAR)
        config_path = Path(env_path) if env_path else None

    config = AppConfig() if config_path is None else _read_config_file(config_path)

    level_override = os.getenv(LOG_LEVEL_ENV_VAR)
    if level_override:
        level = level_override.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"{LOG_LEVEL_ENV_VAR} must be one of {_LOG_LEVELS}, got {level_override!r}")
        config = replace(config, log_level=level)
    return config


def _read_config_file(config_path: Path) -> AppConfig:
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    if not config_path.is_file():
        raise ValueError(f"Config path is not a file: {config_path}")

    with config_path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_app_config(raw, config_path)


def _parse_app_config(raw: dict[str, Any], file_path: Path) -> AppConfig:
    database_raw = raw.get("database", {})
    catalog_raw = raw.get("catalog", {})
    api_raw = raw.get("api", {})
    logging_raw = raw.get("logging", {})

    database_url = str(database_raw.get("url", DEFAULT_DB_URL)).strip()
    if not database_url:
        raise ValueError(f"{file_path}: [database].url cannot be empty")

    catalog_value = catalog_raw.get("path")
    if catalog_value is None:
        catalog_path = DEFAULT_CATALOG_PATH
    else:
        catalog_path = Path(str(catalog_value))
        if not catalog_path.is_absolute():
            catalog_path = (file_path.parent / catalog_path).resolve()

    rankings_limit_value = _parse_int(api_raw, "rankings_limit", 20, file_path=file_path)

    config = AppConfig(
        database_url=database_url,
        catalog_path=catalog_path,
        host=str(api_raw.get("host", "127.0.0.1")),
        port=_parse_int(api_raw, "port", 3001, file_path=file_path),
        recent_votes_limit=_parse_int(api_raw, "recent_votes_limit", 10, file_path=file_path),
        rankings_limit=None if rankings_limit_value == 0 else rankings_limit_value,
        log_level=str(logging_raw.get("level", "INFO")).strip().upper(),
        file_path=file_path,
    )
    _validate_config(file_path=file_path, config=config)
    return config


def _parse_int(
    raw: dict[str, Any], key: str, default: int, *, file_path: Path, section: str = "api"
) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool):
        raise ValueError(f"{file_path}: [{section}].{key} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{file_path}: [{section}].{key} must be an integer") from exc


def _validate_config(*, file_path: Path, config: AppConfig) -> None:
    if config.port <= 0 or config.port > 65535:
        raise ValueError(f"{file_path}: [api].port must be between 1 and 65535")
    if config.recent_votes_limit <= 0:
        raise ValueError(f"{file_path}: [api].recent_votes_limit must be > 0")
    if config.rankings_limit is not None and config.rankings_limit < 0:
        raise ValueError(f"{file_path}: [api].rankings_limit must be >= 0")
    if config.log_level not in _LOG_LEVELS:
        raise ValueError(f"{file_path}: [logging].level must be one of {_LOG_LEVELS}")


__all__ = ["AppConfig", "load_app_config"]
