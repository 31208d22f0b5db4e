"""
jsv/config.py

Environment-driven configuration helpers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_SCHEMA_PATH = "./schema.json"


def load_env_files(project_root: Path | None = None) -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    root = project_root or Path.cwd()
    for filename in (".env", ".env.local"):
        env_path = root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class ValidationSettings:
    """
    Runtime settings for CSV validation runs.
    """

    default_schema_path: str = DEFAULT_SCHEMA_PATH
    log_violations: bool = False
    abort_on_malformed: bool = False
    max_reported_records: int = 500


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """
    Return cached validation settings from environment variables.
    """

    return ValidationSettings(
        default_schema_path=_get_str_env("JSV_DEFAULT_SCHEMA_PATH", DEFAULT_SCHEMA_PATH),
        log_violations=_get_bool_env("JSV_LOG_VIOLATIONS", False),
        abort_on_malformed=_get_bool_env("JSV_ABORT_ON_MALFORMED", False),
        max_reported_records=max(1, _get_int_env("JSV_MAX_REPORTED_RECORDS", 500)),
    )


def configure_logging() -> None:
    """
    Configure root logging once for the process.
    """

    log_level = _get_str_env("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
