from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:4321",
    "http://127.0.0.1:4321",
)
DEFAULT_MAX_CELLS = 4_000_000
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class AppSettings:
    log_level: str
    cors_origins: tuple[str, ...]
    max_cells: int


def load_app_settings() -> AppSettings:
    log_level = os.environ.get("BRANCHFILL_LOG_LEVEL", "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        logger.warning("Invalid BRANCHFILL_LOG_LEVEL value: %s. Falling back to 'INFO'.", log_level)
        log_level = "INFO"
    return AppSettings(
        log_level=log_level,
        cors_origins=_parse_origins(os.environ.get("BRANCHFILL_CORS_ORIGINS")),
        max_cells=_parse_positive_int("BRANCHFILL_MAX_CELLS", DEFAULT_MAX_CELLS),
    )


def _parse_origins(value: str | None) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_CORS_ORIGINS
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def _parse_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Invalid %s value: %s. Falling back to %d.", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Invalid %s value: %s. Falling back to %d.", name, raw, default)
        return default
    return value
