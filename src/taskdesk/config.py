# src/taskdesk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.errors import ValidationError
from .tasks.task_models import ListQuery, StatusFilter

logger = logging.getLogger(__name__)

ENV_PREFIX = "TASKDESK"

DEFAULT_BOARD_FILTERS = ["Not Started", "Completed"]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    # Comma separated only: status labels contain spaces ("Not Started").
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_board_filters(raw: list[str]) -> list[StatusFilter]:
    filters: list[StatusFilter] = []
    for item in raw:
        try:
            f = ListQuery.parse(item).status_filter
        except ValidationError:
            logger.warning("Ignoring unknown board filter %r", item)
            continue
        if f not in filters:
            filters.append(f)
    if not filters:
        return [ListQuery.parse(item).status_filter for item in DEFAULT_BOARD_FILTERS]
    return filters


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Board ----
    board_filters: list[StatusFilter]
    demo_seed: bool
    max_title_width: int

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdesk").strip() or "taskdesk"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        board_filters = parse_board_filters(_env_list(_k("BOARD_FILTERS"), DEFAULT_BOARD_FILTERS))
        demo_seed = _env_bool(_k("DEMO_SEED"), True)
        max_title_width = max(10, _env_int(_k("MAX_TITLE_WIDTH"), 48))

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdesk"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            board_filters=board_filters,
            demo_seed=demo_seed,
            max_title_width=max_title_width,
            data_dir=data_dir,
        )


# Load .env locally (never overrides real environment variables).
load_dotenv(override=False)

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
