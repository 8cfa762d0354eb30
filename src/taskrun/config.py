# src/taskrun/config.py

"""Settings loaded from environment variables (+ optional .env).

Only the CLI reads settings; the core (registry/dispatch/help) takes all of
its inputs as arguments.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASKRUN"

DEFAULT_TASKS_REF = "tasks:tasks"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_dir: Optional[Path]

    # ---- Registry ----
    default_tasks: str

    @staticmethod
    def from_env() -> "Settings":
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), None)
        default_tasks = _env(_k("TASKS"), DEFAULT_TASKS_REF).strip() or DEFAULT_TASKS_REF

        return Settings(
            log_level=log_level,
            log_dir=log_dir,
            default_tasks=default_tasks,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv(override=False)
    return Settings.from_env()
