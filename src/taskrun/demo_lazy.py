# src/taskrun/demo_lazy.py

"""Lazily imported by the `env` demo task."""

from __future__ import annotations

import os


def show_env(*names: str) -> None:
    """Prints environment variables (all TASKRUN_* ones when no names are given)."""
    keys = names or sorted(k for k in os.environ if k.startswith("TASKRUN_"))
    for key in keys:
        print(f"{key}={os.environ.get(key, '')}")
