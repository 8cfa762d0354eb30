# src/taskrun/__init__.py

"""Run named tasks from the command line and print help for them."""

from __future__ import annotations

from .core.dispatch import HELP_ALIASES, dispatch, run_task
from .core.registry import LazyTask, TaskDescriptor, TaskRegistry, task

__all__ = [
    "HELP_ALIASES",
    "LazyTask",
    "TaskDescriptor",
    "TaskRegistry",
    "dispatch",
    "run_task",
    "task",
]

__version__ = "0.1.0"
