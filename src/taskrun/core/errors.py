# src/taskrun/core/errors.py

from __future__ import annotations


class TaskrunError(Exception):
    """Base class for errors raised by taskrun itself (never by task bodies)."""


class TaskLoadError(TaskrunError):
    """A lazy task or a registry reference could not be resolved."""


class UnknownTaskError(TaskrunError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unrecognized task: {name}")
        self.name = name
