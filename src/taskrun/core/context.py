# src/taskrun/core/context.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TextSink
from .registry import TaskRegistry


@dataclass(slots=True)
class TaskContext:
    """
    Handed to tasks registered with pass_context=True.

    Carries the registry of the current invocation so a task can run its
    siblings without any module-level state.
    """

    registry: TaskRegistry
    out: TextSink | None = None
    err: TextSink | None = None

    def run(self, name: str, *args: str) -> object:
        """Run a sibling task; raises UnknownTaskError if `name` is not registered."""
        from .dispatch import run_task

        return run_task(self.registry, name, *args, out=self.out, err=self.err)
