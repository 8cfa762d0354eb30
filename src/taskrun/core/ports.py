# src/taskrun/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher only needs "something callable with string args" and
"something it can write text to". Anything matching these Protocols works:
plain functions, LazyTask references, io.StringIO in tests, sys.stdout.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import TaskContext


class TaskFn(Protocol):
    """A task body: receives the leftover command-line args as strings."""
    def __call__(self, *args: str) -> object: ...


class ContextTaskFn(Protocol):
    """A task body that also wants the running registry (to call sibling tasks)."""
    def __call__(self, ctx: TaskContext, *args: str) -> object: ...


class TextSink(Protocol):
    def write(self, s: str, /) -> int: ...
