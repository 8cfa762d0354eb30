# src/taskrun/core/registry.py

"""
Task registry: name -> TaskDescriptor.

A registry is built once (from a literal dict, a merge of several dicts, or a
module loaded by reference) and treated as read-only while a command runs.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from .errors import TaskLoadError
from .ports import ContextTaskFn, TaskFn
from .text import split_lines

logger = logging.getLogger(__name__)


class LazyTask:
    """
    Callable placeholder for "package.module:attr".

    The module is imported on first use only, so listing tasks or printing help
    never pays for heavy task dependencies. The resolved callable is cached.
    """

    __slots__ = ("ref", "_resolved")

    def __init__(self, ref: str) -> None:
        module_name, sep, attr_path = ref.partition(":")
        if not module_name or not sep or not attr_path:
            raise ValueError(f"Lazy task reference must look like 'module:attr', got {ref!r}")
        self.ref = ref
        self._resolved: Callable[..., Any] | None = None

    @property
    def resolved(self) -> bool:
        return self._resolved is not None

    def resolve(self) -> Callable[..., Any]:
        if self._resolved is not None:
            return self._resolved

        module_name, _, attr_path = self.ref.partition(":")
        logger.debug("Resolving lazy task %s", self.ref)
        try:
            target: Any = importlib.import_module(module_name)
        except ImportError as e:
            raise TaskLoadError(f"Cannot import module {module_name!r} for task {self.ref!r}") from e

        for attr in attr_path.split("."):
            try:
                target = getattr(target, attr)
            except AttributeError as e:
                raise TaskLoadError(f"{self.ref!r}: no attribute {attr!r}") from e

        if not callable(target):
            raise TaskLoadError(f"{self.ref!r} resolved to a non-callable {type(target).__name__}")

        self._resolved = target
        return target

    def __call__(self, *args: Any) -> Any:
        return self.resolve()(*args)

    def __repr__(self) -> str:
        return f"LazyTask({self.ref!r})"


@dataclass(frozen=True, slots=True)
class TaskDescriptor:
    name: str
    fn: TaskFn | ContextTaskFn
    doc: str | None = None
    # When set, fn is called as fn(ctx, *args) with a TaskContext.
    pass_context: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Task name must be a non-empty string, got {self.name!r}")
        if not callable(self.fn):
            raise TypeError(f"Task {self.name!r}: fn must be callable")

    @property
    def summary(self) -> str:
        lines = split_lines(self.doc)
        return lines[0] if lines else ""

    def __call__(self, *args: Any) -> Any:
        return self.fn(*args)


TaskSpec = Union[TaskDescriptor, LazyTask, str, TaskFn]


def _to_descriptor(name: str, spec: TaskSpec) -> TaskDescriptor:
    if isinstance(spec, TaskDescriptor):
        if spec.name == name:
            return spec
        # Registered under a different key (alias); the key is the public name.
        return TaskDescriptor(name=name, fn=spec.fn, doc=spec.doc, pass_context=spec.pass_context)
    if isinstance(spec, str):
        return TaskDescriptor(name=name, fn=LazyTask(spec))
    if isinstance(spec, LazyTask):
        return TaskDescriptor(name=name, fn=spec)
    if callable(spec):
        return TaskDescriptor(name=name, fn=spec, doc=getattr(spec, "__doc__", None))
    raise TypeError(f"Task {name!r}: unsupported task value of type {type(spec).__name__}")


class TaskRegistry(Mapping[str, TaskDescriptor]):
    """Immutable mapping of task names to descriptors."""

    __slots__ = ("_tasks",)

    def __init__(self, tasks: Mapping[str, TaskSpec] | None = None) -> None:
        built: dict[str, TaskDescriptor] = {}
        for name, spec in (tasks or {}).items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Task name must be a non-empty string, got {name!r}")
            built[name] = _to_descriptor(name, spec)
        self._tasks = built

    @classmethod
    def from_tasks(cls, *descriptors: TaskDescriptor) -> TaskRegistry:
        return cls({d.name: d for d in descriptors})

    def __getitem__(self, name: str) -> TaskDescriptor:
        return self._tasks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def names(self) -> list[str]:
        return sorted(self._tasks)

    def merge(self, *others: Mapping[str, TaskSpec]) -> TaskRegistry:
        """
        Return a new registry with `others` layered on top.

        Name collisions: the later registry wins.
        """
        merged: dict[str, TaskSpec] = dict(self._tasks)
        for other in others:
            for name, spec in other.items():
                if name in merged:
                    logger.debug("Task %r overridden during merge", name)
                merged[name] = spec
        return TaskRegistry(merged)

    def __or__(self, other: Mapping[str, TaskSpec]) -> TaskRegistry:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self.merge(other)

    def __repr__(self) -> str:
        return f"TaskRegistry({self.names()!r})"


def task(
    name: str | None = None,
    *,
    doc: str | None = None,
    pass_context: bool = False,
) -> Callable[[Callable[..., Any]], TaskDescriptor]:
    """
    Decorator turning a function into a TaskDescriptor.

    The name defaults to the function name with underscores replaced by dashes;
    the documentation defaults to the function's docstring.

        @task()
        def build_docs(*args): ...
    """

    def decorator(fn: Callable[..., Any]) -> TaskDescriptor:
        return TaskDescriptor(
            name=name or fn.__name__.replace("_", "-"),
            fn=fn,
            doc=doc if doc is not None else fn.__doc__,
            pass_context=pass_context,
        )

    return decorator
