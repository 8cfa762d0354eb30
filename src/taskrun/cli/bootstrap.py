# src/taskrun/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root" for registries: it turns references
like "tasks:tasks" into a TaskRegistry. The core never imports task modules
itself.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.errors import TaskLoadError
from ..core.registry import LazyTask, TaskDescriptor, TaskRegistry

logger = logging.getLogger(__name__)

DEFAULT_ATTR = "tasks"


def split_refs(raw: str) -> list[str]:
    """Split a comma-separated list of registry references."""
    return [p.strip() for p in raw.split(",") if p.strip()]


def _as_registry(ref: str, value: Any) -> TaskRegistry:
    if isinstance(value, TaskRegistry):
        return value
    if isinstance(value, Mapping):
        try:
            return TaskRegistry(value)
        except (TypeError, ValueError) as e:
            raise TaskLoadError(f"{ref!r} is not a valid task mapping: {e}") from e
    if isinstance(value, (TaskDescriptor, LazyTask)):
        raise TaskLoadError(f"{ref!r} is a single task, expected a task mapping")
    if callable(value):
        # Factory: build the registry on demand (e.g. to inject configuration).
        return _as_registry(ref, value())
    raise TaskLoadError(f"{ref!r} resolved to {type(value).__name__}, expected a task mapping")


def load_registry(ref: str) -> TaskRegistry:
    """
    Load a registry from "package.module:attr" (or "package.module", which
    means attribute `tasks`).
    """
    module_name, _, attr = ref.partition(":")
    module_name = module_name.strip()
    attr = attr.strip() or DEFAULT_ATTR
    if not module_name:
        raise TaskLoadError(f"Invalid registry reference {ref!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TaskLoadError(f"Cannot import task module {module_name!r}: {e}") from e

    try:
        value = getattr(module, attr)
    except AttributeError as e:
        raise TaskLoadError(f"Module {module_name!r} has no attribute {attr!r}") from e

    registry = _as_registry(ref, value)
    logger.debug("Loaded %d task(s) from %s", len(registry), ref)
    return registry


def load_registries(refs: Iterable[str]) -> TaskRegistry:
    """Load several references and merge them in order (later ones win on collisions)."""
    merged = TaskRegistry()
    for ref in refs:
        merged = merged.merge(load_registry(ref))
    return merged
