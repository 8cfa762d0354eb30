# src/taskrun/core/dispatch.py

"""Route one command-line invocation to summary help, detail help or a task."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from .context import TaskContext
from .errors import UnknownTaskError
from .help import print_detail, print_summary
from .ports import TextSink
from .registry import TaskRegistry

logger = logging.getLogger(__name__)

HELP_ALIASES = frozenset({"help", "--help", "-h"})
EXIT_UNKNOWN_TASK = 1


def is_help(arg: str | None) -> bool:
    return arg in HELP_ALIASES


def run_task(
    registry: TaskRegistry,
    task_name: str,
    *args: str,
    out: TextSink | None = None,
    err: TextSink | None = None,
) -> object:
    """
    Run one task by name, or print its detail help if args[0] is a help alias.

    Exceptions raised by the task body propagate unchanged.
    """
    descriptor = registry.get(task_name)
    if descriptor is None:
        raise UnknownTaskError(task_name)

    if args and is_help(args[0]):
        logger.debug("Detail help for task %r", task_name)
        print_detail(descriptor, out=out)
        return None

    logger.debug("Running task %r with %d arg(s)", task_name, len(args))
    if descriptor.pass_context:
        ctx = TaskContext(registry=registry, out=out, err=err)
        return descriptor(ctx, *args)
    return descriptor(*args)


def dispatch(
    registry: TaskRegistry,
    task_name: str | None,
    args: Sequence[str] = (),
    *,
    out: TextSink | None = None,
    err: TextSink | None = None,
) -> None:
    """
    Handle `<task_name> <args...>` against `registry`.

    - no task name or a help alias -> summary help
    - unknown task -> "Unrecognized task: <name>" on err, SystemExit(1)
    - `<task> help|--help|-h ...` -> detail help for that task
    - otherwise the task is called with args
    """
    if task_name is None or is_help(task_name):
        logger.debug("Summary help for %d task(s)", len(registry))
        print_summary(registry, out=out)
        return

    if task_name not in registry:
        logger.warning("Unrecognized task %r", task_name)
        (err or sys.stderr).write(f"Unrecognized task: {task_name}\n")
        raise SystemExit(EXIT_UNKNOWN_TASK)

    run_task(registry, task_name, *args, out=out, err=err)
