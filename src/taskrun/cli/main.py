# src/taskrun/cli/main.py

"""
CLI entrypoint.

    taskrun <registry-ref>[,<registry-ref>...] [task] [args...]

Initializes logging, loads the registry, then hands the rest of argv to the
dispatcher. With no arguments at all the configured default registry is used.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..core.dispatch import dispatch
from ..core.errors import TaskLoadError
from ..logging_setup import level_from_name, setup_logging
from .bootstrap import load_registries, split_refs

logger = logging.getLogger(__name__)

EXIT_LOAD_ERROR = 2


def _ensure_cwd_importable() -> None:
    # Console scripts don't put the working directory on sys.path; task
    # modules like ./tasks.py live there.
    cwd = os.getcwd()
    if cwd not in sys.path and "" not in sys.path:
        sys.path.insert(0, cwd)


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))

    args = list(sys.argv[1:] if argv is None else argv)
    refs_arg = args[0] if args else settings.default_tasks
    task_name = args[1] if len(args) > 1 else None
    task_args = args[2:]

    _ensure_cwd_importable()
    try:
        registry = load_registries(split_refs(refs_arg))
    except TaskLoadError as e:
        logger.debug("Registry load failed", exc_info=True)
        print(f"Cannot load tasks from {refs_arg!r}: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    try:
        dispatch(registry, task_name, task_args)
    except TaskLoadError as e:
        # A lazy task failed to import; errors raised by task bodies pass through.
        logger.debug("Lazy task load failed", exc_info=True)
        print(f"Cannot load task {task_name!r}: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
