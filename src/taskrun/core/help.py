# src/taskrun/core/help.py

"""
Help output: the summary table for a whole registry and the detail view for
one task.

Formatting functions return strings; print_* functions write them to a stream
(stdout by default). Help text is user output, not logging.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping

from .ports import TextSink
from .registry import TaskDescriptor
from .text import split_lines

HELP_HEADER = "Available commands:"
EMPTY_REGISTRY_MESSAGE = "No commands available."


def first_line(doc: str | None) -> str:
    lines = split_lines(doc)
    return lines[0] if lines else ""


def format_summary(registry: Mapping[str, TaskDescriptor]) -> str:
    lines = [HELP_HEADER, ""]
    if not registry:
        lines.append(EMPTY_REGISTRY_MESSAGE)
        return "\n".join(lines) + "\n"

    col_width = max(len(name) for name in registry)
    for name in sorted(registry):
        summary = first_line(registry[name].doc)
        suffix = f" - {summary}" if summary else ""
        lines.append(f"  {name.ljust(col_width)}{suffix}")
    return "\n".join(lines) + "\n"


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def reflow_doc(doc: str | None) -> str:
    """
    Remove the common indentation of every line after the first.

    Docstrings are usually written indented inside source code while their
    first line starts right after the opening quotes. Whitespace-only lines do
    not count towards the common indent but are still cut by it (clipped to
    their own length).
    """
    lines = split_lines(doc)
    if not lines:
        return ""

    head, rest = lines[0], lines[1:]
    counted = [_leading_spaces(line) for line in rest if line.strip()]
    if counted:
        indent = min(counted)
        rest = [line[min(indent, len(line)):] for line in rest]
    return "\n".join([head, *rest])


def format_detail(descriptor: TaskDescriptor) -> str:
    return reflow_doc(descriptor.doc) + "\n"


def print_summary(registry: Mapping[str, TaskDescriptor], out: TextSink | None = None) -> None:
    (out or sys.stdout).write(format_summary(registry))


def print_detail(descriptor: TaskDescriptor, out: TextSink | None = None) -> None:
    (out or sys.stdout).write(format_detail(descriptor))
