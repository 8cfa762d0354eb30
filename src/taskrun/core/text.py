# src/taskrun/core/text.py

from __future__ import annotations


def split_lines(text: str | None) -> list[str]:
    """
    Split on "\\n" or "\\r\\n" only, dropping trailing empty lines.

    Unlike str.splitlines(), form feeds and other Unicode line boundaries stay
    inside a line.
    """
    lines = [line[:-1] if line.endswith("\r") else line for line in (text or "").split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return lines
