# tests/conftest.py

from __future__ import annotations

import io

import pytest

from fakes import RecordingTask
from taskrun.config import get_settings
from taskrun.core.registry import TaskDescriptor, TaskRegistry


@pytest.fixture()
def hello_task() -> RecordingTask:
    return RecordingTask()


@pytest.fixture()
def goodbye_task() -> RecordingTask:
    return RecordingTask()


@pytest.fixture()
def registry(hello_task: RecordingTask, goodbye_task: RecordingTask) -> TaskRegistry:
    """
    Two-task registry built in reverse alphabetical order on purpose:
    help output must not depend on insertion order.
    """
    return TaskRegistry(
        {
            "hello": TaskDescriptor(
                name="hello",
                fn=hello_task,
                doc="Prints a friendly greeting.\n\n   To be specific, the greeting is 'hello.'",
            ),
            "goodbye": TaskDescriptor(name="goodbye", fn=goodbye_task, doc="Prints a farewell."),
        }
    )


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def err() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Drop TASKRUN_* variables and the cached Settings for the duration of a test."""
    for name in ("TASKRUN_LOG_LEVEL", "TASKRUN_LOG_DIR", "TASKRUN_TASKS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
