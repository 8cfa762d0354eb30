# tests/test_registry.py

from __future__ import annotations

import sys
import types

import pytest

from fakes import RecordingTask
from taskrun.core.errors import TaskLoadError
from taskrun.core.registry import LazyTask, TaskDescriptor, TaskRegistry, task


def test_registry_accepts_plain_callables_and_uses_their_docstring() -> None:
    def build(*args):
        """Builds things.

        Extended text."""

    reg = TaskRegistry({"build": build})

    assert reg["build"].name == "build"
    assert reg["build"].summary == "Builds things."
    assert reg["build"].doc == build.__doc__


def test_registry_rejects_empty_names() -> None:
    with pytest.raises(ValueError):
        TaskRegistry({"": RecordingTask()})


def test_registry_is_read_only(registry: TaskRegistry) -> None:
    with pytest.raises(TypeError):
        registry["new"] = RecordingTask()  # type: ignore[index]


def test_names_are_sorted(registry: TaskRegistry) -> None:
    assert list(registry) == ["hello", "goodbye"]
    assert registry.names() == ["goodbye", "hello"]


def test_merge_last_writer_wins(registry: TaskRegistry) -> None:
    replacement = RecordingTask()
    merged = registry | {"hello": TaskDescriptor(name="hello", fn=replacement, doc="Other.")}

    assert merged["hello"].fn is replacement
    assert merged["hello"].summary == "Other."
    assert "goodbye" in merged
    # the left-hand registry is untouched
    assert registry["hello"].summary == "Prints a friendly greeting."


def test_descriptor_registered_under_alias_takes_the_key_as_name() -> None:
    d = TaskDescriptor(name="hello", fn=RecordingTask(), doc="Hi.")
    reg = TaskRegistry({"hi": d})
    assert reg["hi"].name == "hi"
    assert reg["hi"].doc == "Hi."


def test_task_decorator_defaults() -> None:
    @task()
    def build_docs(*args: str) -> None:
        """Builds the docs."""

    assert isinstance(build_docs, TaskDescriptor)
    assert build_docs.name == "build-docs"
    assert build_docs.summary == "Builds the docs."
    assert build_docs.pass_context is False


def test_summary_is_empty_without_doc() -> None:
    assert TaskDescriptor(name="x", fn=RecordingTask()).summary == ""
    assert TaskDescriptor(name="x", fn=RecordingTask(), doc="").summary == ""


@pytest.fixture()
def lazy_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType("taskrun_test_lazy_mod")
    module.calls = []  # type: ignore[attr-defined]

    def run(*args: str) -> None:
        module.calls.append(args)  # type: ignore[attr-defined]

    module.run = run  # type: ignore[attr-defined]
    module.ns = types.SimpleNamespace(inner=run)  # type: ignore[attr-defined]
    module.not_callable = 42  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, module.__name__, module)
    return module


def test_lazy_task_resolves_once_and_caches(lazy_module: types.ModuleType) -> None:
    lazy = LazyTask("taskrun_test_lazy_mod:run")
    assert not lazy.resolved

    lazy("a", "b")
    first = lazy.resolve()
    lazy_module.run = lambda *a: None  # type: ignore[attr-defined]

    assert lazy.resolve() is first
    assert lazy_module.calls == [("a", "b")]  # type: ignore[attr-defined]


def test_lazy_task_dotted_attribute(lazy_module: types.ModuleType) -> None:
    LazyTask("taskrun_test_lazy_mod:ns.inner")("x")
    assert lazy_module.calls == [("x",)]  # type: ignore[attr-defined]


def test_lazy_task_errors(lazy_module: types.ModuleType) -> None:
    with pytest.raises(ValueError):
        LazyTask("no_colon_here")

    with pytest.raises(TaskLoadError):
        LazyTask("taskrun_test_lazy_mod:missing").resolve()

    with pytest.raises(TaskLoadError):
        LazyTask("taskrun_test_lazy_mod:not_callable").resolve()

    with pytest.raises(TaskLoadError):
        LazyTask("taskrun_no_such_module_xyz:run").resolve()


def test_string_values_become_lazy_tasks(lazy_module: types.ModuleType) -> None:
    reg = TaskRegistry({"run": "taskrun_test_lazy_mod:run"})
    assert isinstance(reg["run"].fn, LazyTask)
    assert not reg["run"].fn.resolved

    reg["run"]("1")
    assert lazy_module.calls == [("1",)]  # type: ignore[attr-defined]
