# src/taskrun/demo.py

"""
Example task collection.

    taskrun taskrun.demo
    taskrun taskrun.demo hello --help
"""

from __future__ import annotations

from .core.context import TaskContext
from .core.registry import LazyTask, TaskDescriptor, TaskRegistry, task


@task()
def hello(*args: str) -> None:
    """Prints a friendly greeting.

    To be specific, the greeting is 'hello.'"""
    print("hello")


@task()
def goodbye(*args: str) -> None:
    """Prints a friendly farewell."""
    print("goodbye")


@task()
def echo(*args: str) -> None:
    """Prints its arguments separated by spaces."""
    print(" ".join(args))


@task(pass_context=True)
def greet_all(ctx: TaskContext, *args: str) -> None:
    """Runs hello, then goodbye."""
    ctx.run("hello")
    ctx.run("goodbye")


env = TaskDescriptor(
    name="env",
    # Imported only when the task actually runs.
    fn=LazyTask("taskrun.demo_lazy:show_env"),
    doc="Prints TASKRUN_* environment variables, or the ones named as args.",
)

tasks = TaskRegistry.from_tasks(hello, goodbye, echo, greet_all, env)
