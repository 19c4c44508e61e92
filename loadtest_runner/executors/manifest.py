"""Executor manifest definition for the plugin system."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from loadtest_runner.executors.base import TestExecutor


@dataclass(frozen=True, kw_only=True)
class ExecutorManifest:
    """Manifest describing an executor plugin.

    The factory receives the environment the executor should read its tool
    settings from.
    """

    tool_name: str
    executor_factory: Callable[[Mapping[str, str]], TestExecutor]
