"""Tool-specific test executors."""

from loadtest_runner.executors.base import ExecutorState, TestExecutor
from loadtest_runner.executors.manifest import ExecutorManifest

__all__ = ["ExecutorManifest", "ExecutorState", "TestExecutor"]
