"""Loading of executor plugins from entry points."""

from importlib.metadata import entry_points

from loadtest_runner.exceptions import PluginNotFoundError
from loadtest_runner.executors.manifest import ExecutorManifest

ENTRY_POINT_GROUP = "loadtest_runner.executors"


def load_executor_manifest(key: str) -> ExecutorManifest:
    """Load an executor manifest by key.

    Args:
        key: The executor key as registered in pyproject.toml (e.g., "jmeter")

    Returns:
        The executor manifest instance

    Raises:
        PluginNotFoundError: If no executor with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: ExecutorManifest = entry.load()
            return manifest

    available = [e.name for e in entries]
    raise PluginNotFoundError(
        f"Executor '{key}' not found. Available executors: {available}"
    )
