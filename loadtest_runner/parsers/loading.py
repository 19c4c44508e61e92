"""Loading of result parser plugins from entry points."""

from collections.abc import Sequence
from importlib.metadata import entry_points

from loadtest_runner.parsers.manifest import ParserManifest

ENTRY_POINT_GROUP = "loadtest_runner.parsers"


def sort_manifests(manifests: Sequence[ParserManifest]) -> Sequence[ParserManifest]:
    """Order manifests the way the factory tries them: priority, then key."""
    return sorted(manifests, key=lambda manifest: (manifest.priority, manifest.key))


def load_parser_manifests() -> Sequence[ParserManifest]:
    """Load every registered parser manifest in selection order."""
    manifests: list[ParserManifest] = [
        entry.load() for entry in entry_points(group=ENTRY_POINT_GROUP)
    ]
    return sort_manifests(manifests)

