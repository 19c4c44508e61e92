"""JUnit XML parser manifest."""

from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path

from loadtest_runner.parsers.junit.parser import REPORT_PATTERN, JUnitResultParser
from loadtest_runner.parsers.manifest import ParserManifest

REPORT_DIRECTORIES = frozenset({"surefire-reports", "test-results"})


def recognize_junit(listing: Sequence[Path]) -> Path | None:
    """Pick the first JUnit report at the top level or in a report directory."""
    candidates = sorted(
        path
        for path in listing
        if fnmatch(path.name, REPORT_PATTERN)
        and (len(path.parts) == 1 or str(path.parent) in REPORT_DIRECTORIES)
    )
    return candidates[0] if candidates else None


junit_manifest = ParserManifest(
    key=JUnitResultParser.format_key,
    recognize=recognize_junit,
    parser_factory=JUnitResultParser.open,
    priority=50,
)
