"""JMeter JTL parser manifest."""

from collections.abc import Sequence
from pathlib import Path

from loadtest_runner.parsers.jtl.parser import JTLResultParser
from loadtest_runner.parsers.manifest import ParserManifest

PREFERRED_ARTIFACT = "results.jtl"


def recognize_jtl(listing: Sequence[Path]) -> Path | None:
    """Pick the JTL file in the test location, preferring results.jtl."""
    candidates = sorted(
        path for path in listing if len(path.parts) == 1 and path.suffix == ".jtl"
    )
    for path in candidates:
        if path.name == PREFERRED_ARTIFACT:
            return path
    return candidates[0] if candidates else None


jtl_manifest = ParserManifest(
    key=JTLResultParser.format_key,
    recognize=recognize_jtl,
    parser_factory=JTLResultParser.open,
    priority=10,
)
