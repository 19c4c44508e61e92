"""Selection of the result parser matching a test location."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from loadtest_runner.exceptions import (
    ParserFactoryInitializationError,
    ParserInitializationError,
)
from loadtest_runner.models.scenario import TestScenario
from loadtest_runner.parsers.base import ResultParser
from loadtest_runner.parsers.loading import load_parser_manifests, sort_manifests
from loadtest_runner.parsers.manifest import ParserManifest

log = logging.getLogger(__name__)


def list_artifacts(location: Path) -> Sequence[Path]:
    """List files at ``location`` and one directory below, relative to it.

    Subdirectories that cannot be read are skipped; only failing to list
    ``location`` itself raises.
    """
    listing: list[Path] = []
    for entry in location.iterdir():
        if entry.is_file():
            listing.append(entry.relative_to(location))
        elif entry.is_dir():
            try:
                children = [child for child in entry.iterdir() if child.is_file()]
            except OSError as e:
                log.warning("Skipping unreadable directory %s: %s", entry, e)
                continue
            listing.extend(child.relative_to(location) for child in children)
    return sorted(listing)


@dataclass(frozen=True, kw_only=True)
class ResultParserFactory:
    """Chooses the parser for the artifacts found in one test location."""

    location: Path
    listing: Sequence[Path]
    manifests: Sequence[ParserManifest]

    @classmethod
    def for_location(
        cls,
        location: Path | str,
        manifests: Sequence[ParserManifest] | None = None,
    ) -> "ResultParserFactory":
        """Create a factory for ``location``.

        Args:
            location: Directory the tool wrote its artifacts to
            manifests: Parser manifests to choose from (default: all registered)

        Raises:
            ParserFactoryInitializationError: If the location cannot be read

        """
        location = Path(location)
        try:
            listing = list_artifacts(location)
        except OSError as e:
            raise ParserFactoryInitializationError(
                f"Unable to read test location {location}: {e}"
            ) from e

        manifests = (
            load_parser_manifests() if manifests is None else sort_manifests(manifests)
        )

        return cls(location=location, listing=listing, manifests=manifests)

    def get_parser(
        self, scenario: TestScenario, location: Path | str | None = None
    ) -> ResultParser | None:
        """Return the parser for the first recognized artifact, or None.

        Raises:
            ParserInitializationError: If the matched parser cannot be created

        """
        base = Path(location) if location is not None else self.location

        for manifest in self.manifests:
            if (artifact := manifest.recognize(self.listing)) is None:
                continue

            log.info("Using %s parser for %s", manifest.key, base / artifact)
            try:
                return manifest.parser_factory(scenario, base / artifact)
            except ParserInitializationError:
                raise
            except Exception as e:
                raise ParserInitializationError(
                    f"Unable to initialize {manifest.key} parser for "
                    f"{base / artifact}: {e}"
                ) from e

        log.info("No result parser recognized the artifacts in %s", base)
        return None
