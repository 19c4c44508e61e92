"""Parser manifest definition for the plugin system."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from loadtest_runner.models.scenario import TestScenario
from loadtest_runner.parsers.base import ResultParser

Recognizer: TypeAlias = Callable[[Sequence[Path]], Path | None]


@dataclass(frozen=True, kw_only=True)
class ParserManifest:
    """Manifest describing a result parser plugin.

    ``recognize`` receives the relative paths of files found in a test location
    and returns the artifact it would parse, or None. ``parser_factory`` builds
    the parser for that artifact. Lower ``priority`` values are tried first.
    """

    key: str
    recognize: Recognizer
    parser_factory: Callable[[TestScenario, Path], ResultParser]
    priority: int = 100
