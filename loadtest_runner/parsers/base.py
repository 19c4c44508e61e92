"""Abstract base class for result parsers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from loadtest_runner.models.result import ParsedResult, SampleResult
from loadtest_runner.models.scenario import Status, TestScenario

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ResultParser(ABC):
    """Abstract base for format-specific result parsers.

    Subclasses extract samples from their artifact; the base class turns them
    into a ``ParsedResult`` and hands it to the scenario. If extraction raises,
    the scenario is left untouched.
    """

    format_key: ClassVar[str]

    scenario: TestScenario
    artifact: Path

    @abstractmethod
    def extract_samples(self) -> Sequence[SampleResult]:
        """Read the artifact and return every sample it reports.

        Raises:
            ResultParserError: If the artifact cannot be read or is invalid

        """

    def parse_results(self) -> ParsedResult:
        """Parse the artifact and record the outcome on the scenario."""
        log.info(
            "Parsing %s results for scenario %s from %s",
            self.format_key,
            self.scenario.name,
            self.artifact,
        )
        result = ParsedResult(format=self.format_key, samples=self.extract_samples())

        self.scenario.result = result
        self.scenario.status = Status.FAIL if result.failed_count else Status.SUCCESS

        log.info(
            "Scenario %s: %d sample(s), %d failed -> %s",
            self.scenario.name,
            result.total_count,
            result.failed_count,
            self.scenario.status,
        )
        return result
