"""Parser for JUnit-style XML reports (surefire, TestNG, pytest)."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from loadtest_runner.exceptions import (
    JUnitResultParserError,
    ParserInitializationError,
    ResultParserError,
)
from loadtest_runner.models.result import SampleResult
from loadtest_runner.models.scenario import TestScenario
from loadtest_runner.parsers.base import ResultParser

log = logging.getLogger(__name__)

REPORT_PATTERN = "TEST-*.xml"
SUITE_TAGS = frozenset({"testsuite", "testsuites"})


@dataclass(kw_only=True)
class JUnitResultParser(ResultParser):
    """Parses every JUnit report next to the recognized artifact.

    Each ``<testcase>`` becomes one sample; skipped cases are left out.
    """

    format_key: ClassVar[str] = "junit-xml"

    reports: Sequence[Path] = field(default_factory=list)

    @classmethod
    def open(cls, scenario: TestScenario, artifact: Path) -> "JUnitResultParser":
        """Collect the sibling reports of ``artifact``.

        Raises:
            ParserInitializationError: If the report directory cannot be listed

        """
        try:
            reports = sorted(
                path
                for path in artifact.parent.glob(REPORT_PATTERN)
                if path.is_file()
            )
        except OSError as e:
            raise ParserInitializationError(
                f"Unable to list JUnit reports in {artifact.parent}: {e}"
            ) from e

        if not reports:
            raise ParserInitializationError(f"JUnit report {artifact} does not exist")

        log.debug("Found %d JUnit report(s) in %s", len(reports), artifact.parent)
        return cls(scenario=scenario, artifact=artifact, reports=reports)

    def extract_samples(self) -> Sequence[SampleResult]:
        samples = [
            sample
            for report in self.reports
            for sample in self._extract_report(report)
        ]
        if not samples:
            raise JUnitResultParserError(
                f"No executed test cases found in {self.artifact.parent}"
            )
        return samples

    def _extract_report(self, report: Path) -> Sequence[SampleResult]:
        try:
            root = ET.parse(report).getroot()
        except ET.ParseError as e:
            raise JUnitResultParserError(f"Malformed JUnit report {report}: {e}") from e
        except OSError as e:
            raise ResultParserError(f"Unable to read {report}: {e}") from e

        if root.tag not in SUITE_TAGS:
            raise JUnitResultParserError(
                f"Unexpected root element <{root.tag}> in {report}"
            )

        samples = []
        for case in root.iter("testcase"):
            if case.find("skipped") is not None:
                continue
            samples.append(self._sample_from_case(case, report))
        return samples

    def _sample_from_case(self, case: ET.Element, report: Path) -> SampleResult:
        name = case.get("name")
        if name is None:
            raise JUnitResultParserError(f"<testcase> without a name in {report}")

        classname = case.get("classname")
        problem = case.find("failure")
        if problem is None:
            problem = case.find("error")

        try:
            elapsed = round(float(case.get("time") or 0) * 1000)
        except (ValueError, OverflowError) as e:
            raise JUnitResultParserError(
                f"Invalid time {case.get('time')!r} for test case {name} in {report}"
            ) from e

        return SampleResult(
            label=f"{classname}.{name}" if classname else name,
            success=problem is None,
            elapsed=elapsed,
            failure_message=(
                None if problem is None else problem.get("message") or problem.tag
            ),
        )
