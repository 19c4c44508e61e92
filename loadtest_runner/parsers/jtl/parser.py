"""Parser for JMeter JTL result files (XML and CSV save formats)."""

import csv
import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Literal, TypeAlias

from loadtest_runner.exceptions import (
    JTLResultParserError,
    ParserInitializationError,
    ResultParserError,
)
from loadtest_runner.models.result import SampleResult
from loadtest_runner.models.scenario import TestScenario
from loadtest_runner.parsers.base import ResultParser

log = logging.getLogger(__name__)

JTLFormat: TypeAlias = Literal["xml", "csv"]

SAMPLE_TAGS = frozenset({"httpSample", "sample"})
REQUIRED_CSV_COLUMNS = ("timeStamp", "elapsed", "label", "success")
HEAD_SIZE = 4096


@dataclass(kw_only=True)
class JTLResultParser(ResultParser):
    """Parses JMeter sample results into normalized samples."""

    format_key: ClassVar[str] = "jtl"

    jtl_format: JTLFormat

    @classmethod
    def open(cls, scenario: TestScenario, artifact: Path) -> "JTLResultParser":
        """Create a parser after sniffing the save format of ``artifact``.

        Raises:
            ParserInitializationError: If the file cannot be opened or decoded

        """
        try:
            with artifact.open(encoding="utf-8-sig") as handle:
                head = handle.read(HEAD_SIZE)
        except (OSError, UnicodeDecodeError) as e:
            raise ParserInitializationError(
                f"Unable to open JMeter results file {artifact}: {e}"
            ) from e

        jtl_format: JTLFormat = "xml" if head.lstrip().startswith("<") else "csv"
        log.debug("Detected %s JTL format for %s", jtl_format, artifact)
        return cls(scenario=scenario, artifact=artifact, jtl_format=jtl_format)

    def extract_samples(self) -> Sequence[SampleResult]:
        """Read all top-level samples from the JTL file."""
        if self.jtl_format == "xml":
            samples = self._extract_xml()
        else:
            samples = self._extract_csv()

        if not samples:
            raise JTLResultParserError(f"No samples found in {self.artifact}")
        return samples

    def _extract_xml(self) -> Sequence[SampleResult]:
        try:
            root = ET.parse(self.artifact).getroot()
        except ET.ParseError as e:
            raise JTLResultParserError(
                f"Malformed XML in JMeter results file {self.artifact}: {e}"
            ) from e
        except OSError as e:
            raise ResultParserError(f"Unable to read {self.artifact}: {e}") from e

        if root.tag != "testResults":
            raise JTLResultParserError(
                f"Unexpected root element <{root.tag}> in {self.artifact}, "
                "expected <testResults>"
            )

        return [
            self._sample_from_element(element)
            for element in root
            if element.tag in SAMPLE_TAGS
        ]

    def _sample_from_element(self, element: ET.Element) -> SampleResult:
        attrs = element.attrib
        if "lb" not in attrs or "s" not in attrs or "t" not in attrs:
            raise JTLResultParserError(
                f"Sample element <{element.tag}> in {self.artifact} is missing "
                "one of the required attributes 'lb', 's', 't'"
            )

        failure_message = None
        success = attrs["s"] == "true"
        for assertion in element.iter("assertionResult"):
            if (
                assertion.findtext("failure") == "true"
                or assertion.findtext("error") == "true"
            ):
                success = False
                failure_message = failure_message or assertion.findtext(
                    "failureMessage"
                )

        return SampleResult(
            label=attrs["lb"],
            success=success,
            elapsed=self._to_int(attrs["t"], "t"),
            latency=self._optional_int(attrs.get("lt"), "lt"),
            timestamp=self._optional_int(attrs.get("ts"), "ts"),
            response_code=attrs.get("rc"),
            response_message=attrs.get("rm"),
            thread_name=attrs.get("tn"),
            failure_message=failure_message,
        )

    def _extract_csv(self) -> Sequence[SampleResult]:
        try:
            with self.artifact.open(encoding="utf-8-sig", newline="") as handle:
                reader = csv.DictReader(handle)
                missing = [
                    column
                    for column in REQUIRED_CSV_COLUMNS
                    if column not in (reader.fieldnames or ())
                ]
                if missing:
                    raise JTLResultParserError(
                        f"JMeter results file {self.artifact} is missing CSV "
                        f"column(s): {', '.join(missing)}"
                    )
                return [
                    self._sample_from_row(row, reader.line_num) for row in reader
                ]
        except csv.Error as e:
            raise JTLResultParserError(
                f"Malformed CSV in JMeter results file {self.artifact}: {e}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise ResultParserError(f"Unable to read {self.artifact}: {e}") from e

    def _sample_from_row(
        self, row: Mapping[str | None, str | None], line: int
    ) -> SampleResult:
        if any(row.get(column) is None for column in REQUIRED_CSV_COLUMNS):
            raise JTLResultParserError(
                f"Truncated row at line {line} of {self.artifact}"
            )

        return SampleResult(
            label=row["label"] or "",
            success=(row["success"] or "").strip().lower() == "true",
            elapsed=self._to_int(row["elapsed"], "elapsed"),
            latency=self._optional_int(row.get("Latency"), "Latency"),
            timestamp=self._optional_int(row["timeStamp"], "timeStamp"),
            response_code=row.get("responseCode"),
            response_message=row.get("responseMessage"),
            thread_name=row.get("threadName"),
            failure_message=row.get("failureMessage") or None,
        )

    def _to_int(self, value: str | None, field_name: str) -> int:
        try:
            return int(value or "")
        except ValueError as e:
            raise JTLResultParserError(
                f"Invalid value {value!r} for '{field_name}' in {self.artifact}"
            ) from e

    def _optional_int(self, value: str | None, field_name: str) -> int | None:
        if value is None or value == "":
            return None
        return self._to_int(value, field_name)
