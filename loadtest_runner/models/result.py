"""Models for parsed load-test results."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from statistics import fmean


@dataclass(frozen=True, kw_only=True)
class SampleResult:
    """Outcome of a single request or transaction reported by the tool."""

    label: str
    success: bool
    elapsed: int
    latency: int | None = None
    timestamp: int | None = None
    response_code: str | None = None
    response_message: str | None = None
    thread_name: str | None = None
    failure_message: str | None = None


@dataclass(frozen=True, kw_only=True)
class LabelSummary:
    """Aggregate figures for all samples sharing a label."""

    label: str
    total_count: int
    failed_count: int
    average_elapsed: float

    @property
    def passed_count(self) -> int:
        return self.total_count - self.failed_count


@dataclass(frozen=True, kw_only=True)
class ParsedResult:
    """Normalized result set extracted from a tool artifact.

    ``format`` is the key of the parser that produced it. Aggregates are
    derived from ``samples`` and are never stored separately.
    """

    format: str
    samples: Sequence[SampleResult]

    @property
    def total_count(self) -> int:
        return len(self.samples)

    @property
    def failed_count(self) -> int:
        return sum(1 for sample in self.samples if not sample.success)

    @property
    def passed_count(self) -> int:
        return self.total_count - self.failed_count

    @property
    def success_rate(self) -> float:
        if not self.samples:
            return 0.0
        return self.passed_count / self.total_count

    @property
    def average_elapsed(self) -> float:
        if not self.samples:
            return 0.0
        return fmean(sample.elapsed for sample in self.samples)

    @property
    def min_elapsed(self) -> int:
        return min((sample.elapsed for sample in self.samples), default=0)

    @property
    def max_elapsed(self) -> int:
        return max((sample.elapsed for sample in self.samples), default=0)

    @property
    def average_latency(self) -> float | None:
        latencies = [s.latency for s in self.samples if s.latency is not None]
        return fmean(latencies) if latencies else None

    def by_label(self) -> Mapping[str, LabelSummary]:
        """Summarize samples per label, in order of first appearance."""
        grouped: dict[str, list[SampleResult]] = {}
        for sample in self.samples:
            grouped.setdefault(sample.label, []).append(sample)

        return {
            label: LabelSummary(
                label=label,
                total_count=len(samples),
                failed_count=sum(1 for s in samples if not s.success),
                average_elapsed=fmean(s.elapsed for s in samples),
            )
            for label, samples in grouped.items()
        }
