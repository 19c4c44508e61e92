"""Models for test scenarios and their status lifecycle."""

from dataclasses import dataclass
from enum import StrEnum

from loadtest_runner.models.result import ParsedResult


class Status(StrEnum):
    """Lifecycle status of a test scenario."""

    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in {Status.SUCCESS, Status.FAIL, Status.ERROR}


@dataclass(kw_only=True)
class TestScenario:
    """One logical test case driving a single tool invocation.

    Created by the caller before execution. ``status`` and ``result`` are the
    only fields changed while the scenario runs.
    """

    __test__ = False

    name: str
    dir: str
    status: Status = Status.PENDING
    result: ParsedResult | None = None
