"""Data models shared by executors and parsers."""

from loadtest_runner.models.deployment import DeploymentCreationResult, Host
from loadtest_runner.models.result import LabelSummary, ParsedResult, SampleResult
from loadtest_runner.models.scenario import Status, TestScenario

__all__ = [
    "DeploymentCreationResult",
    "Host",
    "LabelSummary",
    "ParsedResult",
    "SampleResult",
    "Status",
    "TestScenario",
]
