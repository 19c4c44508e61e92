"""Abstract base class for tool-specific test executors."""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from loadtest_runner.exceptions import (
    CommandExecutionError,
    JTLResultParserError,
    JUnitResultParserError,
    NoParserFoundError,
    ParserFactoryInitializationError,
    ParserInitializationError,
    ResultParserError,
    TestAutomationError,
)
from loadtest_runner.models.deployment import DeploymentCreationResult
from loadtest_runner.models.scenario import Status, TestScenario
from loadtest_runner.parsers.manifest import ParserManifest
from loadtest_runner.shell import ShellRunner

log = logging.getLogger(__name__)

# First matching entry wins, so subclasses must come before their bases.
FAILURE_MESSAGES: Sequence[tuple[type[Exception], str]] = (
    (CommandExecutionError, "Error executing scenario script: {script}"),
    (
        ParserFactoryInitializationError,
        "Error when initializing the parser factory for script: {script}",
    ),
    (NoParserFoundError, "Unable to find a result parser for script: {script}"),
    (
        ParserInitializationError,
        "Error when initializing the result parser for script: {script}",
    ),
    (
        JTLResultParserError,
        "Unable to parse the JMeter results file of script: {script}",
    ),
    (JUnitResultParserError, "Unable to parse the JUnit reports of script: {script}"),
    (ResultParserError, "Error parsing the result files from script: {script}"),
)
DEFAULT_FAILURE_MESSAGE = "Unexpected error while executing script: {script}"


class ExecutorState(StrEnum):
    """Lifecycle of a single-use executor."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


def failure_message(error: Exception, script: str) -> str:
    """Describe which stage failed for ``script``, including the cause."""
    template = next(
        (message for kind, message in FAILURE_MESSAGES if isinstance(error, kind)),
        DEFAULT_FAILURE_MESSAGE,
    )
    return f"{template.format(script=script)}: {error}"


@dataclass(kw_only=True)
class TestExecutor(ABC):
    """Abstract base for tool-specific test executors.

    An executor runs exactly one scenario: ``init`` once, then ``execute``
    once. Every failure inside ``execute`` marks the scenario as ERROR and is
    re-raised as ``TestAutomationError`` with the original error as its cause.
    Interruptions such as ``KeyboardInterrupt`` also mark the scenario as
    ERROR but propagate unchanged.
    """

    __test__ = False

    environment: Mapping[str, str] = field(default_factory=lambda: os.environ)
    shell_runner: ShellRunner = field(default_factory=ShellRunner)
    parser_manifests: Sequence[ParserManifest] | None = None

    state: ExecutorState = field(default=ExecutorState.UNINITIALIZED, init=False)
    test_location: Path = field(init=False, repr=False)
    test_name: str = field(init=False, repr=False)
    test_scenario: TestScenario = field(init=False, repr=False)

    def init(
        self, test_location: Path | str, test_name: str, test_scenario: TestScenario
    ) -> None:
        """Record the identity of the scenario to run.

        Raises:
            TestAutomationError: If the executor was already initialized

        """
        if self.state is not ExecutorState.UNINITIALIZED:
            raise TestAutomationError(
                f"Executor for test '{self.test_name}' is already initialized"
            )

        self.test_location = Path(test_location)
        self.test_name = test_name
        self.test_scenario = test_scenario
        self.state = ExecutorState.INITIALIZED

    def execute(self, script: str, deployment: DeploymentCreationResult) -> None:
        """Run ``script`` and ingest its results into the scenario.

        Args:
            script: Path of the script to run, relative to the test location
            deployment: Handle to the environment the script targets

        Raises:
            TestAutomationError: If the executor is not ready to run, or if any
                stage of the execution failed

        """
        if self.state is ExecutorState.UNINITIALIZED:
            raise TestAutomationError(
                "Executor must be initialized before execution", script=script
            )
        if self.state is not ExecutorState.INITIALIZED:
            raise TestAutomationError(
                f"Executor for test '{self.test_name}' has already run "
                f"(state={self.state})",
                script=script,
            )

        self.state = ExecutorState.RUNNING
        if self.test_scenario.status is Status.PENDING:
            self.test_scenario.status = Status.RUNNING

        try:
            self.run_script(script, deployment)
            if not self.test_scenario.status.is_terminal:
                raise ResultParserError(
                    f"Scenario {self.test_scenario.name} has no result after "
                    f"execution (status={self.test_scenario.status})"
                )
        except Exception as e:
            self.state = ExecutorState.FAILED
            self.test_scenario.status = Status.ERROR
            message = failure_message(e, script)
            log.error(message)
            raise TestAutomationError(message, script=script) from e
        except BaseException:
            self.state = ExecutorState.FAILED
            self.test_scenario.status = Status.ERROR
            log.error("Execution of script %s was interrupted", script)
            raise

        self.state = ExecutorState.COMPLETED

    @abstractmethod
    def run_script(self, script: str, deployment: DeploymentCreationResult) -> None:
        """Run the tool and parse its results.

        Implementations raise on failure and never assign ERROR themselves.
        """
