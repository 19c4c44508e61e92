"""Tests for the TestExecutor lifecycle."""

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from loadtest_runner.exceptions import (
    CommandExecutionError,
    JTLResultParserError,
    NoParserFoundError,
    ParserFactoryInitializationError,
    ParserInitializationError,
    ResultParserError,
    TestAutomationError,
)
from loadtest_runner.executors.base import ExecutorState, TestExecutor, failure_message
from loadtest_runner.models.deployment import DeploymentCreationResult
from loadtest_runner.models.scenario import Status, TestScenario


@dataclass(kw_only=True)
class StubExecutor(TestExecutor):
    """Executor whose run is a configurable callable."""

    action: Callable[[TestScenario], None] = field(default=lambda scenario: None)
    runs: list[str] = field(default_factory=list)

    def run_script(self, script: str, deployment: DeploymentCreationResult) -> None:
        """Record the run and apply the configured action."""
        self.runs.append(script)
        self.action(self.test_scenario)


def succeed(scenario: TestScenario) -> None:
    scenario.status = Status.SUCCESS


@pytest.fixture
def scenario(tmp_path: Path) -> TestScenario:
    """Create a pending scenario."""
    return TestScenario(name="login", dir=str(tmp_path))


def test_starts_uninitialized() -> None:
    """New executors have not been initialized."""
    assert StubExecutor(environment={}).state is ExecutorState.UNINITIALIZED


def test_init_records_identity(tmp_path: Path, scenario: TestScenario) -> None:
    """Stores the scenario identity without side effects."""
    executor = StubExecutor(environment={})

    executor.init(str(tmp_path), "login", scenario)

    assert executor.state is ExecutorState.INITIALIZED
    assert executor.test_location == tmp_path
    assert executor.test_name == "login"
    assert executor.test_scenario is scenario
    assert scenario.status is Status.PENDING
    assert executor.runs == []


def test_init_twice_is_rejected(tmp_path: Path, scenario: TestScenario) -> None:
    """Raises TestAutomationError when initialized again."""
    executor = StubExecutor(environment={})
    executor.init(tmp_path, "login", scenario)

    with pytest.raises(TestAutomationError, match="already initialized"):
        executor.init(tmp_path, "login", scenario)


def test_execute_before_init_is_rejected() -> None:
    """Raises TestAutomationError when executed before init."""
    executor = StubExecutor(environment={})

    with pytest.raises(TestAutomationError, match="initialized before execution"):
        executor.execute("run.sh", DeploymentCreationResult())

    assert executor.runs == []


def test_successful_execution_completes(
    tmp_path: Path, scenario: TestScenario
) -> None:
    """Completes when the run leaves the scenario in a terminal status."""
    executor = StubExecutor(environment={}, action=succeed)
    executor.init(tmp_path, "login", scenario)

    executor.execute("run.sh", DeploymentCreationResult())

    assert executor.state is ExecutorState.COMPLETED
    assert scenario.status is Status.SUCCESS


def test_marks_scenario_running_during_execution(
    tmp_path: Path, scenario: TestScenario
) -> None:
    """Moves a pending scenario to RUNNING before the run starts."""
    seen: list[Status] = []

    def observe(s: TestScenario) -> None:
        seen.append(s.status)
        s.status = Status.FAIL

    executor = StubExecutor(environment={}, action=observe)
    executor.init(tmp_path, "login", scenario)
    executor.execute("run.sh", DeploymentCreationResult())

    assert seen == [Status.RUNNING]
    assert scenario.status is Status.FAIL


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (CommandExecutionError("no bash"), "Error executing scenario script"),
        (
            ParserFactoryInitializationError("unreadable"),
            "Error when initializing the parser factory",
        ),
        (NoParserFoundError("nothing"), "Unable to find a result parser"),
        (
            ParserInitializationError("bad file"),
            "Error when initializing the result parser",
        ),
        (JTLResultParserError("truncated"), "Unable to parse the JMeter results"),
        (ResultParserError("io"), "Error parsing the result files"),
        (KeyError("boom"), "Unexpected error while executing script"),
    ],
)
def test_failures_are_wrapped_and_mark_error(
    tmp_path: Path, scenario: TestScenario, error: Exception, message: str
) -> None:
    """Every failure sets ERROR and raises TestAutomationError with the cause."""

    def fail(s: TestScenario) -> None:
        raise error

    executor = StubExecutor(environment={}, action=fail)
    executor.init(tmp_path, "login", scenario)

    with pytest.raises(TestAutomationError, match=message) as exc_info:
        executor.execute("run.sh", DeploymentCreationResult())

    assert exc_info.value.__cause__ is error
    assert exc_info.value.script == "run.sh"
    assert "run.sh" in str(exc_info.value)
    assert scenario.status is Status.ERROR
    assert executor.state is ExecutorState.FAILED


def test_run_without_terminal_status_is_an_error(
    tmp_path: Path, scenario: TestScenario
) -> None:
    """A run that leaves the scenario non-terminal fails the scenario."""
    executor = StubExecutor(environment={})
    executor.init(tmp_path, "login", scenario)

    with pytest.raises(TestAutomationError) as exc_info:
        executor.execute("run.sh", DeploymentCreationResult())

    assert isinstance(exc_info.value.__cause__, ResultParserError)
    assert scenario.status is Status.ERROR


@pytest.mark.parametrize("action", [succeed, None], ids=["completed", "failed"])
def test_second_execute_is_rejected_without_side_effects(
    tmp_path: Path,
    scenario: TestScenario,
    action: Callable[[TestScenario], None] | None,
) -> None:
    """Executors are single-use; a second execute changes nothing."""
    executor = StubExecutor(environment={}, action=action or (lambda s: None))
    executor.init(tmp_path, "login", scenario)
    try:
        executor.execute("run.sh", DeploymentCreationResult())
    except TestAutomationError:
        pass
    status_after_first_run = scenario.status
    state_after_first_run = executor.state

    with pytest.raises(TestAutomationError, match="already run"):
        executor.execute("run.sh", DeploymentCreationResult())

    assert executor.runs == ["run.sh"]
    assert scenario.status is status_after_first_run
    assert executor.state is state_after_first_run


def test_failure_message_prefers_most_specific_kind() -> None:
    """Subclasses are matched before their base classes."""
    message = failure_message(JTLResultParserError("bad"), "run.sh")

    assert message == "Unable to parse the JMeter results file of script: run.sh: bad"
