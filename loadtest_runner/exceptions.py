"""Error types raised while executing scenarios and ingesting their results."""


class LoadTestRunnerError(Exception):
    """Base class for all errors raised by this package."""


class CommandExecutionError(LoadTestRunnerError):
    """Raised when a command cannot be launched at all."""


class ParserFactoryInitializationError(LoadTestRunnerError):
    """Raised when the result location cannot be inspected."""


class NoParserFoundError(LoadTestRunnerError):
    """Raised when no parser recognizes the artifacts at a location."""


class ParserInitializationError(LoadTestRunnerError):
    """Raised when a matched parser fails to set itself up."""


class ResultParserError(LoadTestRunnerError):
    """Raised when extracting results fails."""


class JTLResultParserError(ResultParserError):
    """Raised when a JMeter results file is structurally invalid."""


class JUnitResultParserError(ResultParserError):
    """Raised when a JUnit XML report is structurally invalid."""


class PluginNotFoundError(LoadTestRunnerError):
    """Raised when an executor or parser plugin is not found."""


class TestAutomationError(LoadTestRunnerError):
    """Raised by executors for every failed scenario execution.

    The underlying error is chained as ``__cause__``.
    """

    __test__ = False

    def __init__(self, message: str, *, script: str | None = None) -> None:
        super().__init__(message)
        self.script = script
