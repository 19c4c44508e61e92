"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from loadtest_runner.models.deployment import DeploymentCreationResult, Host
from loadtest_runner.models.result import ParsedResult, SampleResult
from loadtest_runner.models.scenario import Status, TestScenario


class SampleResultFactory(DataclassFactory[SampleResult]):
    """Factory for SampleResult."""

    __model__ = SampleResult

    latency = None
    timestamp = None
    response_code = None
    response_message = None
    thread_name = None
    failure_message = None


class ParsedResultFactory(DataclassFactory[ParsedResult]):
    """Factory for ParsedResult."""

    __model__ = ParsedResult

    format = "jtl"
    samples = Use(SampleResultFactory.batch, size=3)


class ScenarioFactory(DataclassFactory[TestScenario]):
    """Factory for TestScenario."""

    __model__ = TestScenario

    status = Status.PENDING
    result = None


class HostFactory(ModelFactory[Host]):
    """Factory for Host."""


class DeploymentCreationResultFactory(ModelFactory[DeploymentCreationResult]):
    """Factory for DeploymentCreationResult."""

    hosts = Use(HostFactory.batch, size=2)
