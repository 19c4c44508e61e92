"""JMeter test executor."""

import logging
import shlex
from collections.abc import Mapping
from dataclasses import dataclass

from loadtest_runner.exceptions import NoParserFoundError
from loadtest_runner.executors.base import TestExecutor
from loadtest_runner.models.deployment import DeploymentCreationResult
from loadtest_runner.parsers.factory import ResultParserFactory

log = logging.getLogger(__name__)

JMETER_HOME = "JMETER_HOME"


@dataclass(kw_only=True)
class JMeterExecutor(TestExecutor):
    """Runs a JMeter scenario script and ingests the results it writes."""

    @classmethod
    def from_environment(cls, environment: Mapping[str, str]) -> "JMeterExecutor":
        """Create an executor reading its settings from ``environment``."""
        return cls(environment=environment)

    def run_script(self, script: str, deployment: DeploymentCreationResult) -> None:
        """Run ``bash <script>`` in the test location and parse its results."""
        jmeter_home = self.environment.get(JMETER_HOME)
        if jmeter_home is None:
            log.warning(
                "%s environment variable is not set. JMeter test execution may fail.",
                JMETER_HOME,
            )
        else:
            log.info("%s: %s", JMETER_HOME, jmeter_home)

        log.info(
            "Running test %s against deployment %r (%d host(s))",
            self.test_name,
            deployment.name,
            len(deployment.hosts),
        )

        exit_code = self.shell_runner.run(
            f"bash {shlex.quote(script)}", self.test_location
        )
        if exit_code != 0:
            log.error(
                "Error occurred while executing the test: %s, at: %s. "
                "Script exited with a status code of %d",
                self.test_name,
                self.test_scenario.dir,
                exit_code,
            )

        factory = ResultParserFactory.for_location(
            self.test_location, self.parser_manifests
        )
        parser = factory.get_parser(self.test_scenario, self.test_location)
        if parser is None:
            raise NoParserFoundError(
                f"No result parser recognized the output of test {self.test_name} "
                f"in {self.test_location}"
            )

        parser.parse_results()
