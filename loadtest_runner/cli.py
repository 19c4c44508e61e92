"""CLI entry point for running a single load-test scenario."""

import argparse
import json
import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loadtest_runner.exceptions import TestAutomationError
from loadtest_runner.executors.loading import load_executor_manifest
from loadtest_runner.models.deployment import DeploymentCreationResult
from loadtest_runner.models.scenario import Status, TestScenario

STATUS_SYMBOLS = {
    Status.SUCCESS: "✓",
    Status.FAIL: "✗",
    Status.ERROR: "!",
}

EXIT_CODES = {
    Status.SUCCESS: 0,
    Status.FAIL: 1,
}
ERROR_EXIT_CODE = 2


def log_scenario_summary(log: logging.Logger, scenario: TestScenario) -> None:
    """Log a formatted summary of a scenario's outcome."""
    log.info("=" * 80)
    log.info("Scenario Summary:")
    log.info("=" * 80)

    symbol = STATUS_SYMBOLS.get(scenario.status, "?")
    log.info("%s %s: %s", symbol, scenario.name, scenario.status)

    if (result := scenario.result) is None:
        return

    log.info(
        "  Samples: %d total, %d passed, %d failed (%.1f%% success)",
        result.total_count,
        result.passed_count,
        result.failed_count,
        result.success_rate * 100,
    )
    for summary in result.by_label().values():
        log.info(
            "  %s: %d/%d passed, avg %.1fms",
            summary.label,
            summary.passed_count,
            summary.total_count,
            summary.average_elapsed,
        )


def format_output(scenario: TestScenario, error: str | None = None) -> dict[str, Any]:
    """Format a scenario's outcome for JSON output."""
    output: dict[str, Any] = {
        "scenario": scenario.name,
        "dir": scenario.dir,
        "status": str(scenario.status),
        "error": error,
    }

    if (result := scenario.result) is None:
        return output

    output["result"] = {
        "format": result.format,
        "total": result.total_count,
        "passed": result.passed_count,
        "failed": result.failed_count,
        "average_elapsed": result.average_elapsed,
        "min_elapsed": result.min_elapsed,
        "max_elapsed": result.max_elapsed,
        "average_latency": result.average_latency,
        "labels": [
            {
                "label": summary.label,
                "total": summary.total_count,
                "failed": summary.failed_count,
                "average_elapsed": summary.average_elapsed,
            }
            for summary in result.by_label().values()
        ],
    }
    return output


def run(
    executor_key: str,
    test_location: Path,
    script: str,
    name: str | None = None,
    deployment_json: str | None = None,
    environment: Mapping[str, str] | None = None,
) -> int:
    """Run one scenario and return exit code."""
    log = logging.getLogger("loadtest_runner")

    log.info("Loading executor: %s", executor_key)
    manifest = load_executor_manifest(executor_key)
    log.info("Running %s scenario in %s", manifest.tool_name, test_location)

    deployment = (
        DeploymentCreationResult.model_validate_json(deployment_json)
        if deployment_json
        else DeploymentCreationResult()
    )

    scenario = TestScenario(name=name or test_location.name, dir=str(test_location))
    executor = manifest.executor_factory(
        os.environ if environment is None else environment
    )
    executor.init(test_location, scenario.name, scenario)

    error = None
    try:
        executor.execute(script, deployment)
    except TestAutomationError as e:
        error = str(e)

    log_scenario_summary(log, scenario)
    print(json.dumps(format_output(scenario, error), indent=2))

    return EXIT_CODES.get(scenario.status, ERROR_EXIT_CODE)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run a load-testing tool script and ingest its results"
    )
    parser.add_argument(
        "--executor",
        default="jmeter",
        help="Executor key (default: jmeter)",
    )
    parser.add_argument(
        "--test-location",
        type=Path,
        required=True,
        help="Directory the script runs in and writes its results to",
    )
    parser.add_argument(
        "--script",
        required=True,
        help="Script to run, relative to the test location",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Scenario name (default: test location directory name)",
    )
    parser.add_argument(
        "--deployment",
        default=None,
        help="JSON description of the target deployment",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        executor_key=args.executor,
        test_location=args.test_location,
        script=args.script,
        name=args.name,
        deployment_json=args.deployment,
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
