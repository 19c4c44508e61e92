"""JMeter executor manifest."""

from loadtest_runner.executors.jmeter.executor import JMeterExecutor
from loadtest_runner.executors.manifest import ExecutorManifest

jmeter_manifest = ExecutorManifest(
    tool_name="Apache JMeter",
    executor_factory=JMeterExecutor.from_environment,
)
