"""JMeter executor module."""

from loadtest_runner.executors.jmeter.executor import JMETER_HOME, JMeterExecutor
from loadtest_runner.executors.jmeter.manifest import jmeter_manifest

__all__ = ["JMETER_HOME", "JMeterExecutor", "jmeter_manifest"]
