"""JUnit XML result parser module."""

from loadtest_runner.parsers.junit.manifest import junit_manifest, recognize_junit
from loadtest_runner.parsers.junit.parser import JUnitResultParser

__all__ = ["JUnitResultParser", "junit_manifest", "recognize_junit"]
