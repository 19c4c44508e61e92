"""Result parsers and parser selection."""

from loadtest_runner.parsers.base import ResultParser
from loadtest_runner.parsers.factory import ResultParserFactory
from loadtest_runner.parsers.manifest import ParserManifest

__all__ = ["ParserManifest", "ResultParser", "ResultParserFactory"]
