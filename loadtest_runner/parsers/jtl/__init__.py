"""JMeter JTL result parser module."""

from loadtest_runner.parsers.jtl.manifest import jtl_manifest, recognize_jtl
from loadtest_runner.parsers.jtl.parser import JTLResultParser

__all__ = ["JTLResultParser", "jtl_manifest", "recognize_jtl"]
