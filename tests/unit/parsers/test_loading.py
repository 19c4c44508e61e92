"""Tests for parser loading."""

from loadtest_runner.parsers.jtl import jtl_manifest
from loadtest_runner.parsers.junit import junit_manifest
from loadtest_runner.parsers.loading import load_parser_manifests, sort_manifests


def test_load_parser_manifests_in_priority_order() -> None:
    """Loads all registered parsers ordered by priority."""
    assert list(load_parser_manifests()) == [jtl_manifest, junit_manifest]


def test_sort_manifests() -> None:
    """Sorts by priority first."""
    assert list(sort_manifests([junit_manifest, jtl_manifest])) == [
        jtl_manifest,
        junit_manifest,
    ]
