"""Fixtures for integration tests."""

from pathlib import Path
from typing import Protocol

import pytest


class WriteScriptFn(Protocol):
    """Protocol for script creation function."""

    def __call__(self, body: str, *, name: str = "run.sh") -> Path:
        """Write a bash script into the test location and return its path."""


@pytest.fixture
def test_location(tmp_path: Path) -> Path:
    """Create an empty scenario directory."""
    location = tmp_path / "scenario"
    location.mkdir()
    return location


@pytest.fixture
def write_script(test_location: Path) -> WriteScriptFn:
    """Return a function to create scripts in the test location."""

    def _write(body: str, *, name: str = "run.sh") -> Path:
        script = test_location / name
        script.write_text(f"#!/usr/bin/env bash\n{body}\n")
        return script

    return _write
