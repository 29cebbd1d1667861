"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload covering several full encoding periods."""
    return bytes(range(256))


@pytest.fixture
def cli_env() -> dict[str, str]:
    """Environment for running the CLI as a subprocess from a source checkout."""
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = str(SRC_DIR) if not existing else os.pathsep.join([str(SRC_DIR), existing])
    return env


@pytest.fixture
def cli_command() -> list[str]:
    """Base command for invoking the CLI module."""
    return [sys.executable, "-m", "zbase32codec.cli.main"]
