"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _no_env_settings(monkeypatch):
    """Ignore NUM2ENGLISH_* settings from the caller's shell."""
    monkeypatch.delenv("NUM2ENGLISH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NUM2ENGLISH_MAX_INPUT_LENGTH", raising=False)
    yield
