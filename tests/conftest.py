"""Shared pytest fixtures for SPECKIT tests."""

import importlib
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from speckit.core.step_tracker import StepTracker

# Enable pytest-asyncio for async test support
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture
def tracker() -> StepTracker:
    """A fresh tracker per test."""
    return StepTracker("Test Tracker")


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".speckit-config"
    config_file.write_text(
        """# SPECKIT Configuration
SPECKIT_DEFAULT_AI="gemini"
SPECKIT_NO_GIT="true"
SPECKIT_SKIP_TLS='false'
"""
    )
    return config_file


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that change speckit behavior."""
    for key in (
        "SPECKIT_DEFAULT_AI",
        "SPECKIT_NO_GIT",
        "SPECKIT_SKIP_TLS",
        "GH_TOKEN",
        "GITHUB_TOKEN",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for git commands."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def mock_console(monkeypatch):
    """Mock console output for testing."""
    mock = MagicMock()
    # speckit.utils re-exports `console`, so patch through the module object
    monkeypatch.setattr(importlib.import_module("speckit.utils.console"), "console", mock)
    return mock


@pytest.fixture
def mock_console_err(monkeypatch):
    """Mock stderr console output for testing."""
    mock = MagicMock()
    monkeypatch.setattr(importlib.import_module("speckit.utils.console"), "console_err", mock)
    return mock
