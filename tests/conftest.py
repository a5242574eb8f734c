"""Shared test fixtures for rn-create-template.

Provides:
- no_sleep: (autouse) records pacing delays instead of sleeping
- workspace: temporary working directory
- cli_runner: Click CliRunner
"""

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    """Replace the pacing sleep so tests run instantly.

    Returns the list of requested sleep durations, in seconds.
    """
    calls = []
    monkeypatch.setattr("rncreate.core.progress.time.sleep", calls.append)
    return calls


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing the CLI."""
    return CliRunner()
