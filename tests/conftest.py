"""Pytest configuration and shared fixtures for the dompath test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import build_sample_document

# Configure Hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def sample_document():
    """Provide a hand-built document with sibling divs, a table and an id.

    Returns
    -------
    SampleDocument
        Document plus handles to the interesting nodes.

    """
    return build_sample_document()


@pytest.fixture
def sample_html() -> str:
    """Provide a small HTML page used across parser and CLI tests."""
    return """<!DOCTYPE html>
<html>
<head><title>Sample</title></head>
<body>
  <div class="header">Header</div>
  <div id="main">
    <p>First</p>
    <!-- note -->
    <p id="second">Second</p>
    <span>Inline</span>
    <p>Third</p>
  </div>
  <table>
    <tr><td>a</td><td>b</td></tr>
    <tr><td id="cell">c</td><td>d</td></tr>
  </table>
</body>
</html>
"""


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with cwd and home pointing at an empty directory so no config is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("DOMPATH_CONFIG", raising=False)
    return tmp_path

