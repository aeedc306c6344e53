"""Pytest configuration and shared fixtures for the adocparse test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture(autouse=True)
def _propagating_package_logger() -> Generator[None, None, None]:
    """Undo CLI logging configuration so that ``caplog`` sees package records."""
    package_logger = logging.getLogger("adocparse")
    yield
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_document() -> str:
    """Provide a document exercising every header part and the body.

    Returns
    -------
    str
        Document with a title, author line, attributes, comments and
        formatted body text.

    """
    return """// leading comment
= Sample Document
Jane Q Public <jane@example.com>
:toc: left
:description: A sample document
:keywords: parsing, asciidoc
:!numbered:

This paragraph has *bold* text.
It spans two lines.

////
A comment block
////
Second paragraph.
// trailing comment
"""


@pytest.fixture
def rsciidoc_document() -> str:
    """Provide the minimal document with author and two attribute entries."""
    return "= Rsciidoc\nHeng Wang <admin@eastack.me>\n:hello: world\n:!toc:\n"
