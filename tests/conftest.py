"""Pytest configuration and shared fixtures for the labrender test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from labrender.ast import (
    CodeNode,
    GridCell,
    GridNode,
    HeaderNode,
    InfoboxNode,
    ItemsListNode,
    ListNode,
    Node,
    TextNode,
    URLNode,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


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


@pytest.fixture
def sample_nodes() -> list[Node]:
    """Provide a small codelab step exercising most node kinds.

    Returns
    -------
    list of Node
        Header, paragraph, link, terminal code, checklist, grid and infobox,
        with one node restricted to the ``web`` environment.

    """
    return [
        HeaderNode(content=[TextNode(value="Setup")], level=1),
        ListNode(
            nodes=[
                TextNode(value="Open the"),
                URLNode(content=[TextNode(value="console")], url="https://console.example.com"),
                TextNode(value="."),
            ],
            block=True,
        ),
        CodeNode(value="gcloud init", term=True),
        ItemsListNode(
            items=[[TextNode(value="Create a project")], [TextNode(value="Enable billing")]],
            kind="checklist",
        ),
        TextNode(value="Web only note", env=("web",)),
        GridNode(rows=[[GridCell(content=[TextNode(value="a")]), GridCell(content=[TextNode(value="b")])]]),
        InfoboxNode(content=[TextNode(value="Careful", bold=True)], kind="warning"),
    ]
