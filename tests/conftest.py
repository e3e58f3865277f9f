"""Shared test fixtures for notedoc.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from notedoc.model.nodes import BOLD, Document, Heading, Paragraph, Text


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "notedoc"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def vitals_markup() -> str:
    """A short clinical note in canonical markup."""
    return "<h2>Vitals</h2><p>BP <strong>120/80</strong></p>"


@pytest.fixture()
def vitals_document() -> Document:
    """The document ``vitals_markup`` parses to."""
    return Document(
        (
            Heading(2, (Text("Vitals"),)),
            Paragraph((Text("BP "), Text("120/80", (BOLD,)))),
        )
    )
