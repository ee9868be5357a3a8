"""Pytest configuration and shared fixtures for the html2doc test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import pytest

from html2doc.document import Document, Section
from html2doc.parsers.html import HtmlConverter


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def document() -> Document:
    """Provide an empty document."""
    return Document()


@pytest.fixture
def section(document: Document) -> Section:
    """Provide an empty section attached to a document.

    Returns
    -------
    Section
        Fresh section; conversions append paragraphs to it.

    """
    return document.add_section()


@pytest.fixture
def converter() -> HtmlConverter:
    """Provide an HTML converter with the default handler set."""
    return HtmlConverter()


@pytest.fixture
def convert(converter: HtmlConverter, section: Section):
    """Provide a helper converting markup into the shared section.

    Returns
    -------
    callable
        ``convert(html) -> Section``

    """

    def _convert(html: str) -> Section:
        converter.convert(html)(section)
        return section

    return _convert
