"""Pytest fixtures for converter tests."""

import pytest

from nicoass.services.converter.templates import ASSTemplateLoader


@pytest.fixture
def template_loader() -> ASSTemplateLoader:
    """Create an ASS template loader."""
    return ASSTemplateLoader()


@pytest.fixture
def event_lines():
    """Extract the event lines of an ASS document."""

    def _extract(document: str) -> list[str]:
        return [
            line
            for line in document.splitlines()
            if line.startswith(("Dialogue:", "Comment:"))
        ]

    return _extract
