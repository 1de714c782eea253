"""Pytest configuration and fixtures.

This module provides common fixtures used across all tests.
"""

import pytest

from nicoass.config.render import RenderConfig
from nicoass.core.logging import setup_logging
from nicoass.models.comment import CommentRecord

# Setup logging for tests
setup_logging()


@pytest.fixture
def render_config() -> RenderConfig:
    """Default rendering configuration."""
    return RenderConfig()


@pytest.fixture
def make_comment():
    """Factory for comment records.

    Returns:
        Callable building a CommentRecord with sensible defaults
    """

    def _make(
        content: str = "hello",
        vpos: int | None = 100,
        user_id: str = "user1",
        mail: str | None = None,
        premium: int | None = 1,
    ) -> CommentRecord:
        return CommentRecord(
            content=content, user_id=user_id, mail=mail, vpos=vpos, premium=premium
        )

    return _make


@pytest.fixture
def make_operator():
    """Factory for operator (broadcaster) comment records."""

    def _make(content: str, vpos: int = 100) -> CommentRecord:
        return CommentRecord(content=content, user_id="-", vpos=vpos, premium=3)

    return _make
