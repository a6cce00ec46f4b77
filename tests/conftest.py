"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"hello world"


@pytest.fixture
def sample_text() -> str:
    """Base65536 encoding of sample_payload."""
    return "驨ꍬ啯\U00012077ꍲᕤ"


@pytest.fixture
def all_bytes() -> bytes:
    """Every byte value, in order."""
    return bytes(range(256))
