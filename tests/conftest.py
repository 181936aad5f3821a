"""
Shared pytest fixtures and configuration for rxcore tests.
"""

import pytest

from rxcore import config
from tests.utils import EventRecorder


@pytest.fixture(autouse=True)
def reset_config():
    """Reset library hooks around each test to prevent state leakage."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def recorder():
    """Provide a fresh observer recording every event it receives."""
    return EventRecorder()
