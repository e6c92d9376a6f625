"""
Pytest configuration and shared fixtures for textprims tests.
"""

import pytest
from loguru import logger


@pytest.fixture
def sample_strings():
    """Strings covering empty, single-character, ASCII and non-ASCII input."""
    return ["", "a", "ab", "banana", "Hello, World!", "  spaced  out ", "a\nb\n", "héllo wörld"]


@pytest.fixture
def log_messages():
    """Capture textprims log records emitted through loguru."""
    messages = []
    logger.enable("textprims")
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
    logger.disable("textprims")
