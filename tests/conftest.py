from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # Handlers added during a test may point at capsys streams that are gone
    logger.remove()


@pytest.fixture
def log_messages() -> list[str]:
    messages: list[str] = []
    logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    return messages
