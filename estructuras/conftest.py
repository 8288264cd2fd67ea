"""Fixtures compartidos por los tests de las estructuras."""

import sys
from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> List[str]:
    """Captura los mensajes que las estructuras mandan a loguru."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def all_log_messages() -> List[str]:
    """Igual que log_messages pero desde nivel DEBUG."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    """Deja loguru con su sink por defecto después de tests que lo reconfiguran."""
    yield
    logger.remove()
    logger.add(sys.stderr)
