"""Shared fixtures for typefactory tests"""

import logging
from abc import ABC, abstractmethod

import pytest

from typefactory.core.config import configure, get_config


@pytest.fixture
def factory_config():
    """Yield ``configure`` and restore the previous configuration afterwards."""
    previous = get_config()
    yield configure
    configure(previous)


@pytest.fixture
def restore_logger():
    """Restore the ``typefactory`` logger's level and handlers after the test."""
    logger = logging.getLogger("typefactory")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def greeter():
    """A fresh Greeter capability, so every test starts with an empty registry."""

    class Greeter(ABC):
        @abstractmethod
        def greet(self) -> str:
            ...

    return Greeter


@pytest.fixture
def counter():
    """A fresh Counter capability."""

    class Counter(ABC):
        @abstractmethod
        def increment(self) -> int:
            ...

    return Counter
