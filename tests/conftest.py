"""Shared pytest fixtures."""

import logging

import pytest

from tripflow.config import get_settings
from tripflow.log import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_runtime_state():
    """Drop cached settings and any handlers installed by the app or CLI."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
