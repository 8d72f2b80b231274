"""Shared fixtures."""

import logging

import pytest

from minicurl.config import ClientConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Pin a default config so no .env file or MINICURL_* variable leaks in."""
    config = ClientConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("minicurl")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
