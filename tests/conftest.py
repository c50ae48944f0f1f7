"""Pytest configuration and shared fixtures."""

import logging

import pytest

from netdash.config import NetdashConfig, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Give every test a fresh default configuration, ignoring the environment."""
    set_config(NetdashConfig())
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup done by the CLI so caplog keeps working."""
    yield
    logger = logging.getLogger("netdash")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
