"""Shared pytest fixtures."""

import pytest

from ternarylogic.config import get_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    config = get_config()
    config.reset()
    yield config
    config.reset()
