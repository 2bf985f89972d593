"""Pytest configuration and shared fixtures for railway-result tests."""

import logging

import pytest

from railway_result import config
from railway_result._logging import LOGGER_NAME, clear_log_hooks


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from the environment-free default configuration."""
    monkeypatch.delenv(config.STRATEGY_ENV, raising=False)
    monkeypatch.delenv(config.CONCURRENCY_ENV, raising=False)
    config.reset()
    yield
    config.reset()


@pytest.fixture
def library_logger():
    """Give tests the library logger and undo configure_logging() afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    clear_log_hooks()
    yield logger
    clear_log_hooks()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from railway_result import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from railway_result import Failure

    return Failure(ValueError('test error'))


@pytest.fixture
def concurrent_combine():
    """Switch deferred.combine() to the concurrent strategy."""
    return config.init(combine_strategy=config.CombineStrategy.CONCURRENT)
