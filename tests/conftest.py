"""Test configuration for pytest."""

import logging
import os
import pytest

from varcheck.config import Settings


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['VARCHECK_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def notices():
    """Collected degraded-precision notices."""
    return []


@pytest.fixture
def degraded_settings(notices):
    """Settings that behave as if gmpy2 were not installed."""
    return Settings(bignum_available=False, on_notice=notices.append)


@pytest.fixture
def bignum_settings(notices):
    """Settings with the gmpy2 backend, skipping when it is not installed."""
    pytest.importorskip("gmpy2")
    return Settings(bignum_available=True, on_notice=notices.append)
