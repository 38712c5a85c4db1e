"""Pytest fixtures for all tests."""

import pytest

from config import EncoderConfig
from internal.logging import LogLevel, StructuredLogger
from lexicoid.encoder import LexicoidEncoder

@pytest.fixture
def fixed_clock():
    """Clock frozen at the reference vector timestamp."""
    def clock():
        return 1654401676
    return clock

@pytest.fixture
def debug_logger():
    """Logger that emits everything."""
    return StructuredLogger(level=LogLevel.DEBUG)

@pytest.fixture
def encoder(fixed_clock, debug_logger):
    """Fixed-layout encoder on a frozen clock."""
    return LexicoidEncoder(clock=fixed_clock, logger=debug_logger)

@pytest.fixture
def compact_encoder(fixed_clock, debug_logger):
    """Compact-layout encoder on a frozen clock."""
    return LexicoidEncoder(config=EncoderConfig(layout="compact"), clock=fixed_clock, logger=debug_logger)

@pytest.fixture(autouse=True)
def reset_shared_logger():
    """Keep StructuredLogger.configure() calls from leaking between tests."""
    from internal import logging as structured
    original = structured._logger
    yield
    structured._logger = original
