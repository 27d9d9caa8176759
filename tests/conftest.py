"""Test configuration for pytest."""

import io
import logging
import os
import pytest

from evtally.ledger import EntityLedger


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['EVTALLY_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['evtally.parser.stream', 'evtally.parser.tally', 'evtally.cli']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture
def two_pokemon() -> EntityLedger:
    """Ledger with Bulbasaur as 'b' and Charmander as 'c'."""
    ledger = EntityLedger()
    assert ledger.insert("Bulbasaur", "b") is None
    assert ledger.insert("Charmander", "c") is None
    return ledger


class BrokenHandle:
    """Text handle that raises OSError once a fixed prefix is used up."""

    def __init__(self, prefix: str) -> None:
        self._buffer = io.StringIO(prefix)

    def read(self, size: int = -1) -> str:
        char = self._buffer.read(size)
        if not char:
            raise OSError("device unplugged")
        return char


@pytest.fixture
def broken_handle():
    """Factory for handles that fail mid-read."""
    return BrokenHandle
