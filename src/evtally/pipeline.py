"""
Runs both parse phases over an ev list and hands back the finished ledger.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .config import Settings
from .ledger import EntityLedger, InputUnavailable, LedgerError
from .logging import get_logger
from .parser import CharStream, declaration_phase, tally_phase

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadOutcome:
    """Result of a run: a ledger on success, an error otherwise, never both."""
    ledger: Optional[EntityLedger]
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_stream(handle: TextIO, settings: Optional[Settings] = None) -> LoadOutcome:
    """Parse an already open text handle."""
    settings = settings or Settings()
    ledger = EntityLedger(capacity=settings.capacity)
    stream = CharStream(handle)

    error = declaration_phase(stream, ledger)
    if error is None:
        error = tally_phase(stream, ledger)
    if error is not None:
        return LoadOutcome(ledger=None, error=error)
    return LoadOutcome(ledger=ledger)


def parse_text(text: str, settings: Optional[Settings] = None) -> LoadOutcome:
    """Parse an ev list held in memory."""
    return parse_stream(io.StringIO(text), settings)


def load_ledger(path: Path, settings: Optional[Settings] = None) -> LoadOutcome:
    """
    Open an ev list file and parse it.

    Args:
        path: Path to the ev list file
        settings: Capacity and encoding options

    Returns:
        LoadOutcome holding the ledger, or InputUnavailable / a parse error
    """
    settings = settings or Settings()
    try:
        handle = open(path, "r", encoding=settings.encoding)
    except OSError as exc:
        logger.debug(f"Failed to open {path}: {exc}")
        return LoadOutcome(ledger=None, error=InputUnavailable(str(path), exc.strerror or str(exc)))
    except LookupError as exc:
        return LoadOutcome(ledger=None, error=InputUnavailable(str(path), str(exc)))

    with handle:
        logger.info(f"Reading ev list: {path}")
        return parse_stream(handle, settings)
