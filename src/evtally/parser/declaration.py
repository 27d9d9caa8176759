"""
Pokemon declaration phase.

The declaration block is ``(' ' id ' ' name)*`` followed by one newline.
Each id is a single character; each name is a run of characters up to the
next space, newline or end of stream. A carriage return counts as a space,
so CRLF line endings read the same as LF.
"""

from typing import Optional

from ..ledger import EntityLedger, LedgerError, MalformedInput
from ..logging import get_logger
from .stream import CharStream

logger = get_logger(__name__)

DECLARATION_END = "\n"
SEPARATORS = frozenset(" \r")


def declaration_phase(stream: CharStream, ledger: EntityLedger) -> Optional[LedgerError]:
    """
    Read the declaration block and register every pokemon in ``ledger``.

    Args:
        stream: Stream positioned at the start of the file
        ledger: Ledger to populate

    Returns:
        None once the terminating newline is consumed, otherwise the error
        that stopped the scan (MalformedInput, DuplicateId or
        CapacityExceeded).
    """
    while True:
        char = stream.read()
        if not char:
            return _truncated(stream, "reached end of input before the end of the pokemon declaration")
        if char == DECLARATION_END:
            logger.info(f"Declared {len(ledger)} pokemon")
            return None
        if char in SEPARATORS:
            continue

        name = _read_name(stream)
        if not name:
            return _truncated(stream, f"pokemon id {char!r} has no name")

        error = ledger.insert(name, char)
        if error is not None:
            return error


def _read_name(stream: CharStream) -> str:
    while stream.peek() in SEPARATORS:
        stream.read()

    chars = []
    while True:
        char = stream.peek()
        if not char or char in SEPARATORS or char == DECLARATION_END:
            return "".join(chars)
        chars.append(stream.read())


def _truncated(stream: CharStream, reason: str) -> MalformedInput:
    if stream.bad:
        reason = f"input stream failed: {stream.error}"
    logger.debug(f"Declaration aborted at character {stream.position}: {reason}")
    return MalformedInput(reason)
