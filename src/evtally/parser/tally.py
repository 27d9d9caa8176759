"""
Effort value tally phase.

After the declaration line the file is a flat run of single characters.
Stat codes vote for whichever batch of ids is currently active; a run of
id characters defines the active batch. The first id after one or more
stat codes closes the previous batch: its counts are flushed onto every
id in it before the new batch starts. End of stream flushes whatever is
still pending.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from ..ledger import (
    EntityLedger,
    LedgerError,
    MalformedInput,
    StatKind,
    UnknownId,
    stat_kind_for,
)
from ..ledger.model import MAX_EFFORT_VALUE, STAT_COUNT, saturating_add
from ..logging import get_logger
from .stream import CharStream

logger = get_logger(__name__)

SEPARATORS = frozenset(" \t\r\n")


class ScanMode(Enum):
    ID = "id"
    STAT = "stat"


@dataclass(frozen=True)
class TallyScan:
    """Pending batch state carried from one character to the next."""
    mode: ScanMode = ScanMode.ID
    pending_ids: Tuple[str, ...] = ()
    pending_counts: Tuple[int, ...] = (0,) * STAT_COUNT

    def add_stat(self, kind: StatKind) -> "TallyScan":
        """Count one stat code, saturating at MAX_EFFORT_VALUE."""
        counts = list(self.pending_counts)
        counts[kind] = saturating_add(counts[kind], 1, MAX_EFFORT_VALUE)
        return replace(self, mode=ScanMode.STAT, pending_counts=tuple(counts))

    def add_id(self, entity_id: str) -> "TallyScan":
        """Add an id to the active batch; repeats within a batch are ignored."""
        if entity_id in self.pending_ids:
            return replace(self, mode=ScanMode.ID)
        return replace(self, mode=ScanMode.ID, pending_ids=self.pending_ids + (entity_id,))


@dataclass
class TallyStats:
    characters: int = 0
    stat_codes: int = 0
    batches: int = 0


def flush(scan: TallyScan, ledger: EntityLedger) -> Optional[LedgerError]:
    """
    Credit the pending counts to every id in the pending batch.

    Every id is checked before any counter moves, so an unknown id leaves
    the ledger untouched.
    """
    for entity_id in scan.pending_ids:
        if entity_id not in ledger:
            return UnknownId(entity_id)

    for entity_id in scan.pending_ids:
        error = ledger.accumulate(entity_id, scan.pending_counts)
        if error is not None:
            return error
    return None


def tally_phase(stream: CharStream, ledger: EntityLedger) -> Optional[LedgerError]:
    """
    Read the rest of the stream and credit the tallied effort values.

    Args:
        stream: Stream positioned just after the declaration newline
        ledger: Ledger populated by the declaration phase

    Returns:
        None when the stream is exhausted and the final batch is flushed;
        UnknownId for an undeclared id; MalformedInput if the stream fails.
    """
    scan = TallyScan()
    stats = TallyStats()

    while True:
        char = stream.read()
        if not char:
            break
        stats.characters += 1

        if char in SEPARATORS:
            continue

        kind = stat_kind_for(char)
        if kind is not None:
            scan = scan.add_stat(kind)
            stats.stat_codes += 1
            continue

        if scan.mode is ScanMode.STAT:
            error = flush(scan, ledger)
            if error is not None:
                logger.debug(f"Tally aborted at character {stream.position}: {error.describe()}")
                return error
            stats.batches += 1
            scan = TallyScan()
        scan = scan.add_id(char)

    if stream.bad:
        return MalformedInput(f"input stream failed during tally: {stream.error}")

    error = flush(scan, ledger)
    if error is not None:
        return error
    if scan.pending_ids:
        stats.batches += 1

    logger.info(
        f"Tally complete: {stats.stat_codes} stat codes in {stats.batches} batches "
        f"({stats.characters} characters)"
    )
    return None
