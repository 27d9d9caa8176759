"""
Entity ledger for declared pokemon and their capped effort values.
"""

from .errors import (
    CapacityExceeded,
    DuplicateId,
    InputUnavailable,
    LedgerError,
    MalformedInput,
    UnknownId,
)
from .model import (
    MAX_EFFORT_VALUE,
    STAT_CODES,
    STAT_COUNT,
    STAT_LABELS,
    Entity,
    StatKind,
    is_reserved,
    stat_kind_for,
)
from .store import EntityLedger

__all__ = [
    "CapacityExceeded",
    "DuplicateId",
    "InputUnavailable",
    "LedgerError",
    "MalformedInput",
    "UnknownId",
    "MAX_EFFORT_VALUE",
    "STAT_CODES",
    "STAT_COUNT",
    "STAT_LABELS",
    "Entity",
    "StatKind",
    "is_reserved",
    "stat_kind_for",
    "EntityLedger",
]
