"""
evtally - effort value tally sheets.

Reads an ev list file (a declaration line of pokemon followed by a stream
of batched stat codes) and produces a per-pokemon summary of the capped
effort value totals.
"""

from .config import Settings
from .ledger import Entity, EntityLedger, LedgerError, StatKind
from .pipeline import LoadOutcome, load_ledger, parse_text
from .report import render_report, write_report

__all__ = [
    "Settings",
    "Entity",
    "EntityLedger",
    "LedgerError",
    "StatKind",
    "LoadOutcome",
    "load_ledger",
    "parse_text",
    "render_report",
    "write_report",
]

__version__ = "0.1.0"
