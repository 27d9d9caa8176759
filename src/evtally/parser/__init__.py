"""
Two-phase ev list parser: pokemon declarations, then the effort value tally.
"""

from .stream import CharStream
from .declaration import declaration_phase
from .tally import ScanMode, TallyScan, flush, tally_phase

__all__ = [
    "CharStream",
    "declaration_phase",
    "ScanMode",
    "TallyScan",
    "flush",
    "tally_phase",
]
