"""
Typed error values for the ev list core.

Ledger and parser operations return one of these instead of raising, so
the caller can branch on the kind of failure. Every error is final: the
run that produced it is abandoned with no partial output.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LedgerError:
    """Base class for every failure the core can report."""

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class DuplicateId(LedgerError):
    """A declaration re-used an id that is already registered."""
    id: str

    def describe(self) -> str:
        return f"id {self.id!r} was repeated in the pokemon declaration"


@dataclass(frozen=True)
class UnknownId(LedgerError):
    """An id was referenced that no pokemon was declared with."""
    id: str

    def describe(self) -> str:
        return f"id {self.id!r} does not belong to any declared pokemon"


@dataclass(frozen=True)
class MalformedInput(LedgerError):
    """The stream ended or went bad before the required structure was read."""
    reason: str

    def describe(self) -> str:
        return f"malformed ev list: {self.reason}"


@dataclass(frozen=True)
class InputUnavailable(LedgerError):
    """The input file could not be opened."""
    path: str
    reason: str = ""

    def describe(self) -> str:
        if self.reason:
            return f"could not open {self.path}: {self.reason}"
        return f"could not open {self.path}"


@dataclass(frozen=True)
class CapacityExceeded(LedgerError):
    """A declaration would grow a bounded ledger past its configured capacity."""
    capacity: int

    def describe(self) -> str:
        return f"ledger capacity of {self.capacity} pokemon exceeded"
