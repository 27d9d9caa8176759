"""
Core ledger data model: stat kinds, the stat-code table and entities.

The stat-code table is part of the ev list file format. Each of the six
reserved letters maps to exactly one stat kind, and the enum order is the
index order of every effort value vector.
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Optional, Sequence, Tuple

MAX_EFFORT_VALUE = 255
UNUSED_ID = "!"


class StatKind(IntEnum):
    """The six base stats an effort value can be earned in."""
    HP = 0
    ATTACK = 1
    DEFENSE = 2
    SP_ATTACK = 3
    SP_DEFENSE = 4
    SPEED = 5

    @property
    def code(self) -> str:
        return STAT_CODES[self]

    @property
    def label(self) -> str:
        return STAT_LABELS[self]


STAT_COUNT = len(StatKind)

STAT_CODES: Dict[StatKind, str] = {
    StatKind.HP: "h",
    StatKind.ATTACK: "a",
    StatKind.DEFENSE: "d",
    StatKind.SP_ATTACK: "p",
    StatKind.SP_DEFENSE: "q",
    StatKind.SPEED: "s",
}

STAT_LABELS: Dict[StatKind, str] = {
    StatKind.HP: "HP",
    StatKind.ATTACK: "Attack",
    StatKind.DEFENSE: "Defense",
    StatKind.SP_ATTACK: "Sp. Attack",
    StatKind.SP_DEFENSE: "Sp. Defense",
    StatKind.SPEED: "Speed",
}

_KIND_BY_CODE: Dict[str, StatKind] = {code: kind for kind, code in STAT_CODES.items()}

RESERVED_CHARACTERS = frozenset({" ", "\n", UNUSED_ID, *STAT_CODES.values()})

EffortValues = Tuple[int, int, int, int, int, int]


def stat_kind_for(char: str) -> Optional[StatKind]:
    """Return the stat kind a stat code stands for, or None for any other character."""
    return _KIND_BY_CODE.get(char)


def is_reserved(char: str) -> bool:
    """Check whether a character may never be used as a pokemon id."""
    return char in RESERVED_CHARACTERS


def saturating_add(current: int, delta: int, ceiling: int = MAX_EFFORT_VALUE) -> int:
    """Add two non-negative counters, clamping the result at ``ceiling``."""
    total = current + delta
    if total > ceiling:
        return ceiling
    return total


def check_effort_values(values: Sequence[int]) -> None:
    """Raise ValueError unless ``values`` is a six-slot vector of counters in range."""
    if len(values) != STAT_COUNT:
        raise ValueError(f"Expected {STAT_COUNT} effort values, got {len(values)}")
    for value in values:
        if not 0 <= value <= MAX_EFFORT_VALUE:
            raise ValueError(f"Effort value out of range 0-{MAX_EFFORT_VALUE}: {value}")


@dataclass(frozen=True)
class Entity:
    """
    A declared pokemon and its accumulated effort values.

    Entities are immutable; the ledger replaces the record when counters
    move, so a caller holding an entity can never push a counter past
    MAX_EFFORT_VALUE.
    """
    name: str
    id: str
    effort_values: EffortValues = (0, 0, 0, 0, 0, 0)

    def add(self, delta: Sequence[int]) -> "Entity":
        """Return a copy with ``delta`` added to each counter, capped at MAX_EFFORT_VALUE."""
        values = tuple(
            saturating_add(self.effort_values[index], delta[index]) for index in range(STAT_COUNT)
        )
        return replace(self, effort_values=values)

    def value(self, kind: StatKind) -> int:
        return self.effort_values[kind]

    def snapshot(self) -> EffortValues:
        """Return the six counters as a tuple."""
        return self.effort_values

    def labelled(self) -> Dict[str, int]:
        """Map display labels to counter values, in stat order."""
        return {kind.label: self.effort_values[kind] for kind in StatKind}

    def total(self) -> int:
        return sum(self.effort_values)
