"""
Entity ledger: the id-keyed, insertion-ordered registry of pokemon.

A single dict keyed by id holds every entity, so an id can never exist
without its record (dicts keep insertion order, which is the report order).
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .errors import CapacityExceeded, DuplicateId, LedgerError, UnknownId
from .model import EffortValues, Entity, check_effort_values
from ..logging import get_logger

logger = get_logger(__name__)


class EntityLedger:
    """
    Registry of declared pokemon and their effort values.

    Args:
        capacity: Optional upper bound on the number of pokemon. None means
            the ledger grows without limit.
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._entities: Dict[str, Entity] = {}
        self._order: List[str] = []

    @property
    def capacity(self) -> Optional[int]:
        return self._capacity

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def insert(self, name: str, entity_id: str) -> Optional[LedgerError]:
        """
        Register a new pokemon with all effort values at zero.

        Returns:
            None on success, DuplicateId if the id is taken, or
            CapacityExceeded if the ledger is full. The ledger is unchanged
            whenever an error is returned.
        """
        if entity_id in self._entities:
            logger.debug(f"Rejected duplicate id {entity_id!r} for {name}")
            return DuplicateId(entity_id)
        if self._capacity is not None and len(self._order) >= self._capacity:
            return CapacityExceeded(self._capacity)

        self._entities[entity_id] = Entity(name=name, id=entity_id)
        self._order.append(entity_id)
        logger.debug(f"Registered {name} as {entity_id!r}")
        return None

    def lookup_index(self, entity_id: str) -> Union[int, UnknownId]:
        """Return the insertion position of a pokemon, or UnknownId."""
        if entity_id not in self._entities:
            return UnknownId(entity_id)
        return self._order.index(entity_id)

    def get(self, entity_id: str) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def effort_values(self, entity_id: str) -> Union[EffortValues, UnknownId]:
        entity = self._entities.get(entity_id)
        if entity is None:
            return UnknownId(entity_id)
        return entity.snapshot()

    def accumulate(self, entity_id: str, delta: Sequence[int]) -> Optional[UnknownId]:
        """
        Add ``delta`` to every counter of a pokemon, capping each at 255.

        Either all six counters change or, when the id is unknown, none do.

        Raises:
            ValueError: If ``delta`` is not a six-slot vector of counters.
        """
        check_effort_values(delta)
        entity = self._entities.get(entity_id)
        if entity is None:
            return UnknownId(entity_id)

        self._entities[entity_id] = entity.add(delta)
        return None

    def ids(self) -> List[str]:
        return list(self._order)

    def entities(self) -> Iterator[Entity]:
        """Yield entities in insertion order."""
        for entity_id in self._order:
            yield self._entities[entity_id]

    def iterate(self) -> Iterator[Tuple[str, EffortValues]]:
        """Yield ``(name, effort_values)`` pairs in insertion order."""
        for entity in self.entities():
            yield entity.name, entity.snapshot()
