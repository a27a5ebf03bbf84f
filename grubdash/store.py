"""
In-Memory Collection Stores

Each resource lives in a process-wide ordered list. Lookups are a linear
scan by exact id. There is no locking: handlers run on the event loop
thread and never suspend between reading and mutating an entity.

Usage:
    from grubdash.store import get_dish_store

    dish = get_dish_store().find(dish_id)

Version: 1.0.0
"""

import logging
from functools import lru_cache
from typing import Generic, Optional, Protocol, TypeVar

from grubdash.models import Dish, Order

logger = logging.getLogger(__name__)


class Identified(Protocol):
    id: str


EntityT = TypeVar("EntityT", bound=Identified)


class CollectionStore(Generic[EntityT]):
    """Ordered in-memory list of entities with id-based access."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: list[EntityT] = []

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[EntityT]:
        """Return the live collection, in insertion order."""
        return self._items

    def find(self, entity_id: str) -> Optional[EntityT]:
        """Return the entity whose id equals ``entity_id``, or None."""
        return next((item for item in self._items if item.id == entity_id), None)

    def insert(self, entity: EntityT) -> EntityT:
        """Append an entity and return it."""
        self._items.append(entity)
        logger.debug(f"{self.name}: inserted {entity.id} ({len(self._items)} total)")
        return entity

    def remove(self, entity_id: str) -> bool:
        """
        Remove the entity with the given id.

        Returns:
            bool: True if an entity was removed
        """
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                del self._items[index]
                logger.debug(f"{self.name}: removed {entity_id}")
                return True
        return False


@lru_cache()
def get_dish_store() -> CollectionStore[Dish]:
    """Get the process-wide dish store."""
    return CollectionStore("dishes")


@lru_cache()
def get_order_store() -> CollectionStore[Order]:
    """Get the process-wide order store."""
    return CollectionStore("orders")


def reset_stores() -> None:
    """
    Drop both cached stores.

    The next call to get_dish_store() / get_order_store() creates an
    empty store.
    """
    get_dish_store.cache_clear()
    get_order_store.cache_clear()
    logger.debug("Collection stores reset")
