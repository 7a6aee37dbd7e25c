# Data repository

import copy
import logging
from typing import Dict, Generic, List, Protocol, TypeVar

from data.errors import DuplicateKeyError, InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)


class Identified(Protocol):
    id: int


T = TypeVar("T", bound=Identified)


class KeyedRepository(Generic[T]):
    """
    In-memory storage of items keyed by their integer ``id``.

    At most one item is stored per id. Every operation either applies fully
    or raises one of DuplicateKeyError, NotFoundError or InvalidArgumentError
    and leaves the mapping as it was.
    """

    def __init__(self, items=None):
        self._items: Dict[int, T] = {}
        for item in items or []:
            self.add(item)

    def add(self, item: T) -> T:
        """
        Adds an item to the repository.
        """
        if item.id in self._items:
            raise DuplicateKeyError(f"Item with ID {item.id} already exists.")
        self._items[item.id] = item
        logger.debug("Added %r", item)
        return item

    def get_by_id(self, item_id: int) -> T:
        """
        Retrieves an item by its ID.
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise NotFoundError(f"Item with ID {item_id} not found.") from None

    def remove(self, item_id: int) -> T:
        if item_id not in self._items:
            raise NotFoundError(f"Item with ID {item_id} not found.")
        item = self._items.pop(item_id)
        logger.debug("Removed item %s", item_id)
        return item

    def update_quantity(self, item_id: int, new_quantity: int) -> T:
        """
        Sets the stored item's quantity.

        The quantity is validated before the lookup, so a negative value
        always reports InvalidArgumentError even for an unknown id.
        """
        if new_quantity < 0:
            raise InvalidArgumentError("Quantity cannot be negative.")
        item = self.get_by_id(item_id)
        item.quantity = new_quantity
        logger.debug("Quantity of item %s set to %s", item_id, new_quantity)
        return item

    def get_all(self) -> List[T]:
        """
        Returns a snapshot of all items.

        Items are shallow copies, so neither edits to the snapshot nor later
        repository updates leak across.
        """
        return [copy.copy(item) for item in self._items.values()]

    def clear(self):
        self._items.clear()

    def __len__(self):
        return len(self._items)

    def __contains__(self, item_id):
        return item_id in self._items
