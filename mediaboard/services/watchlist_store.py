"""In-memory watchlist store"""

import itertools
import threading
from typing import Dict, List

from ..schemas.watchlist import Category, WatchlistItem
from .log_service import log_service


class IndexOutOfRange(IndexError):
    """Watchlist index outside [0, length)"""

    def __init__(self, category: Category, index: int, length: int):
        super().__init__(
            f"Index {index} out of range for {category.value} (length {length})"
        )
        self.category = category
        self.index = index


class ItemNotFound(KeyError):
    """No watchlist item with the given id"""

    def __init__(self, category: Category, item_id: int):
        super().__init__(f"No item {item_id} in {category.value}")
        self.category = category
        self.item_id = item_id


class WatchlistStore:
    """
    Two ordered watchlists, one per category.

    Items are addressed either by their current position (which shifts when
    an earlier item is removed) or by the id assigned at append time.
    Contents live in process memory only.
    """

    def __init__(self):
        self._items: Dict[Category, List[WatchlistItem]] = {
            category: [] for category in Category
        }
        self._locks: Dict[Category, threading.Lock] = {
            category: threading.Lock() for category in Category
        }
        self._ids = itertools.count(1)
        self._ids_lock = threading.Lock()

    def _next_id(self) -> int:
        with self._ids_lock:
            return next(self._ids)

    def _check_index(self, category: Category, index: int) -> None:
        length = len(self._items[category])
        if not 0 <= index < length:
            raise IndexOutOfRange(category, index, length)

    def list(self, category: Category) -> List[WatchlistItem]:
        """Snapshot of a category's items in display order"""
        with self._locks[category]:
            return [item.model_copy() for item in self._items[category]]

    def append(self, category: Category, name: str) -> WatchlistItem:
        """Append a new, not completed item. Duplicates are allowed."""
        item = WatchlistItem(id=self._next_id(), name=name, completed=False)
        with self._locks[category]:
            self._items[category].append(item)
        log_service.info(f"Added '{name}' to {category.value}")
        return item.model_copy()

    def toggle_complete(
        self, category: Category, index: int, completed: bool
    ) -> WatchlistItem:
        """Set the completed flag of the item at `index`"""
        with self._locks[category]:
            self._check_index(category, index)
            item = self._items[category][index]
            item.completed = completed
            return item.model_copy()

    def remove(self, category: Category, index: int) -> WatchlistItem:
        """Remove the item at `index`; later items move down by one"""
        with self._locks[category]:
            self._check_index(category, index)
            item = self._items[category].pop(index)
        log_service.info(f"Removed '{item.name}' from {category.value}")
        return item

    def index_of(self, category: Category, item_id: int) -> int:
        with self._locks[category]:
            return self._index_of(category, item_id)

    def _index_of(self, category: Category, item_id: int) -> int:
        for index, item in enumerate(self._items[category]):
            if item.id == item_id:
                return index
        raise ItemNotFound(category, item_id)

    def toggle_complete_by_id(
        self, category: Category, item_id: int, completed: bool
    ) -> WatchlistItem:
        with self._locks[category]:
            item = self._items[category][self._index_of(category, item_id)]
            item.completed = completed
            return item.model_copy()

    def remove_by_id(self, category: Category, item_id: int) -> WatchlistItem:
        with self._locks[category]:
            item = self._items[category].pop(self._index_of(category, item_id))
        log_service.info(f"Removed '{item.name}' from {category.value}")
        return item
