"""Minimal change-notification helpers the view binds against."""

import logging
from typing import Callable, Iterable, List, Optional

from customers.domain.search import SortDescription, sort_customers

logger = logging.getLogger(__name__)

PropertyChangedHandler = Callable[[object, str], None]


class ObservableObject:
    """Base class raising property-changed notifications to subscribers."""

    def __init__(self):
        self._property_changed_handlers: List[PropertyChangedHandler] = []

    def subscribe(self, handler: PropertyChangedHandler) -> None:
        self._property_changed_handlers.append(handler)

    def unsubscribe(self, handler: PropertyChangedHandler) -> None:
        self._property_changed_handlers.remove(handler)

    def on_property_changed(self, property_name: str) -> None:
        for handler in list(self._property_changed_handlers):
            handler(self, property_name)


class ObservableCollection:
    """List wrapper that notifies subscribers whenever its contents change."""

    def __init__(self, items: Iterable = ()):
        self._items = list(items)
        self._collection_changed_handlers: List[Callable[[], None]] = []

    def subscribe(self, handler: Callable[[], None]) -> None:
        self._collection_changed_handlers.append(handler)

    def _notify(self) -> None:
        for handler in list(self._collection_changed_handlers):
            handler()

    def append(self, item) -> None:
        self._items.append(item)
        self._notify()

    def remove(self, item) -> None:
        self._items.remove(item)
        self._notify()

    def clear(self) -> None:
        self._items.clear()
        self._notify()

    def reset(self, items: Iterable) -> None:
        """Replace all items with a single notification."""
        self._items = list(items)
        self._notify()

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, item):
        return item in self._items


class CollectionView:
    """
    Filtered and sorted projection over an ObservableCollection.

    The filter is re-evaluated on refresh() and whenever the source changes.
    Only the first sort description is applied.
    """

    def __init__(self, source: ObservableCollection, filter: Optional[Callable[[object], bool]] = None):
        self.source = source
        self.filter = filter
        self.sort_descriptions: List[SortDescription] = []
        self._items: List = []
        source.subscribe(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        items = [item for item in self.source if self.filter is None or self.filter(item)]
        sort = self.sort_descriptions[0] if self.sort_descriptions else None
        self._items = sort_customers(items, sort)

    def sort_by(self, sort: SortDescription) -> None:
        self.sort_descriptions.clear()
        self.sort_descriptions.append(sort)
        self.refresh()

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]
