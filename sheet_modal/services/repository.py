from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType

from ..models.events import SheetsLoadedEvent
from ..models.record import ProductTable, Record

"""In-memory product repository.

Holds the key -> Record table that the loader fills and the presenter reads.
The table starts empty and is only ever replaced as a whole, so a reader sees
either the previous table or the complete new one. Each replacement notifies
the subscribers with a ``sheets:loaded`` event carrying the record count.
"""

__all__ = [
    "ProductRepository",
    "Listener",
]

logger = logging.getLogger(__name__)

Listener = Callable[[SheetsLoadedEvent], None]


class ProductRepository:
    def __init__(self) -> None:
        self._table: ProductTable = {}
        self._listeners: list[Listener] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        """True once a table has been installed."""
        return self._loaded

    def replace(self, table: ProductTable) -> SheetsLoadedEvent:
        """Install ``table`` and notify subscribers."""
        self._table = dict(table)
        self._loaded = True
        event = SheetsLoadedEvent(count=len(self._table))
        self._notify(event)
        return event

    def get(self, key: str) -> Record | None:
        """Exact (case-sensitive) lookup; None when absent."""
        return self._table.get(key)

    def snapshot(self) -> Mapping[str, Record]:
        """Read-only view of the current table."""
        return MappingProxyType(self._table)

    def keys(self) -> list[str]:
        return list(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._table))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for ``sheets:loaded``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: SheetsLoadedEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"{event.name} listener failed: {e}")
