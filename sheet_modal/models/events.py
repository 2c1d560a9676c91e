from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "SHEETS_LOADED",
    "SheetsLoadedEvent",
]

SHEETS_LOADED = "sheets:loaded"


@dataclass(frozen=True)
class SheetsLoadedEvent:
    """Notification sent once the product table has been replaced."""
    count: int
    name: str = SHEETS_LOADED

    def to_detail(self) -> dict[str, Any]:
        """Event payload as published on the page: ``{"count": n}``."""
        return {"count": self.count}
