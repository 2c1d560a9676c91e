"""Domain models for the sheet-backed product modal."""

from .card import Card
from .events import SHEETS_LOADED, SheetsLoadedEvent
from .load_result import LoadResult
from .modal_content import DESCRIPTION_FALLBACK, PLACEHOLDER, ModalContent
from .record import ProductTable, Record

__all__ = [
    # Sheet data
    "Record",
    "ProductTable",
    # Page collaborators
    "Card",
    "ModalContent",
    "DESCRIPTION_FALLBACK",
    "PLACEHOLDER",
    # Loading
    "LoadResult",
    "SHEETS_LOADED",
    "SheetsLoadedEvent",
]
