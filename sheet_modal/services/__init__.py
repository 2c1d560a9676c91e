from .formatting import build_modal_content, format_price
from .loader import SheetLoader, SheetLoadError
from .presenter import ModalPresenter, ModalState, ModalView
from .repository import ProductRepository
from .summary import render_summary_line

__all__ = [
    "build_modal_content",
    "format_price",
    "SheetLoader",
    "SheetLoadError",
    "ModalPresenter",
    "ModalState",
    "ModalView",
    "ProductRepository",
    "render_summary_line",
]
