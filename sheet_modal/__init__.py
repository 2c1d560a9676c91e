"""
Sheet-backed product modal.

Loads a spreadsheet published as CSV into an in-memory product table and
fills a product dialog from it when a product card is activated.

Public API:
- sheets.parse_csv, sheets.build_table
- services.ProductRepository, services.SheetLoader
- services.ModalPresenter, services.build_modal_content
- config.load_config
"""

from . import config, models, services, sheets  # re-export modules

__all__ = [
    "config",
    "models",
    "services",
    "sheets",
]

__version__ = "0.1.0"
