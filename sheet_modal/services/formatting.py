from __future__ import annotations

from ..models.card import Card
from ..models.modal_content import DESCRIPTION_FALLBACK, PLACEHOLDER, ModalContent
from ..models.record import Record

"""Turn a (possibly missing) record into modal dialog text.

The title is always the activated key and the image always comes from the
triggering card. Every record-derived field falls back on its own.
"""

__all__ = [
    "build_modal_content",
    "format_price",
]


def _field(record: Record | None, name: str) -> str:
    if not record:
        return ""
    return record.get(name) or ""


def format_price(record: Record | None, placeholder: str = PLACEHOLDER) -> str:
    """``"<price> <currency>"`` with whichever part is present, else placeholder."""
    parts = [p for p in (_field(record, "price"), _field(record, "currency")) if p]
    if not parts:
        return placeholder
    return " ".join(parts)


def build_modal_content(
    key: str,
    record: Record | None,
    card: Card | None = None,
    *,
    description_fallback: str = DESCRIPTION_FALLBACK,
    placeholder: str = PLACEHOLDER,
) -> ModalContent:
    if card is not None and card.has_image:
        image_src = card.image_src or ""
        image_alt = card.image_alt or key
        image_visible = True
    else:
        image_src = ""
        image_alt = ""
        image_visible = False

    return ModalContent(
        title=key,
        image_src=image_src,
        image_alt=image_alt,
        image_visible=image_visible,
        description=_field(record, "description") or description_fallback,
        price=format_price(record, placeholder),
        unit=_field(record, "unit") or placeholder,
        availability=_field(record, "availability") or placeholder,
        sku=_field(record, "sku") or placeholder,
    )
