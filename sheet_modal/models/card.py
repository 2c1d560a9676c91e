from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Card",
]


@dataclass(frozen=True)
class Card:
    """A product card on the page, as seen by the presenter.

    The card is not owned by this package; only its key and its own image are
    read. ``card_id`` identifies the card across re-scans (defaults to the key).
    """
    key: str
    image_src: str | None = None
    image_alt: str | None = None
    card_id: str | None = None

    @property
    def identity(self) -> str:
        return self.card_id if self.card_id is not None else self.key

    @property
    def has_image(self) -> bool:
        return self.image_src is not None
