from __future__ import annotations

from dataclasses import dataclass

"""What the modal dialog shows for one activation."""

__all__ = [
    "ModalContent",
    "DESCRIPTION_FALLBACK",
    "PLACEHOLDER",
]

DESCRIPTION_FALLBACK = "information unavailable"
PLACEHOLDER = "—"  # em dash


@dataclass(frozen=True)
class ModalContent:
    """Fully resolved text for every slot of the dialog.

    Attributes:
        title: Always the activated key, never a record field
        image_src: Source of the triggering card's image ("" when none)
        image_alt: Alt text of that image, defaulting to the key
        image_visible: False hides the image slot
        description: Record description or DESCRIPTION_FALLBACK
        price: "price currency" or PLACEHOLDER
        unit: Record unit or PLACEHOLDER
        availability: Record availability or PLACEHOLDER
        sku: Record sku or PLACEHOLDER
    """
    title: str
    image_src: str
    image_alt: str
    image_visible: bool
    description: str
    price: str
    unit: str
    availability: str
    sku: str
