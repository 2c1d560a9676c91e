from __future__ import annotations

import sys
from typing import Any, TextIO

from ..models.modal_content import ModalContent

"""ModalView printing the dialog to a text stream (used by ``--show``)."""

__all__ = [
    "ConsoleModalView",
    "CLOSE_CONTROL",
]

CLOSE_CONTROL = "close"


class ConsoleModalView:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout
        self.visible = False
        self.scroll_locked = False
        self.focused: Any = None

    def render(self, content: ModalContent) -> None:
        lines = [
            f"title: {content.title}",
            f"image: {content.image_src if content.image_visible else '(hidden)'}",
            f"description: {content.description}",
            f"price: {content.price}",
            f"unit: {content.unit}",
            f"availability: {content.availability}",
            f"sku: {content.sku}",
        ]
        print("\n".join(lines), file=self.stream)

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_scroll_locked(self, locked: bool) -> None:
        self.scroll_locked = locked

    def focused_element(self) -> Any:
        return self.focused

    def focus_close_control(self) -> None:
        self.focused = CLOSE_CONTROL

    def focus(self, element: Any) -> None:
        self.focused = element
