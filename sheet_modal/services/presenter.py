from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol

from ..models.card import Card
from ..models.events import SheetsLoadedEvent
from ..models.modal_content import DESCRIPTION_FALLBACK, PLACEHOLDER, ModalContent
from .formatting import build_modal_content
from .repository import ProductRepository

"""Modal presenter: a two-state (closed/open) machine over a view interface.

The presenter owns no UI. Anything able to show text, toggle visibility,
lock page scroll and move focus can implement ``ModalView``; the product data
comes from the ``ProductRepository`` passed in, which may still be empty when
the user activates a card.

Transitions:
- closed -> open: card activation (click, Enter, Space) or ``open_for_key``
- open -> closed: close control, backdrop click, Escape
"""

__all__ = [
    "ModalState",
    "ModalView",
    "ModalPresenter",
    "ACTIVATION_TRIGGERS",
    "CLOSE_KEY",
]

logger = logging.getLogger(__name__)

ACTIVATION_TRIGGERS = frozenset({"click", "Enter", " ", "Spacebar"})
CLOSE_KEY = "Escape"


class ModalState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class ModalView(Protocol):
    """What the presenter needs from the dialog on the page."""

    def render(self, content: ModalContent) -> None: ...

    def set_visible(self, visible: bool) -> None:
        """Toggle the visible marker and aria-hidden."""
        ...

    def set_scroll_locked(self, locked: bool) -> None:
        """Set/clear ``overflow: hidden`` on the root and body elements."""
        ...

    def focused_element(self) -> Any: ...

    def focus_close_control(self) -> None: ...

    def focus(self, element: Any) -> None: ...


class ModalPresenter:
    def __init__(
        self,
        repository: ProductRepository,
        view: ModalView,
        *,
        description_fallback: str = DESCRIPTION_FALLBACK,
        placeholder: str = PLACEHOLDER,
    ) -> None:
        self.repository = repository
        self.view = view
        self.description_fallback = description_fallback
        self.placeholder = placeholder
        self.state = ModalState.CLOSED
        self.content: ModalContent | None = None
        self._last_focus: Any = None
        self._cards: dict[str, Card] = {}
        self._unsubscribe = repository.subscribe(self._on_sheets_loaded)

    @property
    def is_open(self) -> bool:
        return self.state is ModalState.OPEN

    # -- cards -------------------------------------------------------------

    def attach_cards(self, cards: Iterable[Card]) -> int:
        """Bind cards for activation; returns how many were newly bound.

        Cards without a key are ignored. Scanning the same cards again binds
        nothing twice.
        """
        bound = 0
        for card in cards:
            if not card.key:
                continue
            if card.identity in self._cards:
                continue
            self._cards[card.identity] = card
            bound += 1
        if bound:
            logger.debug(f"bound {bound} product cards ({len(self._cards)} total)")
        return bound

    def bound_cards(self) -> list[Card]:
        return list(self._cards.values())

    def find_card(self, key: str) -> Card | None:
        for card in self._cards.values():
            if card.key == key:
                return card
        return None

    def activate_card(self, card_id: str, trigger: str) -> bool:
        """Dispatch an activation for a bound card. Unknown cards are ignored."""
        card = self._cards.get(card_id)
        if card is None:
            return False
        return self.on_activate(card, trigger)

    def on_activate(self, card: Card, trigger: str) -> bool:
        """Open the dialog for ``card`` on click, Enter or Space."""
        if trigger not in ACTIVATION_TRIGGERS or not card.key:
            return False
        self.open_for_key(card.key, card)
        return True

    # -- transitions -------------------------------------------------------

    def open_for_key(self, key: str, card: Card | None = None) -> ModalContent:
        """Render the dialog for ``key`` and show it.

        A missing record (or a table that has not loaded yet) renders the
        fallback text for every record-derived field. Without an explicit
        card the first bound card with the same key supplies the image.
        """
        record = self.repository.get(key)
        if record is None:
            logger.debug(f"no record for key '{key}' ({len(self.repository)} loaded)")
        if card is None:
            card = self.find_card(key)

        content = build_modal_content(
            key,
            record,
            card,
            description_fallback=self.description_fallback,
            placeholder=self.placeholder,
        )
        self._call_view("render", content)
        self._call_view("set_visible", True)
        if self.state is ModalState.CLOSED:
            self._last_focus = self._call_view("focused_element")
        self._call_view("focus_close_control")
        self._call_view("set_scroll_locked", True)

        self.content = content
        self.state = ModalState.OPEN
        return content

    def close(self) -> None:
        """Hide the dialog, unlock scroll and give focus back. Safe when closed."""
        self._call_view("set_visible", False)
        self._call_view("set_scroll_locked", False)
        last_focus = self._last_focus
        self._last_focus = None
        if last_focus is not None:
            self._call_view("focus", last_focus)
        self.state = ModalState.CLOSED

    # -- page events -------------------------------------------------------

    def on_close_control(self) -> None:
        self.close()

    def on_backdrop_click(self, target_is_backdrop: bool) -> bool:
        """Close on clicks on the backdrop itself, not on the dialog content."""
        if not target_is_backdrop:
            return False
        self.close()
        return True

    def on_key(self, key: str) -> bool:
        """Escape closes the dialog while it is open."""
        if key == CLOSE_KEY and self.is_open:
            self.close()
            return True
        return False

    def detach(self) -> None:
        """Stop listening to repository notifications."""
        self._unsubscribe()

    def _call_view(self, method: str, *args: Any) -> Any:
        try:
            return getattr(self.view, method)(*args)
        except Exception as e:
            logger.error(f"modal view {method} failed: {e}")
            return None

    def _on_sheets_loaded(self, event: SheetsLoadedEvent) -> None:
        logger.debug(f"{event.name}: {event.count} records available")
