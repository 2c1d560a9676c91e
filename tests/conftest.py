# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from sheet_modal.logging.init import reset_logging
from sheet_modal.models.modal_content import ModalContent
from sheet_modal.services.repository import ProductRepository


SAMPLE_CSV = (
    "Name,Description,Price,Currency,Unit,Availability,SKU\n"
    "Apple,Fresh fruit,1.50,USD,kg,In stock,APL-1\n"
    "Pear,,2.00,,,Out of stock,\n"
    ",orphan row,9.99,USD,,,\n"
)


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("SHEETS_CSV_URL", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """csv_url: https://example.test/sheet.csv
request_timeout: 5
cards:
  - key: Apple
    image_src: images/apple.jpg
    image_alt: A red apple
  - key: Pear
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "sheets.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def sample_csv_file(temp_workdir: Path) -> Path:
    f = temp_workdir / "data" / "products.csv"
    f.write_text(SAMPLE_CSV, encoding="utf-8")
    return f


@pytest.fixture()
def repository() -> ProductRepository:
    return ProductRepository()


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.text = text
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    return resp


@pytest.fixture()
def fake_session():
    """requests.Session stand-in; set ``fake_session.get.return_value``/``side_effect``."""
    session = MagicMock()
    session.get.return_value = make_response("")
    return session


class RecordingModalView:
    """ModalView that records what the presenter asked for."""

    def __init__(self, focused: Any = "page-button") -> None:
        self.rendered: list[ModalContent] = []
        self.visible = False
        self.aria_hidden = True
        self.scroll_locked = False
        self.focused: Any = focused
        self.calls: list[str] = []

    def render(self, content: ModalContent) -> None:
        self.calls.append("render")
        self.rendered.append(content)

    def set_visible(self, visible: bool) -> None:
        self.calls.append(f"set_visible:{visible}")
        self.visible = visible
        self.aria_hidden = not visible

    def set_scroll_locked(self, locked: bool) -> None:
        self.calls.append(f"set_scroll_locked:{locked}")
        self.scroll_locked = locked

    def focused_element(self) -> Any:
        return self.focused

    def focus_close_control(self) -> None:
        self.calls.append("focus_close_control")
        self.focused = "close-control"

    def focus(self, element: Any) -> None:
        self.calls.append(f"focus:{element}")
        self.focused = element

    @property
    def last(self) -> ModalContent:
        return self.rendered[-1]


@pytest.fixture()
def view() -> RecordingModalView:
    return RecordingModalView()


@pytest.fixture()
def response():
    """Factory building fake ``requests.Response`` objects."""
    return make_response
