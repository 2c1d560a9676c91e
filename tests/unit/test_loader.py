from __future__ import annotations

from unittest.mock import patch

import requests

from sheet_modal.services.loader import SheetLoader
from sheet_modal.services.repository import ProductRepository

URL = "https://example.test/sheet.csv"


def _loader(repository: ProductRepository, session, timeout=None) -> SheetLoader:
    return SheetLoader(repository, URL, session=session, timeout=timeout)


def test_load_success_installs_table_and_notifies(repository, fake_session, response, sample_csv):
    fake_session.get.return_value = response(sample_csv)
    events = []
    repository.subscribe(events.append)

    result = _loader(repository, fake_session).load()

    assert result.ok is True
    assert result.count == 2
    assert result.data_rows == 3
    assert result.skipped_rows == 1
    assert result.key_field == "name"
    assert result.error is None
    assert repository.get("Apple")["sku"] == "APL-1"
    assert [e.count for e in events] == [2]


def test_plain_get_without_headers_or_auth(repository, fake_session, response, sample_csv):
    fake_session.get.return_value = response(sample_csv)
    _loader(repository, fake_session).load()
    fake_session.get.assert_called_once_with(URL, timeout=None)


def test_configured_timeout_is_passed(repository, fake_session, response, sample_csv):
    fake_session.get.return_value = response(sample_csv)
    _loader(repository, fake_session, timeout=3.5).load()
    fake_session.get.assert_called_once_with(URL, timeout=3.5)


def test_network_error_leaves_table_and_fires_no_event(repository, fake_session):
    fake_session.get.side_effect = requests.ConnectionError("unreachable")
    events = []
    repository.subscribe(events.append)

    result = _loader(repository, fake_session).load()

    assert result.ok is False
    assert "unreachable" in result.error
    assert len(repository) == 0
    assert repository.loaded is False
    assert events == []


def test_failure_keeps_previous_table(repository, fake_session, response):
    repository.replace({"Apple": {"name": "Apple"}})
    fake_session.get.return_value = response("", status_code=500)

    result = _loader(repository, fake_session).load()

    assert result.ok is False
    assert "HTTP 500" in result.error
    assert repository.keys() == ["Apple"]


def test_non_2xx_is_a_failure(repository, fake_session, response, sample_csv):
    fake_session.get.return_value = response(sample_csv, status_code=404)
    result = _loader(repository, fake_session).load()
    assert result.ok is False
    assert len(repository) == 0


def test_empty_body_is_a_failure(repository, fake_session, response):
    fake_session.get.return_value = response("  \n\t ")
    result = _loader(repository, fake_session).load()
    assert result.ok is False
    assert result.error == "empty CSV"


def test_failure_is_logged_as_warning(repository, fake_session):
    fake_session.get.side_effect = requests.Timeout("timed out")
    with patch("sheet_modal.services.loader.logger") as mock_logger:
        _loader(repository, fake_session).load()
    mock_logger.warning.assert_called_once()
    assert "timed out" in mock_logger.warning.call_args[0][0]


def test_load_text_skips_network(repository, fake_session):
    result = _loader(repository, fake_session).load_text("title,price\nLamp,10\n")
    fake_session.get.assert_not_called()
    assert result.ok is True
    assert result.key_field == "title"
    assert repository.get("Lamp") == {"title": "Lamp", "price": "10"}


def test_header_only_sheet_loads_empty_table(repository, fake_session, response):
    fake_session.get.return_value = response("name,price\n")
    events = []
    repository.subscribe(events.append)
    result = _loader(repository, fake_session).load()
    assert result.ok is True
    assert result.count == 0
    assert [e.count for e in events] == [0]


def test_start_background_loads_once(repository, fake_session, response, sample_csv):
    fake_session.get.return_value = response(sample_csv)
    thread = _loader(repository, fake_session).start_background()
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert thread.daemon is True
    assert fake_session.get.call_count == 1
    assert len(repository) == 2


def test_default_session_is_requests_session(repository):
    loader = SheetLoader(repository, URL)
    assert isinstance(loader.session, requests.Session)
