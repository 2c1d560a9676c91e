from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime

import requests

from ..models.load_result import LoadResult
from ..sheets.parser import parse_csv
from ..sheets.table import EmptySheetError, build_table
from .repository import ProductRepository

"""Sheet loading service.

Fetches the published spreadsheet as CSV, parses it, builds the product table
and installs it in the repository. A failed load (network error, non-2xx
response, empty body, zero rows) is logged as a warning and leaves the
repository untouched; nothing is raised and no ``sheets:loaded`` event fires.

There are no retries and no backoff. A request timeout is only applied when
one is configured.
"""

__all__ = [
    "SheetLoadError",
    "SheetLoader",
]

logger = logging.getLogger(__name__)


class SheetLoadError(Exception):
    """Raised internally when the sheet cannot be fetched or is empty."""


class SheetLoader:
    def __init__(
        self,
        repository: ProductRepository,
        url: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.repository = repository
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch_text(self) -> str:
        """GET the CSV export. No auth, no custom headers.

        Raises:
            SheetLoadError: on a non-2xx response
            requests.RequestException: on transport errors
        """
        resp = self.session.get(self.url, timeout=self.timeout)
        if not resp.ok:
            raise SheetLoadError(f"network response not ok: HTTP {resp.status_code}")
        return resp.text

    def load(self) -> LoadResult:
        """Fetch and install the sheet. Never raises."""
        start = datetime.now(UTC)
        try:
            text = self.fetch_text()
        except (requests.RequestException, SheetLoadError) as e:
            return self._failed(start, e)
        return self._load(text, start)

    def load_text(self, text: str) -> LoadResult:
        """Run the parse/build/install pipeline on already fetched text."""
        return self._load(text, datetime.now(UTC))

    def start_background(self) -> threading.Thread:
        """Run ``load()`` once on a daemon thread and return the thread."""
        thread = threading.Thread(target=self.load, name="sheet-loader", daemon=True)
        thread.start()
        return thread

    def _load(self, text: str, start: datetime) -> LoadResult:
        try:
            if not text or not text.strip():
                raise SheetLoadError("empty CSV")
            rows = parse_csv(text)
            built = build_table(rows)
        except (SheetLoadError, EmptySheetError) as e:
            return self._failed(start, e)

        event = self.repository.replace(built.table)
        end = datetime.now(UTC)
        logger.info(
            f"loaded {event.count} records from {self.url} "
            f"(rows={built.data_rows} skipped={built.skipped_rows} key={built.key_field})"
        )
        if built.skipped_row_numbers:
            logger.debug(f"rows without key: {built.skipped_row_numbers}")
        return LoadResult(
            ok=True,
            url=self.url,
            start_time=start,
            end_time=end,
            elapsed_seconds=(end - start).total_seconds(),
            count=event.count,
            data_rows=built.data_rows,
            skipped_rows=built.skipped_rows,
            overwritten_rows=built.overwritten_rows,
            key_field=built.key_field,
            key_fallback=built.key_fallback,
        )

    def _failed(self, start: datetime, error: Exception) -> LoadResult:
        message = str(error) or type(error).__name__
        logger.warning(f"failed to load sheet: {message}")
        end = datetime.now(UTC)
        return LoadResult(
            ok=False,
            url=self.url,
            start_time=start,
            end_time=end,
            elapsed_seconds=(end - start).total_seconds(),
            error=message,
        )
