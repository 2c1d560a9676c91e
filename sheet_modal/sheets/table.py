from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..models.record import ProductTable, Record

"""Build the key -> Record table from parsed CSV rows.

The first row is the header row. Headers are trimmed and lowercased; the key
field is ``name``, else ``title``, else the first column (with a warning).
Rows are padded to the header length, extra cells are dropped, rows with an
empty key are skipped and a repeated key overwrites the earlier row.
"""

__all__ = [
    "EmptySheetError",
    "BuildResult",
    "KEY_FIELD_CANDIDATES",
    "normalize_header",
    "resolve_key_field",
    "build_record",
    "build_table",
]

logger = logging.getLogger(__name__)

KEY_FIELD_CANDIDATES = ("name", "title")


class EmptySheetError(Exception):
    """Raised when there is no header row to build a table from."""


@dataclass
class BuildResult:
    table: ProductTable
    headers: list[str]
    key_field: str
    key_fallback: bool = False
    data_rows: int = 0
    skipped_rows: int = 0
    overwritten_rows: int = 0
    skipped_row_numbers: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.table)


def normalize_header(value: object) -> str:
    """Trim and lowercase a header cell; ``None`` becomes ``""``."""
    return str(value or "").strip().lower()


def resolve_key_field(headers: Sequence[str]) -> tuple[str, bool]:
    """Pick the header identifying each record.

    Returns:
        ``(key_field, fallback)``; ``fallback`` is True when neither ``name``
        nor ``title`` exists and the first column is used instead.
    """
    for candidate in KEY_FIELD_CANDIDATES:
        if candidate in headers:
            return candidate, False
    first = headers[0] if headers else ""
    logger.warning(
        f"sheet has no 'name' or 'title' header; using first column '{first}' as key"
    )
    return first, True


def build_record(headers: Sequence[str], cells: Sequence[str]) -> Record:
    """Zip headers with trimmed cells, padding short rows with "".

    Cells beyond the header count are not captured. With duplicate headers
    the later column wins.
    """
    record: Record = {}
    for idx, header in enumerate(headers):
        record[header] = str(cells[idx]).strip() if idx < len(cells) else ""
    return record


def build_table(rows: Iterable[Sequence[str]]) -> BuildResult:
    """Build the product table from parsed rows (first row = headers).

    Raises:
        EmptySheetError: if ``rows`` is empty
    """
    iterator = iter(rows)
    try:
        raw_headers = next(iterator)
    except StopIteration:
        raise EmptySheetError("no rows parsed") from None

    headers = [normalize_header(h) for h in raw_headers]
    key_field, fallback = resolve_key_field(headers)
    result = BuildResult(table={}, headers=headers, key_field=key_field, key_fallback=fallback)

    # Row numbers are 1-based sheet rows; the header is row 1.
    for row_number, cells in enumerate(iterator, start=2):
        result.data_rows += 1
        record = build_record(headers, cells)
        key = record.get(key_field, "")
        if not key:
            result.skipped_rows += 1
            result.skipped_row_numbers.append(row_number)
            continue
        if key in result.table:
            result.overwritten_rows += 1
            logger.debug(f"row {row_number}: key '{key}' overwrites an earlier row")
        result.table[key] = record

    return result
