from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Outcome of one sheet load attempt (success or logged failure)."""

__all__ = [
    "LoadResult",
]


@dataclass(frozen=True)
class LoadResult:
    """Aggregated result of a load, consumed by the SUMMARY line.

    ``count`` is the number of records in the table that was installed; it is
    0 for failed loads, in which case ``error`` holds the logged message.
    """
    ok: bool
    url: str
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    count: int = 0
    data_rows: int = 0  # rows below the header
    skipped_rows: int = 0  # empty key
    overwritten_rows: int = 0  # duplicate key replaced an earlier row
    key_field: str | None = None
    key_fallback: bool = False
    error: str | None = None
