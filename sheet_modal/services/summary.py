from __future__ import annotations

from ..models.load_result import LoadResult

"""SUMMARY line rendering for a sheet load.

Format:
SUMMARY status={ok|failed} records={n} rows={n} skipped={n} overwritten={n}
key={field} fallback={yes|no} elapsed_sec={seconds}
"""

__all__ = [
    "render_summary_line",
]


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very small numbers
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: LoadResult) -> str:
    """Render the SUMMARY line for ``result``.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> render_summary_line(LoadResult(
        ...     ok=True, url="u", start_time=t, end_time=t, elapsed_seconds=0.5,
        ...     count=2, data_rows=3, skipped_rows=1, key_field="name",
        ... ))
        'SUMMARY status=ok records=2 rows=3 skipped=1 overwritten=0 key=name fallback=no elapsed_sec=0.5'
    """
    return (
        f"SUMMARY status={'ok' if result.ok else 'failed'} "
        f"records={result.count} "
        f"rows={result.data_rows} "
        f"skipped={result.skipped_rows} "
        f"overwritten={result.overwritten_rows} "
        f"key={result.key_field or '-'} "
        f"fallback={'yes' if result.key_fallback else 'no'} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
