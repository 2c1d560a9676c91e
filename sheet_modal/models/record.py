from __future__ import annotations

"""Record and table aliases.

A Record is one spreadsheet row: normalized header name -> trimmed cell text.
The ProductTable maps the value of the key field (product name or title) to
its Record. Keys are kept exactly as they appear in the sheet, so lookups
are case-sensitive.
"""

__all__ = [
    "Record",
    "ProductTable",
]

Record = dict[str, str]
ProductTable = dict[str, Record]
