from __future__ import annotations

"""Lenient CSV tokenizer for spreadsheet exports.

Handles quoted cells containing commas, any newline style and doubled
quotes. It never raises: malformed quoting just ends up inside the cells.
All cells are returned as strings.
"""

__all__ = [
    "parse_csv",
]

QUOTE = '"'
DELIMITER = ","


def parse_csv(text: str) -> list[list[str]]:
    r'''Split CSV text into rows of string cells.

    - ``"`` toggles quoted mode; ``""`` inside quotes is one literal quote
    - unquoted ``,`` ends a cell
    - unquoted ``\n``, ``\r`` or ``\r\n`` ends the cell and the row
    - the last cell is kept when non-empty or when the text ends inside quotes

    Examples:
        >>> parse_csv('a,"b,c",d')
        [['a', 'b,c', 'd']]
        >>> parse_csv('"say ""hi"""')
        [['say "hi"']]
    '''
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == QUOTE:
            if in_quotes and i + 1 < n and text[i + 1] == QUOTE:
                cell.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
            i += 1
            continue
        if not in_quotes and ch in (DELIMITER, "\n", "\r"):
            row.append("".join(cell))
            cell = []
            if ch == DELIMITER:
                i += 1
                continue
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1
            rows.append(row)
            row = []
            i += 1
            continue
        cell.append(ch)
        i += 1

    if cell or in_quotes:
        row.append("".join(cell))
    if row:
        rows.append(row)
    return rows
