from __future__ import annotations

import pytest

from sheet_modal.sheets.parser import parse_csv

"""Unit tests for the lenient CSV tokenizer."""


@pytest.mark.parametrize(
    "text",
    [
        "a,b,c\nd,e,f",
        "name,price\nApple,1\nPear,2\nPlum,3",
        "x\ny\nz",
        "one,two,three,four",
    ],
)
def test_unquoted_input_matches_naive_split(text: str):
    expected = [line.split(",") for line in text.split("\n")]
    assert parse_csv(text) == expected


def test_quoted_cell_keeps_commas():
    assert parse_csv('a,"b,c",d') == [["a", "b,c", "d"]]


def test_doubled_quote_is_literal_quote():
    assert parse_csv('"say ""hi"""') == [['say "hi"']]


def test_quoted_cell_keeps_newlines_of_any_style():
    text = '"line1\nline2","a\r\nb","c\rd"\nnext'
    assert parse_csv(text) == [["line1\nline2", "a\r\nb", "c\rd"], ["next"]]


def test_crlf_is_a_single_row_break():
    assert parse_csv("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]


def test_bare_cr_ends_row():
    assert parse_csv("a,b\rc,d") == [["a", "b"], ["c", "d"]]


def test_trailing_newline_adds_no_empty_row():
    assert parse_csv("name,price\nApple,1.50\n") == [["name", "price"], ["Apple", "1.50"]]


def test_trailing_empty_cell_after_comma_is_dropped_at_eof():
    # the last cell is only kept when non-empty (or inside quotes)
    assert parse_csv("a,b,") == [["a", "b"]]


def test_empty_cells_inside_row_are_kept():
    assert parse_csv("a,,c\n") == [["a", "", "c"]]


def test_blank_line_yields_single_empty_cell_row():
    assert parse_csv("a\n\nb") == [["a"], [""], ["b"]]


def test_unterminated_quote_swallows_rest_of_text():
    assert parse_csv('a,"open,cell\nstill open') == [["a", "open,cell\nstill open"]]


def test_empty_quoted_cell_at_eof_is_dropped():
    assert parse_csv('a,""') == [["a"]]


def test_unterminated_empty_quote_at_eof_is_kept():
    assert parse_csv('a,"') == [["a", ""]]


def test_quote_in_middle_of_cell_toggles_mode():
    assert parse_csv('ab"c,d"e,f') == [["abc,de", "f"]]


def test_empty_text_returns_no_rows():
    assert parse_csv("") == []


def test_no_type_coercion():
    rows = parse_csv("1,2.5,true\n")
    assert rows == [["1", "2.5", "true"]]
    assert all(isinstance(c, str) for c in rows[0])
