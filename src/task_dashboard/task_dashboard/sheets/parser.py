from __future__ import annotations

import re

from ..common.cells import clean_cell

_LINE_BREAK = re.compile(r"\r?\n")


def split_csv_line(line: str) -> list[str]:
    """Split one physical CSV line on commas that are outside double quotes.

    Quotes only toggle the "inside" state; one leading and one trailing quote
    are stripped from each field, escaped quotes ("") are left as-is.
    """
    fields: list[str] = []
    start = 0
    in_quotes = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append(_clean_field(line[start:i]))
            start = i + 1
    fields.append(_clean_field(line[start:]))
    return fields


def split_csv_text(text: str) -> list[list[str]]:
    """Parse a CSV export body into rows, one row per non-blank physical line.

    A quoted field containing a line break is not supported: it is cut at the
    line break like any other line.
    """
    lines = [line for line in _LINE_BREAK.split(text or "") if line.strip()]
    return [split_csv_line(line) for line in lines]


def _clean_field(raw: str) -> str:
    if raw.startswith('"'):
        raw = raw[1:]
    if raw.endswith('"'):
        raw = raw[:-1]
    return clean_cell(raw)
