from __future__ import annotations

import re
from typing import Optional, Sequence

_INVISIBLE_CHARS = re.compile("[\u200B-\u200D\uFEFF]")


def clean_cell(value: object) -> str:
    """Strip zero-width spaces / BOM and surrounding whitespace from a cell."""
    if value is None:
        return ""
    return _INVISIBLE_CHARS.sub("", str(value)).strip()


def cell_at(row: Sequence[str], index: int) -> str:
    """Return the cleaned cell at `index`, or "" when the row is too short."""
    if index < 0 or index >= len(row):
        return ""
    return clean_cell(row[index])


def parse_int_or_zero(value: str) -> int:
    """Parse the leading integer ("12 pcs" -> 12); anything else is 0."""
    match = re.match(r"\s*([+-]?\d+)", value or "")
    if not match:
        return 0
    return int(match.group(1))


def optional_text(value: str) -> Optional[str]:
    return value or None
