from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.cells import cell_at


@dataclass(frozen=True)
class Column:
    field: str
    index: int
    convert: Optional[Callable[[str], Any]] = None


@dataclass(frozen=True)
class RowSchema:
    """Positional schema of one sheet: which column feeds which record field.

    `required` fields must be non-empty after cleaning, otherwise the row is
    skipped. Missing columns read as "" before conversion.
    """

    columns: Sequence[Column]
    required: Sequence[str] = ()

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, int],
        *,
        required: Sequence[str] = (),
        converters: Optional[Mapping[str, Callable[[str], Any]]] = None,
    ) -> "RowSchema":
        converters = converters or {}
        columns = [Column(field=name, index=idx, convert=converters.get(name)) for name, idx in mapping.items()]
        return cls(columns=tuple(columns), required=tuple(required))

    def read(self, row: Sequence[str]) -> Optional[dict[str, Any]]:
        raw = {col.field: cell_at(row, col.index) for col in self.columns}
        if any(not raw.get(name) for name in self.required):
            return None

        values: dict[str, Any] = {}
        for col in self.columns:
            value = raw[col.field]
            values[col.field] = col.convert(value) if col.convert else value
        return values

    def read_all(self, rows: Sequence[Sequence[str]], *, skip_header: bool = True) -> list[dict[str, Any]]:
        body = rows[1:] if skip_header else rows
        records = []
        for row in body:
            values = self.read(row)
            if values is not None:
                records.append(values)
        return records
