from __future__ import annotations

from typing import Protocol

from ..core.enums import SheetName


class SheetRepository(Protocol):
    """Data source interface: one spreadsheet tab -> raw rows.

    Note (DIP): the service layer depends on this interface, not on HTTP.
    """

    def fetch_rows(self, sheet: SheetName) -> list[list[str]]:
        """Return every row of the sheet, header included."""

        raise NotImplementedError
