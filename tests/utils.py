from __future__ import annotations

from typing import Optional

from src.task_dashboard.task_dashboard.accounts.model import SessionUser
from src.task_dashboard.task_dashboard.core.enums import SheetName
from src.task_dashboard.task_dashboard.core.exceptions import SheetFetchError

HEADER = ["HEADER"] * 22


def courier_row(name: str, username: str) -> list[str]:
    row = [""] * 6
    row[1] = name
    row[5] = username
    return row


def ops_row(name: str, username: str) -> list[str]:
    row = [""] * 5
    row[1] = name
    row[4] = username
    return row


def task_row(
    task_id: str,
    courier_id: str,
    *,
    fms_id: str = "",
    name: str = "",
    hub: str = "",
    packages: str = "1",
    operator: str = "",
) -> list[str]:
    row = [""] * 22
    row[0] = task_id
    row[2] = fms_id
    row[9] = packages
    row[11] = operator
    row[19] = hub
    row[20] = name
    row[21] = courier_id
    return row


def attendance_row(name: str, jabatan: str = "", shift: str = "", description: str = "") -> list[str]:
    row = [""] * 7
    row[1] = name
    row[2] = jabatan
    row[5] = shift
    row[6] = description
    return row


class FakeSheets:
    """In-memory SheetRepository; sheets listed in `failing` raise a fetch error."""

    def __init__(self, rows: Optional[dict[SheetName, list[list[str]]]] = None):
        self.rows: dict[SheetName, list[list[str]]] = {sheet: [HEADER] for sheet in SheetName}
        self.rows.update(rows or {})
        self.failing: set[SheetName] = set()
        self.calls: list[SheetName] = []

    def fetch_rows(self, sheet: SheetName) -> list[list[str]]:
        self.calls.append(sheet)
        if sheet in self.failing:
            raise SheetFetchError("Gagal mengambil data dari spreadsheet cloud.")
        return [list(r) for r in self.rows[sheet]]

    def set_rows(self, sheet: SheetName, *body: list[str]) -> None:
        self.rows[sheet] = [HEADER, *body]


class InMemorySessionStore:
    def __init__(self, user: Optional[SessionUser] = None):
        self.user = user

    def save(self, user: SessionUser) -> None:
        self.user = user

    def load(self) -> Optional[SessionUser]:
        return self.user

    def clear(self) -> None:
        self.user = None
