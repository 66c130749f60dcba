from __future__ import annotations

from ..accounts.mapper import map_courier_accounts, map_ops_accounts
from ..accounts.model import Account
from ..attendance.mapper import map_attendance
from ..attendance.model import Attendance
from ..core.enums import SheetName
from ..tasks.mapper import map_tasks
from ..tasks.model import Task
from .repository import SheetRepository


class SheetService:
    """Use case: read one sheet and map it to typed records."""

    def __init__(self, sheets: SheetRepository):
        self._sheets = sheets

    def get_courier_accounts(self) -> list[Account]:
        return map_courier_accounts(self._sheets.fetch_rows(SheetName.KURIR_LOGIN))

    def get_ops_accounts(self) -> list[Account]:
        return map_ops_accounts(self._sheets.fetch_rows(SheetName.OPS_LOGIN))

    def get_tasks(self) -> list[Task]:
        return map_tasks(self._sheets.fetch_rows(SheetName.TASKS))

    def get_attendance(self) -> list[Attendance]:
        return map_attendance(self._sheets.fetch_rows(SheetName.ATTENDANCE))
