from __future__ import annotations

import pytest

from src.task_dashboard.task_dashboard.accounts.service import AuthService
from src.task_dashboard.task_dashboard.core.enums import SheetName
from src.task_dashboard.task_dashboard.dashboard.service import DashboardService
from src.task_dashboard.task_dashboard.sheets.service import SheetService
from tests.utils import FakeSheets, attendance_row, courier_row, ops_row, task_row


@pytest.fixture
def sheets() -> FakeSheets:
    fake = FakeSheets()
    fake.set_rows(SheetName.OPS_LOGIN, ops_row("Rudi", "rudi1"))
    fake.set_rows(SheetName.KURIR_LOGIN, courier_row("Budi", "budi2"), courier_row("Sari", "sari3"))
    fake.set_rows(
        SheetName.TASKS,
        task_row("T1", "budi2", fms_id="F1", name="Budi", hub="Hub Timur", packages="3"),
        task_row("T2", "sari3", fms_id="F2", name="Sari", hub="Hub Barat", packages="5"),
        task_row("T3", "budi2", fms_id="F1", name="Budi", hub="Hub Timur", packages="2"),
        task_row("T4", "BUDI2", name="Budi", hub="Hub Barat", packages=""),
    )
    fake.set_rows(
        SheetName.ATTENDANCE,
        attendance_row("Andi", "Sprinter", "Pagi", "Hadir"),
        attendance_row("Citra", "Admin Hub", "Malam"),
        attendance_row("Dewi", "Sprinter", "OFF", "Libur"),
    )
    return fake


@pytest.fixture
def sheet_service(sheets) -> SheetService:
    return SheetService(sheets)


@pytest.fixture
def dashboard_service(sheet_service) -> DashboardService:
    return DashboardService(sheet_service, AuthService(sheet_service))
