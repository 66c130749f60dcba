from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Peran pengguna: ops melihat semua tugas, kurir hanya tugasnya sendiri."""

    KURIR = "kurir"
    OPS = "ops"


class TaskStatus(str, Enum):
    PENDING = "pending"
    FINISHED = "finished"


class DashboardTab(str, Enum):
    """Tab aktif di dashboard. `ops` adalah tab jadwal (absensi shift)."""

    TASKS = "tasks"
    SCHEDULE = "ops"


class SheetName(str, Enum):
    """Lembar spreadsheet yang dibaca aplikasi."""

    KURIR_LOGIN = "KURIR_LOGIN"
    OPS_LOGIN = "OPS_LOGIN"
    TASKS = "TASKS"
    ATTENDANCE = "ATTENDANCE"
