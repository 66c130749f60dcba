"""Pure helpers that turn loaded records into what the dashboard shows.

Everything here is recomputed from scratch on each call; the data sets are a
few hundred rows at most.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from ..accounts.model import SessionUser
from ..attendance.model import Attendance
from ..core.constants import FILTER_ALL, NO_FMS_GROUP
from ..core.enums import DashboardTab, Role, TaskStatus
from ..tasks.model import Task


@dataclass(frozen=True)
class Filters:
    status: str = FILTER_ALL
    hub: str = FILTER_ALL
    courier: str = FILTER_ALL
    shift: str = FILTER_ALL
    search: str = ""

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "Filters":
        def _pick(name: str) -> str:
            return (args.get(name) or "").strip() or FILTER_ALL

        return cls(
            status=_pick("status"),
            hub=_pick("hub"),
            courier=_pick("courier"),
            shift=_pick("shift"),
            search=(args.get("search") or "").strip(),
        )

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "hub": self.hub,
            "courier": self.courier,
            "shift": self.shift,
            "search": self.search,
        }


@dataclass(frozen=True)
class FilterOptions:
    hubs: list[str] = field(default_factory=list)
    couriers: list[str] = field(default_factory=list)
    shifts: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TaskGroup:
    fms_id: str
    tasks: list[Task]

    @property
    def main_task(self) -> Task:
        return self.tasks[0]

    @property
    def package_total(self) -> int:
        return sum(t.package_count for t in self.tasks)

    @property
    def finished_count(self) -> int:
        return sum(1 for t in self.tasks if t.status == TaskStatus.FINISHED)


def _distinct_sorted(values) -> list[str]:
    return sorted({v for v in values if v})


def derive_filter_options(tasks: Sequence[Task], attendance: Sequence[Attendance]) -> FilterOptions:
    return FilterOptions(
        hubs=_distinct_sorted(t.hub for t in tasks),
        couriers=_distinct_sorted(t.name for t in tasks),
        shifts=_distinct_sorted(a.shift for a in attendance),
    )


def scope_tasks(tasks: Sequence[Task], user: Optional[SessionUser]) -> list[Task]:
    """Tasks the user may see: everything for ops, own tasks for a courier."""
    if user is None:
        return []
    if user.role == Role.OPS:
        return list(tasks)
    return [t for t in tasks if t.belongs_to(user.username)]


def _is_set(value: str) -> bool:
    return bool(value) and value != FILTER_ALL


def filter_tasks(tasks: Sequence[Task], filters: Filters, tab: DashboardTab) -> list[Task]:
    result = list(tasks)
    if _is_set(filters.status):
        result = [t for t in result if (t.status or TaskStatus.PENDING).value == filters.status]
    if _is_set(filters.hub):
        result = [t for t in result if t.hub == filters.hub]
    if _is_set(filters.courier):
        result = [t for t in result if t.name == filters.courier]
    if filters.search and tab == DashboardTab.TASKS:
        needle = filters.search.lower()
        result = [
            t
            for t in result
            if needle in t.task_id.lower() or needle in t.fms_id.lower() or needle in t.name.lower()
        ]
    return result


def group_by_fms(tasks: Sequence[Task]) -> list[TaskGroup]:
    """Partition by fms id, keeping first-occurrence order of the groups."""
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        groups.setdefault(task.fms_id or NO_FMS_GROUP, []).append(task)
    return [TaskGroup(fms_id=key, tasks=items) for key, items in groups.items()]


def filter_attendance(records: Sequence[Attendance], filters: Filters, tab: DashboardTab) -> list[Attendance]:
    result = list(records)
    if _is_set(filters.shift):
        result = [a for a in result if a.shift == filters.shift]
    if filters.search and tab == DashboardTab.SCHEDULE:
        needle = filters.search.lower()
        result = [a for a in result if needle in a.staff_name.lower() or needle in a.jabatan.lower()]
    return result
