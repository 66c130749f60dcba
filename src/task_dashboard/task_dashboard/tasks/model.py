from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: one delivery task assigned to a courier.

    `task_id` identifies the task for "finish"; tasks sharing a `fms_id`
    belong to one dispatch batch.
    """

    task_id: str
    fms_id: str
    hub: str
    name: str
    courier_id: str
    package_count: int = 0
    operator_name: Optional[str] = None
    status: TaskStatus = TaskStatus.PENDING

    def finished(self) -> "Task":
        return replace(self, status=TaskStatus.FINISHED)

    def belongs_to(self, username: str) -> bool:
        return self.courier_id.lower() == (username or "").lower()

    def to_dict(self) -> dict:
        return {
            "task_id": self.task_id,
            "fms_id": self.fms_id,
            "hub": self.hub,
            "name": self.name,
            "courier_id": self.courier_id,
            "package_count": self.package_count,
            "operator_name": self.operator_name,
            "status": self.status.value,
        }
