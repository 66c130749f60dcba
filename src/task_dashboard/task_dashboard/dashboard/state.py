from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..accounts.model import SessionUser
from ..attendance.model import Attendance
from ..tasks.model import Task


@dataclass
class DashboardState:
    """UI state of one browser session.

    Filled by a refresh, cleared on logout. Finishing a task only changes the
    copy held here; the next refresh reloads the sheet and drops it.
    """

    user: Optional[SessionUser] = None
    tasks: list[Task] = field(default_factory=list)
    attendance: list[Attendance] = field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None
    loaded_at: Optional[datetime] = None
    load_attempted: bool = False

    @property
    def is_loaded(self) -> bool:
        return self.loaded_at is not None

    def apply_load(self, tasks: Sequence[Task], attendance: Sequence[Attendance], *, now: datetime | None = None) -> None:
        self.tasks = list(tasks)
        self.attendance = list(attendance)
        self.error = None
        self.loaded_at = now or datetime.now()

    def finish_task(self, task_id: str) -> bool:
        changed = False
        updated = []
        for task in self.tasks:
            if task.task_id == task_id:
                task = task.finished()
                changed = True
            updated.append(task)
        self.tasks = updated
        return changed

    def reset(self) -> None:
        self.user = None
        self.tasks = []
        self.attendance = []
        self.is_loading = False
        self.error = None
        self.loaded_at = None
        self.load_attempted = False


class StateRegistry:
    """Process-lifetime map of browser key -> DashboardState.

    Holds at most `max_states` entries; the least recently used one is
    dropped first.
    """

    def __init__(self, max_states: int = 1000):
        self._states: OrderedDict[str, DashboardState] = OrderedDict()
        self._max_states = int(max_states)
        self._lock = threading.Lock()

    def find(self, key: Optional[str]) -> Optional[DashboardState]:
        if not key:
            return None
        with self._lock:
            state = self._states.get(key)
            if state is not None:
                self._states.move_to_end(key)
            return state

    def put(self, key: str, state: DashboardState) -> None:
        with self._lock:
            self._states[key] = state
            self._states.move_to_end(key)
            while len(self._states) > self._max_states:
                self._states.popitem(last=False)

    def discard(self, key: Optional[str]) -> None:
        if not key:
            return
        with self._lock:
            self._states.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)
