from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..accounts.model import SessionUser
from ..accounts.service import AuthService
from ..attendance.model import Attendance
from ..common.concurrency import run_all
from ..core.enums import DashboardTab
from ..core.exceptions import SheetFetchError
from ..session.repository import SessionStore
from ..sheets.service import SheetService
from .state import DashboardState
from .view_model import (
    FilterOptions,
    Filters,
    TaskGroup,
    derive_filter_options,
    filter_attendance,
    filter_tasks,
    group_by_fms,
    scope_tasks,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    user: SessionUser
    tab: DashboardTab
    filters: Filters
    options: FilterOptions
    groups: list[TaskGroup]
    attendance: list[Attendance]
    is_loading: bool
    error: Optional[str]
    loaded_at: Optional[datetime]

    @property
    def task_count(self) -> int:
        return sum(len(g.tasks) for g in self.groups)

    def to_dict(self) -> dict:
        return {
            "user": self.user.to_dict(),
            "tab": self.tab.value,
            "filters": self.filters.to_dict(),
            "options": {
                "hubs": self.options.hubs,
                "couriers": self.options.couriers,
                "shifts": self.options.shifts,
            },
            "groups": [{"fms_id": g.fms_id, "tasks": [t.to_dict() for t in g.tasks]} for g in self.groups],
            "attendance": [a.to_dict() for a in self.attendance],
            "is_loading": self.is_loading,
            "error": self.error,
            "loaded_at": self.loaded_at.isoformat() if self.loaded_at else None,
        }


class DashboardService:
    """Use case: log in, load and present the dashboard of one session.

    The DashboardState passed in is owned by the caller; this service is its
    only writer.
    """

    def __init__(self, sheets: SheetService, auth: AuthService):
        self._sheets = sheets
        self._auth = auth

    def login(self, state: DashboardState, store: SessionStore, handle: str) -> Optional[SessionUser]:
        """Authenticate and load data. Returns None for a blank handle.

        Authentication and fetch errors propagate; the state is left as it was.
        """
        user = self._auth.authenticate(handle)
        if user is None:
            return None

        store.save(user)
        state.reset()
        state.user = user
        self.refresh(state)
        return user

    def restore(self, state: DashboardState, store: SessionStore, *, load: bool = True) -> Optional[SessionUser]:
        """Re-attach a stored session (e.g. after reload).

        Data is loaded at most once per state: after a failed load only an
        explicit refresh or a new login fetches again.
        """
        user = store.load()
        if user is None:
            if state.user is not None:
                state.reset()
            return None

        if state.user != user:
            state.reset()
            state.user = user
        if load and not state.load_attempted:
            self.refresh(state)
        return user

    def refresh(self, state: DashboardState) -> bool:
        """Reload tasks and attendance. On failure keeps the old data and sets error."""
        state.is_loading = True
        state.load_attempted = True
        state.error = None
        try:
            tasks, attendance = run_all([self._sheets.get_tasks, self._sheets.get_attendance])
        except SheetFetchError as e:
            log.warning("Dashboard refresh failed: %s", e)
            state.error = f"Cloud Error: {e}"
            return False
        finally:
            state.is_loading = False

        state.apply_load(tasks, attendance)
        return True

    def finish_task(self, state: DashboardState, task_id: str) -> bool:
        return state.finish_task(task_id)

    def logout(self, state: DashboardState, store: SessionStore) -> None:
        store.clear()
        state.reset()

    def build_view(self, state: DashboardState, *, filters: Filters, tab: DashboardTab) -> DashboardView:
        if state.user is None:
            raise ValueError("build_view needs a logged-in state")

        visible = scope_tasks(state.tasks, state.user)
        return DashboardView(
            user=state.user,
            tab=tab,
            filters=filters,
            options=derive_filter_options(state.tasks, state.attendance),
            groups=group_by_fms(filter_tasks(visible, filters, tab)),
            attendance=filter_attendance(state.attendance, filters, tab),
            is_loading=state.is_loading,
            error=state.error,
            loaded_at=state.loaded_at,
        )
