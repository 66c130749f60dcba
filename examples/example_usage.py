"""Example: use the service layer without Flask.

Controllers are a thin layer; loading and reshaping sheet data lives in services.
"""

from config import load_settings

from src.task_dashboard.task_dashboard.accounts.model import SessionUser
from src.task_dashboard.task_dashboard.container import build_container
from src.task_dashboard.task_dashboard.core.enums import DashboardTab, Role
from src.task_dashboard.task_dashboard.dashboard.state import DashboardState
from src.task_dashboard.task_dashboard.dashboard.view_model import Filters


def main():
    settings = load_settings()
    container = build_container(sheet_id=settings.SHEET_ID, gids=settings.SHEET_GIDS)

    state = DashboardState(user=SessionUser(username="ops", name="Ops", role=Role.OPS))
    container.dashboard_service.refresh(state)
    view = container.dashboard_service.build_view(state, filters=Filters(), tab=DashboardTab.TASKS)
    for group in view.groups[:5]:
        print(group.fms_id, len(group.tasks))


if __name__ == "__main__":
    main()
