from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .accounts.service import AuthService
from .core.constants import DEFAULT_FETCH_TIMEOUT_SECONDS, SESSION_KEY
from .dashboard.service import DashboardService
from .dashboard.state import StateRegistry
from .session.flask_session_store import FlaskSessionStore
from .sheets.csv_export_repository import CsvExportSheetRepository
from .sheets.repository import SheetRepository
from .sheets.service import SheetService


@dataclass(frozen=True)
class Container:
    sheets_repo: SheetRepository
    session_store: FlaskSessionStore
    states: StateRegistry

    sheet_service: SheetService
    auth_service: AuthService
    dashboard_service: DashboardService


def build_container(
    *,
    sheet_id: str,
    gids: Mapping[str, str],
    timeout_s: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
    session_key: str = SESSION_KEY,
    max_states: int = 1000,
    sheets_repo: Optional[SheetRepository] = None,
) -> Container:
    """Wire repositories and services. `sheets_repo` overrides the HTTP source."""
    sheets_repo = sheets_repo or CsvExportSheetRepository(sheet_id=sheet_id, gids=gids, timeout_s=timeout_s)

    sheet_service = SheetService(sheets_repo)
    auth_service = AuthService(sheet_service)
    dashboard_service = DashboardService(sheet_service, auth_service)

    return Container(
        sheets_repo=sheets_repo,
        session_store=FlaskSessionStore(session_key),
        states=StateRegistry(max_states),
        sheet_service=sheet_service,
        auth_service=auth_service,
        dashboard_service=dashboard_service,
    )
