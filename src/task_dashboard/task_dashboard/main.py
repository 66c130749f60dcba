from __future__ import annotations

import logging
from datetime import timedelta
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import load_settings

from .container import build_container
from .accounts.controller import register as register_accounts
from .dashboard.controller import register as register_dashboard
from .sheets.repository import SheetRepository
from .tasks.controller import register as register_tasks

log = logging.getLogger(__name__)


def create_app(settings: Optional[ModuleType] = None, *, sheets_repo: Optional[SheetRepository] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings = settings or load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", 7))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    sheet_id = getattr(settings, "SHEET_ID")
    gids = getattr(settings, "SHEET_GIDS")
    log.debug("settings=%s sheet=%s gids=%s", settings.__name__, sheet_id, sorted(gids))

    container = build_container(
        sheet_id=sheet_id,
        gids=gids,
        timeout_s=float(getattr(settings, "FETCH_TIMEOUT_SECONDS", 15)),
        session_key=getattr(settings, "SESSION_KEY", "yt_user"),
        max_states=int(getattr(settings, "MAX_BROWSER_STATES", 1000)),
        sheets_repo=sheets_repo,
    )
    app.extensions["task_dashboard"] = container

    register_accounts(app, container)
    register_dashboard(app, container)
    register_tasks(app, container)

    return app
