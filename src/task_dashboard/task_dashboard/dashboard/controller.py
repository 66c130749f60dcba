from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, redirect, render_template, request, url_for

from ..common.web import safe_next, session_state
from ..core.enums import DashboardTab, TaskStatus
from ..container import Container
from .view_model import Filters


def _parse_tab(value: str | None) -> DashboardTab:
    try:
        return DashboardTab(value or DashboardTab.TASKS.value)
    except ValueError:
        return DashboardTab.TASKS


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            state = session_state(container.states, container.session_store)
            if state is None:
                return redirect(url_for("login"))
            return view(state, *args, **kwargs)

        return wrapper

    @app.route("/dashboard", endpoint="dashboard")
    @login_required
    def dashboard(state):
        container.dashboard_service.restore(state, container.session_store)
        tab = _parse_tab(request.args.get("tab"))
        filters = Filters.from_args(request.args)
        view = container.dashboard_service.build_view(state, filters=filters, tab=tab)
        return render_template(
            "dashboard.html",
            view=view,
            statuses=[s.value for s in TaskStatus],
            tabs=DashboardTab,
            current_url=request.full_path,
        )

    @app.route("/refresh", methods=["POST"], endpoint="refresh")
    @login_required
    def refresh(state):
        container.dashboard_service.restore(state, container.session_store, load=False)
        container.dashboard_service.refresh(state)
        return redirect(safe_next(request.form.get("next"), url_for("dashboard")))

    @app.route("/api/dashboard", endpoint="api_dashboard")
    def api_dashboard():
        state = session_state(container.states, container.session_store)
        if state is None:
            return jsonify({"success": False, "message": "Belum login"}), 401

        container.dashboard_service.restore(state, container.session_store)
        tab = _parse_tab(request.args.get("tab"))
        view = container.dashboard_service.build_view(state, filters=Filters.from_args(request.args), tab=tab)
        return jsonify({"success": True, "data": view.to_dict()})
