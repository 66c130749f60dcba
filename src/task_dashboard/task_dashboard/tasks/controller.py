from __future__ import annotations

from functools import wraps
from io import BytesIO

import qrcode
from flask import Flask, flash, redirect, request, send_file, url_for

from ..common.web import safe_next, session_state
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            state = session_state(container.states, container.session_store)
            if state is None:
                return redirect(url_for("login"))
            return view(state, *args, **kwargs)

        return wrapper

    @app.route("/tasks/<path:task_id>/finish", methods=["POST"], endpoint="finish_task")
    @login_required
    def finish_task(state, task_id: str):
        if not container.dashboard_service.finish_task(state, task_id):
            flash(f"Task {task_id} tidak ditemukan", "warning")
        return redirect(safe_next(request.form.get("next"), url_for("dashboard")))

    @app.route("/tasks/<path:task_id>/qr.png", endpoint="task_qr")
    @login_required
    def task_qr(state, task_id: str):
        """QR code of a task id, rendered in memory (no file on disk)."""
        img = qrcode.make(task_id)

        buf = BytesIO()
        img.save(buf)
        buf.seek(0)

        return send_file(buf, mimetype="image/png")
