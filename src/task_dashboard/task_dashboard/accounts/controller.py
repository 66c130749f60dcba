from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import BROWSER_KEY, browser_key
from ..core.exceptions import AuthenticationError, SheetFetchError
from ..container import Container
from ..dashboard.state import DashboardState

log = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if container.session_store.load() is not None:
            return redirect(url_for("dashboard"))

        username = ""
        if request.method == "POST":
            username = request.form.get("username", "")
            state = DashboardState()

            try:
                user = container.dashboard_service.login(state, container.session_store, username)
                if user is not None:
                    session.permanent = True
                    container.states.put(browser_key(), state)
                    return redirect(url_for("dashboard"))
            except (AuthenticationError, SheetFetchError) as e:
                flash(str(e), "danger")
            except Exception as e:
                log.exception("Login failed unexpectedly")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"Kesalahan sistem saat login: {e}", "danger")
                else:
                    flash("Kesalahan sistem saat login", "danger")

        return render_template("login.html", username=username)

    @app.route("/logout", endpoint="logout")
    def logout():
        key = session.get(BROWSER_KEY)
        state = container.states.find(key) or DashboardState()
        container.dashboard_service.logout(state, container.session_store)
        container.states.discard(key)
        return redirect(url_for("login"))
