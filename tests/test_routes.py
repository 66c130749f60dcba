from __future__ import annotations

import pytest

import config.testing as testing_settings
from src.task_dashboard.task_dashboard.common.web import BROWSER_KEY
from src.task_dashboard.task_dashboard.core.enums import SheetName
from src.task_dashboard.task_dashboard.main import create_app
from tests.utils import task_row


@pytest.fixture
def app(sheets):
    return create_app(testing_settings, sheets_repo=sheets)


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, username):
    return client.post("/", data={"username": username})


def _states(app):
    return app.extensions["task_dashboard"].states


def test_login_page_renders(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Login User ID" in resp.data


def test_dashboard_requires_login(client):
    resp = client.get("/dashboard")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")


def test_ops_login_redirects_to_dashboard(client):
    resp = _login(client, "RUDI1")

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/dashboard")

    page = client.get("/dashboard")
    assert page.status_code == 200
    assert b"Halo, Rudi!" in page.data
    assert b"FMS: F2" in page.data


def test_unregistered_login_shows_message(client):
    resp = _login(client, "nouser")

    assert resp.status_code == 200
    assert b"tidak terdaftar" in resp.data


def test_courier_without_task_shows_message(client, sheets):
    sheets.set_rows(SheetName.TASKS)

    resp = _login(client, "budi2")

    assert b"tidak ditemukan tugas aktif" in resp.data


def test_blank_login_is_silent(client):
    resp = _login(client, "   ")

    assert resp.status_code == 200
    assert b"alert" not in resp.data


def test_fetch_failure_on_login_is_reported(client, sheets):
    sheets.failing.add(SheetName.OPS_LOGIN)

    resp = _login(client, "rudi1")

    assert b"Gagal mengambil data dari spreadsheet cloud." in resp.data


def test_logged_in_user_skips_login_page(client):
    _login(client, "rudi1")

    resp = client.get("/")

    assert resp.status_code == 302


def test_courier_dashboard_shows_only_own_tasks(client):
    _login(client, "budi2")

    data = client.get("/api/dashboard").get_json()["data"]

    task_ids = [t["task_id"] for g in data["groups"] for t in g["tasks"]]
    assert sorted(task_ids) == ["T1", "T3", "T4"]
    assert data["user"]["role"] == "kurir"


def test_api_requires_login(client):
    resp = client.get("/api/dashboard")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_api_filters(client):
    _login(client, "rudi1")

    data = client.get("/api/dashboard?tab=ops&shift=Malam&search=cit").get_json()["data"]

    assert [a["staff_name"] for a in data["attendance"]] == ["Citra"]
    assert data["filters"]["shift"] == "Malam"


def test_finish_task_then_refresh_resets_it(client):
    _login(client, "rudi1")

    resp = client.post("/tasks/T2/finish", data={"next": "/dashboard?tab=tasks"})
    assert resp.headers["Location"].endswith("/dashboard?tab=tasks")

    data = client.get("/api/dashboard?status=finished").get_json()["data"]
    assert [t["task_id"] for g in data["groups"] for t in g["tasks"]] == ["T2"]

    client.post("/refresh")
    data = client.get("/api/dashboard?status=finished").get_json()["data"]
    assert data["groups"] == []


def test_finish_ignores_external_next(client):
    _login(client, "rudi1")

    resp = client.post("/tasks/T1/finish", data={"next": "//evil.example"})

    assert resp.headers["Location"].endswith("/dashboard")


def test_refresh_failure_shows_banner(client, sheets):
    _login(client, "rudi1")
    sheets.failing.add(SheetName.TASKS)

    client.post("/refresh")
    page = client.get("/dashboard")

    assert b"Cloud Error:" in page.data
    assert b"FMS: F1" in page.data


def test_task_qr_is_png(client):
    _login(client, "rudi1")

    resp = client.get("/tasks/T1/qr.png")

    assert resp.status_code == 200
    assert resp.mimetype == "image/png"
    assert resp.data[:8] == b"\x89PNG\r\n\x1a\n"


def test_schedule_tab_lists_attendance(client):
    _login(client, "rudi1")

    page = client.get("/dashboard?tab=ops")

    assert b"Citra" in page.data
    assert b"SEMUA SHIFT" in page.data


def test_logout_clears_session(client):
    _login(client, "rudi1")

    resp = client.get("/logout")
    assert resp.status_code == 302

    assert client.get("/dashboard").status_code == 302


def test_anonymous_requests_keep_no_state(app):
    for _ in range(5):
        fresh = app.test_client()
        assert fresh.get("/dashboard").status_code == 302
        assert fresh.get("/api/dashboard").status_code == 401
        assert fresh.post("/refresh").status_code == 302

    assert len(_states(app)) == 0


def test_failed_login_keeps_no_state(app, client):
    _login(client, "nouser")

    assert len(_states(app)) == 0


def test_logout_drops_state(app, client):
    _login(client, "rudi1")
    assert len(_states(app)) == 1

    client.get("/logout")

    assert len(_states(app)) == 0


def test_failed_load_is_not_refetched_on_page_views(client, sheets):
    sheets.failing.add(SheetName.ATTENDANCE)
    resp = _login(client, "rudi1")
    assert resp.status_code == 302
    calls = len(sheets.calls)

    for _ in range(3):
        assert client.get("/dashboard").status_code == 200
    client.get("/api/dashboard")

    assert len(sheets.calls) == calls


def test_refresh_on_fresh_state_fetches_once(app, client, sheets):
    _login(client, "rudi1")
    with client.session_transaction() as sess:
        _states(app).discard(sess[BROWSER_KEY])
    sheets.calls.clear()

    client.post("/refresh")

    assert sorted(s.value for s in sheets.calls) == ["ATTENDANCE", "TASKS"]


def test_task_id_with_slash(client, sheets):
    sheets.set_rows(SheetName.TASKS, task_row("A/1", "budi2", fms_id="F9", name="Budi", hub="Hub Timur"))
    _login(client, "budi2")

    resp = client.post("/tasks/A/1/finish", data={"next": "/dashboard"})
    assert resp.status_code == 302

    data = client.get("/api/dashboard?status=finished").get_json()["data"]
    assert [t["task_id"] for g in data["groups"] for t in g["tasks"]] == ["A/1"]

    qr = client.get("/tasks/A/1/qr.png")
    assert qr.status_code == 200
    assert qr.mimetype == "image/png"
