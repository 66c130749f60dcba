from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.concurrency import run_all
from ..core.enums import Role
from ..core.exceptions import NoActiveTaskError, UnregisteredUserError
from ..sheets.service import SheetService
from ..tasks.model import Task
from .model import Account, SessionUser

log = logging.getLogger(__name__)


def _find(accounts: Sequence[Account], handle_lower: str) -> Optional[Account]:
    for account in accounts:
        if account.username.lower() == handle_lower:
            return account
    return None


def resolve_identity(
    handle: str,
    *,
    ops_accounts: Sequence[Account],
    courier_accounts: Sequence[Account],
    tasks: Sequence[Task],
) -> SessionUser:
    """Decide who `handle` is.

    Ops accounts are checked first, so a handle listed in both sheets is
    always ops. A courier additionally needs at least one task in the task
    sheet. A handle that only appears as a task's courier id is not an
    account.
    """
    handle_lower = handle.lower()

    ops = _find(ops_accounts, handle_lower)
    if ops:
        return SessionUser(username=ops.username, name=ops.name, role=Role.OPS)

    courier = _find(courier_accounts, handle_lower)
    if courier:
        if any(t.courier_id.lower() == handle_lower for t in tasks):
            return SessionUser(username=courier.username, name=courier.name, role=Role.KURIR)
        raise NoActiveTaskError(f"Username '{handle}' terdaftar tapi tidak ditemukan tugas aktif di kolom V.")

    raise UnregisteredUserError(f"Username '{handle}' tidak terdaftar.")


class AuthService:
    """Use case: authenticate a login handle against the login sheets."""

    def __init__(self, sheets: SheetService):
        self._sheets = sheets

    def authenticate(self, handle: str) -> Optional[SessionUser]:
        """Returns None for a blank handle (ignored, not an error)."""
        handle = (handle or "").strip()
        if not handle:
            return None

        courier_accounts, ops_accounts, tasks = run_all(
            [
                self._sheets.get_courier_accounts,
                self._sheets.get_ops_accounts,
                self._sheets.get_tasks,
            ]
        )

        try:
            user = resolve_identity(
                handle,
                ops_accounts=ops_accounts,
                courier_accounts=courier_accounts,
                tasks=tasks,
            )
        except (UnregisteredUserError, NoActiveTaskError) as e:
            log.info("Login rejected for %r: %s", handle, type(e).__name__)
            raise

        log.info("Login %s as %s", user.username, user.role.value)
        return user
