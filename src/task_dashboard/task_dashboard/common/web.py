from __future__ import annotations

import uuid
from typing import Optional

from flask import session

from ..dashboard.state import DashboardState, StateRegistry
from ..session.repository import SessionStore

BROWSER_KEY = "sid"


def browser_key() -> str:
    """Opaque per-browser id kept in the cookie session."""
    key = session.get(BROWSER_KEY)
    if not key:
        key = uuid.uuid4().hex
        session[BROWSER_KEY] = key
    return key


def session_state(states: StateRegistry, store: SessionStore) -> Optional[DashboardState]:
    """State of a logged-in browser, created on first use.

    Without a stored session nothing is created and any stale entry for this
    browser is dropped.
    """
    key = session.get(BROWSER_KEY)
    if store.load() is None:
        states.discard(key)
        return None

    state = states.find(key)
    if state is None:
        state = DashboardState()
        states.put(browser_key(), state)
    return state


def safe_next(target: Optional[str], default: str) -> str:
    """Only allow local redirects (a path on this site)."""
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return default
