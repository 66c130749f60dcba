from __future__ import annotations

import logging
from typing import Optional

from flask import session

from ..accounts.model import SessionUser
from ..core.constants import SESSION_KEY
from .repository import SessionStore
from .serializer import dumps_user, loads_user

log = logging.getLogger(__name__)


class FlaskSessionStore(SessionStore):
    """Keeps the serialized user in Flask's signed cookie session.

    Must be used inside a request context.
    """

    def __init__(self, key: str = SESSION_KEY):
        self._key = key

    def save(self, user: SessionUser) -> None:
        session[self._key] = dumps_user(user)

    def load(self) -> Optional[SessionUser]:
        raw = session.get(self._key)
        if raw is None:
            return None
        user = loads_user(raw if isinstance(raw, str) else None)
        if user is None:
            log.debug("Discarding unreadable session under %s", self._key)
            session.pop(self._key, None)
        return user

    def clear(self) -> None:
        session.pop(self._key, None)
