from __future__ import annotations

from typing import Optional, Protocol

from ..accounts.model import SessionUser


class SessionStore(Protocol):
    """Durable home of the logged-in identity (survives page reloads)."""

    def save(self, user: SessionUser) -> None:
        raise NotImplementedError

    def load(self) -> Optional[SessionUser]:
        """Return the stored user, or None when absent or unreadable."""

        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
