from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Satu baris lembar login (kurir atau ops).

    `username` is compared case-insensitively; the sheet does not enforce
    uniqueness, the first match wins.
    """

    username: str
    name: str


@dataclass(frozen=True)
class SessionUser:
    """What we keep in the session store after login."""

    username: str
    name: str
    role: Role

    def to_dict(self) -> dict:
        return {"username": self.username, "name": self.name, "role": self.role.value}
