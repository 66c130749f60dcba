from __future__ import annotations

import json
from typing import Optional

from ..accounts.model import SessionUser
from ..core.enums import Role


def dumps_user(user: SessionUser) -> str:
    return json.dumps(user.to_dict())


def loads_user(text: Optional[str]) -> Optional[SessionUser]:
    """Parse a stored session; anything malformed reads as "not logged in"."""
    if not text:
        return None
    try:
        data = json.loads(text)
        username = data["username"]
        name = data.get("name") or username
        role = Role(data["role"])
    except (ValueError, TypeError, KeyError, AttributeError):
        return None

    if not isinstance(username, str) or not username.strip() or not isinstance(name, str):
        return None
    return SessionUser(username=username, name=name, role=role)
