# mockstore/auth/credentials.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from ..logging import safe_extra
from ..models.store import User

log = logging.getLogger(__name__)

# Demo accounts used when no USERS_FILE is configured. Not real security.
DEFAULT_USERS: List[User] = [
    User(id=1, username="admin", password="admin123", role="admin"),
    User(id=2, username="tester", password="test123", role="user"),
]


class CredentialStore:
    def __init__(self, users: List[User]):
        self._users = list(users)

    @classmethod
    def from_file(cls, path: Optional[str]) -> "CredentialStore":
        """Load ``{"users": [...]}``; falls back to the demo users when unset or unreadable."""
        if not path:
            return cls(DEFAULT_USERS)
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
            users = [User.model_validate(u) for u in data.get("users", [])]
        except (OSError, ValueError) as e:
            log.error("auth.users_file.load_failed", extra=safe_extra({"path": path, "error": str(e)}))
            return cls(DEFAULT_USERS)
        return cls(users)

    def verify(self, username: str, password: str) -> Optional[User]:
        for user in self._users:
            if user.username == username and user.password == password:
                return user
        return None
