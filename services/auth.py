"""Mock sign-in.

Any non-blank email/password pair signs in as the same demo user. The tokens
are opaque strings that only look like the ones a real backend would issue.
"""
from __future__ import annotations

import base64
import time
from dataclasses import dataclass
from typing import Optional

from core.log import get_logger

logger = get_logger("auth")

MOCK_USER = {
    "id": "1",
    "name": "John Doe",
    "email": "name@example.com",
}


@dataclass(frozen=True)
class UserSession:
    user_id: str
    name: str
    email: str
    access_token: str
    refresh_token: str


class AuthService:
    def __init__(self):
        self.current: Optional[UserSession] = None

    def authorize(self, email: str | None, password: str | None) -> Optional[UserSession]:
        email = (email or "").strip()
        if not email or not (password or "").strip():
            logger.info("Sign-in rejected: missing credentials")
            return None

        encoded = base64.b64encode(email.encode("utf-8")).decode("ascii")
        session = UserSession(
            user_id=MOCK_USER["id"],
            name=MOCK_USER["name"],
            email=MOCK_USER["email"],
            access_token=f"mock_access_token_{encoded}",
            refresh_token=f"mock_refresh_token_{int(time.time() * 1000)}",
        )
        self.current = session
        logger.info("Signed in as %s", email)
        return session

    def sign_out(self) -> None:
        if self.current:
            logger.info("Signed out user %s", self.current.user_id)
        self.current = None

    @property
    def is_authenticated(self) -> bool:
        return self.current is not None


__all__ = ["AuthService", "MOCK_USER", "UserSession"]
