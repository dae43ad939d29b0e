# Local session holder for the logged-in user.
# Created: 2026-09-16
#
# Vivarium runs for one person on their own machine, so it keeps a single
# session in memory, the way a browser keeps one token in local storage.

from __future__ import annotations

import hmac
import logging

from vivarium.clients.auth import AuthSession

logger = logging.getLogger(__name__)


class AuthState:
    """The current session, if any."""

    def __init__(self, session: AuthSession | None = None):
        self._session = session

    @property
    def session(self) -> AuthSession | None:
        return self._session

    @property
    def token(self) -> str | None:
        return self._session.token if self._session else None

    @property
    def username(self) -> str | None:
        return self._session.username if self._session else None

    @property
    def is_admin(self) -> bool:
        return self._session is not None and self._session.is_admin

    def matches(self, token: str | None) -> bool:
        """True if *token* is the current session token."""
        if not token or self._session is None:
            return False
        return hmac.compare_digest(token.encode(), self._session.token.encode())

    def login(self, session: AuthSession) -> None:
        self._session = session
        logger.info("Logged in as %s", session.username)

    def logout(self) -> None:
        if self._session is not None:
            logger.info("Logged out %s", self._session.username)
        self._session = None
