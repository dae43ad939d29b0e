# Auth endpoint client.
# Created: 2026-09-16

from __future__ import annotations

from pydantic import BaseModel, Field

from vivarium.clients.base import ApiClient

ROLE_ADMIN = "ROLE_ADMIN"


class AuthSession(BaseModel):
    """What the record API hands back on a successful login."""

    token: str
    username: str
    roles: list[str] = Field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return ROLE_ADMIN in self.roles


class AuthClient:
    def __init__(self, api: ApiClient):
        self._api = api

    async def login(self, username: str, password: str) -> AuthSession:
        data = await self._api.post(
            "/api/auth/login", {"username": username, "password": password}
        )
        return AuthSession.model_validate(data)
