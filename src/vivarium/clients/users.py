# User account client (admin views).
# Created: 2026-09-16

from __future__ import annotations

from typing import Any

from vivarium.clients.base import ApiClient


class UserClient:
    def __init__(self, api: ApiClient):
        self._api = api

    async def list_users(self) -> list[dict[str, Any]]:
        return await self._api.get("/api/users") or []

    async def get_user(self, user_id: int) -> dict[str, Any]:
        return await self._api.get(f"/api/users/{user_id}")

    async def list_assignable(self) -> list[dict[str, Any]]:
        """Users that todos can be assigned to."""
        return await self._api.get("/api/users/assignable") or []
