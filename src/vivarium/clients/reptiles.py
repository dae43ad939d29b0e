# Reptile record client.
# Created: 2026-09-16

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from vivarium.clients.base import ApiClient


class ReptileStats(BaseModel):
    """Collection counters for the current user.

    Accepts both the long (``totalReptiles``) and the short (``total``)
    field names the record API has used; absent counters are 0.
    """

    model_config = ConfigDict(extra="ignore")

    total_reptiles: int = Field(0, validation_alias=AliasChoices("totalReptiles", "total"))
    active_reptiles: int = Field(0, validation_alias=AliasChoices("activeReptiles", "active"))
    needs_feeding: int = Field(0, validation_alias=AliasChoices("needsFeeding", "needs_feeding"))
    needs_cleaning: int = Field(
        0, validation_alias=AliasChoices("needsCleaning", "needs_cleaning")
    )


class ReptileClient:
    """CRUD and log access for reptiles."""

    def __init__(self, api: ApiClient):
        self._api = api

    async def list_reptiles(self) -> list[dict[str, Any]]:
        return await self._api.get("/api/reptiles") or []

    async def get_reptile(self, reptile_id: int) -> dict[str, Any]:
        return await self._api.get(f"/api/reptiles/{reptile_id}")

    async def create_reptile(self, reptile: dict[str, Any]) -> dict[str, Any]:
        return await self._api.post("/api/reptiles", reptile)

    async def update_reptile(self, reptile_id: int, changes: dict[str, Any]) -> dict[str, Any]:
        return await self._api.put(f"/api/reptiles/{reptile_id}", changes)

    async def delete_reptile(self, reptile_id: int) -> None:
        await self._api.delete(f"/api/reptiles/{reptile_id}")

    async def get_statistics(self) -> ReptileStats:
        data = await self._api.get("/api/reptiles/statistics")
        return ReptileStats.model_validate(data or {})

    async def get_feeding_logs(self, reptile_id: int) -> list[dict[str, Any]]:
        return await self._api.get(f"/api/feeding-logs/reptile/{reptile_id}") or []

    async def get_weight_logs(self, reptile_id: int) -> list[dict[str, Any]]:
        return await self._api.get(f"/api/reptiles/{reptile_id}/weight") or []
