# Todo client.
# Created: 2026-09-17

from __future__ import annotations

from typing import Any

from vivarium.clients.base import ApiClient

TODO_STATUSES = ("PENDING", "IN_PROGRESS", "COMPLETED")


class TodoClient:
    def __init__(self, api: ApiClient):
        self._api = api

    async def my_todos(self) -> list[dict[str, Any]]:
        """Todos assigned to the logged-in user."""
        return await self._api.get("/api/todos/my") or []

    async def all_todos(self) -> list[dict[str, Any]]:
        """Every todo (admin only on the record API side)."""
        return await self._api.get("/api/todos") or []

    async def create_todo(self, todo: dict[str, Any]) -> dict[str, Any]:
        return await self._api.post("/api/todos", todo)

    async def update_todo(self, todo_id: int, todo: dict[str, Any]) -> dict[str, Any]:
        return await self._api.put(f"/api/todos/{todo_id}", todo)

    async def delete_todo(self, todo_id: int) -> None:
        await self._api.delete(f"/api/todos/{todo_id}")


def count_by_status(todos: list[dict[str, Any]]) -> dict[str, int]:
    counts = dict.fromkeys(TODO_STATUSES, 0)
    for todo in todos:
        status = todo.get("status")
        if status in counts:
            counts[status] += 1
    return counts
