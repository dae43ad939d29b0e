# Todo views.
# Created: 2026-09-19

from __future__ import annotations

from datetime import date
from typing import Any, Literal

from fastapi import Depends
from pydantic import BaseModel, Field

from vivarium.clients.base import ApiClient
from vivarium.clients.todos import TodoClient
from vivarium.shell.guards import get_api


class NewTodo(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    status: Literal["PENDING", "IN_PROGRESS", "COMPLETED"] = "PENDING"
    category: Literal["HOUSEHOLD", "MAINTENANCE", "GARDEN", "CLEANING", "OTHER"] = "OTHER"
    assigned_to_id: int = Field(..., serialization_alias="assignedToId")
    due_date: date | None = Field(default=None, serialization_alias="dueDate")


async def my_todos(api: ApiClient = Depends(get_api)) -> list[dict[str, Any]]:
    return await TodoClient(api).my_todos()


async def create_todo(body: NewTodo, api: ApiClient = Depends(get_api)) -> dict[str, Any]:
    return await TodoClient(api).create_todo(body.model_dump(mode="json", by_alias=True))
