# User management views (admin only; guarded by the catalog route).
# Created: 2026-09-19

from __future__ import annotations

from typing import Any

from fastapi import Depends

from vivarium.clients.base import ApiClient
from vivarium.clients.users import UserClient
from vivarium.shell.guards import get_api


async def list_users(api: ApiClient = Depends(get_api)) -> list[dict[str, Any]]:
    return await UserClient(api).list_users()
