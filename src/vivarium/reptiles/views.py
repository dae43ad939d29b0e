# Reptile management views.
# Created: 2026-09-18
#
# Mounted by the shell from the feature catalog; not imported when the
# reptile-management feature is disabled.

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any, Literal

from fastapi import Depends
from pydantic import BaseModel, Field

from vivarium.clients.base import ApiClient
from vivarium.clients.reptiles import ReptileClient
from vivarium.shell.guards import get_api


class NewReptile(BaseModel):
    """Payload for creating a reptile; serialized with the record API's names."""

    name: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=100)
    subspecies: str | None = None
    gender: Literal["MALE", "FEMALE", "UNKNOWN"] = "UNKNOWN"
    birth_date: date | None = Field(default=None, serialization_alias="birthDate")
    acquisition_date: date = Field(..., serialization_alias="acquisitionDate")
    enclosure_id: int | None = Field(default=None, serialization_alias="enclosureId")
    status: Literal["ACTIVE", "QUARANTINE", "DECEASED", "SOLD"] = "ACTIVE"
    morph: str | None = None
    notes: str | None = None


async def list_reptiles(api: ApiClient = Depends(get_api)) -> list[dict[str, Any]]:
    return await ReptileClient(api).list_reptiles()


async def add_reptile(body: NewReptile, api: ApiClient = Depends(get_api)) -> dict[str, Any]:
    payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return await ReptileClient(api).create_reptile(payload)


async def reptile_detail(reptile_id: int, api: ApiClient = Depends(get_api)) -> dict[str, Any]:
    """A reptile with its feeding and weight history."""
    client = ReptileClient(api)
    reptile, feedings, weights = await asyncio.gather(
        client.get_reptile(reptile_id),
        client.get_feeding_logs(reptile_id),
        client.get_weight_logs(reptile_id),
    )
    return {"reptile": reptile, "feeding_logs": feedings, "weight_logs": weights}
