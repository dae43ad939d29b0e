# Route guards and shared FastAPI dependencies for the shell.
# Created: 2026-09-17
#
# Feature routes name their guards by identifier ("auth", "admin"); the
# shell turns each identifier into a FastAPI dependency at mount time.

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import HTTPException, Request

from vivarium.auth import AuthState
from vivarium.clients.base import ApiClient
from vivarium.dashboard.aggregator import DashboardAggregator
from vivarium.features.models import GUARD_ADMIN, GUARD_AUTH
from vivarium.features.registry import FeatureRegistry

logger = logging.getLogger(__name__)

Guard = Callable[[Request], Awaitable[None]]


def get_auth_state(request: Request) -> AuthState:
    return request.app.state.auth


def get_api(request: Request) -> ApiClient:
    return request.app.state.api


def get_registry(request: Request) -> FeatureRegistry:
    return request.app.state.registry


def get_aggregator(request: Request) -> DashboardAggregator:
    return request.app.state.aggregator


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def auth_guard(request: Request) -> None:
    """Allow only requests carrying the current session's bearer token."""
    if not get_auth_state(request).matches(_bearer_token(request)):
        raise HTTPException(status_code=401, detail="Not authenticated")


async def admin_guard(request: Request) -> None:
    """Allow only an authenticated administrator."""
    await auth_guard(request)
    if not get_auth_state(request).is_admin:
        raise HTTPException(status_code=403, detail="Administrator role required")


def _deny(identifier: str) -> Guard:
    async def _check(request: Request) -> None:
        raise HTTPException(status_code=403, detail=f"Unknown route guard: {identifier}")

    return _check


GUARDS: dict[str, Guard] = {
    GUARD_AUTH: auth_guard,
    GUARD_ADMIN: admin_guard,
}


def resolve_guard(identifier: str) -> Guard:
    """Guard dependency for *identifier*; unknown identifiers deny every request."""
    guard = GUARDS.get(identifier)
    if guard is None:
        logger.warning("Unknown route guard '%s'; route will reject all requests", identifier)
        return _deny(identifier)
    return guard
