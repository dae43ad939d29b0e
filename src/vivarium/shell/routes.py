# Core shell routes - session, navigation, feature introspection, dashboard.
# Created: 2026-09-17

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from vivarium.auth import AuthState
from vivarium.clients.auth import AuthClient
from vivarium.clients.base import ApiClient, ApiError
from vivarium.dashboard.aggregator import DashboardAggregator
from vivarium.features.registry import FeatureRegistry
from vivarium.shell.guards import (
    auth_guard,
    get_aggregator,
    get_api,
    get_auth_state,
    get_registry,
)
from vivarium.shell.schemas import (
    FeatureOut,
    LoginRequest,
    MeResponse,
    NavigationItemOut,
    RouteOut,
    SessionResponse,
    StatusResponse,
    WidgetOut,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=StatusResponse, tags=["Health"])
async def health():
    return StatusResponse()


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@router.post("/auth/login", response_model=SessionResponse, tags=["Auth"])
async def login(
    body: LoginRequest,
    api: ApiClient = Depends(get_api),
    auth: AuthState = Depends(get_auth_state),
):
    """Log in against the record API and remember the session."""
    try:
        session = await AuthClient(api).login(body.username, body.password)
    except ApiError as e:
        if e.status_code in (400, 401, 403):
            raise HTTPException(status_code=401, detail="Invalid username or password")
        raise
    auth.login(session)
    return SessionResponse(token=session.token, username=session.username, roles=session.roles)


@router.post("/auth/logout", status_code=204, tags=["Auth"])
async def logout(auth: AuthState = Depends(get_auth_state)):
    auth.logout()
    return Response(status_code=204)


@router.get(
    "/auth/me", response_model=MeResponse, dependencies=[Depends(auth_guard)], tags=["Auth"]
)
async def me(auth: AuthState = Depends(get_auth_state)):
    session = auth.session
    return MeResponse(username=session.username, roles=session.roles, is_admin=session.is_admin)


# ---------------------------------------------------------------------------
# Navigation & features
# ---------------------------------------------------------------------------


@router.get("/api/navigation", response_model=list[NavigationItemOut], tags=["Shell"])
async def navigation(
    registry: FeatureRegistry = Depends(get_registry),
    auth: AuthState = Depends(get_auth_state),
):
    """Sidebar entries; admin-only entries are hidden from non-admins."""
    items = registry.get_enabled_navigation()
    return [
        NavigationItemOut(**item.to_dict())
        for item in items
        if not item.admin_only or auth.is_admin
    ]


@router.get("/api/features", response_model=list[FeatureOut], tags=["Shell"])
async def features(
    registry: FeatureRegistry = Depends(get_registry),
    aggregator: DashboardAggregator = Depends(get_aggregator),
):
    """Every registered feature, enabled or not."""
    return [
        FeatureOut(
            name=feature.name,
            enabled=feature.enabled,
            routes=[RouteOut(**r.to_dict()) for r in registry.get_feature_routes(feature.name)],
            navigation=[
                NavigationItemOut(**n.to_dict())
                for n in registry.get_feature_navigation(feature.name)
            ],
            has_widgets=aggregator.has_provider(feature.name),
        )
        for feature in registry
    ]


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


@router.get(
    "/api/dashboard/widgets",
    response_model=list[WidgetOut],
    dependencies=[Depends(auth_guard)],
    tags=["Dashboard"],
)
async def dashboard_widgets(
    aggregator: DashboardAggregator = Depends(get_aggregator),
    auth: AuthState = Depends(get_auth_state),
):
    widgets = await aggregator.get_dashboard_widgets(auth.username)
    return [WidgetOut(**w.to_dict()) for w in widgets]


@router.post(
    "/api/dashboard/preload",
    status_code=204,
    dependencies=[Depends(auth_guard)],
    tags=["Dashboard"],
)
async def dashboard_preload(
    aggregator: DashboardAggregator = Depends(get_aggregator),
    auth: AuthState = Depends(get_auth_state),
):
    try:
        await aggregator.load_dashboard_data(auth.username)
    except Exception as e:
        logger.warning("Dashboard preload failed: %s", e, exc_info=True)
        raise HTTPException(status_code=502, detail=f"Dashboard preload failed: {e}")
    return Response(status_code=204)
