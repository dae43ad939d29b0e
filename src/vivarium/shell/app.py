"""Application shell - composes enabled features into one FastAPI app.

Created: 2026-09-17

``create_app()`` builds the feature registry from the configured flags, binds
the dashboard providers of enabled features, mounts the core routes and then
every enabled feature route. Each collaborator can be injected, which is how
the tests build apps around fake registries and providers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vivarium.auth import AuthState
from vivarium.clients.base import ApiClient, ApiError
from vivarium.config import Settings, get_settings
from vivarium.dashboard.aggregator import DashboardAggregator
from vivarium.dashboard.protocol import WidgetProviderProtocol
from vivarium.features.catalog import create_feature_registry
from vivarium.features.models import ViewResolutionError
from vivarium.features.registry import FeatureRegistry
from vivarium.shell.guards import resolve_guard
from vivarium.shell.routes import router as core_router

logger = logging.getLogger(__name__)


def default_providers(api: ApiClient) -> dict[str, WidgetProviderProtocol]:
    """Widget providers for every catalog feature that has one."""
    from vivarium.clients.reptiles import ReptileClient
    from vivarium.clients.todos import TodoClient
    from vivarium.features.catalog import REPTILE_MANAGEMENT, TODOS
    from vivarium.reptiles.provider import ReptileDashboardWidgetProvider
    from vivarium.todos.provider import TodoDashboardWidgetProvider

    return {
        REPTILE_MANAGEMENT: ReptileDashboardWidgetProvider(ReptileClient(api)),
        TODOS: TodoDashboardWidgetProvider(TodoClient(api)),
    }


def mount_feature_routes(app: FastAPI, registry: FeatureRegistry) -> int:
    """Mount every enabled route on *app*, in registry order.

    A route whose view cannot be resolved is logged and skipped; the rest of
    the application still starts. Returns the number of routes mounted.
    """
    mounted = 0
    for route in registry.get_enabled_routes():
        try:
            view = route.load_view()
        except ViewResolutionError:
            logger.warning("Skipping route /%s", route.path, exc_info=True)
            continue

        app.add_api_route(
            "/" + route.path.lstrip("/"),
            view,
            methods=list(route.methods),
            dependencies=[Depends(resolve_guard(g)) for g in route.guards],
            name=route.name,
        )
        mounted += 1
        logger.debug("Mounted route: %s /%s -> %s", ",".join(route.methods), route.path, route.view)
    return mounted


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    status = exc.status_code if exc.status_code and exc.status_code >= 400 else 502
    detail = exc.detail if exc.detail is not None else str(exc)
    return JSONResponse(status_code=status, content={"detail": detail})


def create_app(
    settings: Settings | None = None,
    *,
    registry: FeatureRegistry | None = None,
    providers: Mapping[str, WidgetProviderProtocol] | None = None,
    auth_state: AuthState | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the Vivarium application."""
    settings = settings or get_settings()
    registry = registry or create_feature_registry(settings.features)
    auth_state = auth_state or AuthState()

    api = ApiClient(
        settings.api_base_url,
        token_getter=lambda: auth_state.token,
        timeout=settings.api_timeout,
        transport=transport,
    )
    if providers is None:
        providers = default_providers(api)
    aggregator = DashboardAggregator(registry, providers, timeout=settings.provider_timeout)

    app = FastAPI(
        title="Vivarium",
        description="Reptile keeping dashboard composed from feature modules.",
        version="0.3.0",
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.aggregator = aggregator
    app.state.auth = auth_state
    app.state.api = api

    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.add_exception_handler(ApiError, _api_error_handler)

    app.include_router(core_router)
    mounted = mount_feature_routes(app, registry)

    enabled = [name for name in registry.feature_names if registry.is_enabled(name)]
    logger.info(
        "Shell ready: %d/%d features enabled (%s), %d feature routes, %d widget providers",
        len(enabled),
        len(registry),
        ", ".join(enabled) or "none",
        mounted,
        len(aggregator.providers),
    )
    return app
