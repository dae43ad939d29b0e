# Feature catalog - the features this shell knows how to compose.
# Created: 2026-09-14
#
# Feature names are the stable registry keys; flags only decide `enabled`.

from __future__ import annotations

from vivarium.config import FeatureFlags
from vivarium.features.models import (
    GUARD_ADMIN,
    GUARD_AUTH,
    FeatureConfig,
    NavigationItem,
    RouteDefinition,
)
from vivarium.features.registry import FeatureRegistry

REPTILE_MANAGEMENT = "reptile-management"
USER_MANAGEMENT = "user-management"
TODOS = "todos"

# Heroicons outline paths, rendered verbatim by the front end.
ICON_REPTILE = (
    "M14.828 14.828a4 4 0 01-5.656 0M9 10h1.586a1 1 0 01.707.293l.707.707A1 1 0 0012.414 11H13"
    "m-3 3.5A2.5 2.5 0 1110.5 16v-1.5a1 1 0 10-2 0v1.5z"
)
ICON_USERS = (
    "M12 4.354a4 4 0 110 5.292M15 21H3v-1a6 6 0 0112 0v1zm0 0h6v-1a6 6 0 00-9-5.197"
    "M13 7a4 4 0 11-8 0 4 4 0 018 0z"
)
ICON_TODOS = (
    "M9 5H7a2 2 0 00-2 2v12a2 2 0 002 2h10a2 2 0 002-2V7a2 2 0 00-2-2h-2M9 5a2 2 0 002 2h2"
    "a2 2 0 002-2M9 5a2 2 0 012-2h2a2 2 0 012 2m-3 7h3m-3 4h3m-6-4h.01M9 16h.01"
)


def build_feature_configs(flags: FeatureFlags) -> list[FeatureConfig]:
    """Descriptors for every catalog feature, with `enabled` taken from *flags*."""
    return [
        FeatureConfig(
            name=REPTILE_MANAGEMENT,
            enabled=flags.is_on(REPTILE_MANAGEMENT),
            routes=(
                RouteDefinition(
                    path="reptiles",
                    view="vivarium.reptiles.views:list_reptiles",
                    guards=(GUARD_AUTH,),
                    name="reptile-list",
                ),
                RouteDefinition(
                    path="reptiles/add",
                    view="vivarium.reptiles.views:add_reptile",
                    guards=(GUARD_AUTH,),
                    methods=("POST",),
                    name="reptile-add",
                ),
                RouteDefinition(
                    path="reptiles/{reptile_id}",
                    view="vivarium.reptiles.views:reptile_detail",
                    guards=(GUARD_AUTH,),
                    name="reptile-detail",
                ),
            ),
            navigation=(
                NavigationItem(
                    label="Reptiles",
                    route="/reptiles",
                    icon=ICON_REPTILE,
                    feature=REPTILE_MANAGEMENT,
                ),
            ),
        ),
        FeatureConfig(
            name=USER_MANAGEMENT,
            enabled=flags.is_on(USER_MANAGEMENT),
            routes=(
                RouteDefinition(
                    path="admin/users",
                    view="vivarium.admin.views:list_users",
                    guards=(GUARD_AUTH, GUARD_ADMIN),
                    name="user-management",
                ),
            ),
            navigation=(
                NavigationItem(
                    label="User Management",
                    route="/admin/users",
                    icon=ICON_USERS,
                    admin_only=True,
                    # Registry name, not the flag-style "userManagement".
                    feature=USER_MANAGEMENT,
                ),
            ),
        ),
        FeatureConfig(
            name=TODOS,
            enabled=flags.is_on(TODOS),
            routes=(
                RouteDefinition(
                    path="todos",
                    view="vivarium.todos.views:my_todos",
                    guards=(GUARD_AUTH,),
                    name="todo-list",
                ),
                RouteDefinition(
                    path="todos",
                    view="vivarium.todos.views:create_todo",
                    guards=(GUARD_AUTH,),
                    methods=("POST",),
                    name="todo-create",
                ),
            ),
            navigation=(
                NavigationItem(
                    label="Todos",
                    route="/todos",
                    icon=ICON_TODOS,
                    feature=TODOS,
                ),
            ),
        ),
    ]


def create_feature_registry(flags: FeatureFlags) -> FeatureRegistry:
    """Registry populated with the whole catalog."""
    return FeatureRegistry(build_feature_configs(flags))
