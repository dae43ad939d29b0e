# Feature registry - collects feature descriptors and aggregates their
# routes and navigation for the application shell.
# Created: 2026-09-14

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from vivarium.features.models import FeatureConfig, NavigationItem, RouteDefinition

logger = logging.getLogger(__name__)


class FeatureRegistry:
    """
    Registry of feature descriptors, keyed by feature name.

    Usage:
        registry = FeatureRegistry()
        registry.register(FeatureConfig(name="reptile-management", enabled=True, ...))

        routes = registry.get_enabled_routes()
        menu = registry.get_enabled_navigation()

    Lookups never fail: an unknown name is simply "disabled" with no routes
    and no navigation, so a typo in configuration cannot stop the shell from
    starting. Registering a name twice replaces the earlier descriptor; the
    replacement keeps the original registration slot.
    """

    def __init__(self, features: Iterable[FeatureConfig] = ()):
        self._features: dict[str, FeatureConfig] = {}
        for feature in features:
            self.register(feature)

    def register(self, feature: FeatureConfig) -> None:
        """Register (or replace) a feature descriptor."""
        if not feature.name:
            logger.warning("Ignoring feature descriptor without a name: %r", feature)
            return
        if feature.name in self._features:
            logger.warning("Feature '%s' registered twice; last registration wins", feature.name)
        self._features[feature.name] = feature
        logger.debug(
            "Registered feature: %s (enabled=%s, routes=%d, nav=%d)",
            feature.name,
            feature.enabled,
            len(feature.routes),
            len(feature.navigation),
        )

    def is_enabled(self, name: str) -> bool:
        """True only for a registered, enabled feature."""
        feature = self._features.get(name)
        return feature.enabled if feature is not None else False

    def get(self, name: str) -> FeatureConfig | None:
        return self._features.get(name)

    @property
    def feature_names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._features)

    def get_enabled_routes(self) -> list[RouteDefinition]:
        """Routes of every enabled feature, in registration then declaration order."""
        routes: list[RouteDefinition] = []
        for feature in self._features.values():
            if feature.enabled:
                routes.extend(feature.routes)
        return routes

    def get_enabled_navigation(self) -> list[NavigationItem]:
        """Navigation of every enabled feature, admin-only entries last.

        The sort is stable, so each group keeps registration order.
        """
        navigation: list[NavigationItem] = []
        for feature in self._features.values():
            if feature.enabled:
                navigation.extend(feature.navigation)
        return sorted(navigation, key=lambda item: bool(item.admin_only))

    def get_feature_routes(self, name: str) -> list[RouteDefinition]:
        """A feature's own routes regardless of its flag; [] if unknown."""
        feature = self._features.get(name)
        return list(feature.routes) if feature is not None else []

    def get_feature_navigation(self, name: str) -> list[NavigationItem]:
        """A feature's own navigation regardless of its flag; [] if unknown."""
        feature = self._features.get(name)
        return list(feature.navigation) if feature is not None else []

    def __contains__(self, name: object) -> bool:
        return name in self._features

    def __iter__(self) -> Iterator[FeatureConfig]:
        return iter(list(self._features.values()))

    def __len__(self) -> int:
        return len(self._features)
