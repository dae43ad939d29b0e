# Feature composition: descriptors, registry and the built-in catalog.
# Created: 2026-09-14

from vivarium.features.models import (
    GUARD_ADMIN,
    GUARD_AUTH,
    FeatureConfig,
    NavigationItem,
    RouteDefinition,
    ViewResolutionError,
)
from vivarium.features.registry import FeatureRegistry

__all__ = [
    "GUARD_ADMIN",
    "GUARD_AUTH",
    "FeatureConfig",
    "FeatureRegistry",
    "NavigationItem",
    "RouteDefinition",
    "ViewResolutionError",
]
