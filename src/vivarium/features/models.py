# Feature descriptor data types.
# Created: 2026-09-14
#
# A feature is a static bundle of routes and navigation entries. Descriptors
# are built once from configuration and never mutated afterwards.

from __future__ import annotations

import importlib
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

GUARD_AUTH = "auth"
GUARD_ADMIN = "admin"


class ViewResolutionError(ImportError):
    """A route's view reference does not point at an importable callable."""


@dataclass(frozen=True)
class RouteDefinition:
    """A routable path contributed by a feature.

    ``view`` is a deferred reference of the form ``"package.module:attr"``.
    Nothing is imported until :meth:`load_view` is called, so the view code
    of a disabled feature is never loaded.
    """

    path: str
    view: str
    guards: tuple[str, ...] = ()
    methods: tuple[str, ...] = ("GET",)
    name: str | None = None

    def load_view(self) -> Callable[..., Any]:
        """Import and return the view callable."""
        module_path, sep, attr = self.view.partition(":")
        if not sep or not module_path or not attr:
            raise ViewResolutionError(
                f"View reference {self.view!r} must look like 'package.module:attr'"
            )
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ViewResolutionError(f"Cannot import view module {module_path!r}: {e}") from e

        view = getattr(module, attr, None)
        if not callable(view):
            raise ViewResolutionError(f"{module_path!r} has no callable {attr!r}")
        return view

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "view": self.view,
            "guards": list(self.guards),
            "methods": list(self.methods),
            "name": self.name,
        }


@dataclass(frozen=True)
class NavigationItem:
    """A sidebar entry."""

    label: str
    route: str
    icon: str
    admin_only: bool = False
    feature: str | None = None  # owning feature name

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "route": self.route,
            "icon": self.icon,
            "admin_only": self.admin_only,
            "feature": self.feature,
        }


@dataclass(frozen=True)
class FeatureConfig:
    """Declarative description of one feature."""

    name: str
    enabled: bool
    routes: tuple[RouteDefinition, ...] = field(default_factory=tuple)
    navigation: tuple[NavigationItem, ...] = field(default_factory=tuple)
