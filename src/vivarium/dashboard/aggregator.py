# Dashboard aggregator - merges widgets from every enabled feature.
# Created: 2026-09-15

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from vivarium.dashboard.fanout import JoinPolicy, fan_out
from vivarium.dashboard.protocol import (
    DashboardWidget,
    SubjectId,
    WidgetProviderProtocol,
    supports_preload,
)
from vivarium.features.registry import FeatureRegistry

logger = logging.getLogger(__name__)


class DashboardAggregator:
    """
    Fans dashboard requests out to the widget providers of enabled features.

    The shell offers one candidate provider per feature it knows how to build;
    only those whose feature is enabled in *registry* are kept. The binding is
    fixed for the aggregator's lifetime.

    Usage:
        aggregator = DashboardAggregator(
            registry,
            {"reptile-management": ReptileDashboardWidgetProvider(client)},
        )
        widgets = await aggregator.get_dashboard_widgets("alice")
        await aggregator.load_dashboard_data("alice")
    """

    def __init__(
        self,
        registry: FeatureRegistry,
        candidates: Mapping[str, WidgetProviderProtocol],
        *,
        timeout: float | None = None,
        preload_policy: JoinPolicy = JoinPolicy.STRICT,
    ):
        self._timeout = timeout
        self._preload_policy = preload_policy
        self._providers: dict[str, WidgetProviderProtocol] = {}

        for name, provider in candidates.items():
            if not registry.is_enabled(name):
                logger.debug("Skipping widget provider for disabled feature: %s", name)
                continue
            self._providers[name] = provider
            logger.debug("Bound widget provider: %s -> %s", name, type(provider).__name__)

    @property
    def providers(self) -> Mapping[str, WidgetProviderProtocol]:
        """Read-only view of the bound providers."""
        return MappingProxyType(self._providers)

    def has_provider(self, name: str) -> bool:
        return name in self._providers

    async def get_dashboard_widgets(self, subject_id: SubjectId) -> list[DashboardWidget]:
        """Widgets from every bound provider, concatenated in binding order.

        A provider that raises or times out contributes nothing; the others
        are unaffected. Never raises for a provider failure.
        """
        calls = {
            name: (lambda p=provider: p.get_widgets(subject_id))
            for name, provider in self._providers.items()
        }
        results = await fan_out(
            calls,
            policy=JoinPolicy.TOLERANT,
            timeout=self._timeout,
            label="widgets",
        )

        widgets: list[DashboardWidget] = []
        for name in self._providers:
            widgets.extend(results.get(name) or [])
        return widgets

    async def load_dashboard_data(
        self,
        subject_id: SubjectId,
        *,
        policy: JoinPolicy | None = None,
    ) -> None:
        """Run every provider's warm-up step concurrently and wait for all.

        With the default STRICT policy the first failure propagates to the
        caller; pass ``JoinPolicy.TOLERANT`` to log and continue instead.
        """
        calls = {
            name: (lambda p=provider: p.load_data(subject_id))
            for name, provider in self._providers.items()
            if supports_preload(provider)
        }
        await fan_out(
            calls,
            policy=policy or self._preload_policy,
            timeout=self._timeout,
            label="preload",
        )
