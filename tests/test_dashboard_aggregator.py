# Tests for the dashboard fan-out and aggregator.
# Created: 2026-09-15

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from vivarium.dashboard.aggregator import DashboardAggregator
from vivarium.dashboard.fanout import JoinPolicy, fan_out
from vivarium.dashboard.protocol import (
    BaseWidgetProvider,
    DashboardWidget,
    WidgetProviderProtocol,
    supports_preload,
)
from vivarium.features.models import FeatureConfig
from vivarium.features.registry import FeatureRegistry


class StaticProvider(BaseWidgetProvider):
    """Returns fixed widgets and records calls."""

    def __init__(self, widgets=None, *, fail=False, preload_fail=False, delay=0.0):
        self.widgets = widgets or []
        self.fail = fail
        self.preload_fail = preload_fail
        self.delay = delay
        self.seen = []
        self.preloaded = []

    async def get_widgets(self, subject_id):
        self.seen.append(subject_id)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise RuntimeError("backend down")
        return list(self.widgets)

    async def load_data(self, subject_id):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.preload_fail:
            raise RuntimeError("warm-up failed")
        self.preloaded.append(subject_id)


class WidgetsOnlyProvider:
    """Satisfies the protocol without any warm-up step."""

    async def get_widgets(self, subject_id):
        return [DashboardWidget("Only", 1, "i")]


def _registry(**enabled: bool) -> FeatureRegistry:
    return FeatureRegistry(FeatureConfig(name=n, enabled=e) for n, e in enabled.items())


class TestProtocol:
    """Tests for the provider contract helpers."""

    def test_runtime_protocol(self):
        assert isinstance(StaticProvider(), WidgetProviderProtocol)
        assert isinstance(WidgetsOnlyProvider(), WidgetProviderProtocol)

    def test_supports_preload(self):
        assert supports_preload(StaticProvider())
        assert not supports_preload(WidgetsOnlyProvider())

    def test_base_provider_defaults_to_no_preload(self):
        class Minimal(BaseWidgetProvider):
            async def get_widgets(self, subject_id):
                return []

        assert not supports_preload(Minimal())

    @pytest.mark.asyncio
    async def test_default_load_data_is_noop(self):
        class Minimal(BaseWidgetProvider):
            async def get_widgets(self, subject_id):
                return []

        assert await Minimal().load_data(1) is None

    def test_widget_to_dict(self):
        widget = DashboardWidget("Count", 3, "icon", "/x")
        assert widget.to_dict() == {"title": "Count", "value": 3, "icon": "icon", "route": "/x"}


class TestFanOut:
    """Tests for fan_out()."""

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await fan_out({}, policy=JoinPolicy.STRICT) == {}

    @pytest.mark.asyncio
    async def test_calls_run_concurrently(self):
        started = []
        release = asyncio.Event()

        async def call(name):
            started.append(name)
            await release.wait()
            return name

        async def releaser():
            while len(started) < 2:
                await asyncio.sleep(0)
            release.set()

        results, _ = await asyncio.gather(
            fan_out(
                {"a": lambda: call("a"), "b": lambda: call("b")},
                policy=JoinPolicy.STRICT,
            ),
            releaser(),
        )
        assert results == {"a": "a", "b": "b"}

    @pytest.mark.asyncio
    async def test_tolerant_drops_failures(self, caplog):
        async def ok():
            return 1

        async def boom():
            raise ValueError("nope")

        with caplog.at_level(logging.WARNING, logger="vivarium.dashboard.fanout"):
            results = await fan_out({"ok": ok, "boom": boom}, policy=JoinPolicy.TOLERANT)
        assert results == {"ok": 1}
        assert "boom" in caplog.text

    @pytest.mark.asyncio
    async def test_strict_raises_first_failure(self):
        async def ok():
            return 1

        async def boom():
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            await fan_out({"ok": ok, "boom": boom}, policy=JoinPolicy.STRICT)

    @pytest.mark.asyncio
    async def test_tolerant_timeout(self):
        async def slow():
            await asyncio.sleep(5)
            return "late"

        async def fast():
            return "fast"

        results = await fan_out(
            {"slow": slow, "fast": fast}, policy=JoinPolicy.TOLERANT, timeout=0.05
        )
        assert results == {"fast": "fast"}

    @pytest.mark.asyncio
    async def test_strict_timeout_raises(self):
        async def slow():
            await asyncio.sleep(5)

        with pytest.raises(TimeoutError):
            await fan_out({"slow": slow}, policy=JoinPolicy.STRICT, timeout=0.05)


class TestAggregatorBinding:
    """Providers are kept only for enabled features."""

    def test_binds_only_enabled(self):
        registry = _registry(x=True, y=False)
        aggregator = DashboardAggregator(registry, {"x": StaticProvider(), "y": StaticProvider()})
        assert list(aggregator.providers) == ["x"]
        assert aggregator.has_provider("x")
        assert not aggregator.has_provider("y")

    def test_unknown_feature_not_bound(self):
        aggregator = DashboardAggregator(_registry(), {"ghost": StaticProvider()})
        assert len(aggregator.providers) == 0

    def test_providers_view_is_read_only(self):
        aggregator = DashboardAggregator(_registry(x=True), {"x": StaticProvider()})
        with pytest.raises(TypeError):
            aggregator.providers["y"] = StaticProvider()


class TestDashboardWidgets:
    """Tests for get_dashboard_widgets()."""

    @pytest.mark.asyncio
    async def test_no_providers_returns_empty(self):
        aggregator = DashboardAggregator(_registry(), {})
        assert await aggregator.get_dashboard_widgets(42) == []

    @pytest.mark.asyncio
    async def test_failing_provider_is_contained(self):
        registry = _registry(X=True, Y=True)
        y = StaticProvider([DashboardWidget("Count", 3, "i")])
        aggregator = DashboardAggregator(registry, {"X": StaticProvider(fail=True), "Y": y})

        widgets = await aggregator.get_dashboard_widgets(42)
        assert [(w.title, w.value) for w in widgets] == [("Count", 3)]
        assert y.seen == [42]

    @pytest.mark.asyncio
    async def test_concatenates_in_binding_order(self):
        registry = _registry(a=True, b=True)
        a = StaticProvider([DashboardWidget("a1", 1, "i"), DashboardWidget("a2", 2, "i")], delay=0.02)
        b = StaticProvider([DashboardWidget("b1", 3, "i")])
        aggregator = DashboardAggregator(registry, {"a": a, "b": b})

        widgets = await aggregator.get_dashboard_widgets("alice")
        assert [w.title for w in widgets] == ["a1", "a2", "b1"]

    @pytest.mark.asyncio
    async def test_no_dedup_across_providers(self):
        registry = _registry(a=True, b=True)
        same = DashboardWidget("Count", 1, "i")
        aggregator = DashboardAggregator(
            registry, {"a": StaticProvider([same]), "b": StaticProvider([same])}
        )
        assert len(await aggregator.get_dashboard_widgets(1)) == 2

    @pytest.mark.asyncio
    async def test_slow_provider_times_out(self):
        registry = _registry(slow=True, fast=True)
        aggregator = DashboardAggregator(
            registry,
            {
                "slow": StaticProvider([DashboardWidget("s", 1, "i")], delay=5),
                "fast": StaticProvider([DashboardWidget("f", 1, "i")]),
            },
            timeout=0.05,
        )
        widgets = await aggregator.get_dashboard_widgets(1)
        assert [w.title for w in widgets] == ["f"]

    @pytest.mark.asyncio
    async def test_mock_provider(self):
        provider = AsyncMock()
        provider.get_widgets.return_value = [DashboardWidget("m", 5, "i")]
        aggregator = DashboardAggregator(_registry(m=True), {"m": provider})
        widgets = await aggregator.get_dashboard_widgets(7)
        provider.get_widgets.assert_awaited_once_with(7)
        assert widgets[0].value == 5


class TestLoadDashboardData:
    """Tests for load_dashboard_data()."""

    @pytest.mark.asyncio
    async def test_preloads_every_capable_provider(self):
        registry = _registry(a=True, b=True, c=True)
        a, b = StaticProvider(), StaticProvider()
        aggregator = DashboardAggregator(registry, {"a": a, "b": b, "c": WidgetsOnlyProvider()})
        await aggregator.load_dashboard_data(9)
        assert a.preloaded == [9]
        assert b.preloaded == [9]

    @pytest.mark.asyncio
    async def test_overridden_load_data_is_called(self):
        class Warm(BaseWidgetProvider):
            def __init__(self):
                self.loaded = []

            async def get_widgets(self, subject_id):
                return []

            async def load_data(self, subject_id):
                self.loaded.append(subject_id)

        warm = Warm()
        assert supports_preload(warm)
        await DashboardAggregator(_registry(w=True), {"w": warm}).load_dashboard_data(1)
        assert warm.loaded == [1]

    @pytest.mark.asyncio
    async def test_strict_by_default(self):
        registry = _registry(a=True, b=True)
        aggregator = DashboardAggregator(
            registry, {"a": StaticProvider(preload_fail=True), "b": StaticProvider()}
        )
        with pytest.raises(RuntimeError, match="warm-up failed"):
            await aggregator.load_dashboard_data(1)

    @pytest.mark.asyncio
    async def test_tolerant_policy_override(self):
        registry = _registry(a=True, b=True)
        b = StaticProvider()
        aggregator = DashboardAggregator(
            registry, {"a": StaticProvider(preload_fail=True), "b": b}
        )
        await aggregator.load_dashboard_data(1, policy=JoinPolicy.TOLERANT)
        assert b.preloaded == [1]

    @pytest.mark.asyncio
    async def test_tolerant_as_constructor_default(self):
        aggregator = DashboardAggregator(
            _registry(a=True),
            {"a": StaticProvider(preload_fail=True)},
            preload_policy=JoinPolicy.TOLERANT,
        )
        await aggregator.load_dashboard_data(1)

    @pytest.mark.asyncio
    async def test_no_providers(self):
        aggregator = DashboardAggregator(_registry(), {})
        await aggregator.load_dashboard_data(1)
