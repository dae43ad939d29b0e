"""Vivarium - a reptile keeping dashboard composed from togglable features.

- Feature registry: routes and navigation of enabled features.
- Dashboard aggregator: widgets from every enabled feature's provider.
- Application shell: the FastAPI app that puts the two together.
"""

from vivarium.dashboard import DashboardAggregator, DashboardWidget, JoinPolicy
from vivarium.features import FeatureConfig, FeatureRegistry, NavigationItem, RouteDefinition

__all__ = [
    "DashboardAggregator",
    "DashboardWidget",
    "FeatureConfig",
    "FeatureRegistry",
    "JoinPolicy",
    "NavigationItem",
    "RouteDefinition",
]
