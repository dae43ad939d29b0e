# Dashboard widgets: provider protocol, fan-out join and aggregator.
# Created: 2026-09-15

from vivarium.dashboard.aggregator import DashboardAggregator
from vivarium.dashboard.fanout import JoinPolicy, fan_out
from vivarium.dashboard.protocol import (
    BaseWidgetProvider,
    DashboardWidget,
    SubjectId,
    WidgetProviderProtocol,
)

__all__ = [
    "BaseWidgetProvider",
    "DashboardAggregator",
    "DashboardWidget",
    "JoinPolicy",
    "SubjectId",
    "WidgetProviderProtocol",
    "fan_out",
]
