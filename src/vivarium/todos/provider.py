# Todo dashboard widgets - counts of the user's todos by status.
# Created: 2026-09-19

from __future__ import annotations

import logging

from vivarium.clients.todos import TodoClient, count_by_status
from vivarium.dashboard.protocol import BaseWidgetProvider, DashboardWidget, SubjectId
from vivarium.features.catalog import ICON_TODOS

logger = logging.getLogger(__name__)


class TodoDashboardWidgetProvider(BaseWidgetProvider):
    """Widgets only; nothing to warm up."""

    def __init__(self, client: TodoClient):
        self._client = client

    async def get_widgets(self, subject_id: SubjectId) -> list[DashboardWidget]:
        try:
            todos = await self._client.my_todos()
        except Exception as e:
            logger.error("Error loading todo dashboard widgets: %s", e)
            return []

        counts = count_by_status(todos)
        return [
            DashboardWidget("Pending Todos", counts["PENDING"], ICON_TODOS, "/todos"),
            DashboardWidget("In Progress", counts["IN_PROGRESS"], ICON_TODOS, "/todos"),
            DashboardWidget("Completed", counts["COMPLETED"], ICON_TODOS, "/todos"),
        ]
