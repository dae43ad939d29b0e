# Reptile dashboard widgets - collection counters from the record API.
# Created: 2026-09-18

from __future__ import annotations

import logging
import time

from vivarium.clients.reptiles import ReptileClient, ReptileStats
from vivarium.dashboard.protocol import BaseWidgetProvider, DashboardWidget, SubjectId
from vivarium.features.catalog import ICON_REPTILE

logger = logging.getLogger(__name__)

ICON_FEEDING = "M12 9v3m0 0v3m0-3h3m-3 0H9m12 0a9 9 0 11-18 0 9 9 0 0118 0z"
ICON_CLEANING = (
    "M19 7l-.867 12.142A2 2 0 0116.138 21H7.862a2 2 0 01-1.995-1.858L5 7m5 4v6m4-6v6"
    "m1-10V4a1 1 0 00-1-1h-4a1 1 0 00-1 1v3M4 7h16"
)

# How long counters fetched by load_data() may be reused by get_widgets().
PRELOAD_TTL_SECONDS = 30.0


class ReptileDashboardWidgetProvider(BaseWidgetProvider):
    """Total/active reptiles plus the feeding and cleaning backlog."""

    def __init__(self, client: ReptileClient, *, preload_ttl: float = PRELOAD_TTL_SECONDS):
        self._client = client
        self._preload_ttl = preload_ttl
        self._preloaded: dict[SubjectId, tuple[float, ReptileStats]] = {}

    async def get_widgets(self, subject_id: SubjectId) -> list[DashboardWidget]:
        stats = self._fresh_preload(subject_id)
        if stats is None:
            try:
                stats = await self._client.get_statistics()
            except Exception as e:
                logger.error("Error loading reptile dashboard widgets: %s", e)
                return []
        return self._build_widgets(stats)

    async def load_data(self, subject_id: SubjectId) -> None:
        try:
            stats = await self._client.get_statistics()
        except Exception as e:
            logger.error("Error pre-loading reptile dashboard data: %s", e)
            return
        now = time.monotonic()
        self._preloaded = {
            subject: entry
            for subject, entry in self._preloaded.items()
            if now - entry[0] <= self._preload_ttl
        }
        self._preloaded[subject_id] = (now, stats)

    def _fresh_preload(self, subject_id: SubjectId) -> ReptileStats | None:
        entry = self._preloaded.get(subject_id)
        if entry is None:
            return None
        loaded_at, stats = entry
        if time.monotonic() - loaded_at > self._preload_ttl:
            del self._preloaded[subject_id]
            return None
        return stats

    @staticmethod
    def _build_widgets(stats: ReptileStats) -> list[DashboardWidget]:
        return [
            DashboardWidget("Total Reptiles", stats.total_reptiles, ICON_REPTILE, "/reptiles"),
            DashboardWidget("Active Reptiles", stats.active_reptiles, ICON_REPTILE, "/reptiles"),
            DashboardWidget("Need Feeding", stats.needs_feeding, ICON_FEEDING, "/reptiles"),
            DashboardWidget(
                "Enclosures Need Cleaning", stats.needs_cleaning, ICON_CLEANING, "/reptiles"
            ),
        ]
