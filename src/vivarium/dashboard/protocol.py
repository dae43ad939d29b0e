"""Dashboard widget provider protocol.

Created: 2026-09-15

A feature that wants tiles on the landing page supplies a widget provider.
Providers have one required capability (``get_widgets``) and one optional
one (``load_data``, a best-effort warm-up). ``BaseWidgetProvider`` gives a
no-op ``load_data`` so adapters only override what they support.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Protocol, runtime_checkable

# Opaque identity of the acting user, supplied by the auth layer.
SubjectId = int | str


@dataclass(frozen=True)
class DashboardWidget:
    """A small titled number shown on the dashboard."""

    title: str
    value: float | int
    icon: str
    route: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@runtime_checkable
class WidgetProviderProtocol(Protocol):
    """Protocol for dashboard widget providers."""

    async def get_widgets(self, subject_id: SubjectId) -> list[DashboardWidget]:
        """Return this feature's widgets for *subject_id*.

        Must not mutate shared state. Adapters may swallow their own errors
        and return []; anything they let escape is contained by the
        aggregator.
        """
        ...


class BaseWidgetProvider(ABC):
    """Base class for providers with an optional warm-up step."""

    @abstractmethod
    async def get_widgets(self, subject_id: SubjectId) -> list[DashboardWidget]:
        """Produce widgets for the subject."""
        ...

    async def load_data(self, subject_id: SubjectId) -> None:
        """Pre-load data for the subject. Default: nothing to do."""
        return None


def supports_preload(provider: object) -> bool:
    """True if *provider* has a warm-up step worth scheduling."""
    if isinstance(provider, BaseWidgetProvider):
        # Only subclasses that override the no-op default have one.
        return type(provider).load_data is not BaseWidgetProvider.load_data
    return callable(getattr(provider, "load_data", None))
