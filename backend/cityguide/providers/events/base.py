from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from cityguide.domain.models import CityRecord, EventRecord


class EventsProvider(Protocol):
    """Contract for external event listing providers."""

    def fetch_events(
        self,
        city: CityRecord,
        *,
        reference: Optional[datetime] = None,
    ) -> list[EventRecord]:
        """Fetch this week's events for ``city``, sorted by start.

        The week starts at the city's local today as seen at ``reference``.
        Implementations return an empty list instead of raising when the
        upstream is unavailable; callers decide on fallback content.
        """
        raise NotImplementedError
