from __future__ import annotations

from typing import Optional, Protocol

from cityguide.domain.models import CityRecord, WeatherRecord


class WeatherProvider(Protocol):
    """Contract for current-conditions weather providers."""

    def fetch_current(self, city: CityRecord) -> Optional[WeatherRecord]:
        """Return current conditions at the city's coordinates, or None when unavailable."""
        raise NotImplementedError
