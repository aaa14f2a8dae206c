from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from cityguide.domain.bucketing import bucket_events
from cityguide.domain.fallback import fallback_events
from cityguide.domain.models import CityGuide, CityRecord, EventRecord, WeatherRecord
from cityguide.domain.weather_phrases import build_hero_line, build_ticker_line
from cityguide.providers.events.base import EventsProvider
from cityguide.providers.weather.base import WeatherProvider

logger = logging.getLogger(__name__)


class CityGuideHub:
    """Combines the events and weather providers into one page view."""

    def __init__(self, events_provider: EventsProvider, weather_provider: WeatherProvider) -> None:
        self._events_provider = events_provider
        self._weather_provider = weather_provider

    async def build(self, city: CityRecord, *, now: Optional[datetime] = None) -> CityGuide:
        now = now or datetime.now(timezone.utc)
        events, weather = await asyncio.gather(
            asyncio.to_thread(self._events_provider.fetch_events, city, reference=now),
            asyncio.to_thread(self._weather_provider.fetch_current, city),
        )
        return self.compose(city, events, weather, now=now)

    def build_sync(self, city: CityRecord, *, now: Optional[datetime] = None) -> CityGuide:
        return asyncio.run(self.build(city, now=now))

    @staticmethod
    def with_fallback(
        city: CityRecord, events: List[EventRecord], *, now: Optional[datetime] = None
    ) -> Tuple[List[EventRecord], bool]:
        if events:
            return events, False
        logger.info("No live events for %s; using fallback listings", city.slug)
        return fallback_events(city, now), True

    def compose(
        self,
        city: CityRecord,
        events: List[EventRecord],
        weather: Optional[WeatherRecord],
        *,
        now: datetime,
    ) -> CityGuide:
        listing, used_fallback = self.with_fallback(city, events, now=now)
        return CityGuide(
            city=city,
            weather=weather,
            events=bucket_events(listing, city, now=now),
            ticker_line=build_ticker_line(city, weather),
            hero_line=build_hero_line(city, weather),
            generated_at=now,
            used_fallback=used_fallback,
        )
