from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional

from .localtime import city_local_today, local_date_key, local_instant
from .models import CityRecord, EventRecord

SATURDAY = 5


def _upcoming_saturday(today: date) -> date:
    return today + timedelta(days=(SATURDAY - today.weekday()) % 7)


def fallback_events(city: CityRecord, now: Optional[datetime] = None) -> List[EventRecord]:
    """Three placeholder listings anchored to the city's local today.

    Used by callers when the events provider yields nothing; makes no network
    calls.
    """
    tz = city.tz
    today = city_local_today(tz, now)
    address = f"{city.city_name} · {city.state_code}"
    seeds = [
        (
            "1",
            f"{city.display_short_name} Night Market",
            "Food & drink",
            local_instant(today, 19, 0, tz),
            "Downtown plaza",
            "Downtown",
        ),
        (
            "2",
            "Community Sunset Hike",
            "Outdoors",
            local_instant(today + timedelta(days=2), 18, 30, tz),
            "Local trailhead",
            "Foothills",
        ),
        (
            "3",
            "Weekend Farmers Market",
            "Family",
            local_instant(_upcoming_saturday(today), 9, 0, tz),
            "Central park",
            "Central",
        ),
    ]
    events = [
        EventRecord(
            id=f"{city.slug}-fallback-{suffix}",
            name=name,
            category=category,
            start_at=start_at,
            local_date=local_date_key(start_at, tz),
            venue_name=venue,
            address=address,
            area=area,
            url="#",
        )
        for suffix, name, category, start_at, venue, area in seeds
    ]
    return sorted(events, key=lambda evt: evt.start_at)
