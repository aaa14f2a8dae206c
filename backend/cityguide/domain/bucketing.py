from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from .localtime import city_local_today
from .models import BucketedEvents, CityRecord, EventRecord

TONIGHT_LIMIT = 2
LATER_LIMIT = 3
WEEK_SPAN_DAYS = 6


def bucket_events(
    events: Iterable[EventRecord],
    city: CityRecord,
    *,
    now: Optional[datetime] = None,
    tonight_limit: int = TONIGHT_LIMIT,
    later_limit: int = LATER_LIMIT,
) -> BucketedEvents:
    """Split ``events`` into tonight / later-this-week by city-local date.

    Events dated before today or after today + 6 days fall in neither bucket.
    Input order is kept inside each bucket.
    """
    today = city_local_today(city.tz, now)
    today_key = today.isoformat()
    end_key = (today + timedelta(days=WEEK_SPAN_DAYS)).isoformat()

    tonight_all: list[EventRecord] = []
    later_all: list[EventRecord] = []
    for event in events:
        if event.local_date == today_key:
            tonight_all.append(event)
        elif today_key < event.local_date <= end_key:
            later_all.append(event)

    return BucketedEvents(
        tonight=tonight_all[:tonight_limit],
        later_this_week=later_all[:later_limit],
        tonight_has_more=len(tonight_all) > tonight_limit,
        later_has_more=len(later_all) > later_limit,
    )
