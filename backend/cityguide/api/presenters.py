from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from cityguide.domain.models import CityGuide, EventRecord

SEPARATOR = " · "


def _short_date(dt: datetime) -> str:
    return f"{dt:%a}, {dt:%b} {dt.day}"


def _short_time(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt:%M} {'AM' if dt.hour < 12 else 'PM'}"


def format_event_meta(event: EventRecord, tz: ZoneInfo) -> str:
    local = event.start_at.astimezone(tz)
    pieces = [_short_date(local), _short_time(local)]
    if event.venue_name:
        pieces.append(event.venue_name)
    if event.address:
        pieces.append(event.address)
    return SEPARATOR.join(pieces)


def build_tag_label(event: EventRecord) -> Optional[str]:
    parts = [part for part in (event.category, event.area) if part]
    if not parts:
        return None
    return SEPARATOR.join(parts)


def today_label(now: datetime, tz: ZoneInfo) -> str:
    local = now.astimezone(tz)
    return f"{local:%A}, {local:%b} {local.day}"


def page_context(guide: CityGuide) -> dict:
    """Template variables for ``city.html``."""
    city = guide.city
    tz = city.tz
    featured_id = guide.events.featured_id

    def row(event: EventRecord) -> dict:
        return {
            "event": event,
            "tag": build_tag_label(event),
            "meta": format_event_meta(event, tz),
            "featured": event.id == featured_id,
        }

    return {
        "guide": guide,
        "city": city,
        "today_label": today_label(guide.generated_at, tz),
        "year": guide.generated_at.astimezone(tz).year,
        "tonight_rows": [row(evt) for evt in guide.events.tonight],
        "later_rows": [row(evt) for evt in guide.events.later_this_week],
    }


def guide_payload(guide: CityGuide) -> dict:
    """JSON-ready view of a composed guide."""

    def event_dict(event: EventRecord) -> dict:
        return {
            "id": event.id,
            "name": event.name,
            "category": event.category,
            "start_at": event.start_at.isoformat(),
            "local_date": event.local_date,
            "venue_name": event.venue_name,
            "address": event.address,
            "area": event.area,
            "url": event.url,
        }

    weather = guide.weather
    return {
        "city": {
            "slug": guide.city.slug,
            "domain": guide.city.domain,
            "city_name": guide.city.city_name,
            "timezone": guide.city.timezone,
        },
        "weather": None
        if weather is None
        else {
            "temp_f": weather.temp_f,
            "feels_like_f": weather.feels_like_f,
            "condition": weather.condition,
            "description": weather.description,
            "wind_mph": weather.wind_mph,
        },
        "ticker_line": guide.ticker_line,
        "hero_line": guide.hero_line,
        "tonight": [event_dict(evt) for evt in guide.events.tonight],
        "later_this_week": [event_dict(evt) for evt in guide.events.later_this_week],
        "tonight_has_more": guide.events.tonight_has_more,
        "later_has_more": guide.events.later_has_more,
        "used_fallback": guide.used_fallback,
        "generated_at": guide.generated_at.isoformat(),
    }
