from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import List, Optional

import httpx

from cityguide.config import DEFAULT_HTTP_TIMEOUT
from cityguide.domain.localtime import city_local_today, local_date_key, utc_midnight
from cityguide.domain.models import CityRecord, EventRecord

from .base import EventsProvider

logger = logging.getLogger(__name__)

WINDOW_DAYS = 6
PAGE_SIZE = 100
COUNTRY_CODE = "US"
DEFAULT_CATEGORY = "Event"
ADDRESS_SEPARATOR = " · "


class TicketmasterEventsProvider(EventsProvider):
    BASE_URL = "https://app.ticketmaster.com/discovery/v2/events.json"

    def __init__(self, api_key: Optional[str] = None, timeout: float = DEFAULT_HTTP_TIMEOUT):
        self.api_key = api_key or os.getenv("TM_API_KEY")
        self.timeout = timeout

    def fetch_events(
        self,
        city: CityRecord,
        *,
        reference: Optional[datetime] = None,
    ) -> List[EventRecord]:
        if not self.api_key:
            logger.warning("TM_API_KEY missing; no live events for %s", city.slug)
            return []

        params = self.build_params(city, reference)
        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(self.BASE_URL, params=params)
            if resp.is_error:
                logger.error(
                    "Ticketmaster error for %s: %s %s", city.slug, resp.status_code, resp.reason_phrase
                )
                return []
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Ticketmaster fetch failed for %s: %s", city.slug, exc)
            return []

        embedded = data.get("_embedded") if isinstance(data, dict) else None
        raw_events = embedded.get("events", []) if isinstance(embedded, dict) else []
        if not isinstance(data, dict) or not isinstance(raw_events, list):
            logger.error("Ticketmaster payload for %s has no event list", city.slug)
            return []

        events, stats = self._process_events(raw_events, city)
        logger.debug("Ticketmaster %s: %s", city.slug, stats)
        return events

    def build_params(self, city: CityRecord, reference: Optional[datetime] = None) -> dict:
        start = utc_midnight(city_local_today(city.tz, reference))
        end = start + timedelta(days=WINDOW_DAYS)
        return {
            "apikey": self.api_key,
            "city": city.city_name,
            "stateCode": city.state_code,
            "countryCode": COUNTRY_CODE,
            "size": PAGE_SIZE,
            "sort": "date,asc",
            "startDateTime": self._format_ts(start),
            "endDateTime": self._format_ts(end),
        }

    def _process_events(self, events: list, city: CityRecord) -> tuple[list[EventRecord], dict]:
        seen: dict[str, EventRecord] = {}
        stats = {"fetched": len(events), "mapped": 0, "skipped": 0, "duplicates": 0}
        for item in events:
            try:
                event = self._map_event(item, city) if isinstance(item, dict) else None
            except Exception:
                logger.debug("Ticketmaster %s: unreadable record %r", city.slug, item.get("id"))
                event = None
            if event is None:
                stats["skipped"] += 1
                continue
            if event.id in seen:
                stats["duplicates"] += 1
                continue
            seen[event.id] = event
        mapped = sorted(seen.values(), key=lambda evt: evt.start_at)
        stats["mapped"] = len(mapped)
        return mapped, stats

    def _map_event(self, payload: dict, city: CityRecord) -> Optional[EventRecord]:
        event_id = payload.get("id")
        name = payload.get("name")
        start_info = (payload.get("dates") or {}).get("start") or {}
        date_time = start_info.get("dateTime")
        local_date = start_info.get("localDate")
        if not event_id or not name or not (date_time or local_date):
            return None

        try:
            if date_time:
                start_at = self._parse_ts(date_time)
            else:
                # Midday UTC keeps a date-only listing on the same day once projected locally.
                start_at = self._parse_ts(f"{local_date}T12:00:00Z")
        except ValueError:
            return None

        venues = (payload.get("_embedded") or {}).get("venues") or [{}]
        venue = venues[0] or {}
        venue_city = (venue.get("city") or {}).get("name")
        address_parts = [
            (venue.get("address") or {}).get("line1"),
            venue_city,
            (venue.get("state") or {}).get("stateCode"),
        ]
        address = ADDRESS_SEPARATOR.join(part for part in address_parts if part) or None

        classification = (payload.get("classifications") or [{}])[0] or {}
        genre = (classification.get("genre") or {}).get("name")
        segment = (classification.get("segment") or {}).get("name")

        return EventRecord(
            id=str(event_id),
            name=name,
            category=genre or segment or DEFAULT_CATEGORY,
            start_at=start_at,
            local_date=local_date_key(start_at, city.tz),
            venue_name=venue.get("name"),
            address=address,
            area=venue.get("neighborhood") or venue_city or city.city_name,
            url=payload.get("url"),
        )

    @staticmethod
    def _parse_ts(value: str) -> datetime:
        if value.endswith("Z"):
            value = value.replace("Z", "+00:00")
        if len(value) == 19:
            value += "+00:00"
        dt = datetime.fromisoformat(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def _format_ts(value: datetime) -> str:
        value = value.astimezone(timezone.utc).replace(microsecond=0)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
