from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from cityguide.api.main import create_app
from cityguide.config import Settings
from cityguide.domain.cities import SALT_LAKE
from cityguide.domain.localtime import city_local_today
from cityguide.domain.models import EventRecord, WeatherRecord
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub

PROVO = dataclasses.replace(
    SALT_LAKE,
    slug="provo",
    domain="provoguide.com",
    city_name="Provo",
    short_name=None,
    brand_initials=None,
    ticker_label=None,
)


class _StaticEvents:
    def __init__(self, events):
        self._events = events

    def fetch_events(self, city, *, reference=None):
        return list(self._events)


class _StaticWeather:
    def __init__(self, weather):
        self._weather = weather

    def fetch_current(self, city):
        return self._weather


def _live_events() -> list[EventRecord]:
    today = city_local_today(SALT_LAKE.tz)
    now = datetime.now(timezone.utc)
    return [
        EventRecord(
            id=f"tonight-{idx}",
            name=f"Jazz Night {idx}",
            category="Jazz",
            start_at=now,
            local_date=today.isoformat(),
            venue_name="Eccles Theater",
            area="Downtown",
            url=f"https://tickets.example/{idx}",
        )
        for idx in range(3)
    ] + [
        EventRecord(
            id="later-1",
            name="Utah Jazz Home Game",
            category="Basketball",
            start_at=now + timedelta(days=2),
            local_date=(today + timedelta(days=2)).isoformat(),
        )
    ]


def _build_client(events, weather):
    settings = Settings(default_city_slug="saltlake")
    hub = CityGuideHub(_StaticEvents(events), _StaticWeather(weather))
    app = create_app(settings=settings, directory=CityDirectory([SALT_LAKE, PROVO]), hub=hub)
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def api_client():
    yield from _build_client(_live_events(), WeatherRecord(temp_f=64.0, condition="Clear", wind_mph=5.0))


@pytest.fixture()
def api_client_offline():
    yield from _build_client([], None)
