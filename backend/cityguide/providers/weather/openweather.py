from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

from cityguide.domain.models import CityRecord, WeatherRecord
from cityguide.infra.weather.openweather_client import OpenWeatherClient

from .base import WeatherProvider

logger = logging.getLogger(__name__)


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _section(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class OpenWeatherProvider(WeatherProvider):
    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[OpenWeatherClient] = None,
        units: str = "imperial",
    ):
        self.api_key = api_key or os.getenv("WEATHER_API_KEY")
        self.client = client or OpenWeatherClient()
        self.units = units

    def fetch_current(self, city: CityRecord) -> Optional[WeatherRecord]:
        if not self.api_key:
            logger.warning("WEATHER_API_KEY missing; skipping weather for %s", city.slug)
            return None
        try:
            payload = self.client.fetch_current(city.lat, city.lon, api_key=self.api_key, units=self.units)
        except httpx.HTTPStatusError as exc:
            logger.error(
                "OpenWeather error for %s: %s %s",
                city.slug,
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            return None
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("OpenWeather fetch failed for %s: %s", city.slug, exc)
            return None
        return self._map_weather(payload)

    @staticmethod
    def _map_weather(payload: dict) -> WeatherRecord:
        main = _section(payload.get("main"))
        wind = _section(payload.get("wind"))
        conditions = payload.get("weather")
        primary = _section(conditions[0] if isinstance(conditions, list) and conditions else None)
        return WeatherRecord(
            temp_f=_number(main.get("temp")),
            feels_like_f=_number(main.get("feels_like")),
            condition=_text(primary.get("main")) or "Unknown",
            description=_text(primary.get("description")),
            wind_mph=_number(wind.get("speed")),
        )
