from __future__ import annotations

import math
from typing import Optional

from .models import CityRecord, WeatherRecord

WARM_THRESHOLD_F = 80
CHILLY_THRESHOLD_F = 40


def _round(value: float) -> int:
    # Half-up, so 79.5 reads as 80 on both lines.
    return int(math.floor(value + 0.5))


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:] if text else ""


def build_ticker_line(city: CityRecord, weather: Optional[WeatherRecord]) -> str:
    if weather is None or weather.temp_f is None:
        return f"{city.city_name}: Weather currently unavailable"

    temp = _round(weather.temp_f)
    desc = _capitalize(weather.description) if weather.description else weather.condition
    parts = [f"Now: {temp}°F · {desc}"]
    if weather.wind_mph is not None:
        parts.append(f"Wind {_round(weather.wind_mph)} mph")
    return " · ".join(parts)


def build_hero_line(city: CityRecord, weather: Optional[WeatherRecord]) -> str:
    short = city.display_short_name
    if weather is None or weather.temp_f is None:
        return f"Weather currently unavailable — but there's still plenty happening around {short}."

    temp = _round(weather.temp_f)
    condition = (weather.condition or "").lower()

    if "snow" in condition:
        return f"{temp}°F · Snowy — bundle up, but it's still a good night for a game or show."
    if "rain" in condition:
        return f"{temp}°F · Rainy — grab a jacket and pick something indoors tonight."
    if temp >= WARM_THRESHOLD_F:
        return f"{temp}°F · Warm evening — perfect for patios, markets, and night events."
    if temp <= CHILLY_THRESHOLD_F:
        return f"{temp}°F · Chilly night — ideal for cozy indoor events around {short}."
    return f"{temp}°F · Comfortable tonight — great weather to get out around {short}."
