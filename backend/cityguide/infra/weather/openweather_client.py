from __future__ import annotations

import httpx


class OpenWeatherClient:
    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    def fetch_current(
        self,
        lat: float,
        lon: float,
        *,
        api_key: str,
        units: str = "imperial",
    ) -> dict:
        params = {
            "lat": lat,
            "lon": lon,
            "appid": api_key,
            "units": units,
        }
        with httpx.Client(timeout=self.timeout) as client:
            resp = client.get(self.BASE_URL, params=params)
            resp.raise_for_status()
            data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("OpenWeather payload is not an object")
        return data
