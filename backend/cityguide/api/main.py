from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from cityguide.api.routers import cities, pages
from cityguide.config import Settings, configure_logging
from cityguide.domain.cities import CITIES
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub
from cityguide.infra.weather.openweather_client import OpenWeatherClient
from cityguide.providers.events.ticketmaster import TicketmasterEventsProvider
from cityguide.providers.weather.openweather import OpenWeatherProvider


def create_app(
    settings: Optional[Settings] = None,
    directory: Optional[CityDirectory] = None,
    hub: Optional[CityGuideHub] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="City Guide", version="0.1.0")
    if hub is None:
        hub = CityGuideHub(
            TicketmasterEventsProvider(api_key=settings.tm_api_key, timeout=settings.http_timeout),
            OpenWeatherProvider(
                api_key=settings.weather_api_key,
                client=OpenWeatherClient(timeout=settings.http_timeout),
            ),
        )
    app.state.settings = settings
    app.state.directory = directory or CityDirectory(CITIES)
    app.state.guide_hub = hub

    app.include_router(cities.router, prefix="/api")
    app.include_router(pages.router)
    return app


app = create_app()
