from typing import List

import typer

from cityguide.config import Settings, configure_logging
from cityguide.domain.cities import CITIES
from cityguide.domain.models import CityRecord, EventRecord
from cityguide.domain.weather_phrases import build_hero_line, build_ticker_line
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub
from cityguide.infra.weather.openweather_client import OpenWeatherClient
from cityguide.providers.events.ticketmaster import TicketmasterEventsProvider
from cityguide.providers.weather.openweather import OpenWeatherProvider

app = typer.Typer(help="CLI para inspeccionar la guía de cada ciudad")


def _directory() -> CityDirectory:
    return CityDirectory(CITIES)


def _weather_provider(settings: Settings) -> OpenWeatherProvider:
    return OpenWeatherProvider(
        api_key=settings.weather_api_key,
        client=OpenWeatherClient(timeout=settings.http_timeout),
    )


def _hub(settings: Settings) -> CityGuideHub:
    return CityGuideHub(
        TicketmasterEventsProvider(api_key=settings.tm_api_key, timeout=settings.http_timeout),
        _weather_provider(settings),
    )


def _resolve(slug: str) -> CityRecord:
    city = _directory().get_by_slug(slug)
    if city is None:
        typer.echo(f"Ciudad desconocida: {slug}", err=True)
        raise typer.Exit(code=1)
    return city


def _echo_events(label: str, events: List[EventRecord], has_more: bool) -> None:
    typer.echo(label)
    if not events:
        typer.echo("  (sin eventos)")
    for evt in events:
        typer.echo(f"  {evt.local_date}\t{evt.name}\t{evt.category}\t{evt.venue_name or '-'}")
    if has_more:
        typer.echo("  ...")


@app.command("cities")
def cli_cities():
    typer.echo("slug\tdomain\tname")
    for city in _directory().cities():
        typer.echo(f"{city.slug}\t{city.domain}\t{city.city_name}")


@app.command("events")
def cli_events(
    city: str = typer.Option(..., help="Slug de la ciudad"),
):
    """Muestra los eventos de esta noche y del resto de la semana."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    record = _resolve(city)
    guide = _hub(settings).build_sync(record)
    if guide.used_fallback:
        typer.echo("(eventos de respaldo)")
    _echo_events("Tonight", guide.events.tonight, guide.events.tonight_has_more)
    _echo_events("Later this week", guide.events.later_this_week, guide.events.later_has_more)


@app.command("weather")
def cli_weather(
    city: str = typer.Option(..., help="Slug de la ciudad"),
):
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    record = _resolve(city)
    weather = _weather_provider(settings).fetch_current(record)
    typer.echo(build_ticker_line(record, weather))
    typer.echo(build_hero_line(record, weather))


if __name__ == "__main__":
    app()
