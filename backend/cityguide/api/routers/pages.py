from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from cityguide.api.deps import get_city, get_directory, get_guide_hub, get_settings
from cityguide.api.presenters import page_context
from cityguide.config import Settings
from cityguide.domain.models import CityRecord
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


async def _render_city(request: Request, city: CityRecord, hub: CityGuideHub, settings: Settings) -> HTMLResponse:
    guide = await hub.build(city)
    response = templates.TemplateResponse(request, "city.html", page_context(guide))
    response.headers["Cache-Control"] = settings.cache_control
    return response


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    directory: CityDirectory = Depends(get_directory),
    hub: CityGuideHub = Depends(get_guide_hub),
    settings: Settings = Depends(get_settings),
):
    # Served in place at "/"; the host picks the city.
    city = directory.resolve_host(request.headers.get("host"), settings.default_city_slug)
    if city is None:
        raise HTTPException(status_code=404, detail="No city configured for this host")
    return await _render_city(request, city, hub, settings)


@router.get("/{city_slug}", response_class=HTMLResponse)
async def city_page(
    request: Request,
    city: CityRecord = Depends(get_city),
    hub: CityGuideHub = Depends(get_guide_hub),
    settings: Settings = Depends(get_settings),
):
    return await _render_city(request, city, hub, settings)
