from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from cityguide.config import Settings
from cityguide.domain.models import CityRecord
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_directory(request: Request) -> CityDirectory:
    directory = getattr(request.app.state, "directory", None)
    if directory is None:
        raise HTTPException(status_code=500, detail="City directory not configured")
    return directory


def get_guide_hub(request: Request) -> CityGuideHub:
    hub = getattr(request.app.state, "guide_hub", None)
    if hub is None:
        raise HTTPException(status_code=500, detail="Guide hub not configured")
    return hub


def get_city(city_slug: str, directory: CityDirectory = Depends(get_directory)) -> CityRecord:
    city = directory.get_by_slug(city_slug)
    if city is None:
        raise HTTPException(status_code=404, detail=f"Unknown city '{city_slug}'")
    return city
