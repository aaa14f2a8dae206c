from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from cityguide.api.deps import get_city, get_directory, get_guide_hub, get_settings
from cityguide.api.presenters import guide_payload
from cityguide.config import Settings
from cityguide.domain.models import CityRecord
from cityguide.hub.city_directory import CityDirectory
from cityguide.hub.guide_hub import CityGuideHub

router = APIRouter(tags=["cities"])


@router.get("/cities")
def list_cities(directory: CityDirectory = Depends(get_directory)):
    return [
        {"slug": city.slug, "domain": city.domain, "city_name": city.city_name}
        for city in directory.cities()
    ]


@router.get("/cities/{city_slug}/guide")
async def city_guide(
    response: Response,
    city: CityRecord = Depends(get_city),
    hub: CityGuideHub = Depends(get_guide_hub),
    settings: Settings = Depends(get_settings),
):
    guide = await hub.build(city)
    response.headers["Cache-Control"] = settings.cache_control
    return guide_payload(guide)
