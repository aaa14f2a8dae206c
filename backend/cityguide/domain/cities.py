from __future__ import annotations

from typing import Tuple

from .models import CityRecord, LocalProRecord, NeighborhoodRecord

SALT_LAKE = CityRecord(
    slug="saltlake",
    domain="saltlakeut.com",
    city_name="Salt Lake City",
    short_name="Salt Lake",
    state_code="UT",
    timezone="America/Denver",
    lat=40.7608,
    lon=-111.891,
    hero_tagline="See what's happening tonight & who to call when you need help.",
    hero_image_url=(
        "https://images.pexels.com/photos/3586966/pexels-photo-3586966.jpeg"
        "?auto=compress&cs=tinysrgb&w=1600"
    ),
    brand_initials="SL",
    ticker_label="Live city ticker — Salt Lake City, Utah",
    neighborhoods=(
        NeighborhoodRecord("Downtown", "Arena, nightlife, office towers.", "/neighborhoods#downtown"),
        NeighborhoodRecord("Sugar House", "Parks, coffee, older homes.", "/neighborhoods#sugar-house"),
        NeighborhoodRecord("9th & 9th", "Restaurants, boutiques, walkable.", "/neighborhoods#ninth-and-ninth"),
        NeighborhoodRecord("The Avenues", "Historic homes, hills, views.", "/neighborhoods#avenues"),
    ),
    local_pros=(
        LocalProRecord(
            name="Wasatch Roofing & Exteriors",
            category="Roofing",
            description="Salt Lake City & valley · Free inspections · Storm damage & leaks",
            cta_label="Visit website →",
            cta_url="#",
        ),
        LocalProRecord(
            name="Salt Lake HVAC Pros",
            category="Heating & cooling",
            description="24/7 emergency service · Residential & light commercial",
            cta_label="Book a service call →",
            cta_url="#",
        ),
        LocalProRecord(
            name="Downtown Realty Group",
            category="Real estate",
            description="Condos, townhomes, investment properties across Salt Lake County",
            cta_label="See listings →",
            cta_url="#",
        ),
        LocalProRecord(
            name="Mountain View Landscaping",
            category="Landscaping & snow removal",
            description="Year-round maintenance · Residential & HOAs",
            cta_label="Request a quote →",
            cta_url="#",
        ),
    ),
)

CITIES: Tuple[CityRecord, ...] = (SALT_LAKE,)
