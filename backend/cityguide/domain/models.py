from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class NeighborhoodRecord:
    name: str
    description: str
    url: Optional[str] = None


@dataclass(frozen=True)
class LocalProRecord:
    name: str
    category: str
    description: str
    cta_label: str
    cta_url: str


@dataclass(frozen=True)
class CityRecord:
    slug: str
    domain: str
    city_name: str
    state_code: str
    timezone: str
    lat: float
    lon: float
    hero_tagline: str = ""
    hero_image_url: str = ""
    short_name: Optional[str] = None
    neighborhoods: Tuple[NeighborhoodRecord, ...] = ()
    local_pros: Tuple[LocalProRecord, ...] = ()
    brand_initials: Optional[str] = None
    ticker_label: Optional[str] = None

    def __post_init__(self):
        if not self.slug or not self.domain:
            raise ValueError("slug and domain are required")
        # Fail at definition time on an unknown IANA name.
        ZoneInfo(self.timezone)

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def display_short_name(self) -> str:
        return self.short_name or self.city_name

    @property
    def initials(self) -> str:
        if self.brand_initials:
            return self.brand_initials
        letters = "".join(word[0] for word in self.city_name.split() if word)
        return letters[:2].upper()

    @property
    def ticker_title(self) -> str:
        return self.ticker_label or f"Live city ticker — {self.city_name}, {self.state_code}"


@dataclass(frozen=True)
class EventRecord:
    id: str
    name: str
    category: str
    start_at: datetime
    local_date: str
    venue_name: Optional[str] = None
    address: Optional[str] = None
    area: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class WeatherRecord:
    temp_f: Optional[float]
    condition: str = "Unknown"
    feels_like_f: Optional[float] = None
    description: Optional[str] = None
    wind_mph: Optional[float] = None


@dataclass
class BucketedEvents:
    tonight: List[EventRecord] = field(default_factory=list)
    later_this_week: List[EventRecord] = field(default_factory=list)
    tonight_has_more: bool = False
    later_has_more: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.tonight and not self.later_this_week

    @property
    def featured_id(self) -> Optional[str]:
        if self.tonight:
            return self.tonight[0].id
        if self.later_this_week:
            return self.later_this_week[0].id
        return None


@dataclass
class CityGuide:
    city: CityRecord
    weather: Optional[WeatherRecord]
    events: BucketedEvents
    ticker_line: str
    hero_line: str
    generated_at: datetime
    used_fallback: bool = False
