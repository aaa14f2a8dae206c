from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from cityguide.domain.models import CityRecord


def _clean_host(host: str) -> str:
    return host.strip().lower().split(":")[0]


class CityDirectory:
    """Read-only lookup of cities by slug and by public host name."""

    def __init__(self, cities: Iterable[CityRecord]) -> None:
        by_slug: dict[str, CityRecord] = {}
        by_host: dict[str, CityRecord] = {}
        for city in cities:
            slug = city.slug.lower()
            host = _clean_host(city.domain)
            if slug in by_slug:
                raise ValueError(f"City slug '{city.slug}' already registered")
            if host in by_host:
                raise ValueError(f"City domain '{city.domain}' already registered")
            by_slug[slug] = city
            by_host[host] = city
        self._by_slug: Mapping[str, CityRecord] = MappingProxyType(by_slug)
        self._by_host: Mapping[str, CityRecord] = MappingProxyType(by_host)

    def get_by_slug(self, slug: str) -> Optional[CityRecord]:
        return self._by_slug.get(slug.strip().lower())

    def get_by_host(self, host: str) -> Optional[CityRecord]:
        return self._by_host.get(_clean_host(host))

    def resolve_host(self, host: Optional[str], default_slug: str) -> Optional[CityRecord]:
        city = self.get_by_host(host) if host else None
        return city or self.get_by_slug(default_slug)

    def list(self) -> List[str]:
        return [city.slug for city in self._by_slug.values()]

    def cities(self) -> List[CityRecord]:
        return list(self._by_slug.values())

    def __len__(self) -> int:
        return len(self._by_slug)
