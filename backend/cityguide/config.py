from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_CITY_SLUG = "saltlake"
DEFAULT_REVALIDATE_SECONDS = 600
DEFAULT_HTTP_TIMEOUT = 10.0

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    default_city_slug: str = DEFAULT_CITY_SLUG
    tm_api_key: Optional[str] = None
    weather_api_key: Optional[str] = None
    revalidate_seconds: int = DEFAULT_REVALIDATE_SECONDS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        revalidate = int(os.getenv("REVALIDATE_SECONDS", str(DEFAULT_REVALIDATE_SECONDS)))
        if revalidate < 0:
            raise ValueError("REVALIDATE_SECONDS must be >= 0")
        return cls(
            default_city_slug=os.getenv("DEFAULT_CITY_SLUG") or DEFAULT_CITY_SLUG,
            tm_api_key=os.getenv("TM_API_KEY") or None,
            weather_api_key=os.getenv("WEATHER_API_KEY") or None,
            revalidate_seconds=revalidate,
            http_timeout=float(os.getenv("HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT))),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def cache_control(self) -> str:
        seconds = self.revalidate_seconds
        return f"public, max-age=0, s-maxage={seconds}, stale-while-revalidate={seconds}"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Calling it again only adjusts the level, so the app factory and the CLI can
    both call it.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level)
