"""Application configuration.

Configuration via environment variables:
    BBL_API_BASE_URL: SportsPress REST API root
    BBL_API_TIMEOUT: Request timeout in seconds (default: 10)
    BBL_MAX_CONNECTIONS: Max concurrent upstream connections (default: 20)
    BBL_LEAGUE_ID: SportsPress league ID for the current competition (default: 69)
    BBL_SEASON_ID: SportsPress season ID for the current season (default: 239)
    BBL_TIMEZONE: IANA timezone used for date display (default: Europe/Zagreb)
    BBL_LOG_LEVEL: Root log level (default: INFO)
    BBL_HOST / BBL_PORT: Bind address for the HTTP server
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://bbl.hr/wp-json/sportspress/v2"
DEFAULT_TIMEZONE = "Europe/Zagreb"


@dataclass(frozen=True)
class Settings:
    """Runtime settings, resolved once per process."""

    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: float = 10.0
    max_connections: int = 20
    league_id: int = 69
    season_id: int = 239
    timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    return Settings(
        api_base_url=env.get("BBL_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        api_timeout=float(env.get("BBL_API_TIMEOUT", 10.0)),
        max_connections=int(env.get("BBL_MAX_CONNECTIONS", 20)),
        league_id=int(env.get("BBL_LEAGUE_ID", 69)),
        season_id=int(env.get("BBL_SEASON_ID", 239)),
        timezone=env.get("BBL_TIMEZONE", DEFAULT_TIMEZONE),
        log_level=env.get("BBL_LOG_LEVEL", "INFO").upper(),
        host=env.get("BBL_HOST", "0.0.0.0"),
        port=int(env.get("BBL_PORT", 8000)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def get_display_timezone(tz_name: str | None = None) -> ZoneInfo:
    """Get timezone from string, falling back to configured default.

    Args:
        tz_name: IANA timezone name (e.g., 'Europe/Zagreb').
                 If None, uses the configured timezone.

    Returns:
        ZoneInfo for the timezone
    """
    name = tz_name or get_settings().timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("[CONFIG] Unknown timezone '%s', using %s", name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)
