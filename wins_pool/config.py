"""
Configuration for the wins pool service.

This module centralizes all tunable settings (scoreboard URL, pool config location,
cache TTL and display timezone).
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional


ESPN_SCOREBOARD = "https://site.api.espn.com/apis/site/v2/sports/football/nfl/scoreboard"


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, returning default on missing/invalid values."""
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        return default


def _env_bool(name: str, default: bool) -> bool:
    """
    Read a boolean-ish environment variable.

    Treats these as false: 0, false, no, off
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def _env_str(name: str) -> Optional[str]:
    """Read a string environment variable; blank values count as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable app configuration.

    Notes on the pool config source:
      - config_url wins over config_path when both are set.
      - with neither set, every /api/ request fails with MissingConfiguration.
    """

    # Upstream
    scoreboard_url: str = os.getenv("ESPN_SCOREBOARD_URL", ESPN_SCOREBOARD)
    http_timeout_seconds: int = _env_int("HTTP_TIMEOUT_SECONDS", 10)

    # Pool ownership config
    config_url: Optional[str] = _env_str("CONFIG_URL")
    config_path: Optional[str] = _env_str("CONFIG_PATH")
    default_season: int = _env_int("DEFAULT_SEASON", 2025)

    # Cache controls
    cache_enabled: bool = _env_bool("CACHE_ENABLED", True)
    cache_ttl_minutes: int = _env_int("CACHE_TTL_MINUTES", 30)

    # Display
    display_tz: str = os.getenv("DISPLAY_TZ", "America/Chicago")

    @property
    def cache_ttl_seconds(self) -> int:
        """TTL applied to both cache namespaces, in seconds."""
        return self.cache_ttl_minutes * 60
