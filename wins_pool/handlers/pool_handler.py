"""
Handler/controller responsible for building the /api/ response payloads.

Keeps Flask routes simple by concentrating config loading, caching and assembly logic here.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Any, Callable, Dict, Optional

from dateutil import tz

from ..cache import TTLCache
from ..config import AppConfig
from ..espn_client import ESPNClient
from ..models import GameRow, PoolStandings, TeamWins, WeekGrid
from ..ownership import OwnershipConfig, build_team_to_owner, load_ownership
from ..services.standings_service import build_standings
from ..services.week_grid_service import WeekGridService
from ..services.wins_service import WinsService

logger = logging.getLogger(__name__)

STANDINGS_CACHE_KEY = "standings_cache_v1"


def week_cache_key(week: Optional[int]) -> str:
    """Cache key for a week request; an unspecified week is keyed as 'auto'."""
    return f"week_cache_v1_{week if week is not None else 'auto'}"


def display_time(now: datetime) -> str:
    """Render a timestamp like 'Oct 18, 2026, 09:05 AM'."""
    return now.strftime("%b %d, %Y, %I:%M %p")


def team_wins_to_dict(t: TeamWins) -> Dict[str, Any]:
    """Serialize a TeamWins row into JSON-safe primitives."""
    return {"team": t.team, "code": t.code, "wins": t.wins}


def standings_to_dict(s: PoolStandings) -> Dict[str, Any]:
    """Serialize PoolStandings into the standings/unowned JSON shape."""
    return {
        "standings": [
            {
                "owner": row.owner,
                "total_wins": row.total_wins,
                "teams": [team_wins_to_dict(t) for t in row.teams],
            }
            for row in s.standings
        ],
        "unowned": [team_wins_to_dict(t) for t in s.unowned],
    }


def game_to_dict(g: GameRow) -> Dict[str, Any]:
    """Serialize a GameRow model into JSON-safe primitives."""
    return {
        "kickoff_utc": g.kickoff_utc,
        "away": g.away,
        "home": g.home,
        "winner": g.winner,
        "awayOwner": g.away_owner,
        "homeOwner": g.home_owner,
        "winningOwner": g.winning_owner,
    }


def grid_to_dict(grid: WeekGrid) -> Dict[str, Any]:
    """Serialize a WeekGrid; window fields only appear when a window matched."""
    out: Dict[str, Any] = {
        "week": grid.week,
        "current_week": grid.current_week,
        "games": [game_to_dict(g) for g in grid.games],
    }
    if grid.window is not None:
        out["week_label"] = str(grid.window.label)
        out["startDate"] = grid.window.start_date
        out["endDate"] = grid.window.end_date
    return out


@dataclass
class PoolHandler:
    """Orchestrates config loading, the cache and the services into response payloads."""

    cfg: AppConfig
    client: ESPNClient
    cache: Optional[TTLCache]
    wins_service: WinsService
    grid_service: WeekGridService

    def _now(self) -> datetime:
        """Return the current time in the display timezone."""
        return datetime.now(tz=tz.gettz(self.cfg.display_tz))

    def _cached(self, key: str, compute: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
        """Serve key from the cache when one is configured, else always compute."""
        if self.cache is None:
            return compute()
        return self.cache.get_or_set(key=key, ttl_seconds=self.cfg.cache_ttl_seconds, loader=compute)

    def _season(self, config: OwnershipConfig) -> int:
        """The config's season, or DEFAULT_SEASON when the config omits it."""
        return config.season if config.season is not None else self.cfg.default_season

    def _metadata(self, config: OwnershipConfig) -> Dict[str, Any]:
        """Fields shared by every payload, for operator visibility."""
        return {
            "season": self._season(config),
            "generated_at_ct": display_time(self._now()),
            "cache_ttl_minutes": self.cfg.cache_ttl_minutes,
        }

    def load_config(self) -> OwnershipConfig:
        """Load the ownership config for this request."""
        return load_ownership(self.cfg, self.client)

    def standings(self) -> Dict[str, Any]:
        """
        Build (or serve from cache) the season standings payload.

        Raises:
            MissingConfiguration, FetchError
        """
        config = self.load_config()

        def compute() -> Dict[str, Any]:
            wins = self.wins_service.season_wins(self._season(config))
            return {**self._metadata(config), **standings_to_dict(build_standings(config, wins))}

        return self._cached(STANDINGS_CACHE_KEY, compute)

    def week(self, week: Optional[int]) -> Dict[str, Any]:
        """
        Build (or serve from cache) the game grid payload for week (None = current).

        Raises:
            MissingConfiguration, FetchError
        """
        config = self.load_config()

        def compute() -> Dict[str, Any]:
            grid = self.grid_service.build(week, build_team_to_owner(config))
            logger.info("built week %s grid with %d games", grid.week, len(grid.games))
            return {
                **self._metadata(config),
                "timezone": config.timezone,
                **grid_to_dict(grid),
            }

        return self._cached(week_cache_key(week), compute)
