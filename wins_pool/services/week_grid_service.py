"""
Single-week game grid.

Responsibilities:
  - pick the requested (or current) week window
  - fetch that window's results
  - normalize each matchup into a GameRow annotated with owners
  - drop games no pool owner cares about, and order the rest by kickoff
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Mapping, Optional

from .. import payload
from ..espn_client import ESPNClient
from ..models import GameRow, WeekGrid
from ..ownership import UNOWNED
from .weeks_service import WeeksService

logger = logging.getLogger(__name__)

NO_OWNER = "-"


def game_row(event: Dict[str, Any], team_to_owner: Mapping[str, str]) -> Optional[GameRow]:
    """
    Build a GameRow from an event's first competition.

    Returns None when the event lacks a home or away side, or when both teams
    are unowned.
    """
    comps = payload.competitions(event)
    if not comps:
        return None
    comp = comps[0]
    competitors = payload.competitors(comp)
    away = payload.side(competitors, "away")
    home = payload.side(competitors, "home")
    if away is None or home is None:
        return None

    away_name = payload.team_display_name(away)
    home_name = payload.team_display_name(home)
    away_owner = team_to_owner.get(away_name, NO_OWNER)
    home_owner = team_to_owner.get(home_name, NO_OWNER)

    if away_owner == UNOWNED and home_owner == UNOWNED:
        return None

    w = payload.winner(competitors)
    winner_name = payload.team_display_name(w) if w is not None else None
    winning_owner = team_to_owner.get(winner_name, NO_OWNER) if winner_name else NO_OWNER

    return GameRow(
        kickoff_utc=payload.kickoff(event, comp),
        away=away_name,
        home=home_name,
        winner=winner_name,
        away_owner=away_owner,
        home_owner=home_owner,
        winning_owner=winning_owner,
    )


def sort_games(games: List[GameRow]) -> List[GameRow]:
    """Order by kickoff (missing kickoff first), then away name, then home name."""
    return sorted(games, key=lambda g: (payload.kickoff_epoch(g.kickoff_utc), g.away, g.home))


@dataclass
class WeekGridService:
    """Service responsible for building the game grid of one week."""

    client: ESPNClient
    weeks: WeeksService

    def build(self, week: Optional[int], team_to_owner: Mapping[str, str]) -> WeekGrid:
        """
        Return the grid for week, or for the provider's current week when week is None.

        A week with no matching calendar window yields an empty grid without window
        metadata.
        """
        windows, current = self.weeks.resolve()
        wanted = week if week is not None else (current or 1)
        window = next((w for w in windows if w.label == wanted), None)
        if window is None:
            logger.info("no calendar window for week %s", wanted)
            return WeekGrid(week=wanted, current_week=current, games=[])

        results = self.client.scoreboard_for_dates(window.compact_range())
        rows = [game_row(ev, team_to_owner) for ev in payload.events(results)]
        games = sort_games([r for r in rows if r is not None])
        return WeekGrid(week=wanted, current_week=current, games=games, window=window)
