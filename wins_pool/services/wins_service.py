"""
Season win aggregation.

Wins are counted from game-level results, one scoreboard request per week window,
instead of reading a separate standings endpoint that might disagree with them.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Dict, Iterable, Optional

from .. import payload
from ..espn_client import ESPNClient
from ..models import WeekWindow
from ..teams import NAME_TO_ABBR, seed_wins
from .weeks_service import WeeksService

logger = logging.getLogger(__name__)


def winner_code(competitor: Dict[str, Any]) -> str:
    """Code for a winning competitor: ESPN abbreviation, else the static name table."""
    return payload.team_abbreviation(competitor) or NAME_TO_ABBR.get(
        payload.team_display_name(competitor), ""
    )


def add_wins(wins: Dict[str, int], results: Any) -> Dict[str, int]:
    """Fold one results payload into the wins table; unfinished games add nothing."""
    for ev in payload.events(results):
        for comp in payload.competitions(ev):
            w = payload.winner(payload.competitors(comp))
            if w is None:
                continue
            code = winner_code(w)
            if code:
                wins[code] = wins.get(code, 0) + 1
    return wins


def accumulate_wins(
    windows: Iterable[WeekWindow],
    fetch_window: Callable[[WeekWindow], Any],
    wins: Optional[Dict[str, int]] = None,
) -> Dict[str, int]:
    """
    Walk windows in order, fetching and folding each one into the wins table.

    fetch_window is called once per window, sequentially; the first exception
    aborts the whole walk and nothing partial is returned.
    """
    table = seed_wins() if wins is None else wins
    for window in windows:
        add_wins(table, fetch_window(window))
    return table


@dataclass
class WinsService:
    """Service responsible for computing wins per team code for the season."""

    client: ESPNClient
    weeks: WeeksService

    def _fetch_window(self, window: WeekWindow) -> Any:
        """Fetch results for a single week window."""
        return self.client.scoreboard_for_dates(window.compact_range())

    def season_wins(self, season: Optional[int] = None) -> Dict[str, int]:
        """
        Return wins keyed by team code, every known code present.

        season is metadata only; ESPN is queried by the calendar's date windows.
        """
        windows, _ = self.weeks.resolve()
        wins = accumulate_wins(windows, self._fetch_window)
        logger.info("computed season %s wins over %d weeks", season, len(windows))
        return wins
