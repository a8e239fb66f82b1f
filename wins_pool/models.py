"""
Domain models for the wins pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class WeekWindow:
    """One regular-season week: its number and ISO start/end dates."""
    label: int
    start_date: str
    end_date: str

    def compact_range(self) -> str:
        """Return the window as ESPN's YYYYMMDD-YYYYMMDD dates filter."""
        start = self.start_date[:10].replace("-", "")
        end = self.end_date[:10].replace("-", "")
        return f"{start}-{end}"


@dataclass(frozen=True)
class GameRow:
    """A single matchup of a week grid, annotated with pool owners."""
    kickoff_utc: Optional[str]
    away: str
    home: str
    winner: Optional[str]
    away_owner: str
    home_owner: str
    winning_owner: str


@dataclass(frozen=True)
class WeekGrid:
    """All games of one week plus the window metadata when the week exists."""
    week: int
    current_week: Optional[int]
    games: Sequence[GameRow]
    window: Optional[WeekWindow] = None


@dataclass(frozen=True)
class TeamWins:
    """A team's win count within a standings row."""
    team: str
    code: str
    wins: int


@dataclass(frozen=True)
class StandingsRow:
    """A single owner row for standings display."""
    owner: str
    total_wins: int
    teams: Sequence[TeamWins]


@dataclass(frozen=True)
class PoolStandings:
    """Ranked owner rows plus the unowned teams in config order."""
    standings: Sequence[StandingsRow]
    unowned: Sequence[TeamWins]
