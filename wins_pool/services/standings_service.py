"""
Standings logic.

Responsibilities:
  - resolve each configured team to a code and its wins
  - total wins per owner
  - rank owners (wins desc, then owner name)
"""

from __future__ import annotations

from typing import List, Mapping, Sequence

from ..models import PoolStandings, StandingsRow, TeamWins
from ..ownership import OwnershipConfig
from ..teams import code_for_team


def team_rows(teams: Sequence[str], wins: Mapping[str, int]) -> List[TeamWins]:
    """Map team names to TeamWins rows, keeping the given order."""
    out: List[TeamWins] = []
    for t in teams:
        code = code_for_team(t)
        out.append(TeamWins(team=t, code=code, wins=wins.get(code, 0)))
    return out


def build_standings(config: OwnershipConfig, wins: Mapping[str, int]) -> PoolStandings:
    """
    Join wins against ownership.

    Owners are sorted by total wins descending, ties by owner name ascending.
    The unowned list keeps config order.
    """
    rows: List[StandingsRow] = []
    for owner, teams in config.owners.items():
        tr = team_rows(teams, wins)
        rows.append(StandingsRow(owner=owner, total_wins=sum(r.wins for r in tr), teams=tr))

    rows.sort(key=lambda r: (-r.total_wins, r.owner))
    return PoolStandings(standings=rows, unowned=team_rows(config.unowned, wins))
