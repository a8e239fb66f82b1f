"""
Static NFL team name -> code table.

Used as a fallback when ESPN does not supply team.abbreviation, and to resolve the
mascot names in the pool config to codes.
"""

from __future__ import annotations

from typing import Dict

NAME_TO_ABBR: Dict[str, str] = {
    "49ers": "SF",
    "Bears": "CHI",
    "Bengals": "CIN",
    "Bills": "BUF",
    "Broncos": "DEN",
    "Browns": "CLE",
    "Buccaneers": "TB",
    "Cardinals": "ARI",
    "Chargers": "LAC",
    "Chiefs": "KC",
    "Colts": "IND",
    "Commanders": "WSH",
    "Cowboys": "DAL",
    "Dolphins": "MIA",
    "Eagles": "PHI",
    "Falcons": "ATL",
    "Giants": "NYG",
    "Jaguars": "JAX",
    "Jets": "NYJ",
    "Lions": "DET",
    "Packers": "GB",
    "Panthers": "CAR",
    "Patriots": "NE",
    "Raiders": "LV",
    "Rams": "LAR",
    "Ravens": "BAL",
    "Saints": "NO",
    "Seahawks": "SEA",
    "Steelers": "PIT",
    "Texans": "HOU",
    "Titans": "TEN",
    "Vikings": "MIN",
}


def code_for_team(name: str) -> str:
    """
    Return the code for a mascot name.

    Unknown names are used as their own code, so a renamed ESPN abbreviation can
    leave such a team stuck at zero wins.
    """
    return NAME_TO_ABBR.get(name, name)


def seed_wins() -> Dict[str, int]:
    """A wins table holding every known code at zero."""
    return {code: 0 for code in NAME_TO_ABBR.values()}
