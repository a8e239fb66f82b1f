"""
Defensive navigation over the ESPN scoreboard schema.

Every accessor returns an explicit default when a node is missing or has an unexpected
type, so services never deal with raw None/KeyError/IndexError cases.
"""

from __future__ import annotations

import re
from datetime import timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from dateutil import parser as date_parser

LABEL_RE = re.compile(r"[0-9]+")


def safe_int(v, default=0) -> int:
    """Convert a value to int safely; return default on failures."""
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def get_nested(obj: Any, path: Sequence[Union[str, int]], default=None):
    """
    Safely access nested dict keys / list indexes by path; return default if missing.

    Example:
      get_nested(root, ["leagues", 0, "calendar"])
    """
    cur = obj
    for k in path:
        if isinstance(k, int):
            if not isinstance(cur, list) or not -len(cur) <= k < len(cur):
                return default
            cur = cur[k]
        else:
            if not isinstance(cur, dict):
                return default
            cur = cur.get(k)
    return cur if cur is not None else default


def as_list(v) -> List[Any]:
    """Return v when it is a list, otherwise an empty list."""
    return v if isinstance(v, list) else []


def as_dict(v) -> Dict[str, Any]:
    """Return v when it is a dict, otherwise an empty dict."""
    return v if isinstance(v, dict) else {}


# -------------------------
# Scoreboard root
# -------------------------

def calendar_entries(root: Any) -> List[Dict[str, Any]]:
    """
    Return the week entries of the league calendar.

    The calendar shows up either as a list of sections ({"entries": [...]}) or as a
    single section, depending on the schema version ESPN serves.
    """
    entries = get_nested(root, ["leagues", 0, "calendar", 0, "entries"])
    if not isinstance(entries, list):
        entries = get_nested(root, ["leagues", 0, "calendar", "entries"])
    return [e for e in as_list(entries) if isinstance(e, dict)]


def is_week_entry(entry: Dict[str, Any]) -> bool:
    """True for calendar entries labelled with a plain integer and carrying both dates."""
    label = entry.get("label")
    if label is None or not LABEL_RE.fullmatch(str(label)) or int(str(label)) <= 0:
        return False
    return bool(entry.get("startDate")) and bool(entry.get("endDate"))


def current_week(root: Any) -> Optional[int]:
    """Return the provider's current week number, or None when absent."""
    n = safe_int(get_nested(root, ["week", "number"]), 0)
    return n if n > 0 else None


# -------------------------
# Results payloads
# -------------------------

def events(payload: Any) -> List[Dict[str, Any]]:
    """Return the event objects of a results payload."""
    return [e for e in as_list(get_nested(payload, ["events"])) if isinstance(e, dict)]


def competitions(event: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the competition objects of an event."""
    return [c for c in as_list(event.get("competitions")) if isinstance(c, dict)]


def competitors(competition: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Return the competitor objects of a competition."""
    return [c for c in as_list(competition.get("competitors")) if isinstance(c, dict)]


def side(comps: List[Dict[str, Any]], home_away: str) -> Optional[Dict[str, Any]]:
    """Return the first competitor flagged with the given homeAway value."""
    for c in comps:
        if c.get("homeAway") == home_away:
            return c
    return None


def is_winner(competitor: Dict[str, Any]) -> bool:
    """A competitor counts as the winner only when flagged with a literal true."""
    return competitor.get("winner") is True


def winner(comps: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return the first competitor flagged as winner, or None for unfinished games."""
    for c in comps:
        if is_winner(c):
            return c
    return None


def team_display_name(competitor: Optional[Dict[str, Any]]) -> str:
    """
    Return the mascot-style team name used by the pool config.

    ESPN provides displayName "Baltimore Ravens" and shortDisplayName "Ravens".
    """
    team = as_dict((competitor or {}).get("team"))
    for key in ("shortDisplayName", "name", "abbreviation"):
        val = team.get(key)
        if isinstance(val, str) and val:
            return val
    return ""


def team_abbreviation(competitor: Optional[Dict[str, Any]]) -> str:
    """Return ESPN's team abbreviation, or an empty string."""
    val = get_nested(competitor, ["team", "abbreviation"], "")
    return val if isinstance(val, str) else ""


def kickoff(event: Dict[str, Any], competition: Dict[str, Any]) -> Optional[str]:
    """Return the raw kickoff timestamp string, preferring the competition's."""
    for val in (competition.get("date"), event.get("date")):
        if isinstance(val, str) and val:
            return val
    return None


def kickoff_epoch(value: Optional[str]) -> float:
    """Parse an ISO kickoff timestamp to epoch seconds; missing/unparseable -> 0."""
    if not value:
        return 0.0
    try:
        dt = date_parser.isoparse(value)
    except (ValueError, OverflowError):
        return 0.0
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp()
