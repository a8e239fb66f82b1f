"""
Pool ownership configuration.

The config is a JSON document:
  {"season": 2025, "timezone": "America/Chicago",
   "owners": {"Alice": ["Ravens", "Bears"], ...},
   "unowned": ["Jets", ...]}

It is fetched fresh for every request and never validated beyond shape coercion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from typing import Any, Dict, Optional, Tuple

from .config import AppConfig
from .espn_client import ESPNClient

logger = logging.getLogger(__name__)

UNOWNED = "Unowned"
DEFAULT_TIMEZONE = "America/Chicago"


class MissingConfiguration(Exception):
    """Raised when neither CONFIG_URL nor CONFIG_PATH is set."""


def _team_names(v) -> Tuple[str, ...]:
    """Coerce a roster node into a tuple of team names, dropping non-strings."""
    if not isinstance(v, list):
        return ()
    return tuple(t for t in v if isinstance(t, str))


@dataclass(frozen=True)
class OwnershipConfig:
    """Immutable ownership config; owners keep the document's order."""
    season: Optional[int]
    timezone: str = DEFAULT_TIMEZONE
    owners: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    unowned: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, doc: Any) -> "OwnershipConfig":
        """Build a config from a parsed JSON document, tolerating odd shapes."""
        doc = doc if isinstance(doc, dict) else {}
        owners_raw = doc.get("owners")
        owners = {
            str(owner): _team_names(teams)
            for owner, teams in (owners_raw.items() if isinstance(owners_raw, dict) else [])
        }

        season = doc.get("season")
        tz_name = doc.get("timezone")
        return cls(
            season=season if isinstance(season, int) else None,
            timezone=tz_name if isinstance(tz_name, str) and tz_name else DEFAULT_TIMEZONE,
            owners=owners,
            unowned=_team_names(doc.get("unowned")),
        )


def build_team_to_owner(config: OwnershipConfig) -> Dict[str, str]:
    """
    Map each team name to its owner, or to UNOWNED.

    Explicit owners always win: an unowned entry never overwrites an assigned team.
    """
    team_to_owner: Dict[str, str] = {}
    for owner, teams in config.owners.items():
        for t in teams:
            team_to_owner[t] = owner
    for t in config.unowned:
        team_to_owner.setdefault(t, UNOWNED)
    return team_to_owner


def load_ownership(cfg: AppConfig, client: ESPNClient) -> OwnershipConfig:
    """
    Load the ownership config from CONFIG_URL (preferred) or CONFIG_PATH.

    Raises:
        MissingConfiguration when neither location is configured.
        FetchError when CONFIG_URL answers with a non-2xx status.
    """
    if cfg.config_url:
        return OwnershipConfig.from_dict(client.fetch_json(cfg.config_url))

    if cfg.config_path:
        logger.debug("reading pool config from %s", cfg.config_path)
        with open(cfg.config_path, encoding="utf-8") as fh:
            return OwnershipConfig.from_dict(json.load(fh))

    raise MissingConfiguration("Missing CONFIG_URL env var")
