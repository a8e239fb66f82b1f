"""
Week resolution.

Responsibilities:
  - fetch the scoreboard root
  - extract regular-season week windows from the league calendar
  - report the provider's current week
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional, Tuple

from .. import payload
from ..espn_client import ESPNClient
from ..models import WeekWindow

logger = logging.getLogger(__name__)

REGULAR_SEASON_WEEKS = 18


@dataclass
class WeeksService:
    """Service responsible for turning the scoreboard calendar into WeekWindows."""

    client: ESPNClient

    def resolve(self) -> Tuple[List[WeekWindow], Optional[int]]:
        """
        Return (ordered week windows, current week number or None).

        Every call re-fetches the scoreboard root; callers own caching.
        """
        root = self.client.scoreboard()
        windows = [
            WeekWindow(
                label=int(str(e["label"])),
                start_date=str(e["startDate"]),
                end_date=str(e["endDate"]),
            )
            for e in payload.calendar_entries(root)
            if payload.is_week_entry(e)
        ][:REGULAR_SEASON_WEEKS]

        current = payload.current_week(root)
        logger.debug("resolved %d week windows (current week %s)", len(windows), current)
        return windows, current
