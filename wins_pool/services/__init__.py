"""
Services package exports.
"""
from .standings_service import build_standings
from .week_grid_service import WeekGridService
from .weeks_service import WeeksService
from .wins_service import WinsService

__all__ = ["WeeksService", "WinsService", "WeekGridService", "build_standings"]
