"""Fantasy league analytics over Sleeper league data."""

from .config import AnalyticsConfig, load_config
from .dashboard import LeagueDashboard
from .errors import (
    AnalyticsError,
    InsufficientDataError,
    InvalidLeagueSizeError,
    MalformedInputError,
    UnresolvedEntityError,
)
from .sleeper_data import SleeperLeagueData, TeamSeasonRecord

__version__ = "0.1.0"

__all__ = [
    "AnalyticsConfig",
    "AnalyticsError",
    "InsufficientDataError",
    "InvalidLeagueSizeError",
    "LeagueDashboard",
    "MalformedInputError",
    "SleeperLeagueData",
    "TeamSeasonRecord",
    "UnresolvedEntityError",
    "load_config",
]
