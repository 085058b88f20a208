"""Sleeper data layer: retrieval and normalization of league payloads."""

from .config import SleeperConfig, load_config
from .schema import models as schema_models
from .schema.models import DivisionNames, PlayerInfo, RawDraftPick, TeamSeasonRecord
from .sleeper_league_data import DraftData, SleeperLeagueData

__all__ = [
    "DivisionNames",
    "DraftData",
    "PlayerInfo",
    "RawDraftPick",
    "SleeperConfig",
    "SleeperLeagueData",
    "TeamSeasonRecord",
    "load_config",
    "schema_models",
]
