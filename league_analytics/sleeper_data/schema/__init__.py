"""Schema exports for the Sleeper data layer."""

from .models import DivisionNames, PlayerInfo, RawDraftPick, TeamSeasonRecord

__all__ = [
    "DivisionNames",
    "PlayerInfo",
    "RawDraftPick",
    "TeamSeasonRecord",
]
