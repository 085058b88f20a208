"""Sleeper API fetch helpers."""

from .client import SleeperApiError, SleeperClient
from .endpoints import (
    get_draft_picks,
    get_league,
    get_league_drafts,
    get_league_rosters,
    get_league_users,
    get_matchups,
    get_player_stats,
    get_players,
)

__all__ = [
    "SleeperApiError",
    "SleeperClient",
    "get_draft_picks",
    "get_league",
    "get_league_drafts",
    "get_league_rosters",
    "get_league_users",
    "get_matchups",
    "get_player_stats",
    "get_players",
]
