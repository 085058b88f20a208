"""Sleeper API endpoint helpers."""

from __future__ import annotations

from typing import Any, Optional

from .client import SleeperClient


def _client_or_default(client: Optional[SleeperClient]) -> SleeperClient:
    return client or SleeperClient()


def get_league(league_id: str, client: Optional[SleeperClient] = None) -> dict[str, Any]:
    return _client_or_default(client).get_json(f"/league/{league_id}")


def get_league_users(
    league_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/users")


def get_league_rosters(
    league_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/rosters")


def get_league_drafts(
    league_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/drafts")


def get_draft_picks(
    draft_id: str, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/draft/{draft_id}/picks")


def get_matchups(
    league_id: str, week: int, client: Optional[SleeperClient] = None
) -> list[dict[str, Any]]:
    return _client_or_default(client).get_json(f"/league/{league_id}/matchups/{week}")


def get_players(
    sport: str = "nfl", client: Optional[SleeperClient] = None
) -> dict[str, Any]:
    return _client_or_default(client).get_json(f"/players/{sport}")


def get_player_stats(
    player_id: str,
    season: str,
    sport: str = "nfl",
    client: Optional[SleeperClient] = None,
) -> dict[str, Any]:
    return _client_or_default(client).get_json(
        f"/players/{sport}/stats/{season}/{player_id}"
    )
