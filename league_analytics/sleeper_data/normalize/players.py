"""Normalization helpers for player payloads."""

from __future__ import annotations

from typing import Any, Mapping

from ..schema.models import PlayerInfo


def _full_name(raw_player: Mapping[str, Any]) -> str | None:
    name = raw_player.get("full_name")
    if name:
        return str(name)
    first = raw_player.get("first_name")
    last = raw_player.get("last_name")
    if first and last:
        return f"{first} {last}"
    return None


def normalize_players(raw_players: Mapping[str, Any]) -> dict[str, PlayerInfo]:
    """Index the ``/players/nfl`` payload by player id."""
    players: dict[str, PlayerInfo] = {}
    for player_id, raw_player in raw_players.items():
        if not isinstance(raw_player, Mapping):
            continue
        resolved_id = str(raw_player.get("player_id") or player_id)
        position = raw_player.get("position")
        # Team defenses have no personal name; Sleeper keys them by team abbreviation.
        name = _full_name(raw_player) or (
            f"{resolved_id} Defense" if position == "DEF" else resolved_id
        )
        players[resolved_id] = PlayerInfo(
            player_id=resolved_id,
            name=name,
            position=position,
            pro_team=str(raw_player.get("team") or "FA"),
            status=str(raw_player.get("status") or "Active"),
        )
    return players
