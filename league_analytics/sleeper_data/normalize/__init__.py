"""Normalization exports."""

from .matchups import accumulate_player_points
from .picks import latest_draft, normalize_draft_picks
from .players import normalize_players
from .teams import (
    division_names,
    group_divisions,
    normalize_team,
    normalize_teams,
    standings,
)

__all__ = [
    "accumulate_player_points",
    "division_names",
    "group_divisions",
    "latest_draft",
    "normalize_draft_picks",
    "normalize_players",
    "normalize_team",
    "normalize_teams",
    "standings",
]
