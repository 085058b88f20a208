"""Numeric helpers shared by the scorers."""

from __future__ import annotations

import math
from numbers import Real

from ..errors import MalformedInputError
from ..sleeper_data.schema.models import TeamSeasonRecord

_NUMERIC_FIELDS = ("wins", "losses", "ties", "points_for", "points_against")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves towards +inf, matching the dashboard's displayed values."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def check_team(team: TeamSeasonRecord) -> TeamSeasonRecord:
    for name in _NUMERIC_FIELDS:
        value = getattr(team, name, None)
        if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
            raise MalformedInputError(
                f"Team {getattr(team, 'team_id', '?')!r} has non-numeric {name}: {value!r}"
            )
        if value < 0:
            raise MalformedInputError(
                f"Team {team.team_id!r} has negative {name}: {value!r}"
            )
    return team


def decided_games(team: TeamSeasonRecord) -> int:
    return team.wins + team.losses


def win_pct(team: TeamSeasonRecord, *, include_ties: bool = False) -> float:
    games = team.games_played if include_ties else decided_games(team)
    if games == 0:
        return 0.0
    return team.wins / games


def points_per_game(team: TeamSeasonRecord) -> float:
    games = decided_games(team)
    if games == 0:
        return 0.0
    return team.points_for / games


def point_diff(team: TeamSeasonRecord) -> float:
    return team.points_for - team.points_against
