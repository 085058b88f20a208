"""Standard fantasy scoring used when league matchup points are unavailable."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ._math import round_half_up

# Points per unit of each stat. Yardage is one point per 25 passing or
# 10 rushing/receiving yards. Kickers lose a point per miss (fga - fgm),
# folded in as 3 + 1 per make and -1 per attempt.
SCORING_RULES: dict[str, dict[str, float]] = {
    "QB": {
        "pass_yds": 1 / 25,
        "pass_td": 4,
        "rush_yds": 1 / 10,
        "rush_td": 6,
        "int": -2,
    },
    "RB": {
        "rush_yds": 1 / 10,
        "rush_td": 6,
        "rec_yds": 1 / 10,
        "rec_td": 6,
        "rec": 1,
    },
    "WR": {
        "rec_yds": 1 / 10,
        "rec_td": 6,
        "rec": 1,
        "rush_yds": 1 / 10,
        "rush_td": 6,
    },
    "TE": {
        "rec_yds": 1 / 10,
        "rec_td": 6,
        "rec": 1,
    },
    "K": {
        "fgm": 4,
        "fga": -1,
        "xpm": 1,
    },
    "DEF": {
        "sack": 1,
        "int": 2,
        "fr": 2,
        "td": 6,
        "safety": 2,
    },
}

# (most points allowed, fantasy points) checked in order.
POINTS_ALLOWED_TIERS: tuple[tuple[float, int], ...] = (
    (0, 10),
    (6, 7),
    (13, 4),
    (20, 1),
    (27, 0),
    (34, -1),
)
POINTS_ALLOWED_FLOOR = -4


def _stat(stats: Mapping[str, Any], key: str) -> float:
    value = stats.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def points_allowed_score(points_allowed: float) -> int:
    for ceiling, points in POINTS_ALLOWED_TIERS:
        if points_allowed <= ceiling:
            return points
    return POINTS_ALLOWED_FLOOR


def fantasy_points(stats: Optional[Mapping[str, Any]], position: Optional[str]) -> float:
    """Season fantasy points for ``stats`` under the standard rules, 2 decimals."""
    if not stats or position not in SCORING_RULES:
        return 0.0

    points = sum(
        _stat(stats, key) * weight for key, weight in SCORING_RULES[position].items()
    )
    if position == "DEF":
        points += points_allowed_score(_stat(stats, "pa"))
    return round_half_up(points, 2)
