"""Accumulation of per-player fantasy points from weekly matchup payloads."""

from __future__ import annotations

from typing import Any, Iterable, Mapping


def accumulate_player_points(
    weekly_matchups: Iterable[Iterable[Mapping[str, Any]]],
    totals: dict[str, float] | None = None,
) -> dict[str, float]:
    """Sum ``players_points`` (starters and bench) across weeks.

    Player id ``"0"`` is Sleeper's empty-slot marker and is skipped, as are
    non-numeric point values.
    """
    totals = {} if totals is None else totals
    for matchups in weekly_matchups:
        for matchup in matchups:
            players_points = matchup.get("players_points")
            if not isinstance(players_points, Mapping):
                continue
            for player_id, points in players_points.items():
                if not player_id or player_id == "0":
                    continue
                if isinstance(points, bool) or not isinstance(points, (int, float)):
                    continue
                key = str(player_id)
                totals[key] = totals.get(key, 0.0) + float(points)
    return totals
