"""League-wide aggregates computed once per prediction run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..errors import InsufficientDataError, UnresolvedEntityError
from ..sleeper_data.normalize.teams import standings
from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import check_team, win_pct


@dataclass(frozen=True)
class LeagueContext:
    avg_points_for: float
    avg_points_against: float
    # Reported alongside the point averages; no scorer weights it.
    avg_win_pct: float
    standings: tuple[int, ...]

    @classmethod
    def from_teams(cls, teams: Sequence[TeamSeasonRecord]) -> "LeagueContext":
        if not teams:
            raise InsufficientDataError("League context needs at least one team.")
        for team in teams:
            check_team(team)
        count = len(teams)
        return cls(
            avg_points_for=sum(team.points_for for team in teams) / count,
            avg_points_against=sum(team.points_against for team in teams) / count,
            avg_win_pct=sum(win_pct(team) for team in teams) / count,
            standings=tuple(team.team_id for team in standings(teams)),
        )

    @property
    def team_count(self) -> int:
        return len(self.standings)

    def standing_of(self, team_id: int) -> int:
        """1-based position of ``team_id`` in the wins-minus-losses order."""
        try:
            return self.standings.index(team_id) + 1
        except ValueError:
            raise UnresolvedEntityError(
                f"Team {team_id!r} is not part of this league."
            ) from None
