"""Power ranking scores."""

from __future__ import annotations

from typing import Iterable, Optional

from ..errors import InsufficientDataError
from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import check_team, decided_games, point_diff, round_half_up, win_pct
from .context import LeagueContext
from .types import PowerRanking


class PowerRankingScorer:
    """Scalar team strength from win percentage and point differential.

    ``score`` is the dashboard formula (ties left out of the win percentage);
    ``ranking_score`` is the rankings-page formula, which counts ties as games
    and weights both terms more gently. The two are kept apart because they
    produce different displayed numbers for the same team.

    Both take an optional league context; neither formula reads it.
    """

    def score(
        self, team: TeamSeasonRecord, context: Optional[LeagueContext] = None
    ) -> int:
        check_team(team)
        if decided_games(team) == 0:
            return 0
        return int(round_half_up(win_pct(team) * 100 + point_diff(team) / 10))

    def ranking_score(
        self, team: TeamSeasonRecord, context: Optional[LeagueContext] = None
    ) -> int:
        check_team(team)
        if team.games_played == 0:
            return 0
        return int(
            round_half_up(win_pct(team, include_ties=True) * 50 + point_diff(team) * 0.1)
        )

    def rank(
        self, teams: Iterable[TeamSeasonRecord], *, include_ties: bool = False
    ) -> list[PowerRanking]:
        teams = list(teams)
        if not teams:
            raise InsufficientDataError("No teams to rank.")
        scorer = self.ranking_score if include_ties else self.score
        scored = sorted(
            ((team, scorer(team)) for team in teams),
            key=lambda item: item[1],
            reverse=True,
        )
        return [
            PowerRanking(team=team, score=score, rank=index)
            for index, (team, score) in enumerate(scored, start=1)
        ]
