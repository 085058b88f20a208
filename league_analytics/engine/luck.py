"""Luck index from Pythagorean expectation."""

from __future__ import annotations

from typing import Iterable

from ..errors import InsufficientDataError
from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import check_team, decided_games, round_half_up
from .types import LuckResult


def luck_category(luck_score: float) -> str:
    if luck_score > 1.5:
        return "Very Lucky"
    if luck_score > 0.8:
        return "Lucky"
    if luck_score < -1.5:
        return "Very Unlucky"
    if luck_score < -0.8:
        return "Unlucky"
    return "Neutral"


class LuckIndexEstimator:
    """Compares actual wins to the wins a team's scoring "deserved"."""

    @staticmethod
    def pythagorean_win_pct(team: TeamSeasonRecord) -> float:
        scored = team.points_for**2
        allowed = team.points_against**2
        if scored + allowed == 0:
            return 0.0
        return scored / (scored + allowed)

    def expected_wins(self, team: TeamSeasonRecord) -> float:
        check_team(team)
        games = decided_games(team)
        if games == 0:
            return 0.0
        return round_half_up(self.pythagorean_win_pct(team) * games, 1)

    def luck_score(self, team: TeamSeasonRecord) -> float:
        return round_half_up(team.wins - self.expected_wins(team), 1)

    def evaluate(self, team: TeamSeasonRecord) -> LuckResult:
        expected = self.expected_wins(team)
        luck = round_half_up(team.wins - expected, 1)
        return LuckResult(
            team=team,
            expected_wins=expected,
            luck_score=luck,
            category=luck_category(luck),
        )

    def rank(self, teams: Iterable[TeamSeasonRecord]) -> list[LuckResult]:
        """Luckiest team first."""
        results = [self.evaluate(team) for team in teams]
        if not results:
            raise InsufficientDataError("No teams to evaluate.")
        return sorted(results, key=lambda result: result.luck_score, reverse=True)
