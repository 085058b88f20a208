"""Championship, playoff and win probability heuristics."""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import (
    check_team,
    clamp,
    decided_games,
    point_diff,
    points_per_game,
    round_half_up,
    win_pct,
)
from .context import LeagueContext
from .types import PredictionData

logger = logging.getLogger(__name__)

# League points are compared per game against a ten-game baseline.
BASELINE_GAMES = 10
PLAYOFF_TEAMS = 6
BUBBLE_TEAMS = 8
MOMENTUM_WINDOW = 3


def strength_score(team: TeamSeasonRecord, context: LeagueContext) -> float:
    """Weighted 0-100 strength: record 40, offense 25, defense 20, margin 15."""
    league_ppg = context.avg_points_for / BASELINE_GAMES
    league_papg = context.avg_points_against / BASELINE_GAMES
    games = decided_games(team)
    allowed_per_game = team.points_against / games if games else 0.0

    relative_offense = points_per_game(team) / league_ppg if league_ppg > 0 else 0.0
    relative_defense = league_papg / allowed_per_game if allowed_per_game > 0 else 0.0

    raw = (
        win_pct(team) * 40
        + relative_offense * 25
        + relative_defense * 20
        + (point_diff(team) / 10) * 15
    )
    return clamp(raw, 0, 100)


def momentum(team: TeamSeasonRecord) -> float:
    """-1..1 from the wins among the last three results."""
    recent = team.recent_results[-MOMENTUM_WINDOW:]
    recent_wins = sum(1 for result in recent if result == "W")
    return (recent_wins - 1.5) / 1.5


def playoff_probability(standing: int) -> float:
    if standing <= PLAYOFF_TEAMS:
        value = 85 - standing * 8
    elif standing <= BUBBLE_TEAMS:
        value = 25 - (standing - PLAYOFF_TEAMS) * 10
    else:
        value = 5
    return clamp(value, 0, 100)


def momentum_trend(value: float) -> str:
    if value > 0.3:
        return "rising"
    if value > -0.3:
        return "steady"
    return "falling"


def championship_tier(index: int) -> str:
    """Label for a 0-based position in the championship ranking."""
    if index == 0:
        return "favorite"
    if index < 3:
        return "contender"
    if index < PLAYOFF_TEAMS:
        return "playoff"
    return "longshot"


class ChampionshipPredictor:
    """Per-team probabilities; one schedule-difficulty draw per prediction.

    The schedule term is a placeholder drawn uniformly from [0.3, 0.7]; it is
    not derived from remaining opponents.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def draw_schedule_difficulty(self) -> float:
        return self.rng.random() * 0.4 + 0.3

    def predict(
        self,
        team: TeamSeasonRecord,
        context: LeagueContext,
        *,
        schedule_difficulty: Optional[float] = None,
    ) -> PredictionData:
        check_team(team)
        schedule = (
            self.draw_schedule_difficulty()
            if schedule_difficulty is None
            else schedule_difficulty
        )
        strength = strength_score(team, context)
        team_momentum = momentum(team)
        standing = context.standing_of(team.team_id)
        playoff = playoff_probability(standing)

        championship = clamp(
            (strength / 100) * (playoff / 100) * 35
            + (team_momentum + 1) * 5
            + (schedule - 0.5) * 8,
            0.5,
            25,
        )
        win = clamp(
            (strength / 100) * 50 + team_momentum * 15 + (schedule - 0.5) * 20,
            15,
            85,
        )

        return PredictionData(
            team_id=team.team_id,
            team_name=team.team_name,
            win_probability=int(round_half_up(win)),
            playoff_probability=int(round_half_up(playoff)),
            championship_probability=round_half_up(championship, 1),
            strength_score=int(round_half_up(strength)),
            schedule_difficulty_proxy=int(round_half_up(schedule * 100)),
            momentum=round_half_up(team_momentum, 2),
            current_standing=standing,
        )

    def predict_league(self, teams: Sequence[TeamSeasonRecord]) -> list[PredictionData]:
        """Every team's prediction, highest championship probability first."""
        context = LeagueContext.from_teams(teams)
        predictions = [self.predict(team, context) for team in teams]
        logger.debug("predicted %d teams", len(predictions))
        return sorted(
            predictions,
            key=lambda prediction: prediction.championship_probability,
            reverse=True,
        )
