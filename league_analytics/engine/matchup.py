"""Head-to-head matchup prediction."""

from __future__ import annotations

from typing import Iterable, Optional

from ..errors import UnresolvedEntityError
from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import check_team, clamp, point_diff, points_per_game, round_half_up, win_pct
from .types import MatchupPrediction


def matchup_strength(team: TeamSeasonRecord) -> float:
    """Record 40, scoring 3.5 per point per game, margin 0.25 per point; never negative."""
    check_team(team)
    strength = win_pct(team) * 40 + points_per_game(team) * 3.5 + point_diff(team) * 0.25
    return max(0.0, strength)


def confidence_band(confidence: float) -> str:
    if confidence > 60:
        return "High"
    if confidence > 30:
        return "Medium"
    return "Low"


class MatchupPredictor:
    def predict(
        self, team_a: TeamSeasonRecord, team_b: TeamSeasonRecord
    ) -> Optional[MatchupPrediction]:
        """Predict ``team_a`` vs ``team_b``; a team cannot face itself (returns None)."""
        if team_a.team_id == team_b.team_id:
            return None

        strength_a = matchup_strength(team_a)
        strength_b = matchup_strength(team_b)
        total = strength_a + strength_b
        probability_a = strength_a / total * 100 if total > 0 else 50.0
        probability_b = strength_b / total * 100 if total > 0 else 50.0

        if strength_a > strength_b:
            favorite, underdog = team_a, team_b
        elif strength_b > strength_a:
            favorite, underdog = team_b, team_a
        else:
            favorite = underdog = None

        confidence = clamp(abs(probability_a - 50) * 2, 0, 100)
        return MatchupPrediction(
            team_a=team_a,
            team_b=team_b,
            strength_a=round_half_up(strength_a, 2),
            strength_b=round_half_up(strength_b, 2),
            win_probability_a=int(round_half_up(probability_a)),
            win_probability_b=int(round_half_up(probability_b)),
            favorite=favorite,
            underdog=underdog,
            spread=round_half_up(abs(strength_a - strength_b) / 10, 1),
            confidence=round_half_up(confidence, 1),
            confidence_band=confidence_band(confidence),
        )

    def predict_by_id(
        self, teams: Iterable[TeamSeasonRecord], team_a_id: int, team_b_id: int
    ) -> Optional[MatchupPrediction]:
        by_id = {team.team_id: team for team in teams}
        missing = [team_id for team_id in (team_a_id, team_b_id) if team_id not in by_id]
        if missing:
            raise UnresolvedEntityError(
                f"Unknown team id(s): {', '.join(str(team_id) for team_id in missing)}"
            )
        return self.predict(by_id[team_a_id], by_id[team_b_id])
