"""Draft pick value model, best/worst pick selection and draft grades."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..errors import InsufficientDataError
from ..sleeper_data.schema.models import PlayerInfo, RawDraftPick, TeamSeasonRecord
from ._math import round_half_up
from .types import DraftPick, TeamDraftAnalysis

logger = logging.getLogger(__name__)

# Late-round expectation by position before the draft-slot multiplier.
POSITION_BASE_POINTS: dict[str, int] = {
    "QB": 150,
    "RB": 100,
    "WR": 85,
    "TE": 60,
    "K": 50,
    "DEF": 60,
}
DEFAULT_BASE_POINTS = 90

# (last pick in band, multiplier at that pick, step per earlier pick)
SLOT_BANDS: tuple[tuple[int, float, float], ...] = (
    (12, 1.40, 0.02),
    (24, 1.20, 0.015),
    (36, 1.00, 0.01),
    (48, 0.90, 0.008),
    (60, 0.80, 0.005),
    (72, 0.70, 0.005),
    (84, 0.60, 0.005),
    (96, 0.50, 0.005),
    (120, 0.40, 0.005),
)
LATE_MULTIPLIER = 0.30
LATE_HORIZON = 150
LATE_STEP = 0.003

POSITION_WEIGHT: dict[str, float] = {
    "QB": 1.0,
    "RB": 1.2,
    "WR": 1.2,
    "TE": 0.8,
    "K": 0.3,
    "DEF": 0.4,
}
POSITION_PENALTY: dict[str, float] = {
    "QB": 1.0,
    "RB": 1.2,
    "WR": 1.2,
    "TE": 0.8,
    "K": 0.4,
    "DEF": 0.5,
}

STEAL_THRESHOLD = 1.5
BUST_THRESHOLD = 0.4

GRADE_SCALE: tuple[tuple[float, str], ...] = (
    (3.5, "A+"),
    (3.0, "A"),
    (2.5, "A-"),
    (2.0, "B+"),
    (1.5, "B"),
    (1.0, "B-"),
    (0.5, "C+"),
    (0.0, "C"),
)


def draft_slot_multiplier(overall_pick: int) -> float:
    for band_end, multiplier, step in SLOT_BANDS:
        if overall_pick <= band_end:
            return multiplier + (band_end - overall_pick) * step
    return LATE_MULTIPLIER + max(0, (LATE_HORIZON - overall_pick) * LATE_STEP)


def expected_points(overall_pick: int, position: Optional[str]) -> int:
    base = POSITION_BASE_POINTS.get(position or "", DEFAULT_BASE_POINTS)
    return int(round_half_up(base * draft_slot_multiplier(overall_pick)))


def value_score(actual_points: float, expected: float) -> float:
    if expected == 0:
        return 0.0
    return actual_points / expected


def value_tier(score: float) -> str:
    if score >= STEAL_THRESHOLD:
        return "steal"
    if score >= 1.2:
        return "great"
    if score >= 1.0:
        return "good"
    if score >= 0.8:
        return "fair"
    return "poor"


def build_pick(
    raw_pick: RawDraftPick, player: PlayerInfo, actual_points: float
) -> DraftPick:
    position = player.position or ""
    expected = expected_points(raw_pick.overall_pick, position)
    return DraftPick(
        player_id=raw_pick.player_id,
        player_name=player.name,
        position=position,
        round=raw_pick.round,
        overall_pick=raw_pick.overall_pick,
        season=raw_pick.season,
        actual_points=actual_points,
        expected_points=expected,
        value_score=value_score(actual_points, expected),
        owner_team_id=raw_pick.team_id,
        pro_team=player.pro_team,
        status=player.status,
    )


def build_draft_picks(
    raw_picks: Iterable[RawDraftPick],
    players: Mapping[str, PlayerInfo],
    points_by_player: Mapping[str, float],
) -> list[DraftPick]:
    picks: list[DraftPick] = []
    for raw_pick in raw_picks:
        player = players.get(raw_pick.player_id)
        if player is None:
            logger.warning("no player found for drafted id %s", raw_pick.player_id)
            continue
        picks.append(
            build_pick(raw_pick, player, points_by_player.get(raw_pick.player_id, 0.0))
        )
    return picks


def best_pick_score(pick: DraftPick) -> float:
    if pick.overall_pick <= 12:
        bonus = 1.5
    elif pick.overall_pick <= 24:
        bonus = 1.3
    elif pick.overall_pick <= 36:
        bonus = 1.1
    elif pick.overall_pick <= 48:
        bonus = 1.0
    elif pick.overall_pick <= 72:
        bonus = 0.9
    else:
        bonus = 1.0 if pick.value_score > STEAL_THRESHOLD else 0.7
    return pick.value_score * POSITION_WEIGHT.get(pick.position, 1.0) * bonus


def worst_pick_score(pick: DraftPick) -> float:
    """Lower is worse; early-round busts are divided by a larger penalty."""
    if pick.overall_pick <= 12:
        penalty = 2.0
    elif pick.overall_pick <= 24:
        penalty = 1.7
    elif pick.overall_pick <= 36:
        penalty = 1.4
    elif pick.overall_pick <= 48:
        penalty = 1.1
    elif pick.overall_pick <= 72:
        penalty = 0.9
    else:
        penalty = 1.0 if pick.value_score < 0.3 else 0.6
    return pick.value_score / (POSITION_PENALTY.get(pick.position, 1.0) * penalty)


def draft_grade(average_value: float, steal_count: int, bust_count: int) -> str:
    score = 0.0

    if average_value >= 1.3:
        score += 3
    elif average_value >= 1.1:
        score += 2.5
    elif average_value >= 1.0:
        score += 2
    elif average_value >= 0.9:
        score += 1.5
    elif average_value >= 0.8:
        score += 1

    if steal_count >= 2:
        score += 2
    elif steal_count >= 1:
        score += 1

    if bust_count >= 4:
        score -= 1.5
    elif bust_count >= 3:
        score -= 1.0
    elif bust_count >= 2:
        score -= 0.5
    elif bust_count >= 1:
        score -= 0.25

    for floor, grade in GRADE_SCALE:
        if score >= floor:
            return grade
    return "D"


class DraftValueAnalyzer:
    def analyze_team(
        self, team: TeamSeasonRecord, picks: Sequence[DraftPick]
    ) -> TeamDraftAnalysis:
        if not picks:
            raise InsufficientDataError(
                f"Team {team.team_id!r} has no draft picks to analyze."
            )
        steals = sum(1 for pick in picks if pick.value_score > STEAL_THRESHOLD)
        busts = sum(1 for pick in picks if pick.value_score < BUST_THRESHOLD)
        average = sum(pick.value_score for pick in picks) / len(picks)
        return TeamDraftAnalysis(
            team_id=team.team_id,
            team_name=team.team_name,
            owner_name=team.owner_name,
            season=picks[0].season,
            best_pick=max(picks, key=best_pick_score),
            worst_pick=min(picks, key=worst_pick_score),
            steal_count=steals,
            bust_count=busts,
            average_value=average,
            overall_grade=draft_grade(average, steals, busts),
            picks=tuple(picks),
        )

    def analyze(
        self, picks: Iterable[DraftPick], teams: Iterable[TeamSeasonRecord]
    ) -> list[TeamDraftAnalysis]:
        """One analysis per (team, season), in order of each group's first pick."""
        picks = list(picks)
        if not picks:
            raise InsufficientDataError("No draft picks to analyze.")
        team_by_id = {team.team_id: team for team in teams}
        if not team_by_id:
            raise InsufficientDataError("No teams to attribute draft picks to.")

        grouped: dict[tuple[int, str], list[DraftPick]] = {}
        for pick in picks:
            if pick.owner_team_id not in team_by_id:
                logger.warning(
                    "skipping pick %s: roster %s is not in the league",
                    pick.overall_pick,
                    pick.owner_team_id,
                )
                continue
            grouped.setdefault((pick.owner_team_id, pick.season), []).append(pick)
        if not grouped:
            raise InsufficientDataError("No draft pick belongs to a team in this league.")

        return [
            self.analyze_team(team_by_id[team_id], team_picks)
            for (team_id, _season), team_picks in grouped.items()
        ]


def filter_analyses(
    analyses: Iterable[TeamDraftAnalysis],
    *,
    season: Optional[str] = None,
    team_id: Optional[int] = None,
) -> list[TeamDraftAnalysis]:
    return [
        analysis
        for analysis in analyses
        if (season is None or analysis.season == season)
        and (team_id is None or analysis.team_id == team_id)
    ]


def available_seasons(analyses: Iterable[TeamDraftAnalysis]) -> list[str]:
    return sorted({analysis.season for analysis in analyses}, reverse=True)
