"""Result snapshots produced by the analytics engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..sleeper_data.schema.models import TeamSeasonRecord


class SnapshotMixin:
    """Plain-dict export for JSON output."""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PowerRanking(SnapshotMixin):
    team: TeamSeasonRecord
    score: int
    rank: int


@dataclass(frozen=True)
class LuckResult(SnapshotMixin):
    team: TeamSeasonRecord
    expected_wins: float
    luck_score: float
    category: str


@dataclass(frozen=True)
class PredictionData(SnapshotMixin):
    team_id: int
    team_name: str
    win_probability: int
    playoff_probability: int
    championship_probability: float
    strength_score: int
    schedule_difficulty_proxy: int
    momentum: float
    current_standing: int


@dataclass(frozen=True)
class MatchupPrediction(SnapshotMixin):
    team_a: TeamSeasonRecord
    team_b: TeamSeasonRecord
    strength_a: float
    strength_b: float
    win_probability_a: int
    win_probability_b: int
    favorite: Optional[TeamSeasonRecord]
    underdog: Optional[TeamSeasonRecord]
    spread: float
    confidence: float
    confidence_band: str


@dataclass(frozen=True)
class ShuffleResult(SnapshotMixin):
    division1: tuple[TeamSeasonRecord, ...]
    division2: tuple[TeamSeasonRecord, ...]
    balance_score: int
    rivalry_score: int
    strength_variance: float

    @property
    def quality(self) -> float:
        """Combined score used to pick the best arrangement from history."""
        return self.balance_score + self.rivalry_score - self.strength_variance


@dataclass(frozen=True)
class DraftPick(SnapshotMixin):
    player_id: str
    player_name: str
    position: str
    round: int
    overall_pick: int
    season: str
    actual_points: float
    expected_points: int
    value_score: float
    owner_team_id: int
    pro_team: str = "FA"
    status: str = "Active"


@dataclass(frozen=True)
class TeamDraftAnalysis(SnapshotMixin):
    team_id: int
    team_name: str
    owner_name: str
    season: str
    best_pick: DraftPick
    worst_pick: DraftPick
    steal_count: int
    bust_count: int
    average_value: float
    overall_grade: str
    picks: tuple[DraftPick, ...] = ()
