"""Analytics engine: scorers over normalized team season records."""

from .championship import ChampionshipPredictor, championship_tier, momentum_trend
from .context import LeagueContext
from .draft import (
    DraftValueAnalyzer,
    available_seasons,
    build_draft_picks,
    expected_points,
    filter_analyses,
    value_tier,
)
from .luck import LuckIndexEstimator, luck_category
from .matchup import MatchupPredictor
from .power import PowerRankingScorer
from .scoring import fantasy_points
from .shuffler import DivisionShuffler, evaluate_divisions, quality_label
from .types import (
    DraftPick,
    LuckResult,
    MatchupPrediction,
    PowerRanking,
    PredictionData,
    ShuffleResult,
    TeamDraftAnalysis,
)

__all__ = [
    "ChampionshipPredictor",
    "DivisionShuffler",
    "DraftPick",
    "DraftValueAnalyzer",
    "LeagueContext",
    "LuckIndexEstimator",
    "LuckResult",
    "MatchupPrediction",
    "MatchupPredictor",
    "PowerRanking",
    "PowerRankingScorer",
    "PredictionData",
    "ShuffleResult",
    "TeamDraftAnalysis",
    "available_seasons",
    "build_draft_picks",
    "championship_tier",
    "evaluate_divisions",
    "expected_points",
    "fantasy_points",
    "filter_analyses",
    "luck_category",
    "momentum_trend",
    "quality_label",
    "value_tier",
]
