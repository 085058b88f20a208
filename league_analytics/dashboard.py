"""One entry point over every scorer for a single league snapshot."""

from __future__ import annotations

from typing import Optional, Sequence

from .config import AnalyticsConfig
from .engine import (
    ChampionshipPredictor,
    DivisionShuffler,
    DraftValueAnalyzer,
    LuckIndexEstimator,
    MatchupPredictor,
    PowerRankingScorer,
    build_draft_picks,
    evaluate_divisions,
    filter_analyses,
)
from .engine.types import (
    LuckResult,
    MatchupPrediction,
    PowerRanking,
    PredictionData,
    ShuffleResult,
    TeamDraftAnalysis,
)
from .errors import InsufficientDataError
from .sleeper_data.normalize import group_divisions, standings
from .sleeper_data.schema.models import DivisionNames, TeamSeasonRecord
from .sleeper_data.sleeper_league_data import DraftData


class LeagueDashboard:
    """Scorers bound to one immutable list of team records.

    Randomness (schedule proxy, shuffles) comes from a single seedable
    ``random.Random`` built from the config.
    """

    def __init__(
        self,
        teams: Sequence[TeamSeasonRecord],
        *,
        config: Optional[AnalyticsConfig] = None,
        division_names: Optional[DivisionNames] = None,
    ) -> None:
        if not teams:
            raise InsufficientDataError("A dashboard needs at least one team.")
        self.teams = tuple(teams)
        self.config = config or AnalyticsConfig()
        self.division_names = division_names or DivisionNames()
        rng = self.config.rng()
        self.power = PowerRankingScorer()
        self.luck = LuckIndexEstimator()
        self.predictor = ChampionshipPredictor(rng)
        self.matchups = MatchupPredictor()
        self.shuffler = DivisionShuffler(
            rng,
            delay_seconds=self.config.shuffle_delay_seconds,
            history_size=self.config.history_size,
        )
        self.drafts = DraftValueAnalyzer()

    def standings(self) -> list[TeamSeasonRecord]:
        return standings(self.teams)

    def divisions(self) -> dict[str, list[TeamSeasonRecord]]:
        return {
            self.division_names.name_for(number): members
            for number, members in group_divisions(self.teams).items()
        }

    def power_rankings(self, *, include_ties: bool = False) -> list[PowerRanking]:
        return self.power.rank(self.teams, include_ties=include_ties)

    def luck_table(self) -> list[LuckResult]:
        return self.luck.rank(self.teams)

    def championship_odds(self) -> list[PredictionData]:
        return self.predictor.predict_league(self.teams)

    def predict_matchup(
        self, team_a_id: int, team_b_id: int
    ) -> Optional[MatchupPrediction]:
        return self.matchups.predict_by_id(self.teams, team_a_id, team_b_id)

    def current_divisions(self) -> ShuffleResult:
        """The league's real divisions scored like a shuffle."""
        grouped = group_divisions(self.teams)
        return evaluate_divisions(grouped[1], grouped[2])

    async def shuffle_divisions(self) -> ShuffleResult:
        return await self.shuffler.shuffle(self.teams)

    def draft_report(
        self,
        draft: DraftData,
        *,
        season: Optional[str] = None,
        team_id: Optional[int] = None,
    ) -> list[TeamDraftAnalysis]:
        picks = build_draft_picks(draft.picks, draft.players, draft.points_by_player)
        analyses = self.drafts.analyze(picks, self.teams)
        return filter_analyses(analyses, season=season, team_id=team_id)
