"""Facade for loading a Sleeper league into normalized records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..config import AnalyticsConfig
from ..engine.scoring import fantasy_points
from ..errors import InsufficientDataError
from .config import REGULAR_SEASON_WEEKS, SleeperConfig, load_config
from .normalize import (
    accumulate_player_points,
    division_names,
    latest_draft,
    normalize_draft_picks,
    normalize_players,
    normalize_teams,
)
from .schema.models import DivisionNames, PlayerInfo, RawDraftPick, TeamSeasonRecord
from .sleeper_api import (
    SleeperApiError,
    SleeperClient,
    get_draft_picks,
    get_league,
    get_league_drafts,
    get_league_rosters,
    get_league_users,
    get_matchups,
    get_player_stats,
    get_players,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftData:
    draft_id: str
    season: str
    picks: tuple[RawDraftPick, ...]
    players: Mapping[str, PlayerInfo] = field(default_factory=dict)
    points_by_player: Mapping[str, float] = field(default_factory=dict)


class SleeperLeagueData:
    def __init__(
        self,
        league_id: Optional[str] = None,
        *,
        client: Optional[SleeperClient] = None,
        config: Optional[SleeperConfig] = None,
        analytics_config: Optional[AnalyticsConfig] = None,
    ) -> None:
        if config is None and league_id is None:
            config = load_config()
        self.league_id = str(league_id or config.league_id)
        self.max_week = config.max_week if config is not None else REGULAR_SEASON_WEEKS
        self.analytics_config = analytics_config or AnalyticsConfig()
        self.client = client or SleeperClient()
        self.league: Optional[dict[str, Any]] = None
        self.teams: list[TeamSeasonRecord] = []
        self.division_names = DivisionNames()

    @property
    def name(self) -> str:
        return str((self.league or {}).get("name") or self.league_id)

    def load(self) -> list[TeamSeasonRecord]:
        """Fetch league, users and rosters; replace ``teams`` with fresh records."""
        raw_league = get_league(self.league_id, client=self.client)
        raw_users = get_league_users(self.league_id, client=self.client)
        raw_rosters = get_league_rosters(self.league_id, client=self.client)
        if not raw_rosters:
            raise InsufficientDataError(f"League {self.league_id} has no rosters.")

        self.league = raw_league
        self.division_names = division_names(raw_league)
        self.teams = normalize_teams(raw_rosters, raw_users or [])
        logger.info("loaded %d teams for league %s", len(self.teams), self.league_id)
        return self.teams

    def load_draft(self) -> DraftData:
        """Fetch the latest draft with player metadata and season fantasy points."""
        draft = latest_draft(get_league_drafts(self.league_id, client=self.client))
        if draft is None:
            raise InsufficientDataError(f"League {self.league_id} has no drafts.")

        draft_id = str(draft["draft_id"])
        season = str(draft.get("season") or "")
        picks = normalize_draft_picks(
            get_draft_picks(draft_id, client=self.client) or [], season=season
        )
        if not picks:
            raise InsufficientDataError(f"Draft {draft_id} has no picks.")

        all_players = normalize_players(get_players("nfl", client=self.client))
        drafted = {
            pick.player_id: all_players[pick.player_id]
            for pick in picks
            if pick.player_id in all_players
        }

        points = self._matchup_points()
        if len(points) < self.analytics_config.stats_fallback_threshold:
            logger.info(
                "only %d players have matchup points; fetching season stats", len(points)
            )
            self._fill_points_from_stats(picks, drafted, season, points)

        return DraftData(
            draft_id=draft_id,
            season=season,
            picks=tuple(picks),
            players=drafted,
            points_by_player=points,
        )

    def _matchup_points(self) -> dict[str, float]:
        totals: dict[str, float] = {}
        for week in range(1, self.max_week + 1):
            try:
                matchups = get_matchups(self.league_id, week, client=self.client)
            except SleeperApiError as exc:
                logger.info("week %d not available (%s); stopping", week, exc)
                break
            accumulate_player_points([matchups or []], totals)
        return totals

    def _fill_points_from_stats(
        self,
        picks: list[RawDraftPick],
        players: Mapping[str, PlayerInfo],
        season: str,
        points: dict[str, float],
    ) -> None:
        for pick in picks[: self.analytics_config.stats_fallback_limit]:
            player = players.get(pick.player_id)
            if player is None:
                continue
            try:
                payload = get_player_stats(pick.player_id, season, client=self.client)
            except SleeperApiError as exc:
                logger.warning("no stats for player %s: %s", pick.player_id, exc)
                continue
            stats = (payload or {}).get("stats")
            if stats:
                points[pick.player_id] = fantasy_points(stats, player.position)
