import json
from pathlib import Path

import pytest

from league_analytics.config import AnalyticsConfig
from league_analytics.sleeper_data.config import SleeperConfig
from league_analytics.sleeper_data.normalize import normalize_teams
from league_analytics.sleeper_data.schema.models import TeamSeasonRecord
from league_analytics.sleeper_data.sleeper_api import SleeperApiError


@pytest.fixture
def sleeper_fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures" / "sleeper"


@pytest.fixture
def load_fixture(sleeper_fixture_dir: Path):
    def _load(name: str):
        path = sleeper_fixture_dir / name
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    return _load


@pytest.fixture
def sleeper_fixtures(load_fixture):
    return {
        "league": load_fixture("league.json"),
        "users": load_fixture("users.json"),
        "rosters": load_fixture("rosters.json"),
        "drafts": load_fixture("drafts.json"),
        "draft_picks": load_fixture("draft_picks.json"),
        "players": load_fixture("players.json"),
        "matchups_by_week": {
            1: load_fixture("matchups_week1.json"),
            2: load_fixture("matchups_week2.json"),
        },
    }


@pytest.fixture
def teams(sleeper_fixtures) -> list[TeamSeasonRecord]:
    return normalize_teams(sleeper_fixtures["rosters"], sleeper_fixtures["users"])


@pytest.fixture
def make_team():
    def _make(team_id: int = 1, **overrides) -> TeamSeasonRecord:
        values = {
            "team_id": team_id,
            "team_name": f"Team {team_id}",
            "owner_name": f"Owner {team_id}",
            "wins": 0,
            "losses": 0,
            "ties": 0,
            "points_for": 0.0,
            "points_against": 0.0,
            "division": 1,
            "streak": None,
            "recent_results": (),
        }
        values.update(overrides)
        return TeamSeasonRecord(**values)

    return _make


@pytest.fixture
def sleeper_config() -> SleeperConfig:
    return SleeperConfig(league_id="123", max_week=4)


@pytest.fixture
def analytics_config() -> AnalyticsConfig:
    return AnalyticsConfig(seed=7, shuffle_delay_seconds=0)


@pytest.fixture
def monkeypatch_sleeper_api(monkeypatch, sleeper_fixtures):
    import league_analytics.sleeper_data.sleeper_league_data as sld

    calls = {"matchups": [], "stats": []}

    def _get_matchups(league_id, week, client=None):
        calls["matchups"].append(week)
        if week not in sleeper_fixtures["matchups_by_week"]:
            raise SleeperApiError(f"HTTP 404 for week {week}")
        return sleeper_fixtures["matchups_by_week"][week]

    def _get_player_stats(player_id, season, sport="nfl", client=None):
        calls["stats"].append(player_id)
        if player_id == "p5":
            return {"stats": {"fgm": 10, "fga": 12, "xpm": 20}}
        raise SleeperApiError(f"HTTP 404 for {player_id}")

    monkeypatch.setattr(sld, "get_league", lambda league_id, client=None: sleeper_fixtures["league"])
    monkeypatch.setattr(
        sld,
        "get_league_users",
        lambda league_id, client=None: sleeper_fixtures["users"],
    )
    monkeypatch.setattr(
        sld,
        "get_league_rosters",
        lambda league_id, client=None: sleeper_fixtures["rosters"],
    )
    monkeypatch.setattr(
        sld,
        "get_league_drafts",
        lambda league_id, client=None: sleeper_fixtures["drafts"],
    )
    monkeypatch.setattr(
        sld,
        "get_draft_picks",
        lambda draft_id, client=None: sleeper_fixtures["draft_picks"],
    )
    monkeypatch.setattr(
        sld,
        "get_players",
        lambda sport, client=None: sleeper_fixtures["players"],
    )
    monkeypatch.setattr(sld, "get_matchups", _get_matchups)
    monkeypatch.setattr(sld, "get_player_stats", _get_player_stats)

    return calls
