import pytest

import league_analytics.sleeper_data.sleeper_league_data as sld
from league_analytics.config import AnalyticsConfig
from league_analytics.errors import InsufficientDataError
from league_analytics.sleeper_data.sleeper_league_data import SleeperLeagueData


def test_load_teams_and_division_names(
    monkeypatch_sleeper_api, sleeper_config, analytics_config
):
    data = SleeperLeagueData(config=sleeper_config, analytics_config=analytics_config)

    teams = data.load()

    assert [team.team_id for team in teams] == [1, 2, 4, 3]
    assert data.teams == teams
    assert data.name == "Test League"
    assert data.division_names.name_for(1) == "North"
    assert data.division_names.name_for(2) == "South"


def test_load_draft_with_stats_fallback(
    monkeypatch_sleeper_api, sleeper_config, analytics_config
):
    data = SleeperLeagueData(config=sleeper_config, analytics_config=analytics_config)

    draft = data.load_draft()

    assert draft.draft_id == "d2024"
    assert draft.season == "2024"
    assert len(draft.picks) == 8
    assert set(draft.players) == {"p1", "p2", "p3", "p4", "p5", "SF", "p7"}

    # week 3 fails, so loading stops after two weeks of matchups
    assert monkeypatch_sleeper_api["matchups"] == [1, 2, 3]
    assert draft.points_by_player["p1"] == pytest.approx(40.0)
    assert draft.points_by_player["p3"] == pytest.approx(45.0)
    assert draft.points_by_player["p4"] == pytest.approx(9.9)

    # fewer than ten players scored, so known drafted players get season stats
    assert monkeypatch_sleeper_api["stats"] == ["p1", "p2", "p3", "p4", "p5", "SF", "p7"]
    assert draft.points_by_player["p5"] == pytest.approx(48.0)


def test_load_draft_skips_stats_when_enough_players_scored(
    monkeypatch_sleeper_api, sleeper_config
):
    config = AnalyticsConfig(stats_fallback_threshold=0, shuffle_delay_seconds=0)
    data = SleeperLeagueData(config=sleeper_config, analytics_config=config)

    draft = data.load_draft()

    assert monkeypatch_sleeper_api["stats"] == []
    assert "p5" not in draft.points_by_player


def test_load_without_rosters(monkeypatch, monkeypatch_sleeper_api, sleeper_config):
    monkeypatch.setattr(sld, "get_league_rosters", lambda league_id, client=None: [])
    data = SleeperLeagueData(config=sleeper_config)

    with pytest.raises(InsufficientDataError):
        data.load()


def test_load_draft_without_drafts(monkeypatch, monkeypatch_sleeper_api, sleeper_config):
    monkeypatch.setattr(sld, "get_league_drafts", lambda league_id, client=None: [])
    data = SleeperLeagueData(config=sleeper_config)

    with pytest.raises(InsufficientDataError):
        data.load_draft()


def test_league_id_argument_wins_over_config(monkeypatch_sleeper_api, sleeper_config):
    data = SleeperLeagueData("999", config=sleeper_config)

    assert data.league_id == "999"
    assert data.max_week == 4
