import json

import pytest

import league_analytics.cli.main as cli
from league_analytics.sleeper_data.sleeper_league_data import SleeperLeagueData


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("ANALYTICS_SEED", "ANALYTICS_SHUFFLE_DELAY", "ANALYTICS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixture_league(monkeypatch, monkeypatch_sleeper_api, sleeper_config):
    def _factory(league_id=None, analytics_config=None):
        return SleeperLeagueData(
            league_id, config=sleeper_config, analytics_config=analytics_config
        )

    monkeypatch.setattr(cli, "SleeperLeagueData", _factory)


def _run_json(capsys, *argv):
    exit_code = cli.main(list(argv))
    captured = capsys.readouterr()
    assert exit_code == 0, captured.err
    return json.loads(captured.out)


def test_power_command(fixture_league, capsys):
    payload = _run_json(capsys, "power", "--league-id", "123")

    assert [row["team_name"] for row in payload] == [
        "Alpha",
        "Unknown Team",
        "Beta",
        "Gamma",
    ]
    assert payload[0]["rank"] == 1
    assert payload[0]["score"] == 81
    assert payload[0]["record"] == "3-1-0"


def test_standings_command(fixture_league, capsys):
    payload = _run_json(capsys, "standings")

    assert set(payload) == {"North", "South"}


def test_predict_command_labels_tiers(fixture_league, capsys):
    payload = _run_json(capsys, "predict", "--seed", "4")

    assert payload[0]["tier"] == "favorite"
    assert {row["trend"] for row in payload} <= {"rising", "steady", "falling"}


def test_matchup_command(fixture_league, capsys):
    payload = _run_json(capsys, "matchup", "1", "3")

    assert payload["found"] is True
    assert payload["favorite"] == "Alpha"
    assert payload["win_probability_a"] == 58


def test_matchup_against_itself(fixture_league, capsys):
    payload = _run_json(capsys, "matchup", "2", "2")

    assert payload["found"] is False


def test_matchup_unknown_team_fails(fixture_league, capsys):
    exit_code = cli.main(["matchup", "1", "77"])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err


def test_shuffle_command(fixture_league, capsys):
    payload = _run_json(capsys, "shuffle", "--times", "3", "--delay", "0", "--seed", "1")

    assert len(payload["history"]) == 3
    assert payload["best"] is not None
    assert payload["original"]["division1"] == ["Alpha", "Beta"]
    assert payload["original"]["balance_quality"] in {"Excellent", "Good", "Fair", "Poor"}


def test_draft_command(fixture_league, capsys):
    payload = _run_json(capsys, "draft", "--team", "3")

    assert payload["seasons"] == ["2024"]
    assert len(payload["teams"]) == 1
    assert payload["teams"][0]["overall_grade"] == "D"
    assert payload["teams"][0]["best_pick"]["value_tier"] == "poor"
