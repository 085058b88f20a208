import pytest

from league_analytics.engine import LeagueContext, PowerRankingScorer
from league_analytics.errors import InsufficientDataError, MalformedInputError


def test_score_combines_win_pct_and_point_diff(make_team):
    team = make_team(wins=10, losses=3, points_for=1500, points_against=1300)

    assert PowerRankingScorer().score(team) == 97


def test_score_is_zero_without_decided_games(make_team):
    team = make_team(ties=2, points_for=200, points_against=100)

    assert PowerRankingScorer().score(team) == 0


def test_score_rounds_halves_up(make_team):
    team = make_team(wins=1, losses=1, points_for=105, points_against=100)

    assert PowerRankingScorer().score(team) == 51


def test_ranking_score_counts_ties_as_games(make_team):
    team = make_team(wins=5, losses=4, ties=1, points_for=1000, points_against=900)

    assert PowerRankingScorer().ranking_score(team) == 35


def test_score_accepts_league_context(make_team, teams):
    scorer = PowerRankingScorer()
    team = make_team(wins=10, losses=3, points_for=1500, points_against=1300)
    context = LeagueContext.from_teams(teams)

    assert scorer.score(team, context) == scorer.score(team) == 97
    assert scorer.ranking_score(team, context) == scorer.ranking_score(team)


def test_non_numeric_team_is_rejected(make_team):
    with pytest.raises(MalformedInputError):
        PowerRankingScorer().score(make_team(wins=None, losses=2))


def test_negative_points_are_rejected(make_team):
    with pytest.raises(MalformedInputError):
        PowerRankingScorer().score(make_team(wins=1, points_for=-5))


def test_rank_orders_by_score(teams):
    rankings = PowerRankingScorer().rank(teams)

    assert [(r.team.team_id, r.score, r.rank) for r in rankings] == [
        (1, 81, 1),
        (4, 51, 2),
        (2, 49, 3),
        (3, 18, 4),
    ]


def test_rank_empty_league():
    with pytest.raises(InsufficientDataError):
        PowerRankingScorer().rank([])
