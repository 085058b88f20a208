import pytest

from league_analytics.engine import LuckIndexEstimator, luck_category
from league_analytics.errors import InsufficientDataError


@pytest.fixture
def estimator():
    return LuckIndexEstimator()


def test_expected_wins_from_pythagorean_expectation(estimator, make_team):
    team = make_team(wins=10, losses=3, points_for=1500, points_against=1300)

    result = estimator.evaluate(team)

    assert result.expected_wins == 7.4
    assert result.luck_score == 2.6
    assert result.category == "Very Lucky"


def test_luck_score_is_wins_minus_expected(estimator, teams):
    for team in teams:
        expected = estimator.expected_wins(team)
        assert 0 <= expected <= team.wins + team.losses
        assert estimator.luck_score(team) == pytest.approx(team.wins - expected, abs=0.05)


def test_no_points_means_no_expected_wins(estimator, make_team):
    team = make_team(wins=2, losses=1)

    assert estimator.expected_wins(team) == 0.0
    assert estimator.luck_score(team) == 2.0


def test_no_games_means_zero(estimator, make_team):
    assert estimator.expected_wins(make_team()) == 0.0
    assert estimator.luck_score(make_team()) == 0.0


@pytest.mark.parametrize(
    ("score", "category"),
    [
        (1.6, "Very Lucky"),
        (1.0, "Lucky"),
        (0.8, "Neutral"),
        (-0.8, "Neutral"),
        (-0.9, "Unlucky"),
        (-1.6, "Very Unlucky"),
    ],
)
def test_luck_category(score, category):
    assert luck_category(score) == category


def test_rank_puts_luckiest_first(estimator, teams):
    results = estimator.rank(teams)

    scores = [result.luck_score for result in results]
    assert scores == sorted(scores, reverse=True)
    assert len(results) == len(teams)


def test_rank_empty_league(estimator):
    with pytest.raises(InsufficientDataError):
        estimator.rank([])
