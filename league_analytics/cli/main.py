"""CLI for league analytics.

Every command loads the league from Sleeper, runs one scorer and prints
JSON to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from dotenv import load_dotenv

from league_analytics.config import AnalyticsConfig, load_config
from league_analytics.dashboard import LeagueDashboard
from league_analytics.engine import (
    available_seasons,
    championship_tier,
    momentum_trend,
    quality_label,
    value_tier,
)
from league_analytics.engine.types import DraftPick, ShuffleResult, TeamDraftAnalysis
from league_analytics.errors import AnalyticsError
from league_analytics.sleeper_data import SleeperLeagueData, TeamSeasonRecord
from league_analytics.sleeper_data.sleeper_api import SleeperApiError


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--league-id",
        help="Sleeper league id (overrides SLEEPER_LEAGUE_ID).",
    )
    common.add_argument(
        "--seed",
        type=int,
        help="Seed for randomized scores (overrides ANALYTICS_SEED).",
    )
    common.add_argument(
        "--log-level",
        help="Logging level (overrides ANALYTICS_LOG_LEVEL).",
    )

    parser = argparse.ArgumentParser(prog="league-analytics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "standings", parents=[common], help="Standings grouped by division."
    )
    power = subparsers.add_parser("power", parents=[common], help="Power rankings.")
    power.add_argument(
        "--with-ties",
        action="store_true",
        help="Use the rankings-page formula that counts ties as games.",
    )
    subparsers.add_parser("luck", parents=[common], help="Luck index table.")
    subparsers.add_parser(
        "predict", parents=[common], help="Championship and playoff odds."
    )

    matchup = subparsers.add_parser(
        "matchup", parents=[common], help="Predict a head-to-head matchup."
    )
    matchup.add_argument("team_a", type=int, help="Roster id of the first team.")
    matchup.add_argument("team_b", type=int, help="Roster id of the second team.")

    shuffle = subparsers.add_parser(
        "shuffle", parents=[common], help="Shuffle teams into new divisions."
    )
    shuffle.add_argument(
        "--times", type=int, default=1, help="Number of shuffles to run."
    )
    shuffle.add_argument(
        "--delay", type=float, help="Seconds each shuffle takes to complete."
    )

    draft = subparsers.add_parser(
        "draft", parents=[common], help="Grade each team's latest draft."
    )
    draft.add_argument("--season", help="Only show this draft season.")
    draft.add_argument("--team", type=int, help="Only show this roster id.")

    return parser


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, default=str))


def _team_brief(team: TeamSeasonRecord) -> dict[str, Any]:
    return {
        "team_id": team.team_id,
        "team_name": team.team_name,
        "owner_name": team.owner_name,
        "record": f"{team.wins}-{team.losses}-{team.ties}",
    }


def _shuffle_payload(result: ShuffleResult) -> dict[str, Any]:
    return {
        "division1": [team.team_name for team in result.division1],
        "division2": [team.team_name for team in result.division2],
        "balance_score": result.balance_score,
        "balance_quality": quality_label(result.balance_score, "balance"),
        "rivalry_score": result.rivalry_score,
        "rivalry_quality": quality_label(result.rivalry_score, "rivalry"),
        "strength_variance": result.strength_variance,
    }


def _pick_payload(pick: DraftPick) -> dict[str, Any]:
    payload = pick.to_dict()
    payload["value_score"] = round(pick.value_score, 2)
    payload["value_tier"] = value_tier(pick.value_score)
    return payload


def _analysis_payload(analysis: TeamDraftAnalysis) -> dict[str, Any]:
    return {
        "team_id": analysis.team_id,
        "team_name": analysis.team_name,
        "owner_name": analysis.owner_name,
        "season": analysis.season,
        "overall_grade": analysis.overall_grade,
        "average_value": round(analysis.average_value, 2),
        "steal_count": analysis.steal_count,
        "bust_count": analysis.bust_count,
        "best_pick": _pick_payload(analysis.best_pick),
        "worst_pick": _pick_payload(analysis.worst_pick),
    }


def _analytics_config(args: argparse.Namespace) -> AnalyticsConfig:
    config = load_config()
    overrides: dict[str, Any] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if getattr(args, "delay", None) is not None:
        overrides["shuffle_delay_seconds"] = args.delay
    return config.model_copy(update=overrides)


async def _run_shuffles(dashboard: LeagueDashboard, times: int) -> None:
    for _ in range(times):
        await dashboard.shuffle_divisions()


def _run(args: argparse.Namespace, config: AnalyticsConfig) -> object:
    data = SleeperLeagueData(league_id=args.league_id, analytics_config=config)
    teams = data.load()
    dashboard = LeagueDashboard(
        teams, config=config, division_names=data.division_names
    )

    if args.command == "standings":
        return {
            name: [_team_brief(team) for team in members]
            for name, members in dashboard.divisions().items()
        }
    if args.command == "power":
        return [
            {**_team_brief(ranking.team), "rank": ranking.rank, "score": ranking.score}
            for ranking in dashboard.power_rankings(include_ties=args.with_ties)
        ]
    if args.command == "luck":
        return [
            {
                **_team_brief(result.team),
                "expected_wins": result.expected_wins,
                "luck_score": result.luck_score,
                "category": result.category,
            }
            for result in dashboard.luck_table()
        ]
    if args.command == "predict":
        return [
            {
                **prediction.to_dict(),
                "tier": championship_tier(index),
                "trend": momentum_trend(prediction.momentum),
            }
            for index, prediction in enumerate(dashboard.championship_odds())
        ]
    if args.command == "matchup":
        prediction = dashboard.predict_matchup(args.team_a, args.team_b)
        if prediction is None:
            return {"found": False, "reason": "A team cannot play itself."}
        return {
            "found": True,
            "team_a": _team_brief(prediction.team_a),
            "team_b": _team_brief(prediction.team_b),
            "win_probability_a": prediction.win_probability_a,
            "win_probability_b": prediction.win_probability_b,
            "favorite": prediction.favorite.team_name if prediction.favorite else None,
            "spread": prediction.spread,
            "confidence": prediction.confidence,
            "confidence_band": prediction.confidence_band,
        }
    if args.command == "shuffle":
        asyncio.run(_run_shuffles(dashboard, max(1, args.times)))
        best = dashboard.shuffler.save_best()
        return {
            "original": _shuffle_payload(dashboard.current_divisions()),
            "history": [
                _shuffle_payload(result) for result in dashboard.shuffler.history
            ],
            "best": _shuffle_payload(best) if best else None,
        }
    if args.command == "draft":
        analyses = dashboard.draft_report(
            data.load_draft(), season=args.season, team_id=args.team
        )
        return {
            "seasons": available_seasons(analyses),
            "teams": [_analysis_payload(analysis) for analysis in analyses],
        }
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _analytics_config(args)
        logging.basicConfig(level=config.log_level)
        payload = _run(args, config)
    except (AnalyticsError, SleeperApiError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    _print_json(payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
