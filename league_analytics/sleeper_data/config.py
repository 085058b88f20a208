"""Configuration helpers for the Sleeper data layer."""

from __future__ import annotations

from dataclasses import dataclass
import os
from dotenv import load_dotenv

REGULAR_SEASON_WEEKS = 17


@dataclass(frozen=True)
class SleeperConfig:
    league_id: str
    max_week: int = REGULAR_SEASON_WEEKS


def load_config() -> SleeperConfig:
    load_dotenv()
    league_id = os.getenv("SLEEPER_LEAGUE_ID")
    if not league_id:
        raise ValueError("SLEEPER_LEAGUE_ID must be set.")

    max_week_raw = os.getenv("SLEEPER_MAX_WEEK")
    if max_week_raw is None or max_week_raw == "":
        max_week = REGULAR_SEASON_WEEKS
    else:
        try:
            max_week = int(max_week_raw)
        except ValueError as exc:
            raise ValueError("SLEEPER_MAX_WEEK must be an integer.") from exc

    return SleeperConfig(league_id=str(league_id), max_week=max_week)
