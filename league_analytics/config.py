"""Configuration for the analytics engine."""

from __future__ import annotations

import os
import random
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AnalyticsConfig(BaseModel):
    """Tunables for the scorers and the draft data loader."""

    seed: Optional[int] = Field(
        default=None, description="Seed for the schedule proxy and shuffle draws"
    )
    shuffle_delay_seconds: float = Field(
        default=1.0, ge=0, description="Visible delay before a shuffle completes"
    )
    history_size: int = Field(default=5, ge=1, description="Shuffles kept in history")
    stats_fallback_threshold: int = Field(
        default=10,
        ge=0,
        description="Fetch per-player stats when fewer players than this have points",
    )
    stats_fallback_limit: int = Field(
        default=20, ge=0, description="Number of leading picks to fetch stats for"
    )
    log_level: str = Field(default="WARNING", description="Root logging level")

    def rng(self) -> random.Random:
        return random.Random(self.seed)


def load_config() -> AnalyticsConfig:
    """Load configuration from environment variables."""
    load_dotenv()

    seed_raw = os.getenv("ANALYTICS_SEED")
    try:
        seed = int(seed_raw) if seed_raw else None
    except ValueError as exc:
        raise ValueError("ANALYTICS_SEED must be an integer.") from exc

    delay_raw = os.getenv("ANALYTICS_SHUFFLE_DELAY")
    try:
        delay = float(delay_raw) if delay_raw else 1.0
    except ValueError as exc:
        raise ValueError("ANALYTICS_SHUFFLE_DELAY must be a number.") from exc

    return AnalyticsConfig(
        seed=seed,
        shuffle_delay_seconds=delay,
        log_level=os.getenv("ANALYTICS_LOG_LEVEL", "WARNING").upper(),
    )
