"""Random division re-partitioning with a balance/rivalry evaluation."""

from __future__ import annotations

import asyncio
import logging
import math
import random
from collections import deque
from typing import Iterable, Optional, Sequence

from ..errors import InvalidLeagueSizeError
from ..sleeper_data.schema.models import TeamSeasonRecord
from ._math import check_team, clamp, point_diff, points_per_game, round_half_up, win_pct
from .types import ShuffleResult

logger = logging.getLogger(__name__)

HISTORY_SIZE = 5

_QUALITY_THRESHOLDS = {
    "balance": (80, 60, 40),
    "rivalry": (60, 40, 20),
}


def shuffle_strength(team: TeamSeasonRecord) -> float:
    check_team(team)
    return win_pct(team) * 50 + points_per_game(team) * 2 + point_diff(team) * 0.1


def division_balance(division: Sequence[TeamSeasonRecord]) -> int:
    """0-100 from the coefficient of variation of team strengths."""
    if not division:
        return 0
    strengths = [shuffle_strength(team) for team in division]
    mean = sum(strengths) / len(strengths)
    std_dev = math.sqrt(sum((value - mean) ** 2 for value in strengths) / len(strengths))
    # A non-positive mean has no meaningful CV; it scores as perfectly balanced.
    variation = std_dev / mean if mean > 0 else 0.0
    return int(round_half_up(clamp((1 - variation) * 100, 0, 100)))


def division_rivalry(division: Sequence[TeamSeasonRecord]) -> int:
    """Rewards neighbouring strengths: +30 for a gap under 5, +10 under 10."""
    strengths = sorted((shuffle_strength(team) for team in division), reverse=True)
    score = 0
    for stronger, weaker in zip(strengths, strengths[1:]):
        gap = abs(stronger - weaker)
        if gap < 5:
            score += 20
        if gap < 10:
            score += 10
    return min(100, score)


def quality_label(score: float, kind: str) -> str:
    excellent, good, fair = _QUALITY_THRESHOLDS[kind]
    if score >= excellent:
        return "Excellent"
    if score >= good:
        return "Good"
    if score >= fair:
        return "Fair"
    return "Poor"


def _mean_strength(division: Sequence[TeamSeasonRecord]) -> float:
    if not division:
        return 0.0
    return sum(shuffle_strength(team) for team in division) / len(division)


def evaluate_divisions(
    division1: Sequence[TeamSeasonRecord], division2: Sequence[TeamSeasonRecord]
) -> ShuffleResult:
    balance = (division_balance(division1) + division_balance(division2)) / 2
    rivalry = (division_rivalry(division1) + division_rivalry(division2)) / 2
    variance = abs(_mean_strength(division1) - _mean_strength(division2))
    return ShuffleResult(
        division1=tuple(division1),
        division2=tuple(division2),
        balance_score=int(round_half_up(balance)),
        rivalry_score=int(round_half_up(rivalry)),
        strength_variance=round_half_up(variance, 1),
    )


class DivisionShuffler:
    """Owns the displayed arrangement and a newest-first history of shuffles.

    One shuffler serves one caller; concurrent shuffles on the same instance
    are serialized.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        delay_seconds: float = 1.0,
        history_size: int = HISTORY_SIZE,
    ) -> None:
        self.rng = rng or random.Random()
        self.delay_seconds = delay_seconds
        self._history: deque[ShuffleResult] = deque(maxlen=history_size)
        self._lock = asyncio.Lock()
        self.current: Optional[ShuffleResult] = None

    @property
    def history(self) -> tuple[ShuffleResult, ...]:
        return tuple(self._history)

    def partition(
        self, teams: Sequence[TeamSeasonRecord]
    ) -> tuple[list[TeamSeasonRecord], list[TeamSeasonRecord]]:
        count = len(teams)
        if count == 0 or count % 2:
            raise InvalidLeagueSizeError(
                f"Cannot split {count} teams into two equal divisions."
            )
        shuffled = list(teams)
        self.rng.shuffle(shuffled)
        half = count // 2
        return shuffled[:half], shuffled[half:]

    async def shuffle(self, teams: Sequence[TeamSeasonRecord]) -> ShuffleResult:
        async with self._lock:
            division1, division2 = self.partition(teams)
            # Callers show a progress state while this is pending.
            await asyncio.sleep(self.delay_seconds)
            result = evaluate_divisions(division1, division2)
            self._history.appendleft(result)
            self.current = result
            logger.info(
                "shuffle balance=%s rivalry=%s variance=%s",
                result.balance_score,
                result.rivalry_score,
                result.strength_variance,
            )
            return result

    def reset(self) -> None:
        self._history.clear()
        self.current = None

    def save_best(
        self, history: Optional[Iterable[ShuffleResult]] = None
    ) -> Optional[ShuffleResult]:
        """Pick the highest-quality arrangement; earlier entries win ties."""
        candidates = self._history if history is None else history
        best: Optional[ShuffleResult] = None
        for result in candidates:
            if best is None or result.quality > best.quality:
                best = result
        if best is not None:
            self.current = best
        return best
