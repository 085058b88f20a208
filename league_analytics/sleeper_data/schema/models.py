"""Canonical records handed from the Sleeper data layer to the engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TeamSeasonRecord:
    team_id: int
    team_name: str
    owner_name: str
    wins: int
    losses: int
    ties: int
    points_for: float
    points_against: float
    division: int = 1
    streak: Optional[str] = None
    recent_results: tuple[str, ...] = ()

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def record(self) -> str:
        return "".join(self.recent_results)


@dataclass(frozen=True)
class DivisionNames:
    division_1: str = "Division 1"
    division_2: str = "Division 2"

    def name_for(self, division: int) -> str:
        if division == 1:
            return self.division_1
        if division == 2:
            return self.division_2
        return f"Division {division}"


@dataclass(frozen=True)
class PlayerInfo:
    player_id: str
    name: str
    position: Optional[str] = None
    pro_team: str = "FA"
    status: str = "Active"


@dataclass(frozen=True)
class RawDraftPick:
    player_id: str
    round: int
    overall_pick: int
    team_id: int
    season: str
