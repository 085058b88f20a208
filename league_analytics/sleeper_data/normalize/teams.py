"""Normalization of Sleeper roster/user payloads into team season records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ...errors import MalformedInputError
from ..schema.models import DivisionNames, TeamSeasonRecord


class _RosterSettings(BaseModel):
    """Season fields Sleeper keeps under ``roster.settings``."""

    model_config = ConfigDict(extra="ignore")

    wins: int
    losses: int
    ties: int = 0
    fpts: int = 0
    fpts_decimal: int = 0
    fpts_against: int = 0
    fpts_against_decimal: int = 0
    division: int = 1


def _points(whole: int, decimal: int) -> float:
    return round(float(whole) + float(decimal) / 100.0, 2)


def _parse_settings(raw_roster: Mapping[str, Any]) -> _RosterSettings:
    # Sleeper sends null for point fields before week 1; wins/losses must be present.
    settings = {
        key: value
        for key, value in (raw_roster.get("settings") or {}).items()
        if value is not None
    }
    try:
        return _RosterSettings.model_validate(settings)
    except ValidationError as exc:
        fields = ", ".join(
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        )
        raise MalformedInputError(
            f"Roster {raw_roster.get('roster_id')!r} has missing or non-numeric "
            f"settings: {fields}"
        ) from exc


def _recent_results(record: Any) -> tuple[str, ...]:
    if isinstance(record, list):
        record = "".join(str(item) for item in record if item)
    if not isinstance(record, str):
        return ()
    return tuple(ch for ch in record.strip().upper() if ch.strip())


def normalize_team(
    raw_roster: Mapping[str, Any], user: Optional[Mapping[str, Any]]
) -> TeamSeasonRecord:
    if raw_roster.get("roster_id") is None:
        raise MalformedInputError("Roster payload is missing roster_id.")
    settings = _parse_settings(raw_roster)
    metadata = raw_roster.get("metadata") or {}
    user = user or {}
    user_metadata = user.get("metadata") or {}

    return TeamSeasonRecord(
        team_id=int(raw_roster["roster_id"]),
        team_name=str(user_metadata.get("team_name") or "Unknown Team"),
        owner_name=str(user.get("display_name") or "Unknown Owner"),
        wins=settings.wins,
        losses=settings.losses,
        ties=settings.ties,
        points_for=_points(settings.fpts, settings.fpts_decimal),
        points_against=_points(settings.fpts_against, settings.fpts_against_decimal),
        division=settings.division,
        streak=metadata.get("streak"),
        recent_results=_recent_results(metadata.get("record")),
    )


def standings(teams: Iterable[TeamSeasonRecord]) -> list[TeamSeasonRecord]:
    """Order teams by wins minus losses; equal records keep input order."""
    return sorted(teams, key=lambda team: team.wins - team.losses, reverse=True)


def normalize_teams(
    raw_rosters: Iterable[Mapping[str, Any]],
    raw_users: Iterable[Mapping[str, Any]],
) -> list[TeamSeasonRecord]:
    user_by_id: dict[str, Mapping[str, Any]] = {
        str(user["user_id"]): user for user in raw_users if user.get("user_id")
    }

    teams: list[TeamSeasonRecord] = []
    for raw_roster in raw_rosters:
        owner_id = raw_roster.get("owner_id")
        user = user_by_id.get(str(owner_id)) if owner_id is not None else None
        teams.append(normalize_team(raw_roster, user))
    return standings(teams)


def group_divisions(
    teams: Iterable[TeamSeasonRecord],
) -> dict[int, list[TeamSeasonRecord]]:
    grouped: dict[int, list[TeamSeasonRecord]] = {1: [], 2: []}
    for team in standings(teams):
        grouped.setdefault(team.division, []).append(team)
    return grouped


def division_names(raw_league: Optional[Mapping[str, Any]]) -> DivisionNames:
    metadata = (raw_league or {}).get("metadata") or {}
    return DivisionNames(
        division_1=str(metadata.get("division_1") or "Division 1"),
        division_2=str(metadata.get("division_2") or "Division 2"),
    )
