"""Normalization functions for draft payloads."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from ..schema.models import RawDraftPick


def latest_draft(raw_drafts: Iterable[Mapping[str, Any]] | None) -> Optional[Mapping[str, Any]]:
    """Return the most recent draft; Sleeper lists a league's drafts oldest first."""
    drafts = list(raw_drafts or [])
    if not drafts:
        return None
    return drafts[-1]


def normalize_draft_picks(
    raw_picks: Iterable[Mapping[str, Any]], season: str
) -> list[RawDraftPick]:
    picks: list[RawDraftPick] = []
    for raw_pick in raw_picks:
        player_id = raw_pick.get("player_id")
        pick_no = raw_pick.get("pick_no")
        roster_id = raw_pick.get("roster_id")
        if not player_id or pick_no is None or roster_id is None:
            continue
        picks.append(
            RawDraftPick(
                player_id=str(player_id),
                round=int(raw_pick.get("round") or 0),
                overall_pick=int(pick_no),
                team_id=int(roster_id),
                season=str(raw_pick.get("season") or season),
            )
        )
    return picks
