"""
Build a full results snapshot from the current scorecards.

Results are never patched in place: every call recomputes standings, skins
and corners from scratch, so callers can simply rebuild after each score.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Mapping

from golfday.corners import calculate_corners, corner_entries
from golfday.models import Scorecard, Tournament, TournamentResults
from golfday.scorecard import summarize
from golfday.skins import calculate_skins
from golfday.standings import ScoreSnapshot, calculate_class_results, snapshot_from_totals


def score_snapshots(tournament: Tournament, cards: Mapping[str, Scorecard]) -> dict[str, ScoreSnapshot]:
    return {
        player.player_id: snapshot_from_totals(summarize(cards[player.player_id]))
        for player in tournament.players
        if player.player_id in cards
    }


def compute_results(
    tournament: Tournament,
    cards: Mapping[str, Scorecard],
    now: datetime | None = None,
) -> TournamentResults:
    skins = (
        tuple(calculate_skins(tournament.players, cards, tournament.skins_basis))
        if tournament.skins_enabled
        else ()
    )
    corners = (
        tuple(calculate_corners(corner_entries(tournament.players, cards, tournament.corners_basis)))
        if tournament.corners_enabled
        else ()
    )
    return TournamentResults(
        tournament_id=tournament.tournament_id,
        class_results=tuple(calculate_class_results(tournament.players, score_snapshots(tournament, cards))),
        skin_results=skins,
        corner_results=corners,
        last_updated=now or datetime.now(timezone.utc),
    )
