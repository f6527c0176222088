"""Tournament-long point totals, winner announcements and roster statistics."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping

from golfday.handicap import round_half_up
from golfday.models import (
    ClassResults,
    ClassStanding,
    CornerResult,
    Player,
    PointsTotal,
    Scorecard,
    SkinResult,
    Tournament,
    TournamentStats,
    WinnerAnnouncement,
)
from golfday.scorecard import is_complete


def _round_points(value: float) -> float:
    return round_half_up(value * 100) / 100


def _collect(awards: Iterable[tuple[str, str, float]]) -> list[PointsTotal]:
    names: dict[str, str] = {}
    totals: dict[str, float] = {}
    for player_id, player_name, points in awards:
        names.setdefault(player_id, player_name)
        totals[player_id] = totals.get(player_id, 0.0) + points
    ranked = [
        PointsTotal(player_id, names[player_id], _round_points(points))
        for player_id, points in totals.items()
    ]
    return sorted(ranked, key=lambda entry: -entry.points)


def total_skins(skin_results: Iterable[SkinResult]) -> list[PointsTotal]:
    return _collect(
        (winner.player_id, winner.player_name, winner.skin_points)
        for result in skin_results
        for winner in result.winners
    )


def consolidated_corners(corner_results: Iterable[CornerResult]) -> list[PointsTotal]:
    return _collect(
        (winner.player_id, winner.player_name, winner.points)
        for result in corner_results
        for winner in result.winners
    )


def _describe(place: str, standing: ClassStanding) -> str:
    status = "Member" if standing.is_member else "Guest"
    return (
        f"{place} Place winner is {standing.player_name} ({status}) - "
        f"Gross {standing.gross_score}, Net {standing.net_score}"
    )


def announce_class(class_result: ClassResults) -> WinnerAnnouncement | None:
    if not class_result.players:
        return None
    first = class_result.players[0]
    second = class_result.players[1] if len(class_result.players) > 1 else None
    decided_by_gross = second is not None and second.net_score == first.net_score
    title = f"Class {class_result.classification.value} Winners"
    lines = [title, "=" * len(title), _describe("First", first)]
    if second is not None:
        lines.append(_describe("Second", second))
    if decided_by_gross:
        lines.append(
            f"Tie-breaker: net scores tied at {first.net_score}, decided by gross score."
        )
    return WinnerAnnouncement(
        classification=class_result.classification,
        first=first,
        second=second,
        decided_by_gross=decided_by_gross,
        message="\n".join(lines),
    )


def winner_announcements(class_results: Iterable[ClassResults]) -> list[WinnerAnnouncement]:
    announcements = []
    for class_result in class_results:
        announcement = announce_class(class_result)
        if announcement is not None:
            announcements.append(announcement)
    return announcements


def sort_players_alphabetically(players: Iterable[Player]) -> list[Player]:
    return sorted(players, key=lambda player: (player.name.lower(), player.player_id))


def tournament_stats(tournament: Tournament, cards: Mapping[str, Scorecard]) -> TournamentStats:
    players = tournament.players
    by_class = Counter(player.classification.value for player in players)
    scored = [cards.get(player.player_id) or () for player in players]
    return TournamentStats(
        total_players=len(players),
        members=sum(1 for player in players if player.is_member),
        guests=sum(1 for player in players if not player.is_member),
        players_by_class=dict(sorted(by_class.items())),
        skins_players=sum(1 for player in players if player.plays_skins),
        corners_players=sum(1 for player in players if player.plays_corners),
        players_with_scores=sum(1 for card in scored if any(hole.is_scored for hole in card)),
        completed_cards=sum(1 for card in scored if is_complete(card)),
    )
