"""
Corners: the round is cut into six fixed three-hole segments and each one
is worth a point for the lowest combined score.

A player must have all three holes of a corner scored to contend for it.
Corners nobody qualifies for are left out of the results.
"""

from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple, Sequence

from golfday.models import CornerResult, CornerWinner, Player, ScoreBasis, Scorecard

CORNER_GROUPS: tuple[tuple[int, int, int], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (10, 11, 12),
    (13, 14, 15),
    (16, 17, 18),
)


class CornerEntry(NamedTuple):
    player_id: str
    player_name: str
    scores: Sequence[int | None]
    plays_corners: bool


def corner_points(winner_count: int) -> float:
    if winner_count == 1:
        return 1.0
    if winner_count == 2:
        return 0.5
    return 1.0 / winner_count


def corner_total(scores: Sequence[int | None], holes: Iterable[int]) -> int | None:
    strokes = [scores[hole - 1] if len(scores) >= hole else None for hole in holes]
    if any(stroke is None for stroke in strokes):
        return None
    return sum(strokes)


def calculate_corners(
    entries: Iterable[CornerEntry],
    groups: Sequence[Sequence[int]] = CORNER_GROUPS,
) -> list[CornerResult]:
    enrolled = [entry for entry in entries if entry.plays_corners]
    results: list[CornerResult] = []
    for number, holes in enumerate(groups, 1):
        qualified: list[tuple[CornerEntry, int]] = []
        for entry in enrolled:
            total = corner_total(entry.scores, holes)
            if total is not None:
                qualified.append((entry, total))
        if not qualified:
            continue
        low = min(total for _, total in qualified)
        winners = [(entry, total) for entry, total in qualified if total == low]
        points = corner_points(len(winners))
        results.append(
            CornerResult(
                corner_number=number,
                holes=tuple(holes),
                winners=tuple(
                    CornerWinner(entry.player_id, entry.player_name, total, points)
                    for entry, total in winners
                ),
            )
        )
    return results


def corner_entries(
    players: Iterable[Player],
    cards: Mapping[str, Scorecard],
    basis: ScoreBasis = ScoreBasis.GROSS,
) -> list[CornerEntry]:
    return [
        CornerEntry(
            player.player_id,
            player.name,
            [hole.score_for(basis) for hole in cards.get(player.player_id) or ()],
            player.plays_corners,
        )
        for player in players
    ]
