"""
Skins: one point per hole for the lowest score among enrolled players.

Ties split the point evenly. Nothing carries over: a hole without an
enrolled, scored player is simply a push with no winners.
"""

from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple

from golfday.models import (
    HOLES_PER_ROUND,
    Player,
    ScoreBasis,
    Scorecard,
    SkinResult,
    SkinWinner,
)


class SkinEntry(NamedTuple):
    player_id: str
    player_name: str
    score: int | None
    plays_skins: bool


def skin_for_hole(hole: int, entries: Iterable[SkinEntry]) -> SkinResult:
    contenders = [entry for entry in entries if entry.plays_skins and entry.score is not None]
    if not contenders:
        return SkinResult(hole=hole)
    low = min(entry.score for entry in contenders)
    winners = [entry for entry in contenders if entry.score == low]
    share = 1.0 / len(winners)
    return SkinResult(
        hole=hole,
        winners=tuple(
            SkinWinner(
                player_id=entry.player_id,
                player_name=entry.player_name,
                score=entry.score,
                skin_points=share,
            )
            for entry in winners
        ),
    )


def calculate_skins(
    players: Iterable[Player],
    cards: Mapping[str, Scorecard],
    basis: ScoreBasis = ScoreBasis.GROSS,
) -> list[SkinResult]:
    roster = list(players)
    results: list[SkinResult] = []
    for hole in range(1, HOLES_PER_ROUND + 1):
        entries = []
        for player in roster:
            card = cards.get(player.player_id) or ()
            score = card[hole - 1].score_for(basis) if len(card) >= hole else None
            entries.append(SkinEntry(player.player_id, player.name, score, player.plays_skins))
        results.append(skin_for_hole(hole, entries))
    return results
