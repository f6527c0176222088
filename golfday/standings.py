from __future__ import annotations

from typing import Iterable, Mapping, NamedTuple, Sequence

from golfday.models import ClassResults, ClassStanding, Player, PlayerClass, RoundTotals

PLAYER_CLASSES: tuple[PlayerClass, ...] = (
    PlayerClass.A,
    PlayerClass.B,
    PlayerClass.C,
    PlayerClass.SENIOR,
)


class ScoreSnapshot(NamedTuple):
    gross: int
    net: int
    to_par: int


def snapshot_from_totals(totals: RoundTotals) -> ScoreSnapshot:
    return ScoreSnapshot(totals.total.gross, totals.total.net, totals.total.to_par)


def assign_positions(net_scores: Sequence[int]) -> list[int]:
    """
    Positions for net scores already sorted best first.

    Equal scores share a position and the next distinct score takes its
    1-based index, so [70, 70, 72] ranks as [1, 1, 3].
    """
    positions: list[int] = []
    current = 1
    for index, score in enumerate(net_scores):
        if index and score > net_scores[index - 1]:
            current = index + 1
        positions.append(current)
    return positions


def calculate_class_results(
    players: Iterable[Player],
    snapshots: Mapping[str, ScoreSnapshot],
    classes: Sequence[PlayerClass] = PLAYER_CLASSES,
) -> list[ClassResults]:
    roster = list(players)
    results: list[ClassResults] = []
    for player_class in classes:
        posted: list[tuple[Player, ScoreSnapshot]] = []
        for player in roster:
            if player.classification is not player_class:
                continue
            snapshot = snapshots.get(player.player_id)
            # A zero net means nothing has been posted yet.
            if snapshot is None or not snapshot.net:
                continue
            posted.append((player, snapshot))
        if not posted:
            continue
        posted.sort(key=lambda item: (item[1].net, item[1].gross))
        positions = assign_positions([snapshot.net for _, snapshot in posted])
        results.append(
            ClassResults(
                classification=player_class,
                players=tuple(
                    ClassStanding(
                        player_id=player.player_id,
                        player_name=player.name,
                        is_member=player.is_member,
                        gross_score=snapshot.gross,
                        net_score=snapshot.net,
                        to_par=snapshot.to_par,
                        position=position,
                    )
                    for (player, snapshot), position in zip(posted, positions)
                ),
            )
        )
    return results
