"""Per-hole net scoring, Stableford points and running round totals."""

from __future__ import annotations

from dataclasses import replace

from golfday.handicap import player_gets_stroke
from golfday.models import (
    HOLES_PER_ROUND,
    UNSCORED,
    Course,
    HoleScore,
    InvalidScoreError,
    Player,
    RoundTotals,
    Scorecard,
    Scored,
    ScoreTotals,
)

MAX_STROKES = 15
FRONT_NINE = range(1, 10)
BACK_NINE = range(10, 19)
# Score relative to par after the handicap stroke -> points.
STABLEFORD_TABLE = {-1: 3, 0: 2, 1: 1}


def net_score(gross: int, gets_stroke: bool) -> int:
    return gross - (1 if gets_stroke else 0)


def stableford_points(gross: int, par: int, gets_stroke: bool) -> int:
    delta = net_score(gross, gets_stroke) - par
    if delta <= -2:
        return 4
    if delta >= 2:
        return 0
    return STABLEFORD_TABLE[delta]


def validate_strokes(strokes: object, max_strokes: int = MAX_STROKES) -> int:
    if isinstance(strokes, bool) or not isinstance(strokes, int):
        raise InvalidScoreError(f"Gross score must be a whole number, got {strokes!r}.")
    if not 1 <= strokes <= max_strokes:
        raise InvalidScoreError(f"Gross score {strokes} is outside 1-{max_strokes}.")
    return strokes


def open_scorecard(player: Player, course: Course) -> Scorecard:
    return tuple(
        HoleScore(
            player_id=player.player_id,
            hole=hole.number,
            par=hole.par,
            handicap_index=hole.handicap_index,
            gets_stroke=player_gets_stroke(player.course_handicap, hole.handicap_index),
        )
        for hole in course.holes
    )


def enter_score(
    card: Scorecard,
    hole_number: int,
    strokes: int,
    *,
    stableford: bool = False,
    max_strokes: int = MAX_STROKES,
) -> Scorecard:
    """Return a copy of ``card`` with ``hole_number`` set to ``strokes``."""
    if not 1 <= hole_number <= len(card):
        raise InvalidScoreError(f"Hole {hole_number} is outside 1-{len(card)}.")
    gross = validate_strokes(strokes, max_strokes)
    current = card[hole_number - 1]
    updated = replace(
        current,
        gross=Scored(gross),
        stableford_points=(
            stableford_points(gross, current.par, current.gets_stroke) if stableford else None
        ),
    )
    return card[: hole_number - 1] + (updated,) + card[hole_number:]


def clear_scorecard(card: Scorecard) -> Scorecard:
    return tuple(replace(hole, gross=UNSCORED, stableford_points=None) for hole in card)


def _totals(holes: list[HoleScore]) -> ScoreTotals:
    scored = [hole for hole in holes if isinstance(hole.gross, Scored)]
    gross = sum(hole.gross.strokes for hole in scored)
    net = sum(hole.net for hole in scored)
    par_played = sum(hole.par for hole in scored)
    return ScoreTotals(gross=gross, net=net, to_par=net - par_played)


def summarize(card: Scorecard) -> RoundTotals:
    """
    Front nine, back nine and 18 hole totals.

    Unscored holes are left out entirely, including their par, so to-par
    for a round in progress is measured against the holes played so far.
    """
    front = [hole for hole in card if hole.hole in FRONT_NINE]
    back = [hole for hole in card if hole.hole in BACK_NINE]
    points = [hole.stableford_points for hole in card if hole.stableford_points is not None]
    return RoundTotals(
        front_nine=_totals(front),
        back_nine=_totals(back),
        total=_totals(list(card)),
        holes_played=sum(1 for hole in card if hole.is_scored),
        stableford_total=sum(points) if points else None,
    )


def gross_by_hole(card: Scorecard) -> list[int | None]:
    strokes: list[int | None] = [None] * HOLES_PER_ROUND
    for hole in card:
        strokes[hole.hole - 1] = hole.gross.strokes
    return strokes


def is_complete(card: Scorecard) -> bool:
    return len(card) == HOLES_PER_ROUND and all(hole.is_scored for hole in card)
