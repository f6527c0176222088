"""
Course handicap, stroke allocation and player classification.

Strokes are allocated one per hole at most: a course handicap of 20 still
receives a single stroke on every hole, never a second pass over the
hardest ones.
"""

from __future__ import annotations

import math

from golfday.models import Course, Player, PlayerClass, ScoringError

STANDARD_SLOPE = 113
SENIOR_AGE = 65
# Inclusive upper handicap index for each handicap-based class.
CLASS_CUTOFFS: tuple[tuple[PlayerClass, float], ...] = (
    (PlayerClass.A, 12),
    (PlayerClass.B, 18),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def course_handicap(handicap_index: float, slope_rating: int, course_rating: float = 72) -> int:
    # course_rating is accepted for call-site symmetry with the tee data but
    # plays no part in the simplified formula.
    return round_half_up(handicap_index * (slope_rating / STANDARD_SLOPE))


def player_gets_stroke(course_handicap: int, hole_handicap_index: int) -> bool:
    return course_handicap >= hole_handicap_index


def classify(handicap_index: float, age: int | None = None) -> PlayerClass:
    if age is not None and age >= SENIOR_AGE:
        return PlayerClass.SENIOR
    for player_class, upper in CLASS_CUTOFFS:
        if handicap_index <= upper:
            return player_class
    return PlayerClass.C


def strokes_received(course_handicap: int, course: Course) -> int:
    return sum(
        1 for hole in course.holes if player_gets_stroke(course_handicap, hole.handicap_index)
    )


def register_player(
    course: Course,
    player_id: str,
    name: str,
    handicap_index: float,
    tee: str,
    *,
    age: int | None = None,
    is_member: bool = True,
    plays_skins: bool = False,
    plays_corners: bool = False,
    classification: PlayerClass | None = None,
) -> Player:
    """
    Build a roster entry for a player on a given tee.

    Course handicap and class are fixed here; they only change if the player
    is registered again. An explicit classification overrides the
    handicap-based one, except that an age-eligible senior is always Senior.
    """
    if not math.isfinite(handicap_index):
        raise ScoringError(f"Handicap index for {name.strip()} must be a finite number.")
    selected = course.tee(tee)
    resolved_class = classify(handicap_index, age)
    if classification is not None and resolved_class is not PlayerClass.SENIOR:
        resolved_class = classification
    return Player(
        player_id=player_id,
        name=name.strip(),
        handicap_index=handicap_index,
        course_handicap=course_handicap(handicap_index, selected.slope, selected.rating),
        classification=resolved_class,
        tee=selected.name,
        is_member=is_member,
        plays_skins=plays_skins,
        plays_corners=plays_corners,
        age=age,
    )
