"""Export a tournament to plain JSON data and load it back."""

from __future__ import annotations

from typing import Any, Mapping

from golfday.course_sync import build_course
from golfday.models import Course, Player, Scorecard, ScoringFormat, Tournament
from golfday.schemas import CoursePayload, SnapshotPayload
from golfday.scorecard import MAX_STROKES, enter_score, gross_by_hole, open_scorecard


def course_from_payload(payload: CoursePayload) -> Course:
    return build_course(
        payload.course_id,
        payload.name,
        [hole.model_dump() for hole in payload.holes],
        [tee.model_dump() for tee in payload.tees],
    )


def course_to_payload(course: Course) -> dict[str, Any]:
    return {
        "course_id": course.course_id,
        "name": course.name,
        "holes": [
            {"number": hole.number, "par": hole.par, "handicap_index": hole.handicap_index}
            for hole in course.holes
        ],
        "tees": [{"name": tee.name, "slope": tee.slope, "rating": tee.rating} for tee in course.tees],
    }


def export_snapshot(tournament: Tournament, course: Course, cards: Mapping[str, Scorecard]) -> dict[str, Any]:
    return {
        "tournament": {
            "tournament_id": tournament.tournament_id,
            "name": tournament.name,
            "date": tournament.date,
            "course_id": tournament.course_id,
            "players": [
                {
                    "player_id": player.player_id,
                    "name": player.name,
                    "handicap_index": player.handicap_index,
                    "course_handicap": player.course_handicap,
                    "classification": player.classification.value,
                    "tee": player.tee,
                    "is_member": player.is_member,
                    "plays_skins": player.plays_skins,
                    "plays_corners": player.plays_corners,
                    "age": player.age,
                }
                for player in tournament.players
            ],
            "skins_enabled": tournament.skins_enabled,
            "corners_enabled": tournament.corners_enabled,
            "scoring_format": tournament.scoring_format.value,
            "status": tournament.status.value,
            "skins_basis": tournament.skins_basis.value,
            "corners_basis": tournament.corners_basis.value,
        },
        "course": course_to_payload(course),
        "scorecards": {player_id: gross_by_hole(card) for player_id, card in cards.items()},
    }


def load_snapshot(
    payload: SnapshotPayload, max_strokes: int = MAX_STROKES
) -> tuple[Tournament, Course, dict[str, Scorecard]]:
    course = course_from_payload(payload.course)
    snapshot = payload.tournament
    # Course handicap and class were fixed at registration; keep them as exported.
    players = tuple(Player(**player.model_dump()) for player in snapshot.players)
    tournament = Tournament(**{**snapshot.model_dump(), "players": players})
    stableford = tournament.scoring_format is ScoringFormat.STABLEFORD
    cards: dict[str, Scorecard] = {}
    for player in players:
        card = open_scorecard(player, course)
        strokes = payload.scorecards.get(player.player_id) or []
        for hole, gross in enumerate(strokes, 1):
            if gross is not None:
                card = enter_score(card, hole, gross, stableford=stableford, max_strokes=max_strokes)
        cards[player.player_id] = card
    return tournament, course, cards
