from dataclasses import replace

import pytest

from golfday.models import (
    InvalidCourseError,
    PlayerClass,
    ScoringFormat,
    StatusTransitionError,
    TournamentStatus,
    UnknownEntityError,
)
from golfday.store import TournamentStore, advance_status


@pytest.fixture
def store(course):
    store = TournamentStore()
    store.add_course(course)
    return store


def test_status_only_moves_forward(store):
    tournament = store.create_tournament("Club Day", "2025-07-04", "pebble-beach")
    assert tournament.status is TournamentStatus.SETUP
    assert store.advance(tournament.tournament_id).status is TournamentStatus.IN_PROGRESS
    assert store.advance(tournament.tournament_id).status is TournamentStatus.COMPLETED
    with pytest.raises(StatusTransitionError):
        advance_status(store.tournament(tournament.tournament_id))


def test_register_player_opens_scorecard(store):
    tournament = store.create_tournament("Club Day", "2025-07-04", "pebble-beach")
    player = store.register_player(tournament.tournament_id, "Steve Wilson", 11.8, "Blue", plays_corners=True)
    assert player.player_id == "player-1"
    assert player.course_handicap == 13
    assert player.classification is PlayerClass.A
    card = store.scorecard(tournament.tournament_id, player.player_id)
    assert len(card) == 18
    assert not any(hole.is_scored for hole in card)
    assert store.tournament(tournament.tournament_id).players == (player,)


def test_scores_require_tournament_in_progress(store):
    tid = store.create_tournament("Club Day", "2025-07-04", "pebble-beach").tournament_id
    pid = store.register_player(tid, "Ann", 5.0, "White").player_id
    with pytest.raises(StatusTransitionError):
        store.record_score(tid, pid, 1, 4)
    store.advance(tid)
    card = store.record_score(tid, pid, 1, 4)
    assert card[0].gross.strokes == 4
    store.advance(tid)
    with pytest.raises(StatusTransitionError):
        store.record_score(tid, pid, 2, 4)
    with pytest.raises(StatusTransitionError):
        store.register_player(tid, "Late", 10.0, "White")


def test_stableford_tournament_records_points(store):
    tid = store.create_tournament(
        "Stableford Day", "2025-07-05", "pebble-beach", scoring_format=ScoringFormat.STABLEFORD
    ).tournament_id
    pid = store.register_player(tid, "Ann", 0.0, "White").player_id
    store.advance(tid)
    card = store.record_score(tid, pid, 1, 3)
    assert card[0].stableford_points == 3


def test_max_strokes_setting_is_applied(course):
    store = TournamentStore(max_strokes=8)
    store.add_course(course)
    tid = store.create_tournament("Club Day", "2025-07-04", "pebble-beach").tournament_id
    pid = store.register_player(tid, "Ann", 5.0, "White").player_id
    store.advance(tid)
    with pytest.raises(ValueError):
        store.record_score(tid, pid, 1, 9)


def test_clear_and_reset(store):
    tid = store.create_tournament("Club Day", "2025-07-04", "pebble-beach").tournament_id
    pid = store.register_player(tid, "Ann", 5.0, "White").player_id
    store.advance(tid)
    store.record_score(tid, pid, 1, 4)
    assert store.clear_scores(tid) == 1
    assert not store.scorecard(tid, pid)[0].is_scored
    store.record_score(tid, pid, 1, 5)
    tournament = store.reset(tid)
    assert tournament.status is TournamentStatus.SETUP
    assert not store.scorecard(tid, pid)[0].is_scored
    assert tournament.players[0].player_id == pid


def test_unknown_entities(store):
    with pytest.raises(UnknownEntityError):
        store.tournament("T-999")
    with pytest.raises(UnknownEntityError):
        store.create_tournament("Club Day", None, "augusta")
    tid = store.create_tournament("Club Day", None, None).tournament_id
    with pytest.raises(UnknownEntityError):
        store.register_player(tid, "Ann", 5.0, "White")
    with pytest.raises(UnknownEntityError):
        store.scorecard(tid, "player-42")


def test_course_in_use_cannot_be_replaced(store, course):
    renamed = replace(course, name="Pebble Beach (Winter Greens)")
    assert store.add_course(renamed) is renamed
    tid = store.create_tournament("Club Day", "2025-07-04", "pebble-beach").tournament_id
    pid = store.register_player(tid, "Ann", 5.0, "White").player_id
    with pytest.raises(InvalidCourseError) as excinfo:
        store.add_course(course)
    assert tid in str(excinfo.value)
    assert store.course("pebble-beach") is renamed
    assert store.scorecard(tid, pid)[0].par == renamed.holes[0].par
