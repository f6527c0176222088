from datetime import datetime, timezone

import pytest

from golfday.models import PlayerClass, ScoreBasis, Tournament
from golfday.results import compute_results

NOW = datetime(2025, 7, 4, 16, 30, tzinfo=timezone.utc)


@pytest.fixture
def field(make_player, make_card):
    mike = make_player("mike", course_handicap=7)
    harry = make_player("harry", course_handicap=10)
    bob = make_player("bob", course_handicap=18, classification=PlayerClass.B, corners=False)
    late = make_player("late", classification=PlayerClass.C)
    players = (mike, harry, bob, late)
    cards = {
        "mike": make_card(mike, [4, 5, 4, 4, 3, 5, 3, 4, 4, 4, 4, 3, 4, 5, 4, 4, 3, 5]),
        "harry": make_card(harry, [5, 5, 4, 4, 3, 5, 3, 4, 4, 4, 4, 3, 4, 5, 4, 4, 3, 5]),
        "bob": make_card(bob, [5, 6, 5, 5, 4, 6, 4, 5, 5] + [None] * 9),
        "late": make_card(late, []),
    }
    tournament = Tournament(
        "T-001",
        "Club Day",
        "2025-07-04",
        "pebble-beach",
        players,
        skins_enabled=True,
        corners_enabled=True,
    )
    return tournament, cards


def test_results_pipeline(field):
    tournament, cards = field
    results = compute_results(tournament, cards, NOW)
    assert results.tournament_id == "T-001"
    assert results.last_updated == NOW

    [class_a, class_b] = results.class_results
    assert class_a.classification is PlayerClass.A
    # Mike: 72 gross, 7 strokes. Harry: 73 gross, 10 strokes.
    assert [(s.player_id, s.gross_score, s.net_score) for s in class_a.players] == [
        ("harry", 73, 63),
        ("mike", 72, 65),
    ]
    # Bob: front nine only, 45 gross with a stroke on every hole.
    assert (class_b.players[0].gross_score, class_b.players[0].net_score, class_b.players[0].to_par) == (45, 36, 0)

    assert len(results.skin_results) == 18
    assert [w.player_id for w in results.skin_results[0].winners] == ["mike"]
    assert [w.player_id for w in results.skin_results[1].winners] == ["mike", "harry"]
    assert [w.player_id for w in results.skin_results[17].winners] == ["mike", "harry"]

    corners = results.corner_results
    assert [corner.corner_number for corner in corners] == [1, 2, 3, 4, 5, 6]
    assert [w.player_id for w in corners[0].winners] == ["mike"]
    assert all(len(corner.winners) == 2 for corner in corners[1:])


def test_recomputing_is_idempotent(field):
    tournament, cards = field
    assert compute_results(tournament, cards, NOW) == compute_results(tournament, cards, NOW)


def test_side_games_follow_tournament_toggles(field):
    tournament, cards = field
    plain = Tournament(tournament.tournament_id, tournament.name, tournament.date, tournament.course_id, tournament.players)
    results = compute_results(plain, cards, NOW)
    assert results.skin_results == ()
    assert results.corner_results == ()
    assert len(results.class_results) == 2


def test_net_basis_for_skins(field):
    tournament, cards = field
    net_skins = Tournament(
        tournament.tournament_id,
        tournament.name,
        tournament.date,
        tournament.course_id,
        tournament.players,
        skins_enabled=True,
        skins_basis=ScoreBasis.NET,
    )
    results = compute_results(net_skins, cards, NOW)
    # Hole 6 (index 1): Mike 5-1, Harry 5-1, Bob 6-1.
    assert [w.player_id for w in results.skin_results[5].winners] == ["mike", "harry"]
    assert results.skin_results[5].winners[0].score == 4


def test_last_updated_defaults_to_now(field):
    tournament, cards = field
    assert compute_results(tournament, cards).last_updated.tzinfo is not None
