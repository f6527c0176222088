from golfday.consolidation import (
    announce_class,
    consolidated_corners,
    sort_players_alphabetically,
    total_skins,
    tournament_stats,
    winner_announcements,
)
from golfday.models import (
    ClassResults,
    ClassStanding,
    CornerResult,
    CornerWinner,
    PlayerClass,
    SkinResult,
    SkinWinner,
    Tournament,
)


def _skin(hole, *winners):
    share = 1 / len(winners) if winners else 0
    return SkinResult(hole, tuple(SkinWinner(pid, pid.title(), 4, share) for pid in winners))


def _standing(pid, gross, net, position, member=True):
    return ClassStanding(pid, pid.title(), member, gross, net, net - 72, position)


def test_total_skins_sums_shares_and_sorts():
    results = [
        _skin(1, "ann"),
        _skin(2, "ann", "bob", "cat"),
        _skin(3, "bob", "cat", "ann"),
        _skin(4, "bob", "cat", "dan"),
        _skin(5),
    ]
    totals = total_skins(results)
    assert [(entry.player_id, entry.points) for entry in totals] == [
        ("ann", 1.67),
        ("bob", 1.0),
        ("cat", 1.0),
        ("dan", 0.33),
    ]
    assert totals[0].player_name == "Ann"


def test_consolidated_corners():
    results = [
        CornerResult(1, (1, 2, 3), (CornerWinner("ann", "Ann", 12, 1.0),)),
        CornerResult(3, (7, 8, 9), (CornerWinner("bob", "Bob", 12, 0.5), CornerWinner("ann", "Ann", 12, 0.5))),
    ]
    totals = consolidated_corners(results)
    assert [(entry.player_id, entry.points) for entry in totals] == [("ann", 1.5), ("bob", 0.5)]


def test_empty_totals():
    assert total_skins([]) == []
    assert consolidated_corners([]) == []


def test_announcement_names_first_and_second():
    result = ClassResults(
        PlayerClass.A,
        (_standing("mike", 78, 71, 1), _standing("harry", 82, 72, 2, member=False)),
    )
    announcement = announce_class(result)
    lines = announcement.message.split("\n")
    assert lines[0] == "Class A Winners"
    assert lines[2] == "First Place winner is Mike (Member) - Gross 78, Net 71"
    assert lines[3] == "Second Place winner is Harry (Guest) - Gross 82, Net 72"
    assert len(lines) == 4
    assert not announcement.decided_by_gross
    assert announcement.second.player_id == "harry"


def test_announcement_notes_gross_tie_breaker():
    result = ClassResults(
        PlayerClass.SENIOR,
        (_standing("frank", 88, 72, 1), _standing("george", 91, 72, 1)),
    )
    announcement = announce_class(result)
    assert announcement.decided_by_gross
    assert announcement.message.splitlines()[0] == "Class Senior Winners"
    assert announcement.message.endswith("Tie-breaker: net scores tied at 72, decided by gross score.")


def test_single_player_class_has_no_second():
    announcement = announce_class(ClassResults(PlayerClass.C, (_standing("dave", 102, 77, 1),)))
    assert announcement.second is None
    assert "Second Place" not in announcement.message


def test_winner_announcements_skip_empty_classes():
    results = [
        ClassResults(PlayerClass.A, ()),
        ClassResults(PlayerClass.B, (_standing("bob", 92, 74, 1),)),
    ]
    announcements = winner_announcements(results)
    assert [entry.classification for entry in announcements] == [PlayerClass.B]


def test_sort_players_alphabetically(make_player):
    players = [make_player("b"), make_player("C"), make_player("a")]
    assert [player.player_id for player in sort_players_alphabetically(players)] == ["a", "b", "C"]


def test_tournament_stats(make_player, make_card):
    players = (
        make_player("a", skins=True, corners=False),
        make_player("b", classification=PlayerClass.B, skins=False, member=False),
        make_player("c", classification=PlayerClass.B, skins=False, corners=False),
    )
    tournament = Tournament("T-001", "Club Day", "2025-07-04", "pebble-beach", players)
    cards = {
        "a": make_card(players[0], [4] * 18),
        "b": make_card(players[1], [5, 5]),
        "c": make_card(players[2], []),
    }
    stats = tournament_stats(tournament, cards)
    assert stats.total_players == 3
    assert (stats.members, stats.guests) == (2, 1)
    assert stats.players_by_class == {"A": 1, "B": 2}
    assert (stats.skins_players, stats.corners_players) == (1, 1)
    assert stats.players_with_scores == 2
    assert stats.completed_cards == 1
