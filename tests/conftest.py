import pytest

from golfday.course_sync import build_course
from golfday.models import Player, PlayerClass
from golfday.scorecard import enter_score, open_scorecard

PEBBLE_HOLES = [
    (4, 5), (5, 13), (4, 3), (4, 9), (3, 17), (5, 1), (3, 15), (4, 7), (4, 11),
    (4, 4), (4, 14), (3, 18), (4, 2), (5, 8), (4, 12), (4, 6), (3, 16), (5, 10),
]
PEBBLE_TEES = [
    {"name": "Red", "slope": 116, "rating": 70.3},
    {"name": "White", "slope": 120, "rating": 72.1},
    {"name": "Blue", "slope": 126, "rating": 74.8},
]


def pebble_hole_rows() -> list[dict]:
    return [
        {"number": number, "par": par, "handicap_index": handicap}
        for number, (par, handicap) in enumerate(PEBBLE_HOLES, 1)
    ]


@pytest.fixture
def course():
    return build_course("pebble-beach", "Pebble Beach Golf Links", pebble_hole_rows(), PEBBLE_TEES)


@pytest.fixture
def make_player():
    def _make(
        player_id: str,
        course_handicap: int = 0,
        classification: PlayerClass = PlayerClass.A,
        *,
        skins: bool = True,
        corners: bool = True,
        member: bool = True,
    ) -> Player:
        return Player(
            player_id=player_id,
            name=f"Player {player_id}",
            handicap_index=float(course_handicap),
            course_handicap=course_handicap,
            classification=classification,
            tee="White",
            is_member=member,
            plays_skins=skins,
            plays_corners=corners,
        )

    return _make


@pytest.fixture
def make_card(course):
    def _make(player: Player, strokes: list, stableford: bool = False):
        card = open_scorecard(player, course)
        for hole, gross in enumerate(strokes, 1):
            if gross is not None:
                card = enter_score(card, hole, gross, stableford=stableford)
        return card

    return _make
