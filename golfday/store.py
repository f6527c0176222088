"""In-memory home for courses, tournaments and scorecards."""

from __future__ import annotations

import itertools
import logging
from dataclasses import replace
from datetime import datetime

from golfday.handicap import register_player
from golfday.models import (
    Course,
    InvalidCourseError,
    Player,
    PlayerClass,
    ScoreBasis,
    Scorecard,
    ScoringFormat,
    StatusTransitionError,
    Tournament,
    TournamentResults,
    TournamentStatus,
    UnknownEntityError,
)
from golfday.results import compute_results
from golfday.scorecard import MAX_STROKES, clear_scorecard, enter_score, open_scorecard

logger = logging.getLogger(__name__)

NEXT_STATUS = {
    TournamentStatus.SETUP: TournamentStatus.IN_PROGRESS,
    TournamentStatus.IN_PROGRESS: TournamentStatus.COMPLETED,
}


def advance_status(tournament: Tournament) -> Tournament:
    next_status = NEXT_STATUS.get(tournament.status)
    if next_status is None:
        raise StatusTransitionError(f"{tournament.name} is already {tournament.status.value}.")
    return replace(tournament, status=next_status)


class TournamentStore:
    def __init__(self, max_strokes: int = MAX_STROKES) -> None:
        self.max_strokes = max_strokes
        self._courses: dict[str, Course] = {}
        self._tournaments: dict[str, Tournament] = {}
        self._cards: dict[str, dict[str, Scorecard]] = {}
        self._tournament_ids = itertools.count(1)
        self._player_ids = itertools.count(1)

    def add_course(self, course: Course) -> Course:
        """Add a course, or replace one no tournament has been set up on yet."""
        in_use = sorted(
            tournament.tournament_id
            for tournament in self._tournaments.values()
            if tournament.course_id == course.course_id
        )
        if in_use:
            raise InvalidCourseError(
                f"Course '{course.course_id}' is already used by {', '.join(in_use)} and cannot be replaced."
            )
        if course.course_id in self._courses:
            logger.info("Replacing course %s", course.course_id)
        self._courses[course.course_id] = course
        return course

    def course(self, course_id: str | None) -> Course:
        if not course_id or course_id not in self._courses:
            raise UnknownEntityError(f"Course '{course_id}' not found.")
        return self._courses[course_id]

    def courses(self) -> list[Course]:
        return sorted(self._courses.values(), key=lambda course: course.name)

    def create_tournament(
        self,
        name: str,
        date: str | None,
        course_id: str | None,
        *,
        skins_enabled: bool = False,
        corners_enabled: bool = False,
        scoring_format: ScoringFormat = ScoringFormat.STROKE,
        skins_basis: ScoreBasis = ScoreBasis.GROSS,
        corners_basis: ScoreBasis = ScoreBasis.GROSS,
    ) -> Tournament:
        if course_id:
            self.course(course_id)
        tournament = Tournament(
            tournament_id=f"T-{next(self._tournament_ids):03d}",
            name=name.strip(),
            date=date,
            course_id=course_id,
            skins_enabled=skins_enabled,
            corners_enabled=corners_enabled,
            scoring_format=scoring_format,
            skins_basis=skins_basis,
            corners_basis=corners_basis,
        )
        self._tournaments[tournament.tournament_id] = tournament
        self._cards[tournament.tournament_id] = {}
        logger.info("Created tournament %s (%s)", tournament.tournament_id, tournament.name)
        return tournament

    def tournament(self, tournament_id: str) -> Tournament:
        if tournament_id not in self._tournaments:
            raise UnknownEntityError(f"Tournament '{tournament_id}' not found.")
        return self._tournaments[tournament_id]

    def tournaments(self) -> list[Tournament]:
        return list(self._tournaments.values())

    def register_player(
        self,
        tournament_id: str,
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
        tournament = self.tournament(tournament_id)
        if tournament.status is TournamentStatus.COMPLETED:
            raise StatusTransitionError(f"{tournament.name} is completed; the roster is closed.")
        course = self.course(tournament.course_id)
        player = register_player(
            course,
            f"player-{next(self._player_ids)}",
            name,
            handicap_index,
            tee,
            age=age,
            is_member=is_member,
            plays_skins=plays_skins,
            plays_corners=plays_corners,
            classification=classification,
        )
        self._tournaments[tournament_id] = replace(tournament, players=tournament.players + (player,))
        self._cards[tournament_id][player.player_id] = open_scorecard(player, course)
        logger.info(
            "Registered %s in %s: course handicap %d, class %s",
            player.name,
            tournament_id,
            player.course_handicap,
            player.classification.value,
        )
        return player

    def advance(self, tournament_id: str) -> Tournament:
        tournament = advance_status(self.tournament(tournament_id))
        self._tournaments[tournament_id] = tournament
        logger.info("Tournament %s is now %s", tournament_id, tournament.status.value)
        return tournament

    def record_score(self, tournament_id: str, player_id: str, hole: int, strokes: int) -> Scorecard:
        tournament = self.tournament(tournament_id)
        if tournament.status is not TournamentStatus.IN_PROGRESS:
            raise StatusTransitionError(
                f"Scores can only be entered while {tournament.name} is in progress."
            )
        tournament.player(player_id)
        card = enter_score(
            self._cards[tournament_id][player_id],
            hole,
            strokes,
            stableford=tournament.scoring_format is ScoringFormat.STABLEFORD,
            max_strokes=self.max_strokes,
        )
        self._cards[tournament_id][player_id] = card
        logger.debug("%s: %s scored %d on hole %d", tournament_id, player_id, strokes, hole)
        return card

    def scorecard(self, tournament_id: str, player_id: str) -> Scorecard:
        self.tournament(tournament_id).player(player_id)
        return self._cards[tournament_id][player_id]

    def cards(self, tournament_id: str) -> dict[str, Scorecard]:
        self.tournament(tournament_id)
        return dict(self._cards[tournament_id])

    def clear_scores(self, tournament_id: str) -> int:
        cards = self.cards(tournament_id)
        for player_id, card in cards.items():
            self._cards[tournament_id][player_id] = clear_scorecard(card)
        logger.info("Cleared scores for %d players in %s", len(cards), tournament_id)
        return len(cards)

    def reset(self, tournament_id: str) -> Tournament:
        self.clear_scores(tournament_id)
        tournament = replace(self.tournament(tournament_id), status=TournamentStatus.SETUP)
        self._tournaments[tournament_id] = tournament
        logger.info("Reset tournament %s to setup", tournament_id)
        return tournament

    def results(self, tournament_id: str, now: datetime | None = None) -> TournamentResults:
        return compute_results(self.tournament(tournament_id), self.cards(tournament_id), now)
