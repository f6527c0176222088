from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Union

HOLES_PER_ROUND = 18


class ScoringError(ValueError):
    pass


class InvalidCourseError(ScoringError):
    pass


class InvalidScoreError(ScoringError):
    pass


class StatusTransitionError(ScoringError):
    pass


class UnknownEntityError(ScoringError):
    pass


class PlayerClass(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    SENIOR = "Senior"


class TournamentStatus(str, Enum):
    SETUP = "setup"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ScoringFormat(str, Enum):
    STROKE = "stroke"
    STABLEFORD = "stableford"


class ScoreBasis(str, Enum):
    GROSS = "gross"
    NET = "net"


@dataclass(frozen=True)
class Unscored:
    """A hole nobody has entered strokes for yet."""

    @property
    def strokes(self) -> None:
        return None


@dataclass(frozen=True)
class Scored:
    strokes: int


UNSCORED = Unscored()
Gross = Union[Scored, Unscored]


@dataclass(frozen=True)
class Hole:
    number: int
    par: int
    handicap_index: int


@dataclass(frozen=True)
class Tee:
    name: str
    slope: int
    rating: float = 72.0


@dataclass(frozen=True)
class Course:
    course_id: str
    name: str
    holes: tuple[Hole, ...]
    tees: tuple[Tee, ...] = ()

    def hole(self, number: int) -> Hole:
        if not 1 <= number <= len(self.holes):
            raise InvalidScoreError(f"Hole {number} is not on {self.name}.")
        return self.holes[number - 1]

    def tee(self, name: str) -> Tee:
        normalized = name.strip().lower()
        for tee in self.tees:
            if tee.name.lower() == normalized:
                return tee
        raise UnknownEntityError(f"Tee '{name}' is not defined for {self.name}.")


@dataclass(frozen=True)
class Player:
    player_id: str
    name: str
    handicap_index: float
    course_handicap: int
    classification: PlayerClass
    tee: str = ""
    is_member: bool = True
    plays_skins: bool = False
    plays_corners: bool = False
    age: int | None = None


@dataclass(frozen=True)
class Tournament:
    tournament_id: str
    name: str
    date: str | None
    course_id: str | None
    players: tuple[Player, ...] = ()
    skins_enabled: bool = False
    corners_enabled: bool = False
    scoring_format: ScoringFormat = ScoringFormat.STROKE
    status: TournamentStatus = TournamentStatus.SETUP
    skins_basis: ScoreBasis = ScoreBasis.GROSS
    corners_basis: ScoreBasis = ScoreBasis.GROSS

    def player(self, player_id: str) -> Player:
        for player in self.players:
            if player.player_id == player_id:
                return player
        raise UnknownEntityError(f"Player '{player_id}' is not registered for {self.name}.")


@dataclass(frozen=True)
class HoleScore:
    player_id: str
    hole: int
    par: int
    handicap_index: int
    gross: Gross = UNSCORED
    gets_stroke: bool = False
    stableford_points: int | None = None

    @property
    def is_scored(self) -> bool:
        return isinstance(self.gross, Scored)

    @property
    def net(self) -> int | None:
        if not isinstance(self.gross, Scored):
            return None
        return self.gross.strokes - (1 if self.gets_stroke else 0)

    def score_for(self, basis: ScoreBasis) -> int | None:
        if basis is ScoreBasis.NET:
            return self.net
        return self.gross.strokes


Scorecard = tuple[HoleScore, ...]


@dataclass(frozen=True)
class ScoreTotals:
    gross: int = 0
    net: int = 0
    to_par: int = 0


@dataclass(frozen=True)
class RoundTotals:
    front_nine: ScoreTotals
    back_nine: ScoreTotals
    total: ScoreTotals
    holes_played: int = 0
    stableford_total: int | None = None


@dataclass(frozen=True)
class SkinWinner:
    player_id: str
    player_name: str
    score: int
    skin_points: float


@dataclass(frozen=True)
class SkinResult:
    hole: int
    winners: tuple[SkinWinner, ...] = ()
    # Reserved for a carry-over variant; the base engine never fills it.
    pushes: int | None = None


@dataclass(frozen=True)
class CornerWinner:
    player_id: str
    player_name: str
    total_score: int
    points: float


@dataclass(frozen=True)
class CornerResult:
    corner_number: int
    holes: tuple[int, ...]
    winners: tuple[CornerWinner, ...]


@dataclass(frozen=True)
class ClassStanding:
    player_id: str
    player_name: str
    is_member: bool
    gross_score: int
    net_score: int
    to_par: int
    position: int


@dataclass(frozen=True)
class ClassResults:
    classification: PlayerClass
    players: tuple[ClassStanding, ...]


@dataclass(frozen=True)
class TournamentResults:
    tournament_id: str
    class_results: tuple[ClassResults, ...]
    skin_results: tuple[SkinResult, ...]
    corner_results: tuple[CornerResult, ...]
    last_updated: datetime


@dataclass(frozen=True)
class PointsTotal:
    player_id: str
    player_name: str
    points: float


@dataclass(frozen=True)
class WinnerAnnouncement:
    classification: PlayerClass
    first: ClassStanding
    second: ClassStanding | None
    decided_by_gross: bool
    message: str


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


@dataclass(frozen=True)
class TournamentStats:
    total_players: int
    members: int
    guests: int
    players_by_class: dict[str, int] = field(default_factory=dict)
    skins_players: int = 0
    corners_players: int = 0
    players_with_scores: int = 0
    completed_cards: int = 0
