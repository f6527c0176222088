from __future__ import annotations

from pydantic import BaseModel, Field

from golfday.models import PlayerClass, ScoreBasis, ScoringFormat, TournamentStatus


class HolePayload(BaseModel):
    number: int
    par: int
    handicap_index: int


class TeePayload(BaseModel):
    name: str
    slope: int
    rating: float = Field(default=72.0, allow_inf_nan=False)


class CoursePayload(BaseModel):
    course_id: str
    name: str
    holes: list[HolePayload]
    tees: list[TeePayload] = Field(default_factory=list)


class TournamentPayload(BaseModel):
    name: str
    date: str | None = None
    course_id: str | None = None
    skins_enabled: bool = False
    corners_enabled: bool = False
    scoring_format: ScoringFormat = ScoringFormat.STROKE
    skins_basis: ScoreBasis = ScoreBasis.GROSS
    corners_basis: ScoreBasis = ScoreBasis.GROSS


class PlayerPayload(BaseModel):
    name: str
    handicap_index: float = Field(allow_inf_nan=False)
    tee: str
    age: int | None = None
    is_member: bool = True
    plays_skins: bool = False
    plays_corners: bool = False
    classification: PlayerClass | None = None


class ScoreEntryPayload(BaseModel):
    player_id: str
    hole: int
    strokes: int


class PinPayload(BaseModel):
    pin: str


class PlayerSnapshot(BaseModel):
    player_id: str
    name: str
    handicap_index: float = Field(allow_inf_nan=False)
    course_handicap: int
    classification: PlayerClass
    tee: str = ""
    is_member: bool = True
    plays_skins: bool = False
    plays_corners: bool = False
    age: int | None = None


class TournamentSnapshot(BaseModel):
    tournament_id: str
    name: str
    date: str | None = None
    course_id: str | None = None
    players: list[PlayerSnapshot] = Field(default_factory=list)
    skins_enabled: bool = False
    corners_enabled: bool = False
    scoring_format: ScoringFormat = ScoringFormat.STROKE
    status: TournamentStatus = TournamentStatus.SETUP
    skins_basis: ScoreBasis = ScoreBasis.GROSS
    corners_basis: ScoreBasis = ScoreBasis.GROSS


class SnapshotPayload(BaseModel):
    tournament: TournamentSnapshot
    course: CoursePayload
    # player_id -> gross strokes for holes 1-18, null where unscored
    scorecards: dict[str, list[int | None]] = Field(default_factory=dict)
