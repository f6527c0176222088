import logging
from typing import Any, Type, TypeVar

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from golfday import golf_api
from golfday.consolidation import (
    consolidated_corners,
    sort_players_alphabetically,
    total_skins,
    tournament_stats,
    winner_announcements,
)
from golfday.course_sync import import_course
from golfday.handicap import strokes_received
from golfday.models import ScoringError, Scorecard, Tournament, UnknownEntityError
from golfday.schemas import (
    CoursePayload,
    PinPayload,
    PlayerPayload,
    ScoreEntryPayload,
    TournamentPayload,
)
from golfday.scorecard import summarize
from golfday.settings import load_settings
from golfday.snapshot import course_from_payload, course_to_payload, export_snapshot
from golfday.store import TournamentStore
from golfday.validation import validate_tournament

logger = logging.getLogger(__name__)
PayloadModel = TypeVar("PayloadModel", bound=BaseModel)

app = FastAPI(title="Golf Day Scoring")
settings = load_settings()
store = TournamentStore(max_strokes=settings.max_strokes_per_hole)


class PayloadError(Exception):
    def __init__(self, details: list[dict[str, Any]]) -> None:
        super().__init__("Invalid payload")
        self.details = details


@app.exception_handler(PayloadError)
async def _payload_error(request: Request, exc: PayloadError):
    return JSONResponse({"error": "Invalid payload", "details": exc.details}, status_code=422)


@app.exception_handler(UnknownEntityError)
async def _not_found(request: Request, exc: UnknownEntityError):
    return JSONResponse({"error": str(exc)}, status_code=404)


@app.exception_handler(ScoringError)
async def _scoring_error(request: Request, exc: ScoringError):
    return JSONResponse({"error": str(exc)}, status_code=422)


@app.exception_handler(golf_api.GolfApiError)
async def _golf_api_error(request: Request, exc: golf_api.GolfApiError):
    logger.warning("Course API failure: %s", exc)
    return JSONResponse({"error": str(exc)}, status_code=502)


async def _payload(request: Request, model: Type[PayloadModel]) -> PayloadModel:
    try:
        return model.model_validate(await request.json())
    except ValidationError as exc:
        raise PayloadError(exc.errors(include_url=False, include_context=False, include_input=False)) from exc
    except ValueError as exc:
        raise PayloadError([{"msg": f"Body is not valid JSON: {exc}"}]) from exc


def _check_pin(pin: str) -> JSONResponse | None:
    if pin != settings.scoring_pin:
        return JSONResponse({"error": "Invalid PIN"}, status_code=403)
    return None


def _tournament_summary(tournament: Tournament) -> dict:
    return {
        "tournament_id": tournament.tournament_id,
        "name": tournament.name,
        "date": tournament.date,
        "course_id": tournament.course_id,
        "status": tournament.status.value,
        "skins_enabled": tournament.skins_enabled,
        "corners_enabled": tournament.corners_enabled,
        "scoring_format": tournament.scoring_format.value,
        "skins_basis": tournament.skins_basis.value,
        "corners_basis": tournament.corners_basis.value,
        "players": jsonable_encoder(sort_players_alphabetically(tournament.players)),
    }


def _scorecard_view(tournament: Tournament, player_id: str, card: Scorecard) -> dict:
    player = tournament.player(player_id)
    course = store.course(tournament.course_id)
    totals = summarize(card)
    return {
        "player": jsonable_encoder(player),
        "strokes_received": strokes_received(player.course_handicap, course),
        "holes": [
            {
                "hole": hole.hole,
                "par": hole.par,
                "handicap_index": hole.handicap_index,
                "gross": hole.gross.strokes,
                "net": hole.net,
                "gets_stroke": hole.gets_stroke,
                "stableford_points": hole.stableford_points,
            }
            for hole in card
        ],
        "totals": jsonable_encoder(totals),
    }


@app.get("/health")
async def health():
    return {"status": "ok", "tournaments": len(store.tournaments())}


@app.post("/api/courses")
async def api_add_course(request: Request):
    payload = await _payload(request, CoursePayload)
    course = store.add_course(course_from_payload(payload))
    return course_to_payload(course)


@app.get("/api/courses")
async def api_courses():
    return {"courses": [course_to_payload(course) for course in store.courses()]}


@app.get("/api/courses/search")
async def api_course_search(query: str):
    return {"courses": golf_api.search_courses(query, settings.golf_api_key)}


@app.get("/api/courses/{course_id}")
async def api_course(course_id: str):
    return course_to_payload(store.course(course_id))


@app.post("/api/courses/import/{course_id}")
async def api_course_import(course_id: int):
    course = store.add_course(import_course(course_id, settings.golf_api_key))
    return course_to_payload(course)


@app.post("/api/tournaments")
async def api_create_tournament(request: Request):
    payload = await _payload(request, TournamentPayload)
    tournament = store.create_tournament(
        payload.name,
        payload.date,
        payload.course_id,
        skins_enabled=payload.skins_enabled,
        corners_enabled=payload.corners_enabled,
        scoring_format=payload.scoring_format,
        skins_basis=payload.skins_basis,
        corners_basis=payload.corners_basis,
    )
    return _tournament_summary(tournament)


@app.get("/api/tournaments/{tournament_id}")
async def api_tournament(tournament_id: str):
    return _tournament_summary(store.tournament(tournament_id))


@app.post("/api/tournaments/{tournament_id}/players")
async def api_register_player(tournament_id: str, request: Request):
    payload = await _payload(request, PlayerPayload)
    player = store.register_player(
        tournament_id,
        payload.name,
        payload.handicap_index,
        payload.tee,
        age=payload.age,
        is_member=payload.is_member,
        plays_skins=payload.plays_skins,
        plays_corners=payload.plays_corners,
        classification=payload.classification,
    )
    return jsonable_encoder(player)


@app.post("/api/tournaments/{tournament_id}/advance")
async def api_advance(tournament_id: str):
    return _tournament_summary(store.advance(tournament_id))


@app.post("/api/tournaments/{tournament_id}/scores")
async def api_enter_score(tournament_id: str, request: Request):
    payload = await _payload(request, ScoreEntryPayload)
    card = store.record_score(tournament_id, payload.player_id, payload.hole, payload.strokes)
    return _scorecard_view(store.tournament(tournament_id), payload.player_id, card)


@app.get("/api/tournaments/{tournament_id}/scorecards/{player_id}")
async def api_scorecard(tournament_id: str, player_id: str):
    card = store.scorecard(tournament_id, player_id)
    return _scorecard_view(store.tournament(tournament_id), player_id, card)


@app.get("/api/tournaments/{tournament_id}/results")
async def api_results(tournament_id: str):
    return jsonable_encoder(store.results(tournament_id))


@app.get("/api/tournaments/{tournament_id}/skins/totals")
async def api_skins_totals(tournament_id: str):
    results = store.results(tournament_id)
    return {"totals": jsonable_encoder(total_skins(results.skin_results))}


@app.get("/api/tournaments/{tournament_id}/corners/totals")
async def api_corners_totals(tournament_id: str):
    results = store.results(tournament_id)
    return {"totals": jsonable_encoder(consolidated_corners(results.corner_results))}


@app.get("/api/tournaments/{tournament_id}/announcements")
async def api_announcements(tournament_id: str):
    results = store.results(tournament_id)
    return {"announcements": jsonable_encoder(winner_announcements(results.class_results))}


@app.get("/api/tournaments/{tournament_id}/validation")
async def api_validation(tournament_id: str):
    issues = validate_tournament(store.tournament(tournament_id))
    return {"valid": not issues, "issues": jsonable_encoder(issues)}


@app.get("/api/tournaments/{tournament_id}/stats")
async def api_stats(tournament_id: str):
    tournament = store.tournament(tournament_id)
    return jsonable_encoder(tournament_stats(tournament, store.cards(tournament_id)))


@app.get("/api/tournaments/{tournament_id}/export")
async def api_export(tournament_id: str):
    tournament = store.tournament(tournament_id)
    cards = store.cards(tournament_id)
    snapshot = export_snapshot(tournament, store.course(tournament.course_id), cards)
    snapshot["results"] = jsonable_encoder(store.results(tournament_id))
    return snapshot


@app.post("/api/tournaments/{tournament_id}/clear-scores")
async def api_clear_scores(tournament_id: str, request: Request):
    payload = await _payload(request, PinPayload)
    denied = _check_pin(payload.pin)
    if denied:
        return denied
    cleared = store.clear_scores(tournament_id)
    return {"cleared": cleared}


@app.post("/api/tournaments/{tournament_id}/reset")
async def api_reset(tournament_id: str, request: Request):
    payload = await _payload(request, PinPayload)
    denied = _check_pin(payload.pin)
    if denied:
        return denied
    return _tournament_summary(store.reset(tournament_id))
