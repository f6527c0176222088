from __future__ import annotations

from golfday.models import Tournament, ValidationIssue

MIN_SIDE_GAME_PLAYERS = 2


def validate_tournament(tournament: Tournament) -> list[ValidationIssue]:
    """
    Collect every configuration problem; an empty list means the setup is
    consistent. Nothing here stops scoring or results from being computed.
    """
    issues: list[ValidationIssue] = []
    if not (tournament.name or "").strip():
        issues.append(ValidationIssue("name", "Tournament name is required."))
    if not (tournament.date or "").strip():
        issues.append(ValidationIssue("date", "Tournament date is required."))
    if not (tournament.course_id or "").strip():
        issues.append(ValidationIssue("course", "A course must be selected."))
    if not tournament.players:
        issues.append(ValidationIssue("players", "At least one player must be registered."))
    if tournament.skins_enabled:
        skins_players = sum(1 for player in tournament.players if player.plays_skins)
        if skins_players < MIN_SIDE_GAME_PLAYERS:
            issues.append(
                ValidationIssue(
                    "skins",
                    f"Skins needs at least {MIN_SIDE_GAME_PLAYERS} players, {skins_players} entered.",
                )
            )
    if tournament.corners_enabled:
        corners_players = sum(1 for player in tournament.players if player.plays_corners)
        if corners_players < MIN_SIDE_GAME_PLAYERS:
            issues.append(
                ValidationIssue(
                    "corners",
                    f"Corners needs at least {MIN_SIDE_GAME_PLAYERS} players, {corners_players} entered.",
                )
            )
    return issues
