"""Turn hole and tee listings, hand-entered or from the course API, into a Course."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from golfday.golf_api import fetch_course
from golfday.models import HOLES_PER_ROUND, Course, Hole, InvalidCourseError, Tee

logger = logging.getLogger(__name__)
PAR_RANGE = range(3, 6)


def build_course(
    course_id: str,
    name: str,
    holes: Iterable[dict[str, Any]],
    tees: Iterable[dict[str, Any]] = (),
) -> Course:
    """
    Validate a course layout.

    Holes must run 1-18 with par 3-5 and use every handicap index from 1 to
    18 exactly once. Tees need a positive slope.
    """
    layout = sorted(
        (
            Hole(int(hole["number"]), int(hole["par"]), int(hole["handicap_index"]))
            for hole in holes
        ),
        key=lambda hole: hole.number,
    )
    if len(layout) != HOLES_PER_ROUND:
        raise InvalidCourseError(f"{name} has {len(layout)} holes, expected {HOLES_PER_ROUND}.")
    if [hole.number for hole in layout] != list(range(1, HOLES_PER_ROUND + 1)):
        raise InvalidCourseError(f"{name} hole numbers must run 1-{HOLES_PER_ROUND}.")
    if sorted(hole.handicap_index for hole in layout) != list(range(1, HOLES_PER_ROUND + 1)):
        raise InvalidCourseError(f"{name} hole handicap indexes must use 1-{HOLES_PER_ROUND} once each.")
    for hole in layout:
        if hole.par not in PAR_RANGE:
            raise InvalidCourseError(f"Hole {hole.number} on {name} has par {hole.par}.")

    tee_list: list[Tee] = []
    for tee in tees:
        slope = int(tee["slope"])
        if slope <= 0:
            raise InvalidCourseError(f"Tee {tee.get('name')} on {name} has slope {slope}.")
        tee_list.append(Tee(str(tee["name"]).strip(), slope, float(tee.get("rating") or 72)))
    return Course(course_id=str(course_id), name=name.strip(), holes=tuple(layout), tees=tuple(tee_list))


def course_from_api(course: dict[str, Any], genders: Iterable[str] = ("male", "female")) -> Course:
    tees_payload = course.get("tees") or {}
    holes: list[dict[str, Any]] = []
    tees: list[dict[str, Any]] = []
    for gender in genders:
        for tee in tees_payload.get(gender) or []:
            slope = tee.get("slope_rating")
            if not slope:
                logger.warning("Skipping tee %s on course %s: no slope", tee.get("tee_name"), course.get("id"))
                continue
            tee_holes = tee.get("holes") or []
            if not holes and len(tee_holes) == HOLES_PER_ROUND:
                holes = [
                    {
                        "number": idx,
                        "par": hole.get("par") or 4,
                        "handicap_index": hole.get("handicap") or idx,
                    }
                    for idx, hole in enumerate(tee_holes, 1)
                ]
            name = tee.get("tee_name") or f"Tee {len(tees) + 1}"
            if any(existing["name"].lower() == name.lower() for existing in tees):
                name = f"{name} ({gender})"
            tees.append({"name": name, "slope": slope, "rating": tee.get("course_rating")})
    title = course.get("course_name") or course.get("club_name") or f"Course {course.get('id')}"
    return build_course(str(course.get("id")), title, holes, tees)


def import_course(course_id: int, api_key: str) -> Course:
    imported = course_from_api(fetch_course(course_id, api_key))
    logger.info("Imported %s with %d tees", imported.name, len(imported.tees))
    return imported
