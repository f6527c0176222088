import logging
import os
from typing import Any

import requests

logger = logging.getLogger(__name__)
API_BASE = "https://api.golfcourseapi.com/v1"


class GolfApiError(Exception):
    pass


def _headers(api_key: str) -> dict[str, str]:
    key = api_key or os.getenv("GOLF_API_KEY", "")
    if not key:
        raise GolfApiError("Missing Golf Course API key.")
    return {"Authorization": f"Key {key}"}


def _get(path: str, api_key: str, params: dict[str, str] | None = None, timeout: int = 15) -> Any:
    url = f"{API_BASE}{path}"
    try:
        response = requests.get(url, params=params, headers=_headers(api_key), timeout=timeout)
    except requests.RequestException as exc:
        raise GolfApiError(f"Request to {url} failed: {exc}") from exc
    if response.status_code != 200:
        raise GolfApiError(f"{url} returned {response.status_code}: {response.text}")
    return response.json()


def search_courses(query: str, api_key: str) -> list[dict[str, Any]]:
    if not query.strip():
        return []
    payload = _get("/search", api_key, params={"search_query": query.strip()})
    courses = payload.get("courses") if isinstance(payload, dict) else None
    return [
        {
            "id": course.get("id"),
            "club_name": course.get("club_name"),
            "course_name": course.get("course_name"),
            "location": course.get("location") or {},
        }
        for course in courses or []
        if isinstance(course, dict)
    ]


def fetch_course(course_id: int, api_key: str) -> dict[str, Any]:
    payload = _get(f"/courses/{course_id}", api_key, timeout=20)
    course = payload.get("course") if isinstance(payload, dict) else None
    if not isinstance(course, dict) or "id" not in course:
        raise GolfApiError(f"Course fetch returned unexpected payload for id {course_id}.")
    logger.info("Fetched course %s (%s)", course_id, course.get("course_name"))
    return course
