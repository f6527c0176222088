#!/usr/bin/env python3
"""Recompute standings, skins and corners from an exported tournament snapshot."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from golfday.consolidation import consolidated_corners, total_skins, winner_announcements
from golfday.models import ScoringError
from golfday.results import compute_results
from golfday.schemas import SnapshotPayload
from golfday.settings import load_settings
from golfday.snapshot import load_snapshot
from golfday.validation import validate_tournament


def _print_text(tournament, results) -> None:
    print(f"{tournament.name} ({tournament.date or 'no date'}) - {tournament.status.value}")
    for issue in validate_tournament(tournament):
        print(f"  ! {issue.field}: {issue.message}")
    for announcement in winner_announcements(results.class_results):
        print()
        print(announcement.message)
    if results.skin_results:
        print("\nSkins:")
        for entry in total_skins(results.skin_results):
            print(f"  {entry.player_name}: {entry.points}")
    if results.corner_results:
        print("\nCorners:")
        for entry in consolidated_corners(results.corner_results):
            print(f"  {entry.player_name}: {entry.points}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute results from a tournament export.")
    parser.add_argument("snapshot", type=Path, help="JSON file written by the export endpoint.")
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Print announcements and totals as text, or the full results as JSON.",
    )
    args = parser.parse_args()

    try:
        payload = SnapshotPayload.model_validate_json(args.snapshot.read_text(encoding="utf-8"))
        tournament, _course, cards = load_snapshot(payload, load_settings().max_strokes_per_hole)
    except (OSError, ValidationError, ScoringError) as exc:
        raise SystemExit(f"Could not load {args.snapshot}: {exc}")

    results = compute_results(tournament, cards)
    if args.format == "json":
        json.dump(jsonable_encoder(results), sys.stdout, indent=2)
        print()
    else:
        _print_text(tournament, results)


if __name__ == "__main__":
    main()
