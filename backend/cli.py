"""Rank internship listings for a student profile from JSON files.

Usage:
    internship-match --profile student.json --listings internships.json [--top-n 5] [--output out.json]

The profile file holds one JSON object, the listings file a JSON array. Both
accept the portal's camelCase keys (``careerTrack``, ``type``, ...).

Exit codes: 0 success, 1 unreadable file or invalid JSON, 2 invalid records.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from config import settings
from models.schemas.internship_listing import InternshipListing
from models.schemas.student_profile import StudentProfile
from services.internship_recommender import recommend_internships

logger = logging.getLogger(__name__)

_listings_adapter = TypeAdapter(list[InternshipListing])


def _read_json(path: Path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank internships for a student profile")
    parser.add_argument("--profile", required=True, type=Path, help="Student profile JSON object")
    parser.add_argument("--listings", required=True, type=Path, help="JSON array of internship listings")
    parser.add_argument(
        "--top-n",
        type=int,
        default=None,
        help=f"Number of results (default: {settings.recommendation_top_n})",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write results here instead of stdout")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        raw_profile = _read_json(args.profile)
        raw_listings = _read_json(args.listings)
    except OSError as e:
        logger.error("Could not read input file: %s", e)
        return 1
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON input: %s", e)
        return 1

    try:
        student = StudentProfile.model_validate(raw_profile)
        internships = _listings_adapter.validate_python(raw_listings)
    except ValidationError as e:
        logger.error("Invalid input records:\n%s", e)
        return 2

    logger.info("Loaded profile %s and %d listings", student.id, len(internships))

    recommendations = recommend_internships(student, internships, top_n=args.top_n)
    payload = json.dumps(
        [r.model_dump(mode="json") for r in recommendations],
        indent=2,
        ensure_ascii=False,
    )

    if args.output is None:
        print(payload)
    else:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Wrote %d recommendations to %s", len(recommendations), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
