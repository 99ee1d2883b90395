"""Portal-facing entry point: ranked listings with their match score and reasons."""

import logging

from config import settings
from models.schemas.internship_listing import InternshipListing
from models.schemas.ranked_result import InternshipRecommendation
from models.schemas.student_profile import StudentProfile
from services.recommendation.ranker import rank

logger = logging.getLogger(__name__)


def recommend_internships(
    student: StudentProfile,
    internships: list[InternshipListing],
    top_n: int | None = None,
) -> list[InternshipRecommendation]:
    """Recommend internships for a student, best match first.

    ``top_n`` defaults to ``settings.recommendation_top_n``.
    """
    if top_n is None:
        top_n = settings.recommendation_top_n

    results = rank(student, internships, top_n=top_n)
    logger.info(
        "Recommended %d of %d internships for student %s",
        len(results), len(internships), student.id,
    )
    return [r.to_recommendation() for r in results]
