"""Ranker: score every candidate listing against one profile and keep the best.

Flow:
    profile    ─ vectorize_profile  ─┐
    candidates ─ vectorize_listing ──┼─ score_breakdown / combine / match_reasons
                                     └─ stable sort by score (desc) → top_n
"""

import logging

from models.schemas.internship_listing import InternshipListing
from models.schemas.ranked_result import RankedResult
from models.schemas.student_profile import StudentProfile
from services.recommendation.listing_vectorizer import vectorize_listing
from services.recommendation.profile_vectorizer import vectorize_profile
from services.recommendation.scorer import combine, match_reasons, score_breakdown

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 12


def rank(
    profile: StudentProfile,
    candidates: list[InternshipListing],
    top_n: int = DEFAULT_TOP_N,
) -> list[RankedResult]:
    """Rank candidates for a profile, best first, at most ``top_n`` results.

    Equal scores keep their relative input order. ``top_n <= 0`` yields an
    empty list.
    """
    if top_n <= 0 or not candidates:
        return []

    profile_vec = vectorize_profile(profile)

    scored: list[RankedResult] = []
    for listing in candidates:
        listing_vec = vectorize_listing(listing)
        breakdown = score_breakdown(profile_vec, listing_vec)
        scored.append(RankedResult(
            listing=listing,
            score=combine(breakdown),
            reasons=match_reasons(profile_vec, listing_vec),
            breakdown=breakdown,
        ))

    # sorted() is stable, also with reverse=True
    ranked = sorted(scored, key=lambda r: r.score, reverse=True)[:top_n]

    logger.debug(
        "Ranked %d candidates for profile %s: returning %d (top score %.3f)",
        len(candidates), profile.id, len(ranked), ranked[0].score,
    )
    return ranked
