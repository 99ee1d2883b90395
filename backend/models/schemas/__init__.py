"""Pydantic contracts for the recommendation engine."""

from models.schemas.student_profile import StudentProfile
from models.schemas.internship_listing import InternshipListing
from models.schemas.feature_vectors import ListingVector, ProfileVector
from models.schemas.ranked_result import (
    InternshipRecommendation,
    MatchBreakdown,
    RankedResult,
)

__all__ = [
    "StudentProfile",
    "InternshipListing",
    "ProfileVector",
    "ListingVector",
    "MatchBreakdown",
    "RankedResult",
    "InternshipRecommendation",
]
