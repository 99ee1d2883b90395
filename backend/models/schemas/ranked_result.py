"""Ranker output: scored listings with match explanations."""

from pydantic import BaseModel

from models.schemas.internship_listing import InternshipListing


class MatchBreakdown(BaseModel):
    """The four sub-scores combined into the final match score."""
    skill: float = 0.0
    domain: float = 0.0
    location: float = 0.0
    level: float = 0.0


class InternshipRecommendation(InternshipListing):
    """A listing flattened together with its match score and reasons."""
    match_score: float = 0.0  # 0.0-1.0
    match_reasons: list[str] = []


class RankedResult(BaseModel):
    listing: InternshipListing
    score: float = 0.0  # 0.0-1.0
    reasons: list[str] = []  # at most 3, advisory only
    breakdown: MatchBreakdown = MatchBreakdown()

    def to_recommendation(self) -> InternshipRecommendation:
        return InternshipRecommendation(
            **self.listing.model_dump(),
            match_score=self.score,
            match_reasons=list(self.reasons),
        )
