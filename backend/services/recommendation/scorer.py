"""Scorer: bounded similarity between one profile and one listing.

The final score is a weighted linear combination of four sub-scores:

    skill     mean of profile_weight * listing_weight over overlapping skills
    domain    the profile's interest weight for the listing domain
    location  soft penalty when location scores are far apart
    level     fixed preference for intermediate postings

Match reasons are derived separately and never affect the score.
"""

from models.schemas.feature_vectors import ListingVector, ProfileVector
from models.schemas.ranked_result import MatchBreakdown

# Sub-score weights (sum to 1.0)
W_SKILL = 0.40
W_DOMAIN = 0.25
W_LOCATION = 0.20
W_LEVEL = 0.15

NEUTRAL_DOMAIN_SCORE = 0.5  # no interest entry for the listing domain

LOCATION_TOLERANCE = 0.3
LOCATION_MATCH_SCORE = 1.0
LOCATION_MISMATCH_SCORE = 0.7

PREFERRED_LEVEL = 2  # intermediate
PREFERRED_LEVEL_SCORE = 1.0
OTHER_LEVEL_SCORE = 0.8

# Reason thresholds
STRONG_SKILL_WEIGHT = 0.7
STRONG_INTEREST_SCORE = 0.8
MAX_REASON_SKILLS = 2


def _overlapping_skills(profile_vec: ProfileVector, listing_vec: ListingVector) -> list[str]:
    """Required skills the student has, in the listing's order."""
    return [s for s in listing_vec.skills if s in profile_vec.skills]


def skill_score(profile_vec: ProfileVector, listing_vec: ListingVector) -> float:
    overlap = _overlapping_skills(profile_vec, listing_vec)
    if not overlap:
        return 0.0
    total = sum(profile_vec.skills[s] * listing_vec.skills[s] for s in overlap)
    return total / len(overlap)


def domain_score(profile_vec: ProfileVector, listing_vec: ListingVector) -> float:
    return profile_vec.interests.get(listing_vec.domain, NEUTRAL_DOMAIN_SCORE)


def _location_matches(profile_vec: ProfileVector, listing_vec: ListingVector) -> bool:
    gap = abs(profile_vec.location_affinity - listing_vec.location_desirability)
    return gap < LOCATION_TOLERANCE


def location_score(profile_vec: ProfileVector, listing_vec: ListingVector) -> float:
    if _location_matches(profile_vec, listing_vec):
        return LOCATION_MATCH_SCORE
    return LOCATION_MISMATCH_SCORE


def level_score(listing_vec: ListingVector) -> float:
    # Independent of the profile and of the distance from intermediate.
    if listing_vec.level == PREFERRED_LEVEL:
        return PREFERRED_LEVEL_SCORE
    return OTHER_LEVEL_SCORE


def score_breakdown(profile_vec: ProfileVector, listing_vec: ListingVector) -> MatchBreakdown:
    return MatchBreakdown(
        skill=skill_score(profile_vec, listing_vec),
        domain=domain_score(profile_vec, listing_vec),
        location=location_score(profile_vec, listing_vec),
        level=level_score(listing_vec),
    )


def combine(breakdown: MatchBreakdown) -> float:
    """Weighted sum of the sub-scores, clamped to [0, 1]."""
    raw = (
        W_SKILL * breakdown.skill
        + W_DOMAIN * breakdown.domain
        + W_LOCATION * breakdown.location
        + W_LEVEL * breakdown.level
    )
    return min(1.0, max(0.0, raw))


def match_reasons(profile_vec: ProfileVector, listing_vec: ListingVector) -> list[str]:
    """Up to three advisory explanations, in a fixed order."""
    reasons: list[str] = []

    strong = [
        s for s in _overlapping_skills(profile_vec, listing_vec)
        if profile_vec.skills[s] > STRONG_SKILL_WEIGHT
    ]
    if strong:
        reasons.append(f"Strong match in {', '.join(strong[:MAX_REASON_SKILLS])}")

    if domain_score(profile_vec, listing_vec) > STRONG_INTEREST_SCORE:
        reasons.append(f"Aligns with your interest in {listing_vec.domain}")

    if _location_matches(profile_vec, listing_vec):
        reasons.append("Good location match")

    return reasons


def score(profile_vec: ProfileVector, listing_vec: ListingVector) -> tuple[float, list[str]]:
    """Return (score in [0, 1], match reasons) for one profile/listing pair."""
    final = combine(score_breakdown(profile_vec, listing_vec))
    return final, match_reasons(profile_vec, listing_vec)
