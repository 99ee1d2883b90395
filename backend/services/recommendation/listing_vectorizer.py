"""Listing Vectorizer: InternshipListing -> ListingVector."""

from models.schemas.feature_vectors import ListingVector
from models.schemas.internship_listing import InternshipListing
from services.recommendation.locations import lookup_location_score
from services.recommendation.weighting import position_weights

REQUIRED_SKILL_DECAY = 0.4  # required-skill weights run 1.0 down towards 0.6

LEVEL_ORDINALS: dict[str, int] = {
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
}
DEFAULT_LEVEL_ORDINAL = 2

REMOTE_WORK_MODE = "remote"
REMOTE_LOCATION_SCORE = 1.0


def level_ordinal(level: str) -> int:
    return LEVEL_ORDINALS.get(level, DEFAULT_LEVEL_ORDINAL)


def location_desirability(location: str, work_mode: str) -> float:
    """Remote postings are fully desirable wherever they are nominally based."""
    if work_mode == REMOTE_WORK_MODE:
        return REMOTE_LOCATION_SCORE
    return lookup_location_score(location)


def vectorize_listing(listing: InternshipListing) -> ListingVector:
    return ListingVector(
        listing_id=listing.id,
        skills=position_weights(listing.skills, REQUIRED_SKILL_DECAY),
        domain=listing.domain,
        level=level_ordinal(listing.level),
        location_desirability=location_desirability(listing.location, listing.work_mode),
    )
