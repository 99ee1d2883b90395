"""Profile Vectorizer: StudentProfile -> ProfileVector."""

from models.schemas.feature_vectors import ProfileVector
from models.schemas.student_profile import StudentProfile
from services.recommendation.locations import lookup_location_score
from services.recommendation.weighting import position_weights

SKILL_DECAY = 0.5  # skill weights run 1.0 down towards 0.5
INTEREST_DECAY = 0.3  # interest weights run 1.0 down towards 0.7


def vectorize_profile(profile: StudentProfile) -> ProfileVector:
    return ProfileVector(
        profile_id=profile.id,
        skills=position_weights(profile.skills, SKILL_DECAY),
        interests=position_weights(profile.interests, INTEREST_DECAY),
        location_affinity=lookup_location_score(profile.location),
    )
