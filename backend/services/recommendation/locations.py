"""Location desirability table shared by the profile and listing vectorizers."""

LOCATION_SCORES: dict[str, float] = {
    "Bangalore": 0.95,
    "Mumbai": 0.90,
    "Pune": 0.85,
    "Delhi": 0.80,
    "Hyderabad": 0.80,
    "Chennai": 0.75,
    "Remote": 1.00,
}

DEFAULT_LOCATION_SCORE = 0.6


def lookup_location_score(location: str) -> float:
    """Score for a location label; exact match, unknown labels get the default."""
    return LOCATION_SCORES.get(location, DEFAULT_LOCATION_SCORE)
