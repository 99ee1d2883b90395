"""Weighted feature maps derived from profiles and listings.

Weights are not range-checked here; the scorer clamps its output.
"""

from pydantic import BaseModel


class ProfileVector(BaseModel):
    profile_id: str = ""
    skills: dict[str, float] = {}  # (0.5, 1.0], first skill = 1.0
    interests: dict[str, float] = {}  # (0.7, 1.0], first interest = 1.0
    location_affinity: float = 0.6


class ListingVector(BaseModel):
    listing_id: str = ""
    skills: dict[str, float] = {}  # (0.6, 1.0], first required skill = 1.0
    domain: str = ""
    level: int = 2  # beginner=1, intermediate=2, advanced=3
    location_desirability: float = 0.6
