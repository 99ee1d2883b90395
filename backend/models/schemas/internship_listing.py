"""Ranking input: an internship posting from the listing catalog."""

from pydantic import BaseModel, Field, field_validator


class InternshipListing(BaseModel):
    """An internship posting.

    ``skills`` is ordered by criticality (first = most critical).
    ``level`` is one of beginner/intermediate/advanced and ``work_mode``
    one of remote/hybrid/onsite, but any string is accepted; unknown
    values fall back to defaults at vectorization time.
    """
    id: str
    title: str = ""
    company: str = ""
    domain: str = ""
    location: str = ""
    stipend: float = 0
    duration: str = ""
    skills: list[str] = []
    description: str = ""
    eligibility: list[str] = []
    career_track: str = Field(default="", alias="careerTrack")
    nep_credits: int = Field(default=0, alias="nepCredits")
    deadline: str = ""
    work_mode: str = Field(default="onsite", alias="type")
    level: str = "intermediate"
    source_url: str = Field(default="", alias="sourceURL")

    model_config = {"populate_by_name": True}

    @field_validator("skills", "eligibility", mode="before")
    @classmethod
    def _none_to_empty_list(cls, v):
        return [] if v is None else v

    @field_validator(
        "title", "company", "domain", "location", "duration", "description",
        "career_track", "deadline", "work_mode", "level", "source_url",
        mode="before",
    )
    @classmethod
    def _none_to_empty_str(cls, v):
        return "" if v is None else v
