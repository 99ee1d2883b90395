"""Ranking input: a student's declared skills, interests and home location."""

from pydantic import BaseModel, Field, field_validator


class StudentProfile(BaseModel):
    """A student profile as supplied by the portal.

    ``skills`` and ``interests`` are ordered: earlier entries are stronger
    (more experience, more interest). Only ``skills``, ``interests`` and
    ``location`` take part in scoring; the rest is carried through.
    """
    id: str
    name: str = ""
    email: str = ""
    course: str = ""
    year: int = 0
    skills: list[str] = []
    interests: list[str] = []
    location: str = ""
    completed_internships: list[str] = Field(default=[], alias="completedInternships")
    nep_credits_earned: int = Field(default=0, alias="nepCreditsEarned")

    model_config = {"populate_by_name": True}

    @field_validator("skills", "interests", "completed_internships", mode="before")
    @classmethod
    def _none_to_empty_list(cls, v):
        return [] if v is None else v

    @field_validator("name", "email", "course", "location", mode="before")
    @classmethod
    def _none_to_empty_str(cls, v):
        return "" if v is None else v
