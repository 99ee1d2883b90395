"""Shared test configuration, pytest markers and portal-shaped fixtures."""

import pytest

from models.schemas.internship_listing import InternshipListing
from models.schemas.student_profile import StudentProfile


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end ranking scenarios on realistic portal records"
    )


@pytest.fixture
def scenario_profile() -> StudentProfile:
    return StudentProfile(
        id="s1",
        name="Priya Sharma",
        skills=["React", "Python"],
        interests=["Data Science"],
        location="Bangalore",
    )


@pytest.fixture
def listing_a() -> InternshipListing:
    return InternshipListing(
        id="A",
        title="Data Science Intern",
        company="Flipkart",
        skills=["React", "Python"],
        domain="Data Science",
        level="intermediate",
        location="Bangalore",
        work_mode="onsite",
    )


@pytest.fixture
def listing_b() -> InternshipListing:
    return InternshipListing(
        id="B",
        title="Finance Analyst Intern",
        company="HDFC Bank",
        skills=["Excel"],
        domain="Finance",
        level="advanced",
        location="Chennai",
        work_mode="onsite",
    )


@pytest.fixture
def catalog() -> list[InternshipListing]:
    """A small mixed catalog of twenty listings."""
    domains = ["Data Science", "Web Development", "Finance", "Marketing"]
    levels = ["beginner", "intermediate", "advanced"]
    locations = ["Bangalore", "Mumbai", "Chennai", "Delhi", "Jaipur"]
    modes = ["onsite", "hybrid", "remote"]
    skill_pool = ["Python", "React", "SQL", "Excel", "Figma", "Java"]
    return [
        InternshipListing(
            id=f"int-{i}",
            title=f"Intern {i}",
            skills=[skill_pool[(i + j) % len(skill_pool)] for j in range(1 + i % 3)],
            domain=domains[i % len(domains)],
            level=levels[i % len(levels)],
            location=locations[i % len(locations)],
            work_mode=modes[i % len(modes)],
        )
        for i in range(20)
    ]
