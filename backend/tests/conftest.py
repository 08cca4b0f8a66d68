"""Shared test configuration, pytest markers and profile factories."""

from datetime import date

import pytest

from models.schemas.job_requirement import JobRequirement
from models.schemas.student_profile import StudentProfile

TEST_YEAR = 2025


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the HTTP surface through TestClient"
    )


@pytest.fixture
def fixed_clock():
    """Clock pinned to mid-2025 so year-relative rules are deterministic."""
    return lambda: date(TEST_YEAR, 6, 1)


@pytest.fixture
def make_student():
    def _make(**overrides) -> StudentProfile:
        data = {"id": "student-1"}
        data.update(overrides)
        return StudentProfile(**data)
    return _make


@pytest.fixture
def make_job():
    def _make(**overrides) -> JobRequirement:
        data = {"id": "job-1"}
        data.update(overrides)
        return JobRequirement(**data)
    return _make


@pytest.fixture
def startup_job(make_job):
    """High-growth Boston startup hiring a full-time Python developer."""
    return make_job(
        location="Boston, MA",
        company_size="startup",
        growth_trajectory="high_growth",
        employment_type="full_time",
        required_skills=[{"name": "Python", "required_level": 4}],
    )


@pytest.fixture
def strong_student(make_student):
    """Recent graduate who scores 89 against ``startup_job`` in 2025."""
    return make_student(
        id="strong",
        skills=[{"name": "Python", "proficiency_level": 5}],
        location_flexibility="remote",
        employment_type_preference="full_time",
        graduation_year=2024,
        education_score=80,
        experience_score=60,
    )
