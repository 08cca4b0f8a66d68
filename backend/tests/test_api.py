import inspect

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from config import settings
from main import app
from services.engine import registry
from services.errors import (
    ComputationInvariantViolation,
    InputValidationError,
    ServiceException,
    service_exception_handler,
)

client = TestClient(app)

pytestmark = pytest.mark.api

JOB = {
    "id": "job-1",
    "title": "Backend Developer",
    "location": "Boston, MA",
    "growth_trajectory": "high_growth",
    "employment_type": "full_time",
    "required_skills": [{"name": "Python", "required_level": 4}],
}

STRONG = {
    "id": "strong",
    "skills": [{"name": "Python", "proficiency_level": 5}],
    "location_flexibility": "remote",
    "employment_type_preference": "full_time",
    "education_score": 80,
    "experience_score": 60,
}

WEAK = {
    "id": "weak",
    "location_preference": "Chicago",
    "employment_type_preference": "part_time",
}

# No precomputed scores: soft 100, education 100, experience 65 once analysed
RAW = {
    "id": "raw",
    "field_of_study": "Business",
    "skills": [{"name": "Leadership", "category": "soft", "proficiency_level": 5}],
    "education": {"level": "master", "gpa": 4.0},
    "experience": [{"years": 3, "relevant": True, "leadership": True}],
}


@pytest.fixture(autouse=True)
def fresh_registry():
    registry.clear()
    yield
    registry.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["policy_version"] == "1.0"


def test_compatibility():
    response = client.post("/compatibility", json={"student": STRONG, "target": JOB})
    assert response.status_code == 200
    data = response.json()
    # 40 + 16 + 9 + 10 + 10 + 3.75
    assert data["total_score"] == 89
    assert data["student_id"] == "strong"
    assert data["target_id"] == "job-1"
    assert set(data["breakdown"]) == {
        "skills", "education", "experience", "location", "availability", "cultural_fit",
    }
    assert "Strong skills alignment with job requirements" in data["reasons"]


def test_compatibility_without_target():
    response = client.post("/compatibility", json={"student": STRONG})
    assert response.status_code == 200
    assert response.json()["breakdown"]["skills"] == 75


def test_compatibility_missing_student_id():
    response = client.post("/compatibility", json={"student": {"skills": []}, "target": JOB})
    assert response.status_code == 422


def test_rank():
    response = client.post(
        "/rank",
        json={"students": [WEAK, STRONG, dict(STRONG, id="twin")], "target": JOB},
    )
    assert response.status_code == 200
    data = response.json()
    assert [r["student_id"] for r in data["results"]] == ["strong", "twin"]
    assert data["total_candidates"] == 3
    assert data["stats"]["high_compatibility"] == 2


def test_rank_limit_applies_after_stats():
    response = client.post(
        "/rank",
        json={"students": [STRONG, dict(STRONG, id="twin")], "target": JOB, "limit": 1},
    )
    data = response.json()
    assert [r["student_id"] for r in data["results"]] == ["strong"]
    assert data["stats"]["high_compatibility"] == 2


def test_rank_rejects_oversized_pool(monkeypatch):
    monkeypatch.setattr(settings, "max_pool_size", 1)
    response = client.post("/rank", json={"students": [STRONG, WEAK], "target": JOB})
    assert response.status_code == 400
    assert response.json()["type"] == "InputValidationError"


def test_opportunities():
    other = {"id": "job-2", "required_skills": [{"name": "Java"}], "employment_type": "contract"}
    response = client.post(
        "/opportunities",
        json={"student": STRONG, "jobs": [other, JOB], "min_threshold": 60},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["student_id"] == "strong"
    assert data["total_jobs"] == 2
    assert [r["target_id"] for r in data["results"]] == ["job-1"]


def test_pathways():
    student = {"id": "s-1", "field_of_study": "Computer Science", "soft_skills_score": 80}
    response = client.post("/pathways", json={"student": student})
    assert response.status_code == 200
    data = response.json()
    assert [p["id"] for p in data["pathways"]] == [
        "direct_entry", "skill_development", "advanced_education", "entrepreneurial",
    ]
    assert data["bias_check"]["bias_found"] is False
    assert data["labor_market_insights"][0]["type"] == "opportunity"


def test_pathways_with_market_override():
    response = client.post(
        "/pathways",
        json={"student": {"id": "s-1"}, "labor_market": {"growth_rate": 1.5}},
    )
    data = response.json()
    assert "alternative_field" in [p["id"] for p in data["pathways"]]


def test_pathways_gender_flag():
    student = {"id": "s-2", "gender": "female", "field_of_study": "Computer Science"}
    data = client.post("/pathways", json={"student": student}).json()
    assert data["bias_check"]["bias_found"] is True
    assert data["bias_check"]["flags"][0]["type"] == "gender"
    assert data["bias_check"]["confidence"] == 0.8


def test_raw_profile_scored_before_pathways():
    data = client.post("/pathways", json={"student": RAW}).json()
    pathways = {p["id"]: p for p in data["pathways"]}
    assert "entrepreneurial" in pathways
    assert pathways["advanced_education"]["feasibility_score"] == 80
    assert pathways["direct_entry"]["feasibility_score"] == 90


def test_raw_profile_scored_before_compatibility():
    data = client.post("/compatibility", json={"student": RAW, "target": JOB}).json()
    assert data["breakdown"]["education"] == 100
    assert data["breakdown"]["experience"] == 65
    assert "Relevant work experience" in data["reasons"]


def test_raw_profiles_scored_before_ranking():
    response = client.post(
        "/rank",
        json={"students": [RAW], "target": JOB, "min_threshold": 0},
    )
    result = response.json()["results"][0]
    assert result["breakdown"]["education"] == 100
    assert result["breakdown"]["experience"] == 65


def test_supplied_scores_win_over_analysis():
    student = dict(RAW, education_score=30)
    data = client.post("/compatibility", json={"student": student, "target": JOB}).json()
    assert data["breakdown"]["education"] == 30
    assert data["breakdown"]["experience"] == 65


@pytest.mark.parametrize("path", ["/compatibility", "/rank", "/opportunities", "/pathways"])
def test_scoring_routes_are_sync(path):
    route = next(r for r in app.routes if getattr(r, "path", None) == path)
    assert not inspect.iscoroutinefunction(route.endpoint)


def test_profile_analyze():
    student = {
        "id": "s-1",
        "skills": [{"name": "Python", "proficiency_level": 4}],
        "education": {"level": "master", "gpa": 3.0},
    }
    response = client.post("/profile/analyze", json={"student": student})
    assert response.status_code == 200
    data = response.json()
    assert data["technical_skills_score"] == 80
    assert data["education_score"] == 90
    assert data["strengths"] == ["Python"]


def test_labor_market_lookup():
    response = client.get("/labor-market/Computer Science")
    assert response.status_code == 200
    data = response.json()
    assert data["data"]["job_availability"] == "high"
    assert len(data["insights"]) == 2


def test_labor_market_unknown_field_uses_general():
    data = client.get("/labor-market/astrology").json()
    assert data["data"]["field"] == "astrology"
    assert data["data"]["avg_salary_entry"] == 45000


class TestServiceExceptionHandler:
    def setup_method(self):
        probe = FastAPI()
        probe.add_exception_handler(ServiceException, service_exception_handler)

        @probe.get("/bad-input")
        async def bad_input():
            raise InputValidationError("student profile is missing an id")

        @probe.get("/broken")
        async def broken():
            raise ComputationInvariantViolation("total score 104 outside [0, 100]")

        self.client = TestClient(probe)

    def test_input_error_is_400(self):
        response = self.client.get("/bad-input")
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "student profile is missing an id",
            "type": "InputValidationError",
        }

    def test_invariant_violation_is_500(self):
        response = self.client.get("/broken")
        assert response.status_code == 500
        assert response.json()["type"] == "ComputationInvariantViolation"
