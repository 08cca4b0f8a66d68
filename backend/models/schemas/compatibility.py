"""Compatibility engine output: weighted score with factor breakdown."""

from pydantic import BaseModel


class ScoreBreakdown(BaseModel):
    """Per-factor sub-scores, each 0-100. Every factor is always present."""
    skills: int = 0
    education: int = 0
    experience: int = 0
    location: int = 0
    availability: int = 0
    cultural_fit: int = 0

    model_config = {"frozen": True}


class CompatibilityResult(BaseModel):
    """Score for one (student, employer/job) pair. Immutable once produced."""
    student_id: str
    target_id: str | None = None
    total_score: int = 0  # 0-100
    breakdown: ScoreBreakdown = ScoreBreakdown()
    reasons: list[str] = []
    concerns: list[str] = []

    model_config = {"frozen": True}


class MatchingStats(BaseModel):
    average_score: int = 0
    high_compatibility: int = 0  # >= 80
    medium_compatibility: int = 0  # 60-79
    low_compatibility: int = 0  # < 60
