"""Profile analysis: derive the 0-100 profile scores the engines consume.

Scores are simple linear mappings of the raw profile:
    technical/soft skills  mean proficiency (0-5) x 20
    education              level map + GPA bonus
    experience             per-entry years/relevance/leadership, averaged
    socioeconomic          support score from income, family, transport
"""

import logging

import numpy as np

from models.schemas.profile_analysis import ProfileAnalysis, SocioeconomicRecommendation
from models.schemas.student_profile import (
    Education,
    ExperienceEntry,
    Socioeconomic,
    StudentProfile,
    StudentSkill,
)
from services.policy import round_half_up

logger = logging.getLogger(__name__)

EDUCATION_LEVEL_SCORES = {
    "high_school": 20,
    "associate": 40,
    "bachelor": 60,
    "master": 80,
    "phd": 100,
}
_UNKNOWN_EDUCATION_SCORE = 20

STRENGTH_MIN_LEVEL = 4
IMPROVEMENT_MAX_LEVEL = 2
LOW_SUPPORT_THRESHOLD = 40


def skill_category_score(skills: list[StudentSkill], category: str) -> int:
    levels = [s.proficiency_level for s in skills if s.category == category]
    if not levels:
        return 0
    return round_half_up(float(np.mean(levels)) * 20)


def calculate_education_score(education: Education | None) -> int:
    if education is None:
        return _UNKNOWN_EDUCATION_SCORE
    score = float(EDUCATION_LEVEL_SCORES.get(education.level or "", _UNKNOWN_EDUCATION_SCORE))
    if education.gpa:
        # 2.0-4.0 GPA scales onto a 0-20 bonus
        score += max(0.0, min(20.0, (education.gpa - 2.0) * 10))
    return min(100, round_half_up(score))


def calculate_experience_score(experience: list[ExperienceEntry]) -> int:
    if not experience:
        return 0

    per_entry = []
    for exp in experience:
        score = min(30.0, exp.years * 10)
        if exp.relevant:
            score += 20
        if exp.leadership:
            score += 15
        per_entry.append(score)

    return min(100, round_half_up(float(np.mean(per_entry))))


def calculate_socioeconomic_score(factors: Socioeconomic | None) -> int:
    """Support score: higher means more support available."""
    factors = factors or Socioeconomic()
    score = 50

    if factors.income_level == "high":
        score += 20
    elif factors.income_level == "low":
        score -= 10

    if factors.family_support == "high":
        score += 15
    elif factors.family_support == "low":
        score -= 15

    if factors.transportation == "personal":
        score += 10
    elif factors.transportation == "limited":
        score -= 10

    if factors.financial_constraints:
        score -= 20

    return max(0, min(100, score))


def socioeconomic_recommendations(
    factors: Socioeconomic | None,
    support_score: int,
) -> list[SocioeconomicRecommendation]:
    factors = factors or Socioeconomic()
    recs: list[SocioeconomicRecommendation] = []

    if factors.financial_constraints:
        recs.append(SocioeconomicRecommendation(
            type="financial_support",
            message="Consider exploring scholarship opportunities and paid internships",
            priority="high",
        ))

    if factors.transportation == "limited":
        recs.append(SocioeconomicRecommendation(
            type="remote_opportunities",
            message="Focus on remote work opportunities and online skill development",
            priority="medium",
        ))

    if support_score < LOW_SUPPORT_THRESHOLD:
        recs.append(SocioeconomicRecommendation(
            type="mentorship",
            message="Connect with mentorship programs for additional guidance and support",
            priority="high",
        ))

    return recs


def analyze_profile(student: StudentProfile) -> ProfileAnalysis:
    socio_score = calculate_socioeconomic_score(student.socioeconomic)

    analysis = ProfileAnalysis(
        student_id=student.id,
        technical_skills_score=skill_category_score(student.skills, "technical"),
        soft_skills_score=skill_category_score(student.skills, "soft"),
        education_score=calculate_education_score(student.education),
        experience_score=calculate_experience_score(student.experience),
        socioeconomic_score=socio_score,
        location_flexibility=student.location_flexibility,
        strengths=[s.name for s in student.skills if s.proficiency_level >= STRENGTH_MIN_LEVEL],
        improvements=[s.name for s in student.skills if s.proficiency_level <= IMPROVEMENT_MAX_LEVEL],
        recommendations=socioeconomic_recommendations(student.socioeconomic, socio_score),
    )
    logger.debug(
        "Profile %s analysed: tech=%d soft=%d edu=%d exp=%d socio=%d",
        student.id,
        analysis.technical_skills_score,
        analysis.soft_skills_score,
        analysis.education_score,
        analysis.experience_score,
        analysis.socioeconomic_score,
    )
    return analysis


def with_profile_scores(student: StudentProfile) -> StudentProfile:
    """Return a copy with any absent precomputed score filled from analysis.

    Scores already present on the profile are kept as supplied.
    """
    analysis = analyze_profile(student)
    updates = {}
    for name in (
        "technical_skills_score",
        "soft_skills_score",
        "education_score",
        "experience_score",
        "socioeconomic_score",
    ):
        if getattr(student, name) is None:
            updates[name] = float(getattr(analysis, name))
    return student.model_copy(update=updates)
