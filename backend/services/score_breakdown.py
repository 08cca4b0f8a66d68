"""Per-factor sub-scores for student/employer compatibility.

Every function here is pure and maps its inputs onto an integer in [0, 100].
Weights are applied later by the compatibility engine.
"""

import logging
from typing import Sequence

from models.schemas.job_requirement import JobRequirement, RequiredSkill
from models.schemas.student_profile import StudentProfile, StudentSkill
from services.errors import ComputationInvariantViolation
from services.policy import DEFAULT_COMPATIBILITY_POLICY, CompatibilityPolicy, round_half_up

logger = logging.getLogger(__name__)


def check_score(name: str, value: float, strict: bool = False) -> int:
    """Guard a produced score: clamp into [0, 100] and log, or raise if strict."""
    score = round_half_up(value)
    if 0 <= score <= 100:
        return score
    if strict:
        raise ComputationInvariantViolation(f"{name} score {value!r} outside [0, 100]")
    logger.error("Score invariant violated: %s=%r, clamping", name, value)
    return max(0, min(100, score))


def skills_compatibility(
    student_skills: Sequence[StudentSkill],
    required_skills: Sequence[RequiredSkill],
    policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY,
) -> int:
    """Blend of required-skill coverage and proficiency against required level.

    The proficiency average divides by the number of *required* skills, so a
    missing skill drags the average down even when matched skills are strong.
    """
    if not required_skills:
        return policy.skills_no_requirements

    by_name = {}
    for skill in student_skills or []:
        # First entry wins on duplicate names
        by_name.setdefault(skill.name.lower(), skill)

    matched = 0
    proficiency_sum = 0.0
    for required in required_skills:
        skill = by_name.get(required.name.lower())
        if skill is None:
            continue
        matched += 1
        proficiency_sum += min(100.0, (skill.proficiency_level / required.required_level) * 100)

    total = len(required_skills)
    match_percentage = matched / total * 100
    avg_proficiency = proficiency_sum / total

    return round_half_up(
        match_percentage * policy.skills_match_weight
        + avg_proficiency * policy.skills_proficiency_weight
    )


def location_compatibility(
    student_location: str | None,
    flexibility: str | None,
    employer_location: str | None,
    policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY,
) -> int:
    if flexibility == "remote":
        return policy.location_remote
    if flexibility == "flexible":
        return policy.location_flexible

    student_loc = (student_location or "").strip().lower()
    employer_loc = (employer_location or "").strip().lower()
    if student_loc and employer_loc and student_loc in employer_loc:
        return policy.location_match
    return policy.location_mismatch


def availability_compatibility(
    student_preference: str | None,
    job_type: str | None,
    policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY,
) -> int:
    row = policy.availability_matrix.get(student_preference or "", {})
    return row.get(job_type or "", policy.availability_default)


def cultural_fit(
    student: StudentProfile,
    employer: JobRequirement | None,
    current_year: int,
    policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY,
) -> int:
    score = policy.cultural_base
    if employer is None:
        return score

    recent_grad = (
        student.graduation_year is not None
        and student.graduation_year >= current_year - policy.cultural_recent_grad_years
    )
    if employer.company_size == "startup" and recent_grad:
        score += policy.cultural_startup_bonus
    if employer.growth_trajectory == "high_growth":
        score += policy.cultural_high_growth_bonus

    return min(100, score)


def education_score(student: StudentProfile, policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY) -> int:
    """Precomputed education score, or the neutral default when absent."""
    if student.education_score is None:
        return policy.default_education_score
    return round_half_up(student.education_score)


def experience_score(student: StudentProfile, policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY) -> int:
    """Precomputed experience score, or the neutral default when absent."""
    if student.experience_score is None:
        return policy.default_experience_score
    return round_half_up(student.experience_score)
