"""Heuristic bias checks over a generated pathway set.

Three independent rules (gender, socioeconomic, age) inspect the draft
pathways together with the student's attributes. Adjustments only touch
pathways that already exist; a missing pathway is never created.

The age rule has no adjustment: it flags and recommends, nothing more.
"""

import logging
from typing import Callable, Sequence

from models.schemas.bias import BiasCheckResult, BiasFlag, BiasType
from models.schemas.pathway import Pathway, PathwayKind
from models.schemas.student_profile import StudentProfile
from services.policy import DEFAULT_BIAS_POLICY, BiasPolicy

logger = logging.getLogger(__name__)


def _find(pathways: Sequence[Pathway], kind: PathwayKind) -> Pathway | None:
    return next((p for p in pathways if p.id == kind), None)


def _clamp_feasibility(score: int) -> int:
    return max(0, min(100, score))


# ---------------------------------------------------------------------------
# Detection rules
# ---------------------------------------------------------------------------

def check_gender_bias(
    pathways: Sequence[Pathway],
    student: StudentProfile,
    policy: BiasPolicy = DEFAULT_BIAS_POLICY,
) -> BiasFlag:
    detected = False
    if student.gender and student.field_of_study:
        gender = student.gender.strip().lower()
        field = student.field_of_study.lower()
        if gender == "female" and any(f in field for f in policy.male_coded_fields):
            entrepreneurial = _find(pathways, PathwayKind.ENTREPRENEURIAL)
            detected = (
                entrepreneurial is None
                or entrepreneurial.feasibility_score < policy.gender_entrepreneurial_threshold
            )

    return BiasFlag(
        type=BiasType.GENDER,
        detected=detected,
        message=(
            "Potential gender bias: Entrepreneurial opportunities may be "
            "underrepresented for women in tech"
        ) if detected else "",
        recommendation=(
            "Ensure equal representation of leadership and entrepreneurial opportunities"
        ) if detected else None,
    )


def check_socioeconomic_bias(
    pathways: Sequence[Pathway],
    student: StudentProfile,
    policy: BiasPolicy = DEFAULT_BIAS_POLICY,
) -> BiasFlag:
    socio_score = student.socioeconomic_score
    if socio_score is None:
        socio_score = policy.default_socioeconomic_score

    detected = False
    if socio_score < policy.socioeconomic_score_threshold:
        advanced = _find(pathways, PathwayKind.ADVANCED_EDUCATION)
        detected = (
            advanced is not None
            and advanced.feasibility_score < policy.socioeconomic_advanced_education_threshold
        )

    return BiasFlag(
        type=BiasType.SOCIOECONOMIC,
        detected=detected,
        message=(
            "Potential socioeconomic bias: Advanced education pathway may be "
            "unfairly penalized due to financial constraints"
        ) if detected else "",
        recommendation=(
            "Include financial aid and scholarship information for advanced education options"
        ) if detected else None,
    )


def check_age_bias(
    pathways: Sequence[Pathway],
    student: StudentProfile,
    current_year: int,
    policy: BiasPolicy = DEFAULT_BIAS_POLICY,
) -> BiasFlag:
    detected = False
    if student.graduation_year is not None:
        years_post_grad = current_year - student.graduation_year
        if years_post_grad > policy.age_years_since_graduation:
            entrepreneurial = _find(pathways, PathwayKind.ENTREPRENEURIAL)
            detected = (
                entrepreneurial is not None
                and entrepreneurial.feasibility_score < policy.age_entrepreneurial_threshold
            )

    return BiasFlag(
        type=BiasType.AGE,
        detected=detected,
        message=(
            "Potential age bias: Entrepreneurial opportunities may be "
            "undervalued for experienced professionals"
        ) if detected else "",
        recommendation=(
            "Consider experience as an asset for entrepreneurial ventures"
        ) if detected else None,
    )


def check_bias(
    pathways: Sequence[Pathway],
    student: StudentProfile,
    current_year: int,
    policy: BiasPolicy = DEFAULT_BIAS_POLICY,
) -> BiasCheckResult:
    """Run all rules. Only fired flags are returned."""
    candidates = [
        check_gender_bias(pathways, student, policy),
        check_socioeconomic_bias(pathways, student, policy),
        check_age_bias(pathways, student, current_year, policy),
    ]
    flags = [f for f in candidates if f.detected]
    bias_found = bool(flags)

    return BiasCheckResult(
        bias_found=bias_found,
        flags=flags,
        confidence=policy.confidence_flagged if bias_found else policy.confidence_clean,
    )


# ---------------------------------------------------------------------------
# Adjustments
# ---------------------------------------------------------------------------

def _adjust_gender(pathway: Pathway, policy: BiasPolicy) -> Pathway:
    if pathway.id != PathwayKind.ENTREPRENEURIAL:
        return pathway
    return pathway.model_copy(update={
        "feasibility_score": _clamp_feasibility(
            pathway.feasibility_score + policy.gender_entrepreneurial_boost
        ),
        "bias_adjustment": "Adjusted for gender representation",
    })


def _adjust_socioeconomic(pathway: Pathway, policy: BiasPolicy) -> Pathway:
    if pathway.id != PathwayKind.ADVANCED_EDUCATION:
        return pathway
    return pathway.model_copy(update={
        "feasibility_score": _clamp_feasibility(
            pathway.feasibility_score + policy.socioeconomic_advanced_education_boost
        ),
        "financial_support_options": list(policy.financial_support_options),
        "bias_adjustment": "Adjusted for socioeconomic access",
    })


def _no_adjustment(pathway: Pathway, policy: BiasPolicy) -> Pathway:
    # TODO: age flags have no adjustment rule yet; decide on an entrepreneurial boost for experienced graduates
    return pathway


_ADJUSTERS: dict[BiasType, Callable[[Pathway, BiasPolicy], Pathway]] = {
    BiasType.GENDER: _adjust_gender,
    BiasType.SOCIOECONOMIC: _adjust_socioeconomic,
    BiasType.AGE: _no_adjustment,
}
if set(_ADJUSTERS) != set(BiasType):
    raise RuntimeError("Every BiasType needs an adjustment rule")


def adjust_for_bias(
    pathways: Sequence[Pathway],
    bias_check: BiasCheckResult,
    policy: BiasPolicy = DEFAULT_BIAS_POLICY,
) -> list[Pathway]:
    """Apply the adjustment for each fired flag. Returns a new list.

    Feasibility is clamped to [0, 100] after every adjustment.
    """
    adjusted = list(pathways)
    for flag in bias_check.flags:
        if not flag.detected:
            continue
        adjuster = _ADJUSTERS[flag.type]
        if adjuster is _no_adjustment:
            logger.info("%s bias flagged, no adjustment rule", flag.type.value)
            continue
        adjusted = [adjuster(p, policy) for p in adjusted]
        logger.info("Applied %s bias adjustment", flag.type.value)
    return adjusted
