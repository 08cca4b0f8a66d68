"""Compatibility Engine: weighted student/employer match scoring.

Flow:
    student + employer/job
      ├─ score_breakdown.*          → six sub-scores (0-100 each)
      ├─ Σ sub-score × weight       → total_score (rounded)
      └─ rule-based reasons/concerns (skills and experience only)

Ranking scores a pool independently per candidate, drops everything below the
minimum score and sorts descending. Python's sort is stable, so ties keep pool
order. The reverse direction (a student searching jobs) uses the identical
formula with the job on the employer side.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

from models.schemas.compatibility import CompatibilityResult, MatchingStats, ScoreBreakdown
from models.schemas.job_requirement import JobRequirement
from models.schemas.student_profile import StudentProfile
from services import score_breakdown as sb
from services.engine.base import BaseEngine
from services.policy import DEFAULT_COMPATIBILITY_POLICY, CompatibilityPolicy
from services.validation import coerce_requirement, coerce_student

logger = logging.getLogger(__name__)

StudentLike = StudentProfile | Mapping[str, Any]
TargetLike = JobRequirement | Mapping[str, Any] | None


class CompatibilityEngine(BaseEngine):
    engine_name = "compatibility"

    def __init__(
        self,
        policy: CompatibilityPolicy = DEFAULT_COMPATIBILITY_POLICY,
        strict_invariants: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.policy = policy
        self.strict_invariants = strict_invariants

    def load(self) -> None:
        total = sum(self.policy.weights.values())
        if abs(total - 1.0) > 1e-9:
            logger.warning("Compatibility weights sum to %.3f, not 1.0", total)

    def run(self, **kwargs: Any) -> CompatibilityResult:
        self.ensure_loaded()
        return self.compute(kwargs["student"], kwargs.get("target"))

    # ------------------------------------------------------------------
    # Single pair
    # ------------------------------------------------------------------

    def breakdown(self, student: StudentProfile, target: JobRequirement | None) -> ScoreBreakdown:
        policy = self.policy
        required = target.required_skills if target else []
        employer_location = target.location if target else None
        job_type = target.employment_type if target else "full_time"

        factors = {
            "skills": sb.skills_compatibility(student.skills, required, policy),
            "education": sb.education_score(student, policy),
            "experience": sb.experience_score(student, policy),
            "location": sb.location_compatibility(
                student.location_preference, student.location_flexibility, employer_location, policy
            ),
            "availability": sb.availability_compatibility(
                student.employment_type_preference, job_type, policy
            ),
            "cultural_fit": sb.cultural_fit(student, target, self.current_year, policy),
        }
        return ScoreBreakdown(**{
            name: sb.check_score(name, value, self.strict_invariants)
            for name, value in factors.items()
        })

    def compute(self, student: StudentLike, target: TargetLike = None) -> CompatibilityResult:
        """Score one (student, employer/job) pair."""
        student = coerce_student(student)
        target = coerce_requirement(target)
        policy = self.policy

        breakdown = self.breakdown(student, target)
        weights = policy.weights
        raw_total = sum(getattr(breakdown, name) * weight for name, weight in weights.items())
        total_score = sb.check_score("total", raw_total, self.strict_invariants)

        reasons: list[str] = []
        concerns: list[str] = []
        if breakdown.skills >= policy.strong_skills_threshold:
            reasons.append("Strong skills alignment with job requirements")
        elif breakdown.skills < policy.skills_gap_threshold:
            concerns.append("Skills gap may require additional training")
        if breakdown.experience >= policy.relevant_experience_threshold:
            reasons.append("Relevant work experience")

        logger.debug(
            "Compatibility %s -> %s: %d (skills=%d edu=%d exp=%d loc=%d avail=%d culture=%d)",
            student.id,
            target.id if target else None,
            total_score,
            breakdown.skills,
            breakdown.education,
            breakdown.experience,
            breakdown.location,
            breakdown.availability,
            breakdown.cultural_fit,
        )

        return CompatibilityResult(
            student_id=student.id,
            target_id=target.id if target else None,
            total_score=total_score,
            breakdown=breakdown,
            reasons=reasons,
            concerns=concerns,
        )

    # ------------------------------------------------------------------
    # Pools
    # ------------------------------------------------------------------

    def rank_candidates(
        self,
        students: Iterable[StudentLike],
        target: TargetLike = None,
        min_threshold: int | None = None,
    ) -> list[CompatibilityResult]:
        """Score every student against one target, filter and sort descending."""
        threshold = self.policy.min_match_score if min_threshold is None else min_threshold
        target = coerce_requirement(target)

        results = [self.compute(student, target) for student in students]
        kept = [r for r in results if r.total_score >= threshold]
        logger.info(
            "Ranked %d candidates for %s: %d at or above %d",
            len(results), target.id if target else None, len(kept), threshold,
        )
        return sorted(kept, key=lambda r: r.total_score, reverse=True)

    def find_opportunities(
        self,
        student: StudentLike,
        jobs: Iterable[TargetLike],
        min_threshold: int | None = None,
    ) -> list[CompatibilityResult]:
        """Reverse direction: score one student against many jobs."""
        threshold = self.policy.min_opportunity_score if min_threshold is None else min_threshold
        student = coerce_student(student)

        results = [self.compute(student, job) for job in jobs]
        kept = [r for r in results if r.total_score >= threshold]
        logger.info(
            "Scored student %s against %d jobs: %d at or above %d",
            student.id, len(results), len(kept), threshold,
        )
        return sorted(kept, key=lambda r: r.total_score, reverse=True)

    def matching_stats(self, results: Sequence[CompatibilityResult]) -> MatchingStats:
        if not results:
            return MatchingStats()

        scores = np.array([r.total_score for r in results])
        high = self.policy.high_compatibility
        medium = self.policy.medium_compatibility
        return MatchingStats(
            average_score=sb.check_score("average", float(np.mean(scores)), self.strict_invariants),
            high_compatibility=int(np.sum(scores >= high)),
            medium_compatibility=int(np.sum((scores >= medium) & (scores < high))),
            low_compatibility=int(np.sum(scores < medium)),
        )
