"""Scoring policy: every weight, threshold, bonus and penalty in one table.

These are policy constants, not configuration. Changing any of them changes
matching semantics, so bump POLICY_VERSION with the change. Engines receive a
policy object at construction; tests can inject alternatives.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

POLICY_VERSION = "1.0"


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(d)


# Rows: student employment-type preference, columns: job employment type.
# Not symmetric: internship -> full_time is 80, full_time -> internship is 70.
AVAILABILITY_MATRIX: Mapping[str, Mapping[str, int]] = _frozen({
    "full_time": _frozen({"full_time": 100, "part_time": 30, "contract": 50, "internship": 70}),
    "part_time": _frozen({"full_time": 60, "part_time": 100, "contract": 80, "internship": 90}),
    "contract": _frozen({"full_time": 40, "part_time": 70, "contract": 100, "internship": 60}),
    "internship": _frozen({"full_time": 80, "part_time": 60, "contract": 40, "internship": 100}),
})


@dataclass(frozen=True)
class CompatibilityPolicy:
    # Factor weights (sum to 1.0)
    weight_skills: float = 0.40
    weight_education: float = 0.20
    weight_experience: float = 0.15
    weight_location: float = 0.10
    weight_availability: float = 0.10
    weight_cultural_fit: float = 0.05

    # Skills sub-score
    skills_no_requirements: int = 75
    skills_match_weight: float = 0.6
    skills_proficiency_weight: float = 0.4

    # Pass-through defaults for absent precomputed scores
    default_education_score: int = 50
    default_experience_score: int = 20

    # Location sub-score
    location_remote: int = 100
    location_flexible: int = 80
    location_match: int = 90
    location_mismatch: int = 40

    # Availability sub-score
    availability_matrix: Mapping[str, Mapping[str, int]] = field(default_factory=lambda: AVAILABILITY_MATRIX)
    availability_default: int = 50

    # Cultural fit sub-score
    cultural_base: int = 70
    cultural_startup_bonus: int = 10
    cultural_recent_grad_years: int = 2
    cultural_high_growth_bonus: int = 5

    # Reasons / concerns
    strong_skills_threshold: int = 70
    skills_gap_threshold: int = 40
    relevant_experience_threshold: int = 60

    # Pool filtering
    min_match_score: int = 30  # employer ranking a student pool
    min_opportunity_score: int = 40  # student searching open jobs

    # Matching stats buckets
    high_compatibility: int = 80
    medium_compatibility: int = 60

    @property
    def weights(self) -> dict[str, float]:
        return {
            "skills": self.weight_skills,
            "education": self.weight_education,
            "experience": self.weight_experience,
            "location": self.weight_location,
            "availability": self.weight_availability,
            "cultural_fit": self.weight_cultural_fit,
        }


@dataclass(frozen=True)
class PathwayPolicy:
    # Generation conditions
    entrepreneurial_min_soft_skills: int = 70
    alternative_field_max_growth: float = 3.0

    # Neutral values for absent precomputed scores
    default_technical_skills_score: int = 0
    default_soft_skills_score: int = 0
    default_education_score: int = 50
    default_socioeconomic_score: int = 50

    # Direct entry
    direct_entry_base: int = 70
    direct_entry_technical_threshold: int = 70
    direct_entry_technical_bonus: int = 15
    direct_entry_education_threshold: int = 60
    direct_entry_education_bonus: int = 10
    direct_entry_experience_bonus: int = 10
    direct_entry_low_socio_threshold: int = 40
    direct_entry_low_socio_penalty: int = 15
    direct_entry_salary_year_3: float = 1.3
    direct_entry_salary_year_5: float = 1.6

    # Skill development
    skill_development_base: int = 85
    skill_development_low_socio_threshold: int = 50
    skill_development_low_socio_penalty: int = 20
    skill_development_salary_entry: float = 1.2
    skill_development_salary_year_3: float = 1.5
    skill_development_salary_year_5: float = 1.8
    skill_gap_target_level: int = 4

    # Advanced education (salaries keyed off mid/senior averages)
    advanced_education_base: int = 60
    advanced_education_education_threshold: int = 70
    advanced_education_education_bonus: int = 20
    advanced_education_socio_threshold: int = 60
    advanced_education_socio_bonus: int = 15
    advanced_education_salary_year_5: float = 1.3

    # Entrepreneurial (fixed; highly variable in practice)
    entrepreneurial_base: int = 50
    entrepreneurial_salary_entry: int = 20000
    entrepreneurial_salary_year_3: int = 50000
    entrepreneurial_salary_year_5: int = 100000

    # Alternative field
    alternative_field_base: int = 65
    alternative_field_similarity: int = 80
    transferable_min_proficiency: int = 4

    # Market insights
    insight_high_growth: float = 10.0
    insight_low_growth: float = 2.0


@dataclass(frozen=True)
class BiasPolicy:
    male_coded_fields: tuple[str, ...] = ("engineering", "computer science", "technology")
    gender_entrepreneurial_threshold: int = 50
    default_socioeconomic_score: int = 50
    socioeconomic_score_threshold: int = 40
    socioeconomic_advanced_education_threshold: int = 30
    age_years_since_graduation: int = 5
    age_entrepreneurial_threshold: int = 40

    confidence_clean: float = 0.95
    confidence_flagged: float = 0.8

    # Adjustments applied when a flag fires
    gender_entrepreneurial_boost: int = 20
    socioeconomic_advanced_education_boost: int = 15
    financial_support_options: tuple[str, ...] = (
        "Federal financial aid programs",
        "Merit-based scholarships",
        "Graduate assistantships",
        "Employer tuition reimbursement",
    )


DEFAULT_COMPATIBILITY_POLICY = CompatibilityPolicy()
DEFAULT_PATHWAY_POLICY = PathwayPolicy()
DEFAULT_BIAS_POLICY = BiasPolicy()


def round_half_up(x: float) -> int:
    """Round .5 away from zero for non-negative scores (``round()`` rounds to even)."""
    return int(x + 0.5) if x >= 0 else -int(-x + 0.5)
