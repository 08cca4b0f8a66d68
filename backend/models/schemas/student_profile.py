"""Student profile: the input record for compatibility scoring and pathway generation."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

SkillCategory = Literal["technical", "soft", "language", "certification"]
EducationLevel = Literal["high_school", "associate", "bachelor", "master", "phd"]
LocationFlexibility = Literal["remote", "flexible", "local"]

MAX_PROFICIENCY = 5.0
MAX_GPA = 4.0


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


class StudentSkill(BaseModel):
    """A single self-assessed skill."""
    name: str = Field(..., min_length=1)
    category: SkillCategory = "technical"
    proficiency_level: float = 0.0  # 0-5
    years_of_experience: float = 0.0
    market_demand: str | None = None  # "high" | "medium" | "low"

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("skill name must not be blank")
        return v

    @field_validator("proficiency_level")
    @classmethod
    def _clamp_proficiency(cls, v: float) -> float:
        return _clamp(v, 0.0, MAX_PROFICIENCY)

    @field_validator("years_of_experience")
    @classmethod
    def _clamp_years(cls, v: float) -> float:
        return max(0.0, v)


class Education(BaseModel):
    level: EducationLevel | None = None
    gpa: float | None = None  # 0.0-4.0

    @field_validator("gpa")
    @classmethod
    def _clamp_gpa(cls, v: float | None) -> float | None:
        if v is None:
            return None
        return _clamp(v, 0.0, MAX_GPA)


class ExperienceEntry(BaseModel):
    years: float = 0.0
    relevant: bool = False
    leadership: bool = False

    @field_validator("years")
    @classmethod
    def _clamp_years(cls, v: float) -> float:
        return max(0.0, v)


class Socioeconomic(BaseModel):
    income_level: str = "not_specified"  # low | medium | high | not_specified
    family_support: str = "moderate"  # low | moderate | high
    transportation: str = "public"  # limited | public | personal
    financial_constraints: bool = False


class StudentProfile(BaseModel):
    """Snapshot of a student as supplied by the profile lookup.

    The ``*_score`` fields are the precomputed profile-analysis scores
    (0-100). Absent scores fall back to neutral defaults at the point of use.
    """
    id: str = Field(..., min_length=1)
    skills: list[StudentSkill] = []
    education: Education = Education()
    experience: list[ExperienceEntry] = []
    socioeconomic: Socioeconomic = Socioeconomic()
    location_preference: str | None = None
    location_flexibility: LocationFlexibility = "local"
    employment_type_preference: str | None = None
    field_of_study: str | None = None
    graduation_year: int | None = None
    gender: str | None = None  # used only by the bias checker

    # Precomputed profile-analysis scores
    technical_skills_score: float | None = None
    soft_skills_score: float | None = None
    education_score: float | None = None
    experience_score: float | None = None
    socioeconomic_score: float | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("skills", "experience", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("education", "socioeconomic", mode="before")
    @classmethod
    def _none_as_default(cls, v):
        return {} if v is None else v

    @field_validator(
        "technical_skills_score",
        "soft_skills_score",
        "education_score",
        "experience_score",
        "socioeconomic_score",
    )
    @classmethod
    def _clamp_score(cls, v: float | None) -> float | None:
        if v is None:
            return None
        return _clamp(v, 0.0, 100.0)

    @property
    def has_experience(self) -> bool:
        return len(self.experience) > 0
