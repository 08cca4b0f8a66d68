"""Employer or job posting requirements: the target side of a compatibility score."""

from pydantic import BaseModel, Field, field_validator

MIN_REQUIRED_LEVEL = 1.0
MAX_REQUIRED_LEVEL = 5.0


class RequiredSkill(BaseModel):
    name: str = Field(..., min_length=1)
    required_level: float = 3.0  # 1-5

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("skill name must not be blank")
        return v

    @field_validator("required_level")
    @classmethod
    def _clamp_level(cls, v: float) -> float:
        return max(MIN_REQUIRED_LEVEL, min(MAX_REQUIRED_LEVEL, v))


class JobRequirement(BaseModel):
    """Employer profile, optionally narrowed to a single job posting."""
    id: str | None = None
    title: str = ""
    location: str | None = None
    company_size: str | None = None  # startup | small | medium | large | enterprise
    growth_trajectory: str | None = None  # high_growth | stable | declining
    employment_type: str = "full_time"
    required_skills: list[RequiredSkill] = []

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("required_skills", mode="before")
    @classmethod
    def _none_as_empty(cls, v):
        return [] if v is None else v

    @field_validator("employment_type", mode="before")
    @classmethod
    def _default_employment_type(cls, v):
        return v or "full_time"
