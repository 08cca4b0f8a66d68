"""Career pathway generator output."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.bias import BiasCheckResult


class PathwayKind(str, Enum):
    """Closed set of pathway kinds. The value doubles as the stable pathway id."""
    DIRECT_ENTRY = "direct_entry"
    SKILL_DEVELOPMENT = "skill_development"
    ADVANCED_EDUCATION = "advanced_education"
    ENTREPRENEURIAL = "entrepreneurial"
    ALTERNATIVE_FIELD = "alternative_field"


class TimelinePhase(BaseModel):
    phase: str
    duration: str
    activities: list[str] = []


class SalaryProjection(BaseModel):
    entry: int = 0
    year_3: int = 0
    year_5: int = 0


class SkillGap(BaseModel):
    skill_name: str
    category: str = "technical"
    current_level: int = 0
    target_level: int = 4
    priority: str = "high"  # high | medium


class TrainingRecommendation(BaseModel):
    skill: str
    training_options: list[str] = []
    estimated_duration: str = ""


class TransferableSkill(BaseModel):
    skill_name: str
    proficiency: float = 0.0
    applicability: str = "technical"  # universal | technical


class SuggestedField(BaseModel):
    field_name: str
    similarity_score: int = 0
    growth_prospects: str = ""


class Pathway(BaseModel):
    id: PathwayKind
    title: str
    description: str = ""
    feasibility_score: int = 0  # 0-100
    timeline: list[TimelinePhase] = []
    expected_salary: SalaryProjection | None = None
    requirements: list[str] = []
    pros: list[str] = []
    cons: list[str] = []

    # Kind-specific extras
    skill_gaps: list[SkillGap] | None = None
    recommended_training: list[TrainingRecommendation] | None = None
    transferable_skills: list[TransferableSkill] | None = None
    suggested_fields: list[SuggestedField] | None = None
    financial_support_options: list[str] | None = None
    bias_adjustment: str | None = None


class LaborMarketData(BaseModel):
    """Salary and growth statistics for a field of study."""
    field: str = "general"
    growth_rate: float = 5.2  # percent per year
    avg_salary_entry: int = 45000
    avg_salary_mid: int = 65000
    avg_salary_senior: int = 85000
    job_availability: str = "moderate"  # low | moderate | high
    trending_skills: list[str] = []


class MarketInsight(BaseModel):
    type: str  # opportunity | concern
    message: str
    priority: str  # high | medium


class PathwayResult(BaseModel):
    pathways: list[Pathway] = []
    bias_check: BiasCheckResult = BiasCheckResult()
    labor_market_insights: list[MarketInsight] = []
