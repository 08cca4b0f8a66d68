"""Profile analysis output: the precomputed scores consumed by the engines."""

from pydantic import BaseModel


class SocioeconomicRecommendation(BaseModel):
    type: str  # financial_support | remote_opportunities | mentorship
    message: str
    priority: str  # high | medium


class ProfileAnalysis(BaseModel):
    student_id: str
    technical_skills_score: int = 0
    soft_skills_score: int = 0
    education_score: int = 0
    experience_score: int = 0
    socioeconomic_score: int = 0
    location_flexibility: str = "local"

    strengths: list[str] = []  # skills at proficiency >= 4
    improvements: list[str] = []  # skills at proficiency <= 2
    recommendations: list[SocioeconomicRecommendation] = []
