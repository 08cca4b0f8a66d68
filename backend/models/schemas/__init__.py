"""Value objects exchanged between the API layer and the scoring engines."""

from models.schemas.bias import BiasCheckResult, BiasFlag, BiasType
from models.schemas.compatibility import CompatibilityResult, MatchingStats, ScoreBreakdown
from models.schemas.job_requirement import JobRequirement, RequiredSkill
from models.schemas.pathway import LaborMarketData, Pathway, PathwayKind, PathwayResult
from models.schemas.profile_analysis import ProfileAnalysis
from models.schemas.student_profile import StudentProfile, StudentSkill

__all__ = [
    "BiasCheckResult",
    "BiasFlag",
    "BiasType",
    "CompatibilityResult",
    "JobRequirement",
    "LaborMarketData",
    "MatchingStats",
    "Pathway",
    "PathwayKind",
    "PathwayResult",
    "ProfileAnalysis",
    "RequiredSkill",
    "ScoreBreakdown",
    "StudentProfile",
    "StudentSkill",
]
