from pydantic import BaseModel, Field

from models.schemas.job_requirement import JobRequirement
from models.schemas.pathway import LaborMarketData
from models.schemas.student_profile import StudentProfile


class CompatibilityRequest(BaseModel):
    student: StudentProfile
    target: JobRequirement | None = Field(None, description="Employer or job requirements; omit for an open role")


class RankRequest(BaseModel):
    students: list[StudentProfile] = Field(..., description="Candidate pool to score against the target")
    target: JobRequirement | None = None
    min_threshold: int = Field(30, ge=0, le=100)
    limit: int | None = Field(None, ge=1, description="Return at most this many results after sorting")


class OpportunitiesRequest(BaseModel):
    student: StudentProfile
    jobs: list[JobRequirement] = Field(..., description="Open job postings to score the student against")
    min_threshold: int = Field(40, ge=0, le=100)


class PathwaysRequest(BaseModel):
    student: StudentProfile
    labor_market: LaborMarketData | None = Field(None, description="Overrides the field-keyed labor-market lookup")


class ProfileAnalyzeRequest(BaseModel):
    student: StudentProfile
