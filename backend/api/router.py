from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_compatibility_engine, get_pathway_generator
from config import settings
from models.requests import (
    CompatibilityRequest,
    OpportunitiesRequest,
    PathwaysRequest,
    ProfileAnalyzeRequest,
    RankRequest,
)
from models.responses import LaborMarketResponse, OpportunitiesResponse, RankResponse
from models.schemas.compatibility import CompatibilityResult
from models.schemas.pathway import PathwayResult
from models.schemas.profile_analysis import ProfileAnalysis
from services import profile_analysis
from services.engine.compatibility import CompatibilityEngine
from services.engine.pathways import PathwayGenerator
from services.errors import InputValidationError
from services.labor_market import generate_insights
from services.policy import POLICY_VERSION

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_pool_size(size: int, what: str) -> None:
    if size > settings.max_pool_size:
        raise InputValidationError(f"Too many {what}. Max pool size: {settings.max_pool_size}")


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "policy_version": POLICY_VERSION,
    }


@router.post("/compatibility", response_model=CompatibilityResult)
@limiter.limit(settings.rate_limit)
def compatibility(
    request: Request,
    body: CompatibilityRequest,
    engine: CompatibilityEngine = Depends(get_compatibility_engine),
):
    student = profile_analysis.with_profile_scores(body.student)
    return engine.compute(student, body.target)


@router.post("/rank", response_model=RankResponse)
@limiter.limit(settings.rate_limit)
def rank(
    request: Request,
    body: RankRequest,
    engine: CompatibilityEngine = Depends(get_compatibility_engine),
):
    _check_pool_size(len(body.students), "students")

    students = [profile_analysis.with_profile_scores(s) for s in body.students]
    results = engine.rank_candidates(students, body.target, body.min_threshold)
    stats = engine.matching_stats(results)
    if body.limit is not None:
        results = results[: body.limit]

    return RankResponse(
        results=results,
        total_candidates=len(body.students),
        stats=stats,
    )


@router.post("/opportunities", response_model=OpportunitiesResponse)
@limiter.limit(settings.rate_limit)
def opportunities(
    request: Request,
    body: OpportunitiesRequest,
    engine: CompatibilityEngine = Depends(get_compatibility_engine),
):
    _check_pool_size(len(body.jobs), "jobs")

    student = profile_analysis.with_profile_scores(body.student)
    results = engine.find_opportunities(student, body.jobs, body.min_threshold)
    return OpportunitiesResponse(
        student_id=body.student.id,
        results=results,
        total_jobs=len(body.jobs),
    )


@router.post("/pathways", response_model=PathwayResult)
@limiter.limit(settings.rate_limit)
def pathways(
    request: Request,
    body: PathwaysRequest,
    generator: PathwayGenerator = Depends(get_pathway_generator),
):
    student = profile_analysis.with_profile_scores(body.student)
    return generator.generate(student, body.labor_market)


@router.post("/profile/analyze", response_model=ProfileAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_profile(request: Request, body: ProfileAnalyzeRequest):
    return profile_analysis.analyze_profile(body.student)


@router.get("/labor-market/{field}", response_model=LaborMarketResponse)
async def labor_market(
    field: str,
    generator: PathwayGenerator = Depends(get_pathway_generator),
):
    data = generator.labor_market.lookup(field)
    return LaborMarketResponse(data=data, insights=generate_insights(data, generator.policy))
