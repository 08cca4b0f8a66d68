from pydantic import BaseModel

from models.schemas.compatibility import CompatibilityResult, MatchingStats
from models.schemas.pathway import LaborMarketData, MarketInsight


class RankResponse(BaseModel):
    results: list[CompatibilityResult] = []
    total_candidates: int = 0
    stats: MatchingStats = MatchingStats()


class OpportunitiesResponse(BaseModel):
    student_id: str
    results: list[CompatibilityResult] = []
    total_jobs: int = 0


class LaborMarketResponse(BaseModel):
    data: LaborMarketData
    insights: list[MarketInsight] = []
