"""Pathway Generator: ranked career pathway options with a bias pass.

Flow:
    student (+ optional labor-market override)
      ├─ labor-market lookup by field   → LaborMarketData (builtin default fallback)
      ├─ always:      direct entry, skill development, advanced education
      ├─ conditional: entrepreneurial (soft skills), alternative field (low growth)
      ├─ bias_checker.check_bias(draft)  → BiasCheckResult
      └─ bias_checker.adjust_for_bias    → final pathways (feasibility clamped)
"""

import logging
from typing import Any, Mapping

from models.schemas.pathway import LaborMarketData, Pathway, PathwayKind, PathwayResult
from models.schemas.student_profile import StudentProfile
from services import bias_checker
from services.engine.base import BaseEngine
from services.labor_market import LaborMarketProvider, generate_insights
from services.pathway_builders import BUILDERS
from services.policy import (
    DEFAULT_BIAS_POLICY,
    DEFAULT_PATHWAY_POLICY,
    BiasPolicy,
    PathwayPolicy,
)
from services.validation import coerce_labor_market, coerce_student

logger = logging.getLogger(__name__)

ALWAYS_GENERATED = (
    PathwayKind.DIRECT_ENTRY,
    PathwayKind.SKILL_DEVELOPMENT,
    PathwayKind.ADVANCED_EDUCATION,
)


class PathwayGenerator(BaseEngine):
    engine_name = "pathways"

    def __init__(
        self,
        labor_market: LaborMarketProvider | None = None,
        policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
        bias_policy: BiasPolicy = DEFAULT_BIAS_POLICY,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.labor_market = labor_market if labor_market is not None else LaborMarketProvider()
        self.policy = policy
        self.bias_policy = bias_policy

    def load(self) -> None:
        logger.info("Pathway generator ready with %d labor-market records", len(self.labor_market))

    def run(self, **kwargs: Any) -> PathwayResult:
        self.ensure_loaded()
        return self.generate(kwargs["student"], kwargs.get("labor_market"))

    def pathway_kinds(self, student: StudentProfile, market: LaborMarketData) -> list[PathwayKind]:
        kinds = list(ALWAYS_GENERATED)

        soft = student.soft_skills_score
        if soft is None:
            soft = self.policy.default_soft_skills_score
        if soft >= self.policy.entrepreneurial_min_soft_skills:
            kinds.append(PathwayKind.ENTREPRENEURIAL)

        if market.growth_rate < self.policy.alternative_field_max_growth:
            kinds.append(PathwayKind.ALTERNATIVE_FIELD)

        return kinds

    def draft_pathways(self, student: StudentProfile, market: LaborMarketData) -> list[Pathway]:
        return [
            BUILDERS[kind](student, market, self.policy)
            for kind in self.pathway_kinds(student, market)
        ]

    def generate(
        self,
        student: StudentProfile | Mapping[str, Any],
        labor_market: LaborMarketData | Mapping[str, Any] | None = None,
    ) -> PathwayResult:
        student = coerce_student(student)
        market = coerce_labor_market(labor_market) or self.labor_market.lookup(student.field_of_study)

        draft = self.draft_pathways(student, market)
        bias_check = bias_checker.check_bias(draft, student, self.current_year, self.bias_policy)

        pathways = draft
        if bias_check.bias_found:
            logger.info(
                "Bias flags for student %s: %s",
                student.id, ", ".join(f.type.value for f in bias_check.flags),
            )
            pathways = bias_checker.adjust_for_bias(draft, bias_check, self.bias_policy)

        logger.debug(
            "Generated %d pathways for student %s (%s)",
            len(pathways), student.id, ", ".join(p.id.value for p in pathways),
        )
        return PathwayResult(
            pathways=pathways,
            bias_check=bias_check,
            labor_market_insights=generate_insights(market, self.policy),
        )
