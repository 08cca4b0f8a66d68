"""Labor-market defaults: field-keyed salary and growth statistics.

There is no live labor-market integration. Records come from a YAML file
loaded once at engine construction, with a builtin default standing in for
any field the file does not cover (or when the file is missing).
"""

import logging
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from models.schemas.pathway import LaborMarketData, MarketInsight
from services.policy import DEFAULT_PATHWAY_POLICY, PathwayPolicy

logger = logging.getLogger(__name__)

GENERAL_FIELD = "general"

BUILTIN_DEFAULT = LaborMarketData(
    field=GENERAL_FIELD,
    growth_rate=5.2,
    avg_salary_entry=45000,
    avg_salary_mid=65000,
    avg_salary_senior=85000,
    job_availability="moderate",
    trending_skills=[],
)


def load_records(path: str | Path) -> dict[str, LaborMarketData]:
    """Read field-keyed records from a YAML mapping. Returns {} if unavailable."""
    path = Path(path)
    if not path.exists():
        logger.warning("Labor-market file not found at %s, using builtin defaults", path)
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read labor-market file %s: %s", path, e)
        return {}

    if not isinstance(raw, dict):
        logger.warning("Labor-market file %s is not a mapping, ignoring", path)
        return {}

    records: dict[str, LaborMarketData] = {}
    for field, values in raw.items():
        key = str(field).strip().lower()
        try:
            records[key] = LaborMarketData(field=key, **(values or {}))
        except (TypeError, ValidationError) as e:
            logger.warning("Skipping invalid labor-market record %r: %s", field, e)

    logger.info("Loaded %d labor-market records from %s", len(records), path)
    return records


class LaborMarketProvider:
    """Resolves a field of study to labor-market data.

    Lookup order: exact field (case-insensitive), then the ``general`` record,
    then the builtin default. The fallbacks carry the requested field name.
    """

    def __init__(
        self,
        records: Mapping[str, LaborMarketData] | None = None,
        default: LaborMarketData = BUILTIN_DEFAULT,
    ) -> None:
        self._records = {k.lower(): v for k, v in (records or {}).items()}
        self._default = default

    @classmethod
    def from_file(cls, path: str | Path) -> "LaborMarketProvider":
        return cls(load_records(path))

    def __len__(self) -> int:
        return len(self._records)

    def lookup(self, field_of_study: str | None) -> LaborMarketData:
        key = (field_of_study or "").strip().lower()
        if key and key in self._records:
            return self._records[key]

        fallback = self._records.get(GENERAL_FIELD, self._default)
        if key:
            logger.debug("No labor-market record for %r, using %s", key, fallback.field)
            return fallback.model_copy(update={"field": key})
        return fallback


def generate_insights(
    data: LaborMarketData,
    policy: PathwayPolicy = DEFAULT_PATHWAY_POLICY,
) -> list[MarketInsight]:
    insights: list[MarketInsight] = []

    if data.growth_rate > policy.insight_high_growth:
        insights.append(MarketInsight(
            type="opportunity",
            message=f"High growth field with {data.growth_rate}% annual growth rate",
            priority="high",
        ))
    elif data.growth_rate < policy.insight_low_growth:
        insights.append(MarketInsight(
            type="concern",
            message=f"Slower growing field with {data.growth_rate}% growth rate",
            priority="medium",
        ))

    if data.job_availability == "high":
        insights.append(MarketInsight(
            type="opportunity",
            message="High job availability in this field",
            priority="medium",
        ))

    return insights
