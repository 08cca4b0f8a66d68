"""Coerce plain records into validated profile models.

Engines accept either model instances or plain mappings (e.g. rows handed
over by a profile lookup). Validation failures surface as InputValidationError.
"""

from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from models.schemas.job_requirement import JobRequirement
from models.schemas.pathway import LaborMarketData
from models.schemas.student_profile import StudentProfile
from services.errors import InputValidationError


def _describe(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid"))
    return "; ".join(parts)


def _coerce(model: type[BaseModel], record: Any, what: str):
    if isinstance(record, model):
        return record
    if not isinstance(record, Mapping):
        raise InputValidationError(f"Invalid {what}: expected a mapping, got {type(record).__name__}")
    try:
        return model.model_validate(record)
    except ValidationError as e:
        raise InputValidationError(f"Invalid {what}: {_describe(e)}") from e


def coerce_student(record: StudentProfile | Mapping[str, Any]) -> StudentProfile:
    return _coerce(StudentProfile, record, "student profile")


def coerce_requirement(record: JobRequirement | Mapping[str, Any] | None) -> JobRequirement | None:
    if record is None:
        return None
    return _coerce(JobRequirement, record, "job requirement")


def coerce_labor_market(record: LaborMarketData | Mapping[str, Any] | None) -> LaborMarketData | None:
    if record is None:
        return None
    return _coerce(LaborMarketData, record, "labor-market data")
