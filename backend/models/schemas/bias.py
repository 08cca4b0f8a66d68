"""Bias checker output."""

from enum import Enum

from pydantic import BaseModel


class BiasType(str, Enum):
    GENDER = "gender"
    SOCIOECONOMIC = "socioeconomic"
    AGE = "age"


class BiasFlag(BaseModel):
    type: BiasType
    detected: bool = False
    message: str = ""
    recommendation: str | None = None


class BiasCheckResult(BaseModel):
    """Heuristic bias check over one generated pathway set.

    ``flags`` holds only the rules that fired. ``confidence`` is a fixed
    constant per outcome, not an evidence-strength estimate.
    """
    bias_found: bool = False
    flags: list[BiasFlag] = []
    confidence: float = 0.95
