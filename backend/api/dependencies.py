"""Shared dependencies for API routes."""

from services.engine.compatibility import CompatibilityEngine
from services.engine.pathways import PathwayGenerator
from services.engine.registry import get_engine


def get_compatibility_engine() -> CompatibilityEngine:
    return get_engine("compatibility")


def get_pathway_generator() -> PathwayGenerator:
    return get_engine("pathways")
