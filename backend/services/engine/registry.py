"""Lazy-loading engine registry.

Engines are stateless apart from their policy and reference data, so one
instance per name is shared by all requests: created and loaded on first use.
"""

import logging

from config import settings
from services.engine.base import BaseEngine

logger = logging.getLogger(__name__)

_registry: dict[str, BaseEngine] = {}


def _create_engine(name: str) -> BaseEngine:
    """Factory: create an engine by name from application settings."""
    if name == "compatibility":
        from services.engine.compatibility import CompatibilityEngine
        return CompatibilityEngine(strict_invariants=settings.strict_invariants)
    elif name == "pathways":
        from services.engine.pathways import PathwayGenerator
        from services.labor_market import LaborMarketProvider
        return PathwayGenerator(labor_market=LaborMarketProvider.from_file(settings.labor_market_file))
    else:
        raise ValueError(f"Unknown engine: {name}")


def get_engine(name: str) -> BaseEngine:
    """Get an engine by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_engine(name)
    engine = _registry[name]
    engine.ensure_loaded()
    return engine


def preload(*names: str) -> None:
    """Pre-load multiple engines (e.g. at startup)."""
    for name in names:
        get_engine(name)


def clear() -> None:
    """Drop all engines. Useful for testing."""
    _registry.clear()
