"""Abstract base class for the scoring engines."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class BaseEngine(ABC):
    """Base class for stateless scoring engines.

    Subclasses must implement:
        - engine_name: identifier used in the engine registry
        - load(): prepare policy tables / reference data
        - run(**kwargs): compute and return a typed schema

    ``clock`` supplies today's date for year-relative rules (recent graduate,
    years since graduation) so tests can pin it.
    """

    engine_name: str = ""
    _loaded: bool = False

    def __init__(self, clock: Callable[[], date] | None = None) -> None:
        self._clock = clock or date.today

    @abstractmethod
    def load(self) -> None:
        """Prepare reference data. Called once by the engine registry."""

    @abstractmethod
    def run(self, **kwargs: Any) -> Any:
        """Run the engine's main computation."""

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def current_year(self) -> int:
        return self._clock().year

    def ensure_loaded(self) -> None:
        """Load engine if not already loaded."""
        if not self._loaded:
            logger.info("Loading engine: %s", self.engine_name)
            self.load()
            self._loaded = True
            logger.info("Engine loaded: %s", self.engine_name)
