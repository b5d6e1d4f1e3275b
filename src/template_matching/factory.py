"""Dimension factory: instantiates enabled evaluators once, in registry order."""

import logging
import threading
from typing import Any, Optional

from .dimensions import DIMENSION_EVALUATORS, BaseDimension
from .registry import DimensionRegistry

logger = logging.getLogger(__name__)


class DimensionFactory:
    """Owns the evaluator instances used by the matching service.

    ``initialize`` is idempotent and safe to call from several threads; only
    the first call builds evaluators. An evaluator that fails to load is
    logged and left out, the rest keep working.
    """

    def __init__(self, registry: Optional[DimensionRegistry] = None):
        self.registry = registry or DimensionRegistry()
        self._evaluators: dict[str, BaseDimension] = {}
        self._failed: dict[str, str] = {}
        self._initialized = False
        self._lock = threading.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            for config in self.registry.enabled():
                self._load(config.id)
            self._initialized = True
            logger.info(
                f"Dimension factory ready: {len(self._evaluators)} loaded, "
                f"{len(self._failed)} failed"
            )

    def _load(self, dimension_id: str) -> Optional[BaseDimension]:
        constructor = DIMENSION_EVALUATORS.get(dimension_id)
        if constructor is None:
            self._failed[dimension_id] = "no evaluator registered"
            logger.warning(f"No evaluator registered for dimension '{dimension_id}'")
            return None
        try:
            evaluator = constructor()
        except Exception as e:
            self._failed[dimension_id] = str(e)
            logger.warning(f"Failed to load dimension '{dimension_id}': {e}")
            return None
        self._evaluators[dimension_id] = evaluator
        self._failed.pop(dimension_id, None)
        logger.debug(f"Loaded dimension '{dimension_id}'")
        return evaluator

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_evaluators(self) -> list[BaseDimension]:
        """Loaded evaluators in registry order."""
        self.initialize()
        return [
            self._evaluators[dimension_id]
            for dimension_id in self.registry.enabled_ids()
            if dimension_id in self._evaluators
        ]

    def get_evaluator(self, dimension_id: str) -> Optional[BaseDimension]:
        self.initialize()
        return self._evaluators.get(dimension_id)

    def get_weight(self, dimension_id: str) -> float:
        return self.registry.weight(dimension_id)

    def get_dimension_ids(self) -> list[str]:
        self.initialize()
        return [d.id for d in self.get_evaluators()]

    def get_initialized_count(self) -> int:
        return len(self._evaluators)

    def is_dimension_loaded(self, dimension_id: str) -> bool:
        return dimension_id in self._evaluators

    def reload_dimension(self, dimension_id: str) -> bool:
        """Rebuild one evaluator. Returns whether it loaded."""
        with self._lock:
            self._evaluators.pop(dimension_id, None)
            if not self.registry.is_enabled(dimension_id):
                logger.info(f"Dimension '{dimension_id}' is disabled, not reloading")
                return False
            return self._load(dimension_id) is not None

    def get_stats(self) -> dict[str, Any]:
        return {
            "total": len(self.registry.all()),
            "enabled": len(self.registry.enabled()),
            "loaded": len(self._evaluators),
            "failed": dict(self._failed),
        }

    def reset(self) -> None:
        with self._lock:
            self._evaluators.clear()
            self._failed.clear()
            self._initialized = False
