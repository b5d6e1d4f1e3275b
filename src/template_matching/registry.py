"""Dimension registry: which dimensions exist, their weights and switches."""

import logging
from typing import Any, Optional

from src.schemas.engine_config import DEFAULT_DIMENSIONS
from src.schemas.matching_schema import DimensionConfig

logger = logging.getLogger(__name__)

# Capacity acts as a hard filter and never contributes weight.
FILTER_DIMENSIONS = {"capacity"}
WEIGHT_TOLERANCE = 0.001


class DimensionRegistry:
    """Ordered collection of dimension configs with weight bookkeeping."""

    def __init__(self, configs: Optional[list[DimensionConfig]] = None):
        source = configs if configs is not None else DEFAULT_DIMENSIONS
        self._configs: dict[str, DimensionConfig] = {
            c.id: c.model_copy() for c in sorted(source, key=lambda c: c.order)
        }

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def all(self) -> list[DimensionConfig]:
        return list(self._configs.values())

    def enabled(self) -> list[DimensionConfig]:
        return [c for c in self._configs.values() if c.enabled]

    def required(self) -> list[DimensionConfig]:
        return [c for c in self.enabled() if c.required]

    def optional(self) -> list[DimensionConfig]:
        return [c for c in self.enabled() if not c.required]

    def enabled_ids(self) -> list[str]:
        return [c.id for c in self.enabled()]

    def get(self, dimension_id: str) -> Optional[DimensionConfig]:
        return self._configs.get(dimension_id)

    def weight(self, dimension_id: str) -> float:
        config = self._configs.get(dimension_id)
        return config.weight if config else 0.0

    def is_enabled(self, dimension_id: str) -> bool:
        config = self._configs.get(dimension_id)
        return bool(config and config.enabled)

    def is_required(self, dimension_id: str) -> bool:
        config = self._configs.get(dimension_id)
        return bool(config and config.required)

    # ------------------------------------------------------------------
    # Weights
    # ------------------------------------------------------------------

    def total_weight(self) -> float:
        """Sum of enabled weights, excluding filter dimensions."""
        return sum(c.weight for c in self.enabled() if c.id not in FILTER_DIMENSIONS)

    def validate_weights(self) -> bool:
        total = self.total_weight()
        valid = abs(total - 1.0) < WEIGHT_TOLERANCE
        if not valid:
            logger.warning(f"Dimension weights sum to {total:.3f}, expected 1.0")
        return valid

    def update_weight(self, dimension_id: str, weight: float) -> None:
        if dimension_id not in self._configs:
            raise KeyError(f"Unknown dimension: {dimension_id}")
        if not 0.0 <= weight <= 1.0:
            raise ValueError(f"Weight must be within [0, 1], got {weight}")
        self._configs[dimension_id].weight = weight

    def set_enabled(self, dimension_id: str, enabled: bool) -> None:
        if dimension_id not in self._configs:
            raise KeyError(f"Unknown dimension: {dimension_id}")
        self._configs[dimension_id].enabled = enabled

    def stats(self) -> dict[str, Any]:
        return {
            "total": len(self._configs),
            "enabled": len(self.enabled()),
            "required": len(self.required()),
            "optional": len(self.optional()),
            "total_weight": round(self.total_weight(), 6),
            "weights_valid": abs(self.total_weight() - 1.0) < WEIGHT_TOLERANCE,
        }
