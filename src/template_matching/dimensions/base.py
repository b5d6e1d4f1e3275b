"""Base dimension evaluator.

Every dimension scores one aspect of how well a content slide fits a template.
Subclasses implement ``calculate_score``; ``evaluate`` wraps it with the
availability check, error containment and clamping so a broken dimension can
never abort matching.
"""

import logging
from abc import ABC, abstractmethod

from src.schemas.content_schema import ContentSlide
from src.schemas.matching_schema import Available, DimensionOutcome, Unavailable
from src.schemas.template_schema import Template, TextRole

logger = logging.getLogger(__name__)


class BaseDimension(ABC):
    """Abstract base for all dimension evaluators."""

    id: str = ""
    name: str = ""
    required: bool = False

    def is_available(self, slide: ContentSlide) -> bool:
        """Whether this dimension has the inputs it needs. Defaults to always."""
        return True

    @abstractmethod
    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        """Raw score, expected in [0, 1]."""
        ...

    def evaluate(self, slide: ContentSlide, template: Template) -> DimensionOutcome:
        if not self.is_available(slide):
            return Unavailable(reason=f"{self.id}: missing input")
        try:
            score = self.calculate_score(slide, template)
        except Exception as e:
            logger.warning(f"Dimension {self.id} failed on template {template.id}: {e}")
            return Unavailable(reason=f"{self.id}: {e}")
        return Available(score=min(1.0, max(0.0, float(score))))

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    @staticmethod
    def template_capacity(template: Template) -> int:
        return template.item_capacity

    @staticmethod
    def count_role(template: Template, *roles: TextRole) -> int:
        return len(template.elements_with_role(*roles))

    @staticmethod
    def match_ratio(content_count: int, template_count: int) -> float:
        """min/max ratio; 1.0 when both are empty, 0.0 when exactly one is."""
        if content_count == 0 and template_count == 0:
            return 1.0
        if content_count == 0 or template_count == 0:
            return 0.0
        return min(content_count, template_count) / max(content_count, template_count)
