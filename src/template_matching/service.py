"""Template matching service.

Entry point of scored template selection. ``find_best_match`` never raises:
any situation where scoring cannot decide is routed to the fallback matcher.
"""

import logging
from typing import Any, Optional

from src.schemas.content_schema import ContentSlide
from src.schemas.matching_schema import Available, DimensionScore, TemplateMatchResult
from src.schemas.template_schema import Template

from .engine import PolynomialEngine
from .factory import DimensionFactory
from .fallback import FallbackMatcher
from .registry import DimensionRegistry

logger = logging.getLogger(__name__)


class TemplateMatchingService:
    """Scores candidate templates for a content slide and picks the best one."""

    def __init__(
        self,
        registry: Optional[DimensionRegistry] = None,
        fallback: Optional[FallbackMatcher] = None,
        debug: bool = False,
    ):
        self._registry = registry
        self.factory = DimensionFactory(registry)
        self.engine = PolynomialEngine()
        self.fallback = fallback or FallbackMatcher()
        self.debug = debug

    def initialize(self) -> None:
        self.factory.initialize()

    @property
    def initialized(self) -> bool:
        return self.factory.initialized

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def find_best_match(self, slide: ContentSlide, candidates: list[Template]) -> Template:
        self.initialize()
        try:
            if self._should_fallback(slide):
                logger.info(
                    f"Using fallback matcher: {self.fallback.get_fallback_reason(slide)}"
                )
                return self.fallback.find_basic_match(slide, candidates)

            eligible = self.filter_candidates(slide, candidates)
            if not eligible:
                logger.warning(
                    f"No template can hold {slide.item_count} items, using fallback"
                )
                return self.fallback.find_basic_match(slide, candidates)

            results = self.evaluate_templates(slide, eligible)
            best = self.engine.select_best_match(results)
            if best is None:
                logger.warning("No best match found, using fallback")
                return self.fallback.find_basic_match(slide, candidates)

            self._log_match(best)
            return best.template
        except Exception as e:
            logger.warning(f"Template matching failed ({e}), using fallback")
            return self.fallback.find_basic_match(slide, candidates)

    def batch_match(
        self, slides: list[ContentSlide], candidates: list[Template]
    ) -> list[Template]:
        return [self.find_best_match(slide, candidates) for slide in slides]

    def get_detailed_match(
        self, slide: ContentSlide, candidates: list[Template]
    ) -> list[TemplateMatchResult]:
        """Scored results for every eligible candidate, in candidate order.

        Empty when the slide would be routed to the fallback matcher.
        """
        self.initialize()
        if self._should_fallback(slide):
            return []
        return self.evaluate_templates(slide, self.filter_candidates(slide, candidates))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _should_fallback(slide: ContentSlide) -> bool:
        return slide.semantic_features is None

    def filter_candidates(
        self, slide: ContentSlide, candidates: list[Template]
    ) -> list[Template]:
        """Drop templates whose capacity score is zero or unavailable."""
        capacity = self.factory.get_evaluator("capacity")
        if capacity is None:
            return list(candidates)

        eligible = []
        for template in candidates:
            outcome = capacity.evaluate(slide, template)
            if isinstance(outcome, Available) and outcome.score > 0:
                eligible.append(template)
        return eligible

    def evaluate_templates(
        self, slide: ContentSlide, templates: list[Template]
    ) -> list[TemplateMatchResult]:
        evaluators = self.factory.get_evaluators()
        scored = [
            (
                template,
                [
                    DimensionScore.from_outcome(
                        evaluator.id,
                        evaluator.evaluate(slide, template),
                        self.factory.get_weight(evaluator.id),
                    )
                    for evaluator in evaluators
                ],
            )
            for template in templates
        ]
        results = self.engine.calculate_batch_scores(scored)
        if self.debug:
            for result in results:
                logger.debug(
                    f"Candidate {result.template.id}: {result.total_score:.3f} "
                    f"{self._format_scores(result.dimension_scores)}"
                )
        return results

    @staticmethod
    def _format_scores(scores: list[DimensionScore]) -> str:
        parts = []
        for s in scores:
            value = f"{s.score:.3f}" if s.available else "n/a"
            parts.append(f"{s.dimension_id}={value}@{s.weight:.2f}")
        return " ".join(parts)

    def _log_match(self, result: TemplateMatchResult) -> None:
        logger.info(
            f"Best match {result.template.id}: score {result.total_score:.3f} "
            f"via {', '.join(result.matched_dimensions) or 'no dimensions'}"
        )
        logger.debug(self._format_scores(result.dimension_scores))

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_service_status(self) -> dict[str, Any]:
        stats = self.factory.get_stats()
        return {
            "initialized": self.initialized,
            "dimensions_loaded": stats["loaded"],
            "dimensions_enabled": stats["enabled"],
            "failed_dimensions": sorted(stats["failed"]),
        }

    def reset(self) -> None:
        """Drop loaded evaluators; the next call re-initializes."""
        self.factory = DimensionFactory(self._registry)
