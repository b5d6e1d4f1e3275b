"""Polynomial scoring engine.

A template's total score is the weighted mean of the dimensions that produced
a score, with weights renormalized over those dimensions only:

    total = sum(w_i * s_i) / sum(w_i)    for available i

Unavailable dimensions neither reward nor penalize a candidate.
"""

import logging
from typing import Any, Optional

from src.schemas.matching_schema import DimensionScore, TemplateMatchResult
from src.schemas.template_schema import Template

logger = logging.getLogger(__name__)

HIGH_SCORE = 0.7
MEDIUM_SCORE = 0.4


class PolynomialEngine:
    """Combines per-dimension scores into ranked template matches."""

    def calculate_score(
        self, template: Template, dimension_scores: list[DimensionScore]
    ) -> TemplateMatchResult:
        used = [s for s in dimension_scores if s.available]
        total_weight = sum(s.weight for s in used)
        if total_weight <= 0:
            return TemplateMatchResult(
                template=template, total_score=0.0, dimension_scores=dimension_scores
            )

        weighted = sum(s.weight * s.score for s in used)
        total = min(1.0, weighted / total_weight)
        return TemplateMatchResult(
            template=template,
            total_score=total,
            dimension_scores=dimension_scores,
            matched_dimensions=[s.dimension_id for s in used],
        )

    def calculate_batch_scores(
        self, scored: list[tuple[Template, list[DimensionScore]]]
    ) -> list[TemplateMatchResult]:
        return [self.calculate_score(template, scores) for template, scores in scored]

    @staticmethod
    def rank(results: list[TemplateMatchResult]) -> list[TemplateMatchResult]:
        """Sort by score, highest first. Equal scores keep candidate order."""
        return sorted(results, key=lambda r: r.total_score, reverse=True)

    def select_best_match(
        self, results: list[TemplateMatchResult]
    ) -> Optional[TemplateMatchResult]:
        if not results:
            return None
        return self.rank(results)[0]

    def get_top_matches(
        self, results: list[TemplateMatchResult], count: int = 3
    ) -> list[TemplateMatchResult]:
        return self.rank(results)[:count]

    def analyze_results(self, results: list[TemplateMatchResult]) -> dict[str, Any]:
        """Score distribution and how often each dimension contributed."""
        if not results:
            return {
                "average_score": 0.0,
                "distribution": {"high": 0, "medium": 0, "low": 0},
                "dimension_usage": {},
            }

        distribution = {"high": 0, "medium": 0, "low": 0}
        usage: dict[str, int] = {}
        for result in results:
            if result.total_score >= HIGH_SCORE:
                distribution["high"] += 1
            elif result.total_score >= MEDIUM_SCORE:
                distribution["medium"] += 1
            else:
                distribution["low"] += 1
            for dimension_id in result.matched_dimensions:
                usage[dimension_id] = usage.get(dimension_id, 0) + 1

        return {
            "average_score": sum(r.total_score for r in results) / len(results),
            "distribution": distribution,
            "dimension_usage": usage,
        }
