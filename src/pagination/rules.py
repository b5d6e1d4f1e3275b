"""Declarative pagination rules.

Oversized slides are split before template matching so each page fits a
template. Rules are tried in priority order (highest first, declaration
order among equals); the first whose condition holds decides the split.
"""

import logging
import math
from typing import Optional, Sequence, TypeVar

from src.schemas.content_schema import SlideCategory
from src.schemas.pagination_schema import (
    PaginationCondition,
    PaginationRule,
    PaginationStrategy,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _rule(name, min_items, max_items, category, split_points, max_per_page, priority):
    return PaginationRule(
        name=name,
        condition=PaginationCondition(
            min_items=min_items, max_items=max_items, content_type=[category]
        ),
        strategy=PaginationStrategy(
            split_points=split_points,
            max_items_per_page=max_per_page,
            balance_strategy="even",
            preserve_structure=True,
        ),
        priority=priority,
    )


PAGINATION_RULES: list[PaginationRule] = [
    _rule("standard-content-5-6-items", 5, 6, SlideCategory.CONTENT, [3], 4, 100),
    _rule("standard-content-7-8-items", 7, 8, SlideCategory.CONTENT, [4], 4, 100),
    _rule("standard-content-9-10-items", 9, 10, SlideCategory.CONTENT, [3, 6], 4, 100),
    _rule("standard-content-over-10-items", 11, None, SlideCategory.CONTENT, [4, 8], 4, 100),
    _rule("contents-11-items", 11, 11, SlideCategory.CONTENTS, [6], 6, 150),
    _rule("contents-over-11-items", 12, None, SlideCategory.CONTENTS, [10], 10, 150),
]


class PaginationRuleManager:
    """Holds the active rules and applies them to item lists."""

    def __init__(self, custom_rules: Optional[list[PaginationRule]] = None):
        self._rules = self._sorted([*PAGINATION_RULES, *(custom_rules or [])])

    @staticmethod
    def _sorted(rules: list[PaginationRule]) -> list[PaginationRule]:
        return sorted(rules, key=lambda r: r.priority, reverse=True)

    # ------------------------------------------------------------------
    # Rule selection
    # ------------------------------------------------------------------

    def find_applicable_rule(
        self, slide_type: SlideCategory | str, items: Sequence
    ) -> Optional[PaginationRule]:
        for rule in self._rules:
            if self.evaluate_condition(rule.condition, slide_type, items):
                return rule
        return None

    @staticmethod
    def evaluate_condition(
        condition: PaginationCondition, slide_type: SlideCategory | str, items: Sequence
    ) -> bool:
        slide_type = SlideCategory(slide_type)
        count = len(items)
        if condition.min_items is not None and count < condition.min_items:
            return False
        if condition.max_items is not None and count > condition.max_items:
            return False
        if condition.content_type and slide_type not in condition.content_type:
            return False
        if condition.template_type and condition.template_type != slide_type.value:
            return False
        if condition.custom_validator and not condition.custom_validator(list(items)):
            return False
        return True

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------

    def apply_pagination_rule(self, items: Sequence[T], rule: PaginationRule) -> list[list[T]]:
        """Cut ``items`` at the rule's split points, then cap every page size.

        Empty slices are skipped; concatenating the result gives back
        ``items`` unchanged.
        """
        strategy = rule.strategy
        chunks: list[list[T]] = []
        start = 0
        for point in strategy.split_points:
            chunk = list(items[start:point])
            if chunk:
                chunks.append(chunk)
            start = max(start, point)
        if start < len(items):
            chunks.append(list(items[start:]))

        return self.ensure_max_items_per_page(
            chunks, strategy.max_items_per_page, strategy.balance_strategy
        )

    def ensure_max_items_per_page(
        self, chunks: list[list[T]], max_items_per_page: int, balance_strategy: str = "even"
    ) -> list[list[T]]:
        pages: list[list[T]] = []
        for chunk in chunks:
            if len(chunk) <= max_items_per_page:
                pages.append(chunk)
            else:
                pages.extend(self.split_chunk(chunk, max_items_per_page, balance_strategy))
        return pages

    @staticmethod
    def split_chunk(
        chunk: list[T], max_items_per_page: int, balance_strategy: str = "even"
    ) -> list[list[T]]:
        """Split into the fewest pages of at most ``max_items_per_page`` items.

        ``even`` keeps page sizes within one of each other (larger pages
        first), ``front-heavy`` fills pages from the front and leaves the
        remainder last, ``back-heavy`` puts the remainder first.
        """
        total = len(chunk)
        if total == 0:
            return []
        num_pages = math.ceil(total / max_items_per_page)

        if balance_strategy == "even":
            base, extra = divmod(total, num_pages)
            sizes = [base + 1 if i < extra else base for i in range(num_pages)]
        else:
            remainder = total - (num_pages - 1) * max_items_per_page
            sizes = [max_items_per_page] * (num_pages - 1)
            if balance_strategy == "back-heavy":
                sizes.insert(0, remainder)
            else:
                sizes.append(remainder)

        pages = []
        start = 0
        for size in sizes:
            pages.append(chunk[start:start + size])
            start += size
        return pages

    # ------------------------------------------------------------------
    # Rule management
    # ------------------------------------------------------------------

    def get_all_rules(self) -> list[PaginationRule]:
        return list(self._rules)

    def add_rule(self, rule: PaginationRule) -> None:
        self._rules = self._sorted([*self._rules, rule])
        logger.debug(f"Added pagination rule '{rule.name}' (priority {rule.priority})")

    def remove_rule(self, name: str) -> bool:
        """Remove every rule called ``name``; returns whether any was removed."""
        before = len(self._rules)
        self._rules = [r for r in self._rules if r.name != name]
        return len(self._rules) < before
