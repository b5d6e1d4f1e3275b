"""Pagination of content and table-of-contents slides."""

import logging
from typing import Any, Optional

from src.schemas.content_schema import ContentItem, ContentSlide, SlideCategory
from src.schemas.pagination_schema import PaginationRule

from .rules import PaginationRuleManager

logger = logging.getLogger(__name__)

PAGINATED_TYPES = (SlideCategory.CONTENT, SlideCategory.CONTENTS)


class PaginationProcessor:
    """Splits oversized slides into consecutive pages.

    Every page produced from a split slide carries ``offset``, the number of
    items on the pages before it, so item numbering continues across pages.
    Slides no rule applies to pass through untouched.
    """

    def __init__(self, custom_rules: Optional[list[PaginationRule]] = None):
        self.rule_manager = PaginationRuleManager(custom_rules)

    def process_pagination(self, slides: list[ContentSlide]) -> list[ContentSlide]:
        result: list[ContentSlide] = []
        for slide in slides:
            if slide.type not in PAGINATED_TYPES:
                result.append(slide)
                continue

            rule = self.rule_manager.find_applicable_rule(slide.type, slide.items)
            if rule is None:
                result.append(slide)
                continue

            pages = self.rule_manager.apply_pagination_rule(slide.items, rule)
            logger.info(
                f"Paginated {slide.type.value} slide '{slide.title}' "
                f"({slide.item_count} items) into {len(pages)} pages via {rule.name}"
            )
            offset = 0
            for page in pages:
                result.append(slide.model_copy(update={"items": page, "offset": offset}))
                offset += len(page)
        return result

    @staticmethod
    def get_pagination_stats(slides: list[ContentSlide]) -> dict[str, int]:
        return {
            "total_slides": len(slides),
            "paginated_slides": sum(1 for s in slides if s.offset is not None),
        }

    def validate_pagination(
        self, original: list[ContentSlide], paginated: list[ContentSlide]
    ) -> bool:
        """True when both decks hold the same items in the same order."""
        before = self._all_items(original)
        after = self._all_items(paginated)
        if len(before) != len(after):
            return False
        return all(a == b for a, b in zip(before, after))

    @staticmethod
    def _all_items(slides: list[ContentSlide]) -> list[ContentItem]:
        return [item for slide in slides for item in slide.items]

    def add_custom_rule(self, rule: PaginationRule) -> None:
        self.rule_manager.add_rule(rule)

    def get_all_rules(self) -> list[PaginationRule]:
        return self.rule_manager.get_all_rules()

    def describe_rules(self) -> list[dict[str, Any]]:
        return [rule.summary() for rule in self.get_all_rules()]


def create_default_pagination_processor() -> PaginationProcessor:
    return PaginationProcessor()
