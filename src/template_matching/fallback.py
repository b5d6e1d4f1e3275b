"""Fallback matcher used whenever scored matching cannot decide.

It never fails: a capacity-compatible template is chosen when one exists,
otherwise the largest template, otherwise a synthetic two-placeholder slide.
"""

import hashlib
import logging
import random
from typing import Optional

from src.schemas.content_schema import ContentSlide, SlideCategory
from src.schemas.template_schema import ElementType, PlaceholderElement, Template, TextRole

logger = logging.getLogger(__name__)


class FallbackMatcher:
    """Capacity-aware random selection.

    Pass ``rng`` to control the random choice. Without one, each call seeds a
    private generator from the slide and candidate ids, so the same inputs
    always yield the same template.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def _choose(self, key: str, candidates: list[Template]) -> Template:
        if self._rng is not None:
            return self._rng.choice(candidates)
        seed_source = key + "|" + "|".join(t.id for t in candidates)
        seed = int.from_bytes(hashlib.sha256(seed_source.encode("utf-8")).digest()[:8], "big")
        return random.Random(seed).choice(candidates)

    @staticmethod
    def _slide_key(slide: ContentSlide) -> str:
        # Item metadata is caller-owned and may not serialize, so it stays out of the seed.
        parts = [slide.type.value, slide.title, slide.text]
        if slide.semantic_features is not None:
            parts.append(slide.semantic_features.model_dump_json())
        for item in slide.items:
            parts.extend((item.title, item.text))
        return "\x1f".join(parts)

    def find_basic_match(self, slide: ContentSlide, candidates: list[Template]) -> Template:
        if not candidates:
            logger.warning("No candidate templates, using the built-in default template")
            return self.create_default_template()

        item_count = slide.item_count
        compatible = [t for t in candidates if item_count <= t.item_capacity]
        if compatible:
            return self._choose(self._slide_key(slide), compatible)

        # Nothing fits: the largest template loses the fewest items.
        best = candidates[0]
        for template in candidates[1:]:
            if template.item_capacity > best.item_capacity:
                best = template
        logger.debug(
            f"No template holds {item_count} items, using largest ({best.id}, "
            f"capacity {best.item_capacity})"
        )
        return best

    def find_match_by_slide_type(
        self, category: SlideCategory | str, candidates: list[Template]
    ) -> Template:
        category = SlideCategory(category)
        same_type = [t for t in candidates if t.type == category]
        if same_type:
            return self._choose(category.value, same_type)
        if candidates:
            return candidates[0]
        return self.create_default_template(category)

    @staticmethod
    def create_default_template(category: SlideCategory = SlideCategory.CONTENT) -> Template:
        """A plain white slide with one title and one content placeholder."""
        return Template(
            id=f"default-{category.value}",
            type=category,
            name="Default",
            background="#ffffff",
            elements=[
                PlaceholderElement(
                    id="default-title",
                    type=ElementType.TEXT,
                    left=50, top=50, width=400, height=60,
                    text_type=TextRole.TITLE,
                    font_size=32,
                    content="Title",
                ),
                PlaceholderElement(
                    id="default-content",
                    type=ElementType.TEXT,
                    left=50, top=150, width=400, height=300,
                    text_type=TextRole.CONTENT,
                    font_size=16,
                    content="Content",
                ),
            ],
        )

    @staticmethod
    def get_fallback_reason(slide: ContentSlide) -> str:
        reasons = []
        if slide.semantic_features is None:
            reasons.append("missing semantic features")
        if not slide.items:
            reasons.append("missing items")
        if not slide.title:
            reasons.append("missing title")
        return ", ".join(reasons) if reasons else "unknown reason"
