"""Categorical dimensions comparing semantic tags with template annotations.

Both are optional: a slide without the tag makes the dimension unavailable,
which removes it from the weighted sum instead of penalizing the template.
"""

from typing import Optional

from src.schemas.content_schema import ContentSlide
from src.schemas.template_schema import Template

from .base import BaseDimension

NEUTRAL_SCORE = 0.5


class _CategoricalDimension(BaseDimension):
    feature: str = ""

    def _content_tag(self, slide: ContentSlide) -> Optional[str]:
        if slide.semantic_features is None:
            return None
        return getattr(slide.semantic_features, self.feature)

    def _template_tag(self, template: Template) -> Optional[str]:
        if template.annotation is None:
            return None
        return getattr(template.annotation, self.feature)

    def is_available(self, slide: ContentSlide) -> bool:
        return self._content_tag(slide) is not None

    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        template_tag = self._template_tag(template)
        if template_tag is None:
            return NEUTRAL_SCORE
        return 1.0 if self._content_tag(slide) == template_tag else 0.0


class ContentTypeDimension(_CategoricalDimension):
    id = "contentType"
    name = "Content type"
    feature = "content_type"


class LayoutTypeDimension(_CategoricalDimension):
    id = "layoutType"
    name = "Layout type"
    feature = "layout_type"
