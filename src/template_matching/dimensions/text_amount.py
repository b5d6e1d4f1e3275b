"""Text amount dimension: total characters vs. estimated template text capacity."""

import math

from src.schemas.content_schema import ContentSlide
from src.schemas.template_schema import Template

from .base import BaseDimension

BASE_CAPACITY = 1000
DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 30
DEFAULT_FONT_SIZE = 16
GLYPH_AREA_FACTOR = 0.6


class TextAmountDimension(BaseDimension):
    id = "textAmount"
    name = "Text amount"
    required = True

    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        ratio = self.total_chars(slide) / self.estimate_capacity(template)
        if 0.7 <= ratio <= 1.0:
            return 1.0
        if 0.5 <= ratio < 0.7:
            return 0.8
        if 0.3 <= ratio < 0.5:
            return 0.6
        return 0.4

    @staticmethod
    def total_chars(slide: ContentSlide) -> int:
        return sum(len(item.title) + len(item.text) for item in slide.items)

    @staticmethod
    def estimate_capacity(template: Template) -> int:
        """Characters the template's text areas can hold, never below BASE_CAPACITY."""
        capacity = BASE_CAPACITY
        for el in template.text_elements():
            width = el.width or DEFAULT_WIDTH
            height = el.height or DEFAULT_HEIGHT
            font_size = el.font_size or DEFAULT_FONT_SIZE
            capacity += math.floor((width * height) / (font_size * font_size * GLYPH_AREA_FACTOR))
        return capacity
