"""Structure dimensions: titled items and body texts vs. matching placeholders."""

from src.schemas.content_schema import ContentSlide
from src.schemas.template_schema import Template, TextRole

from .base import BaseDimension


class TitleStructureDimension(BaseDimension):
    """Items with a title vs. ``itemTitle`` placeholders."""

    id = "titleStructure"
    name = "Title structure"
    required = True

    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        titled = sum(1 for item in slide.items if item.has_title)
        slots = self.count_role(template, TextRole.ITEM_TITLE)
        return self.match_ratio(titled, slots)


class TextStructureDimension(BaseDimension):
    """Items with body text vs. ``item``/``content`` placeholders."""

    id = "textStructure"
    name = "Text structure"
    required = True

    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        with_text = sum(1 for item in slide.items if item.has_text)
        slots = self.count_role(template, TextRole.ITEM, TextRole.CONTENT)
        return self.match_ratio(with_text, slots)
