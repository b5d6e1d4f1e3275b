"""Capacity dimension: can the template hold every item?"""

from src.schemas.content_schema import ContentSlide
from src.schemas.template_schema import Template

from .base import BaseDimension


class CapacityDimension(BaseDimension):
    """Hard filter. Zero when items overflow, graded by utilization otherwise."""

    id = "capacity"
    name = "Capacity"
    required = True

    def calculate_score(self, slide: ContentSlide, template: Template) -> float:
        item_count = slide.item_count
        capacity = self.template_capacity(template)
        if item_count > capacity:
            return 0.0

        utilization = item_count / capacity
        if abs(utilization - 1.0) < 0.01:
            return 1.0
        if utilization >= 0.8:
            return 0.9
        if utilization >= 0.6:
            return 0.7
        if utilization >= 0.4:
            return 0.5
        return 0.3
