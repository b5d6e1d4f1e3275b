"""Smart template selector.

Chooses between scored matching and plain random selection per slide
category, as configured in ``SmartMatchingConfig``. Categories with smart
matching switched off (by default everything but ``content``) get a random
template of their category.
"""

import logging
import random
from typing import Optional

from src.schemas.content_schema import ContentSlide, SlideCategory
from src.schemas.engine_config import EngineConfig
from src.schemas.template_schema import Template

from .fallback import FallbackMatcher
from .registry import DimensionRegistry
from .service import TemplateMatchingService

logger = logging.getLogger(__name__)


class TemplateSelector:
    """Per-category template selection with random fallback."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        service: Optional[TemplateMatchingService] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or EngineConfig()
        self.fallback = FallbackMatcher(rng)
        self.service = service or TemplateMatchingService(
            registry=DimensionRegistry(self.config.dimensions),
            fallback=self.fallback,
            debug=self.config.smart_matching.debug,
        )

    @property
    def smart(self):
        return self.config.smart_matching

    def select_template(
        self,
        slide: ContentSlide,
        templates: list[Template],
        slide_type: Optional[SlideCategory | str] = None,
    ) -> Template:
        category = SlideCategory(slide_type) if slide_type else slide.type
        if self.smart.debug:
            logger.debug(
                f"Selecting {category.value} template from {len(templates)} candidates "
                f"(smart={self.smart.is_enabled_for(category)})"
            )

        if self.smart.is_enabled_for(category):
            try:
                template = self.service.find_best_match(self._for_matching(slide), templates)
                if self.smart.debug:
                    logger.debug(f"Smart match for {category.value}: {template.id}")
                return template
            except Exception as e:
                if self.smart.fallback.log_failure:
                    logger.warning(f"Smart matching failed for {category.value}: {e}")
                if not self.smart.fallback.enabled:
                    raise

        return self._random_select(templates, category)

    def batch_select(
        self, slides: list[ContentSlide], all_templates: list[Template]
    ) -> dict[str, Template]:
        """Select a template for every slide, keyed ``"<category>_<index>"``."""
        groups: dict[SlideCategory, list[Template]] = {c: [] for c in SlideCategory}
        for template in all_templates:
            groups[template.type].append(template)

        return {
            f"{slide.type.value}_{index}": self.select_template(slide, groups[slide.type])
            for index, slide in enumerate(slides)
        }

    def _random_select(self, templates: list[Template], category: SlideCategory) -> Template:
        if not templates and not self.smart.fallback.enabled:
            raise ValueError(f"No {category.value} templates available")
        template = self.fallback.find_match_by_slide_type(category, templates)
        if self.smart.debug:
            logger.debug(f"Random {category.value} template: {template.id}")
        return template

    @staticmethod
    def _for_matching(slide: ContentSlide) -> ContentSlide:
        # End slides carry nothing worth scoring.
        if slide.type == SlideCategory.END:
            return ContentSlide(type=SlideCategory.END)
        return slide
