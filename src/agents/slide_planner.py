"""Slide Planner Agent: content slides in, template assignments out.

For a whole deck:
1. Paginate oversized content / contents slides
2. Pick a template per slide (scored matching or random, per category)
3. For content slides, detect the template's layout pattern and pair items
   with title/text placeholders
4. Work out the text (and shrunk font size) for every placeholder, including
   item numbers that continue across paginated pages
"""

import logging
from typing import Optional

from src.layout_engine.pairing import build_paired_elements, reading_order_key
from src.layout_engine.text_metrics import (
    HeuristicTextMeasurer,
    PillowTextMeasurer,
    TextMeasurer,
    adapted_font_size,
)
from src.pagination import PaginationProcessor
from src.schemas.content_schema import ContentSlide, SlideCategory
from src.schemas.engine_config import EngineConfig
from src.schemas.plan_schema import SlideAssignment, TextFill
from src.schemas.template_schema import PlaceholderElement, Template, TemplateLibrary, TextRole
from src.template_matching import TemplateSelector

logger = logging.getLogger(__name__)

# Inner padding of a text box on each side, plus the border.
TEXT_BOX_PADDING = 10
TEXT_BOX_BORDER = 2


def count_role(template: Template, role: TextRole) -> int:
    return len(template.elements_with_role(role))


def get_usable_templates(
    templates: list[Template], item_count: int, role: TextRole = TextRole.ITEM
) -> list[Template]:
    """Templates whose ``role`` slot count best suits ``item_count`` items.

    A single item prefers plain title-plus-content templates. Otherwise the
    smallest slot count that holds every item wins, or the largest available
    when none does; all templates with that slot count are returned.
    """
    if not templates:
        return []

    if item_count == 1:
        plain = [
            t for t in templates
            if count_role(t, role) == 0
            and count_role(t, TextRole.TITLE) == 1
            and count_role(t, TextRole.CONTENT) == 1
        ]
        if plain:
            return plain

    fitting = [count_role(t, role) for t in templates if count_role(t, role) >= item_count]
    if fitting:
        target = min(fitting)
    else:
        target = max(count_role(t, role) for t in templates)
    return [t for t in templates if count_role(t, role) == target]


def format_item_number(number: int) -> str:
    """Zero-pad single digits: 1 -> '01', 12 -> '12'."""
    return f"{number:02d}"


class SlidePlannerAgent:
    """Plan a deck: paginate, select templates, pair items, size text."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        selector: Optional[TemplateSelector] = None,
        measurer: Optional[TextMeasurer] = None,
    ):
        self.config = config or EngineConfig()
        self.selector = selector or TemplateSelector(self.config)
        self.paginator = PaginationProcessor(self.config.pagination_rules)
        if measurer is None:
            font_path = self.config.text_fit.font_path
            measurer = PillowTextMeasurer(font_path) if font_path else HeuristicTextMeasurer()
        self.measurer = measurer

    def plan(
        self, slides: list[ContentSlide], library: TemplateLibrary | list[Template]
    ) -> list[SlideAssignment]:
        templates = library.templates if isinstance(library, TemplateLibrary) else library
        groups: dict[SlideCategory, list[Template]] = {c: [] for c in SlideCategory}
        for template in templates:
            groups[template.type].append(template)

        pages = self.paginator.process_pagination(slides)
        if not self.paginator.validate_pagination(slides, pages):
            raise ValueError("Pagination lost or reordered items")

        assignments = []
        transition_index = 0
        for index, slide in enumerate(pages):
            template = self._select(slide, groups[slide.type])
            if slide.type == SlideCategory.TRANSITION:
                transition_index += 1
            assignment = self._assign(index, slide, template, transition_index)
            logger.info(
                f"Slide {index + 1} ({slide.type.value}): template {template.id}, "
                f"{len(assignment.fills)} fills"
            )
            assignments.append(assignment)

        logger.info(f"Planned {len(assignments)} slides from {len(slides)} inputs")
        return assignments

    # ------------------------------------------------------------------
    # Template selection
    # ------------------------------------------------------------------

    def _select(self, slide: ContentSlide, candidates: list[Template]) -> Template:
        smart = self.config.smart_matching.is_enabled_for(slide.type)
        listy = slide.type in (SlideCategory.CONTENT, SlideCategory.CONTENTS)
        if listy and not smart and candidates:
            candidates = get_usable_templates(candidates, slide.item_count, TextRole.ITEM)
        return self.selector.select_template(slide, candidates)

    # ------------------------------------------------------------------
    # Placeholder fills
    # ------------------------------------------------------------------

    def _assign(
        self, index: int, slide: ContentSlide, template: Template, transition_index: int
    ) -> SlideAssignment:
        assignment = SlideAssignment(index=index, slide=slide, template=template)

        if slide.type == SlideCategory.CONTENT:
            self._fill_content(assignment)
        elif slide.type == SlideCategory.CONTENTS:
            self._fill_contents(assignment)
        else:
            self._fill_plain(assignment, transition_index)

        if slide.title:
            for el in template.elements_with_role(TextRole.TITLE):
                self._add_fill(assignment, el, slide.title, self.config.text_fit.title_max_lines)
        return assignment

    def _fill_plain(self, assignment: SlideAssignment, transition_index: int) -> None:
        slide, template = assignment.slide, assignment.template
        if slide.text:
            max_lines = 3 if slide.type == SlideCategory.TRANSITION else 2
            for el in template.elements_with_role(TextRole.CONTENT):
                self._add_fill(assignment, el, slide.text, max_lines)
        if slide.type == SlideCategory.TRANSITION:
            for el in template.elements_with_role(TextRole.PART_NUMBER):
                self._add_fill(assignment, el, format_item_number(transition_index), 1)

    def _fill_contents(self, assignment: SlideAssignment) -> None:
        slide, template = assignment.slide, assignment.template
        offset = slide.offset or 0
        entries = [item.title for item in slide.items]
        longest = max(entries, key=len, default="")

        slots = sorted(template.elements_with_role(TextRole.ITEM), key=reading_order_key)
        numbers = sorted(template.elements_with_role(TextRole.ITEM_NUMBER), key=reading_order_key)
        unused_groups = set()
        for position, el in enumerate(slots):
            if position < len(entries):
                self._add_fill(assignment, el, entries[position], 1, longest)
            else:
                assignment.hidden_element_ids.append(el.id)
                if el.group_id:
                    unused_groups.add(el.group_id)

        for position, el in enumerate(numbers):
            if el.group_id in unused_groups:
                continue
            self._add_fill(assignment, el, format_item_number(position + offset + 1), 1)

        for el in template.elements:
            if el.group_id in unused_groups and el.id not in assignment.hidden_element_ids:
                assignment.hidden_element_ids.append(el.id)

    def _fill_content(self, assignment: SlideAssignment) -> None:
        slide, template = assignment.slide, assignment.template
        fit = self.config.text_fit

        if slide.item_count == 1:
            item = slide.items[0]
            if item.text:
                for el in template.elements_with_role(TextRole.CONTENT):
                    self._add_fill(assignment, el, item.text, fit.single_item_max_lines)
            return

        layout, pairs = build_paired_elements(
            template.elements_with_role(TextRole.ITEM_TITLE),
            template.elements_with_role(TextRole.ITEM),
            slide.titled_items(),
            slide.untitled_items(),
            self.config.layout_analysis,
            self.config.match_score,
        )
        assignment.layout_type = layout.layout_type
        assignment.pairings = pairs

        longest_title = max((i.title for i in slide.items if i.title), key=len, default="")
        longest_text = max((i.text for i in slide.items if i.text), key=len, default="")
        for pair in pairs:
            item = pair.data_item
            if item is None:
                continue
            if pair.title is not None and item.has_title:
                self._add_fill(assignment, pair.title, item.title, fit.title_max_lines, longest_title)
            self._add_fill(assignment, pair.text, item.text, fit.item_max_lines, longest_text)

        offset = slide.offset or 0
        numbers = sorted(template.elements_with_role(TextRole.ITEM_NUMBER), key=reading_order_key)
        for position, el in enumerate(numbers):
            self._add_fill(assignment, el, format_item_number(position + offset + 1), 1)

    def _add_fill(
        self,
        assignment: SlideAssignment,
        element: PlaceholderElement,
        text: str,
        max_lines: int,
        longest: Optional[str] = None,
    ) -> None:
        fit = self.config.text_fit
        font_size = element.font_size or fit.default_font_size
        width = element.width - TEXT_BOX_PADDING * 2 - TEXT_BOX_BORDER
        sized = adapted_font_size(
            longest or text,
            font_size,
            width,
            max_lines,
            self.measurer,
            fit.min_font_size,
        )
        assignment.fills.append(
            TextFill(
                element_id=element.id,
                role=element.text_type or TextRole.CONTENT,
                text=text,
                font_size=sized,
            )
        )
