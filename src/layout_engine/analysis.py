"""Geometric layout-pattern detection for template placeholders.

Looks only at the positions of a template's item-title and item-text
placeholders and classifies the arrangement as a horizontal list (a row of
three or more titles, each with a text below), a comparison (two titles side
by side, each with a text below) or generic.
"""

import logging
from typing import Optional

from src.schemas.engine_config import LayoutAnalysisConfig
from src.schemas.layout_schema import LayoutAnalysisResult, LayoutPattern
from src.schemas.template_schema import ElementType, PlaceholderElement

logger = logging.getLogger(__name__)

_TEXT_CARRIERS = (ElementType.TEXT, ElementType.SHAPE)


def group_elements_by_vertical_position(
    elements: list[PlaceholderElement],
    threshold: float = 50,
) -> list[list[PlaceholderElement]]:
    """Cluster elements into rows.

    An element joins the first row holding any member whose top edge is
    within ``threshold`` of its own; otherwise it starts a new row.
    """
    rows: list[list[PlaceholderElement]] = []
    for element in elements:
        for row in rows:
            if any(abs(member.top - element.top) < threshold for member in row):
                row.append(element)
                break
        else:
            rows.append([element])
    return rows


def _first_text_below(
    title: PlaceholderElement,
    texts: list[PlaceholderElement],
    max_offset: float,
    exclude: list[PlaceholderElement],
) -> Optional[PlaceholderElement]:
    for text in texts:
        if any(text is used for used in exclude):
            continue
        if abs(text.left - title.left) < max_offset and text.top > title.top:
            return text
    return None


def _detect_horizontal_list(
    rows: list[list[PlaceholderElement]],
    texts: list[PlaceholderElement],
    config: LayoutAnalysisConfig,
) -> Optional[LayoutAnalysisResult]:
    thresholds = config.horizontal_list
    if len(rows) != 1 or len(rows[0]) < thresholds.min_title_count:
        return None

    titles = sorted(rows[0], key=lambda el: el.left)
    paired: list[PlaceholderElement] = []
    for title in titles:
        text = _first_text_below(title, texts, thresholds.horizontal_match_threshold, paired)
        if text is not None:
            paired.append(text)
    if len(paired) != len(titles):
        return None

    top_texts = [
        t for t in texts
        if t.top < titles[0].top and t.width > thresholds.top_text_min_width
    ]
    return LayoutAnalysisResult(
        layout_type=LayoutPattern.HORIZONTAL_LIST,
        top_texts=top_texts,
        list_titles=titles,
        list_texts=paired,
    )


def _detect_comparison(
    rows: list[list[PlaceholderElement]],
    texts: list[PlaceholderElement],
    config: LayoutAnalysisConfig,
) -> Optional[LayoutAnalysisResult]:
    thresholds = config.comparison
    if len(rows) != 1 or len(rows[0]) != thresholds.title_count:
        return None

    left_title, right_title = sorted(rows[0], key=lambda el: el.left)
    max_offset = thresholds.horizontal_match_threshold
    left_text = _first_text_below(left_title, texts, max_offset, [])
    if left_text is None:
        return None
    right_text = _first_text_below(right_title, texts, max_offset, [left_text])
    if right_text is None:
        return None

    wide = thresholds.wide_text_min_width
    return LayoutAnalysisResult(
        layout_type=LayoutPattern.COMPARISON,
        left_titles=[left_title],
        right_titles=[right_title],
        left_texts=[left_text],
        right_texts=[right_text],
        top_texts=[t for t in texts if t.top < left_title.top and t.width > wide],
        bottom_texts=[t for t in texts if t.top > right_text.top and t.width > wide],
    )


def analyze_template_layout(
    title_elements: list[PlaceholderElement],
    text_elements: list[PlaceholderElement],
    config: Optional[LayoutAnalysisConfig] = None,
) -> LayoutAnalysisResult:
    """Classify the arrangement of title and text placeholders."""
    config = config or LayoutAnalysisConfig()
    titles = [el for el in title_elements if el.type in _TEXT_CARRIERS]
    texts = [el for el in text_elements if el.type in _TEXT_CARRIERS]

    rows = group_elements_by_vertical_position(titles, config.vertical_grouping_threshold)

    result = _detect_horizontal_list(rows, texts, config)
    if result is None:
        result = _detect_comparison(rows, texts, config)
    if result is None:
        result = LayoutAnalysisResult(layout_type=LayoutPattern.GENERIC)

    logger.debug(
        f"Layout {result.layout_type.value}: {len(titles)} titles in {len(rows)} rows, "
        f"{len(texts)} texts"
    )
    return result
