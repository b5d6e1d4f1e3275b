"""Placeholder pairing strategies.

Use build_paired_elements() to analyze a template's layout and dispatch to
the matching strategy.
"""

import logging
from typing import Optional

from src.schemas.content_schema import ContentItem
from src.schemas.engine_config import LayoutAnalysisConfig, MatchScoreConfig
from src.schemas.layout_schema import LayoutAnalysisResult, LayoutPattern, PairedElement
from src.schemas.template_schema import PlaceholderElement

from ..analysis import analyze_template_layout
from .comparison import pair_comparison_layout
from .generic import pair_generic_layout, reading_order_key
from .horizontal_list import pair_horizontal_list_layout
from .match_scorer import calculate_layout_match_score

logger = logging.getLogger(__name__)


def build_paired_elements(
    title_elements: list[PlaceholderElement],
    text_elements: list[PlaceholderElement],
    titled_items: list[ContentItem],
    untitled_items: list[ContentItem],
    layout_config: Optional[LayoutAnalysisConfig] = None,
    score_config: Optional[MatchScoreConfig] = None,
) -> tuple[LayoutAnalysisResult, list[PairedElement]]:
    """Detect the layout pattern and pair items with placeholders accordingly."""
    layout = analyze_template_layout(title_elements, text_elements, layout_config)

    if layout.layout_type == LayoutPattern.COMPARISON:
        pairs = pair_comparison_layout(layout, titled_items, untitled_items)
    elif layout.layout_type == LayoutPattern.HORIZONTAL_LIST:
        pairs = pair_horizontal_list_layout(layout, titled_items, untitled_items)
    else:
        pairs = pair_generic_layout(
            title_elements, text_elements, titled_items, untitled_items, score_config
        )

    logger.debug(
        f"{layout.layout_type.value} pairing: {len(pairs)} pairs for "
        f"{len(titled_items)} titled / {len(untitled_items)} untitled items"
    )
    return layout, pairs


__all__ = [
    "build_paired_elements",
    "calculate_layout_match_score",
    "pair_comparison_layout",
    "pair_generic_layout",
    "pair_horizontal_list_layout",
    "reading_order_key",
]
