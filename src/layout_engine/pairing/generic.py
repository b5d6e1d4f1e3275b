"""Greedy pairing for layouts without a recognized pattern."""

from typing import Optional

from src.schemas.content_schema import ContentItem
from src.schemas.engine_config import MatchScoreConfig
from src.schemas.layout_schema import PairedElement
from src.schemas.template_schema import ElementType, PlaceholderElement

from .match_scorer import calculate_layout_match_score


def reading_order_key(element: PlaceholderElement) -> float:
    """Left-to-right, top-to-bottom, with vertical position weighted double."""
    return element.left + element.top * 2


def _sorted_carriers(elements: list[PlaceholderElement]) -> list[PlaceholderElement]:
    carriers = [el for el in elements if el.type in (ElementType.TEXT, ElementType.SHAPE)]
    return sorted(carriers, key=reading_order_key)


def pair_generic_layout(
    title_elements: list[PlaceholderElement],
    text_elements: list[PlaceholderElement],
    titled_items: list[ContentItem],
    untitled_items: list[ContentItem],
    config: Optional[MatchScoreConfig] = None,
) -> list[PairedElement]:
    """Pair titled items first, then hand leftover texts to untitled items.

    The i-th titled item takes the i-th title placeholder in reading order
    and the still-unused text with the highest match score. Ties, including
    an all-zero round, go to the earliest text in reading order. The choice
    is made title by title, so the overall assignment is not guaranteed
    optimal.
    """
    titles = _sorted_carriers(title_elements)
    texts = _sorted_carriers(text_elements)

    if not titled_items:
        return [
            PairedElement(text=text, data_item=item)
            for item, text in zip(untitled_items, texts)
        ]

    pairs: list[PairedElement] = []
    pool = list(texts)
    for item, title in zip(titled_items, titles):
        best: Optional[PlaceholderElement] = None
        best_score = -1.0
        for text in pool:
            score = calculate_layout_match_score(title, text, config)
            if score > best_score:
                best, best_score = text, score
        if best is None:
            break
        pairs.append(PairedElement(title=title, text=best, data_item=item))
        pool.remove(best)

    used = {p.text.id for p in pairs}
    remaining = [text for text in texts if text.id not in used]
    for item, text in zip(untitled_items, remaining):
        pairs.append(PairedElement(text=text, data_item=item))
    return pairs
