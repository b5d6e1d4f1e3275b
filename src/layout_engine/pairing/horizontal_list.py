"""Pairing for a row of three or more title/text columns."""

from src.schemas.content_schema import ContentItem
from src.schemas.layout_schema import LayoutAnalysisResult, PairedElement


def pair_horizontal_list_layout(
    layout: LayoutAnalysisResult,
    titled_items: list[ContentItem],
    untitled_items: list[ContentItem],
) -> list[PairedElement]:
    if layout.list_titles is None or layout.list_texts is None:
        return []

    pairs: list[PairedElement] = []
    if layout.top_texts and untitled_items:
        pairs.append(PairedElement(text=layout.top_texts[0], data_item=untitled_items[0]))

    titles = sorted(layout.list_titles, key=lambda el: el.left)
    texts = sorted(layout.list_texts, key=lambda el: el.left)
    for item, title, text in zip(titled_items, titles, texts):
        pairs.append(PairedElement(title=title, text=text, data_item=item))
    return pairs
