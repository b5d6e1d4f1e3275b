"""Pairing for two-column comparison layouts."""

from src.schemas.content_schema import ContentItem
from src.schemas.layout_schema import LayoutAnalysisResult, PairedElement


def pair_comparison_layout(
    layout: LayoutAnalysisResult,
    titled_items: list[ContentItem],
    untitled_items: list[ContentItem],
) -> list[PairedElement]:
    """Fill the slots top caption, left column, right column, bottom caption.

    Columns take the next titled item; a column without one falls back to
    the next untitled item placed in its text box alone. Captions only take
    untitled items. Every slot is used at most once.
    """
    titled = iter(titled_items)
    untitled = iter(untitled_items)
    pairs: list[PairedElement] = []

    def caption(slots):
        if slots and all(p.text.id != slots[0].id for p in pairs):
            item = next(untitled, None)
            if item is not None:
                pairs.append(PairedElement(text=slots[0], data_item=item))

    def column(titles, texts):
        if titles and texts:
            item = next(titled, None)
            if item is not None:
                pairs.append(PairedElement(title=titles[0], text=texts[0], data_item=item))
                return
        if texts:
            item = next(untitled, None)
            if item is not None:
                pairs.append(PairedElement(text=texts[0], data_item=item))

    caption(layout.top_texts)
    column(layout.left_titles, layout.left_texts)
    column(layout.right_titles, layout.right_texts)
    caption(layout.bottom_texts)
    return pairs
