"""Tests for layout analysis and placeholder pairing."""

import pytest

from src.layout_engine.analysis import analyze_template_layout, group_elements_by_vertical_position
from src.layout_engine.pairing import (
    build_paired_elements,
    calculate_layout_match_score,
    pair_comparison_layout,
    pair_generic_layout,
    pair_horizontal_list_layout,
)
from src.schemas.content_schema import ContentItem
from src.schemas.engine_config import LayoutAnalysisConfig
from src.schemas.layout_schema import LayoutAnalysisResult, LayoutPattern
from src.schemas.template_schema import ElementType, PlaceholderElement, TextRole


def box(element_id, left, top, width=300, height=60, role=TextRole.ITEM, element_type=ElementType.TEXT):
    return PlaceholderElement(
        id=element_id, type=element_type, left=left, top=top,
        width=width, height=height, text_type=role,
    )


def title_box(element_id, left, top, width=300):
    return box(element_id, left, top, width=width, height=40, role=TextRole.ITEM_TITLE)


def items(*titles):
    return [ContentItem(title=t, text=f"{t or 'lead'} text") for t in titles]


def comparison_template():
    titles = [title_box("t-left", 100, 200, 400), title_box("t-right", 700, 200, 400)]
    texts = [
        box("top", 50, 100, width=1100),
        box("left", 100, 270, width=400, height=200),
        box("right", 700, 270, width=400, height=200),
        box("bottom", 50, 520, width=1100),
    ]
    return titles, texts


def horizontal_list_template():
    titles = [title_box(f"t{i}", 100 + 400 * i, 200) for i in (2, 0, 1)]
    texts = [box("intro", 50, 100, width=1100)] + [
        box(f"x{i}", 100 + 400 * i, 270, height=200) for i in range(3)
    ]
    return titles, texts


class TestVerticalGrouping:
    def test_rows(self):
        elements = [box("a", 0, 100), box("b", 300, 130), box("c", 0, 300)]
        rows = group_elements_by_vertical_position(elements)
        assert [[el.id for el in row] for row in rows] == [["a", "b"], ["c"]]

    def test_rows_chain_through_members(self):
        elements = [box("a", 0, 100), box("b", 0, 140), box("c", 0, 180)]
        rows = group_elements_by_vertical_position(elements, threshold=50)
        assert len(rows) == 1

    def test_threshold_is_exclusive(self):
        rows = group_elements_by_vertical_position([box("a", 0, 100), box("b", 0, 150)], threshold=50)
        assert len(rows) == 2


class TestLayoutAnalysis:
    def test_comparison(self):
        titles, texts = comparison_template()
        layout = analyze_template_layout(titles, texts)
        assert layout.layout_type == LayoutPattern.COMPARISON
        assert [el.id for el in layout.left_texts] == ["left"]
        assert [el.id for el in layout.right_texts] == ["right"]
        assert [el.id for el in layout.top_texts] == ["top"]
        assert [el.id for el in layout.bottom_texts] == ["bottom"]

    def test_comparison_without_captions(self):
        titles = [title_box("l", 100, 200), title_box("r", 700, 200)]
        texts = [box("lt", 110, 270), box("rt", 690, 270)]
        layout = analyze_template_layout(titles, texts)
        assert layout.layout_type == LayoutPattern.COMPARISON
        assert layout.top_texts == [] and layout.bottom_texts == []

    def test_comparison_needs_text_under_each_title(self):
        titles = [title_box("l", 100, 200), title_box("r", 700, 200)]
        texts = [box("lt", 110, 270)]
        assert analyze_template_layout(titles, texts).layout_type == LayoutPattern.GENERIC

    def test_comparison_threshold_is_configurable(self):
        titles = [title_box("l", 100, 200), title_box("r", 700, 200)]
        texts = [box("lt", 180, 270), box("rt", 780, 270)]
        assert analyze_template_layout(titles, texts).layout_type == LayoutPattern.COMPARISON

        strict = LayoutAnalysisConfig()
        strict.comparison.horizontal_match_threshold = 50
        assert analyze_template_layout(titles, texts, strict).layout_type == LayoutPattern.GENERIC

    def test_horizontal_list(self):
        titles, texts = horizontal_list_template()
        layout = analyze_template_layout(titles, texts)
        assert layout.layout_type == LayoutPattern.HORIZONTAL_LIST
        assert [el.id for el in layout.list_titles] == ["t0", "t1", "t2"]
        assert [el.id for el in layout.list_texts] == ["x0", "x1", "x2"]
        assert [el.id for el in layout.top_texts] == ["intro"]

    def test_two_rows_are_generic(self):
        titles = [title_box("a", 100, 100), title_box("b", 100, 300)]
        texts = [box("x", 100, 170), box("y", 100, 370)]
        assert analyze_template_layout(titles, texts).layout_type == LayoutPattern.GENERIC

    def test_images_are_ignored(self):
        titles = [
            title_box("l", 100, 200),
            title_box("r", 700, 200),
            box("pic", 400, 200, role=TextRole.ITEM_TITLE, element_type=ElementType.IMAGE),
        ]
        texts = [box("lt", 100, 270), box("rt", 700, 270)]
        assert analyze_template_layout(titles, texts).layout_type == LayoutPattern.COMPARISON

    def test_empty_is_generic(self):
        assert analyze_template_layout([], []).layout_type == LayoutPattern.GENERIC


class TestMatchScorer:
    def test_aligned_text_below(self):
        title = box("t", 100, 100, width=200, role=TextRole.ITEM_TITLE)
        text = box("x", 100, 170, width=200)
        # horizontal 100*1.0 + vertical 100*1.2 + width 50*0.5 + center 50*0.8
        assert calculate_layout_match_score(title, text) == pytest.approx(285)

    def test_too_far_left_or_right(self):
        title = box("t", 100, 100, width=200, role=TextRole.ITEM_TITLE)
        assert calculate_layout_match_score(title, box("x", 300, 170, width=200)) == 0

    def test_must_be_below_and_close(self):
        title = box("t", 100, 100, width=200, role=TextRole.ITEM_TITLE)
        assert calculate_layout_match_score(title, box("above", 100, 50, width=200)) == 0
        assert calculate_layout_match_score(title, box("same", 100, 100, width=200)) == 0
        assert calculate_layout_match_score(title, box("far", 100, 300, width=200)) == 0

    def test_center_offset_cutoff(self):
        title = box("t", 100, 100, width=200, role=TextRole.ITEM_TITLE)
        assert calculate_layout_match_score(title, box("wide", 200, 170, width=400)) == 0

    def test_closer_scores_higher(self):
        title = box("t", 100, 100, width=200, role=TextRole.ITEM_TITLE)
        near = calculate_layout_match_score(title, box("near", 110, 170, width=200))
        off = calculate_layout_match_score(title, box("off", 140, 150, width=200))
        assert near > off > 0

    def test_zero_widths(self):
        title = box("t", 100, 100, width=0, role=TextRole.ITEM_TITLE)
        assert calculate_layout_match_score(title, box("x", 100, 170, width=0)) == pytest.approx(285)


class TestComparisonPairing:
    def test_captions_and_columns_in_order(self):
        titles, texts = comparison_template()
        layout = analyze_template_layout(titles, texts)
        titled = items("Pros", "Cons")
        untitled = items("", "")
        pairs = pair_comparison_layout(layout, titled, untitled)

        assert [p.text.id for p in pairs] == ["top", "left", "right", "bottom"]
        assert [p.title.id if p.title else None for p in pairs] == [None, "t-left", "t-right", None]
        assert [p.data_item for p in pairs] == [untitled[0], titled[0], titled[1], untitled[1]]

    def test_column_without_titled_item_takes_untitled(self):
        titles = [title_box("l", 100, 200), title_box("r", 700, 200)]
        texts = [box("lt", 100, 270), box("rt", 700, 270)]
        layout = analyze_template_layout(titles, texts)
        pairs = pair_comparison_layout(layout, items("Only"), items(""))
        assert [(p.title.id if p.title else None, p.text.id) for p in pairs] == [
            ("l", "lt"), (None, "rt"),
        ]

    def test_no_items(self):
        titles, texts = comparison_template()
        layout = analyze_template_layout(titles, texts)
        assert pair_comparison_layout(layout, [], []) == []


class TestHorizontalListPairing:
    def test_intro_then_columns_left_to_right(self):
        titles, texts = horizontal_list_template()
        layout = analyze_template_layout(titles, texts)
        titled = items("One", "Two", "Three")
        pairs = pair_horizontal_list_layout(layout, titled, items(""))

        assert [p.text.id for p in pairs] == ["intro", "x0", "x1", "x2"]
        assert [p.title.id for p in pairs[1:]] == ["t0", "t1", "t2"]
        assert [p.data_item.title for p in pairs[1:]] == ["One", "Two", "Three"]

    def test_fewer_items_than_columns(self):
        titles, texts = horizontal_list_template()
        layout = analyze_template_layout(titles, texts)
        pairs = pair_horizontal_list_layout(layout, items("One", "Two"), [])
        assert [p.text.id for p in pairs] == ["x0", "x1"]

    def test_requires_list_slots(self):
        assert pair_horizontal_list_layout(LayoutAnalysisResult(), items("A"), []) == []


class TestGenericPairing:
    def test_pairs_by_score(self):
        titles = [title_box("t2", 100, 300, 200), title_box("t1", 100, 100, 200)]
        texts = [box("x2", 100, 370, width=200), box("x1", 100, 170, width=200)]
        pairs = pair_generic_layout(titles, texts, items("A", "B"), [])
        assert [(p.title.id, p.text.id, p.data_item.title) for p in pairs] == [
            ("t1", "x1", "A"), ("t2", "x2", "B"),
        ]

    def test_all_zero_scores_take_first_in_reading_order(self):
        titles = [title_box("t", 100, 100, 200)]
        texts = [box("late", 800, 500), box("early", 600, 500)]
        pairs = pair_generic_layout(titles, texts, items("A"), [])
        assert pairs[0].text.id == "early"

    def test_leftover_texts_go_to_untitled_items(self):
        titles = [title_box("t", 100, 100, 200)]
        texts = [box("x", 100, 170, width=200), box("extra", 100, 600, width=200)]
        untitled = items("")
        pairs = pair_generic_layout(titles, texts, items("A"), untitled)
        assert [(p.title.id if p.title else None, p.text.id) for p in pairs] == [
            ("t", "x"), (None, "extra"),
        ]
        assert pairs[1].data_item == untitled[0]

    def test_only_untitled_items(self):
        texts = [box("b", 100, 400), box("a", 100, 100)]
        pairs = pair_generic_layout([], texts, [], items("", ""))
        assert [p.text.id for p in pairs] == ["a", "b"]
        assert all(p.title is None for p in pairs)

    def test_more_items_than_titles(self):
        titles = [title_box("t", 100, 100, 200)]
        texts = [box("x", 100, 170, width=200), box("y", 100, 400, width=200)]
        pairs = pair_generic_layout(titles, texts, items("A", "B"), [])
        assert len(pairs) == 1

    def test_greedy_order_is_kept(self):
        # "t1" comes first in reading order and claims "x", which "t2" would fit better.
        titles = [title_box("t1", 100, 100, 200), title_box("t2", 200, 100, 200)]
        texts = [box("x", 150, 170, width=200), box("y", 100, 250, width=200)]
        pairs = pair_generic_layout(titles, texts, items("A", "B"), [])
        assert [(p.title.id, p.text.id) for p in pairs] == [("t1", "x"), ("t2", "y")]


class TestBuildPairedElements:
    def test_dispatches_on_layout(self):
        titles, texts = comparison_template()
        layout, pairs = build_paired_elements(titles, texts, items("A", "B"), items("", ""))
        assert layout.layout_type == LayoutPattern.COMPARISON
        assert len(pairs) == 4

    def test_generic_fallback(self):
        titles = [title_box("t1", 100, 100, 200)]
        texts = [box("x1", 100, 170, width=200)]
        layout, pairs = build_paired_elements(titles, texts, items("A"), [])
        assert layout.layout_type == LayoutPattern.GENERIC
        assert [(p.title.id, p.text.id) for p in pairs] == [("t1", "x1")]
