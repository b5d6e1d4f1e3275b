"""Tests for template loading and content file parsing."""

import json

import pytest
from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE
from pptx.util import Inches, Pt

from src.schemas.content_schema import ContentType, LayoutType, SlideCategory
from src.schemas.template_schema import ElementType, TemplateLibrary, TextRole


def _textbox(slide, name, left, top, width, height, text, size=None):
    box = slide.shapes.add_textbox(Inches(left), Inches(top), Inches(width), Inches(height))
    box.name = name
    box.text_frame.text = text
    if size is not None:
        box.text_frame.paragraphs[0].runs[0].font.size = Pt(size)
    return box


def build_deck(path):
    prs = Presentation()

    # Two-column content slide with tagged shapes
    slide = prs.slides.add_slide(prs.slide_layouts[6])
    _textbox(slide, "title", 1, 0.3, 8, 0.8, "Slide title", size=30)
    _textbox(slide, "itemTitle 1", 1, 1.5, 3.5, 0.5, "Left heading")
    _textbox(slide, "itemTitle 2", 5, 1.5, 3.5, 0.5, "Right heading")
    _textbox(slide, "Left body [item]", 1, 2.2, 3.5, 2, "Left text", size=15)
    _textbox(slide, "Right body [item]", 5, 2.2, 3.5, 2, "Right text", size=15)
    deco = slide.shapes.add_shape(MSO_SHAPE.RECTANGLE, Inches(0), Inches(0), Inches(0.5), Inches(0.5))
    deco.name = "Decoration"
    slide.notes_slide.notes_text_frame.text = (
        "type=content; contentType=comparison_analysis; layoutType=comparison"
    )

    # Cover slide using the layout's placeholders
    cover = prs.slides.add_slide(prs.slide_layouts[0])
    cover.shapes.title.text = "Lesson title"
    cover.placeholders[1].text = "Subtitle"
    cover.notes_slide.notes_text_frame.text = "type=cover"

    # Contents slide with grouped number/entry pairs
    contents = prs.slides.add_slide(prs.slide_layouts[6])
    for i in range(2):
        group = contents.shapes.add_group_shape()
        number = group.shapes.add_textbox(Inches(1), Inches(1 + i), Inches(0.5), Inches(0.5))
        number.name = "itemNumber"
        number.text_frame.text = "01"
        entry = group.shapes.add_textbox(Inches(2), Inches(1 + i), Inches(4), Inches(0.5))
        entry.name = "item"
        entry.text_frame.text = "Entry"
    contents.notes_slide.notes_text_frame.text = "type=contents"

    # Slide with unrecognized notes
    odd = prs.slides.add_slide(prs.slide_layouts[6])
    _textbox(odd, "content", 1, 1, 8, 4, "Body")
    odd.notes_slide.notes_text_frame.text = "type=appendix; contentType=poetry"

    prs.save(str(path))
    return path


class TestPptxTemplateLoader:
    def test_loads_every_slide(self, tmp_path):
        from src.parsers import load_pptx_templates

        templates = load_pptx_templates(build_deck(tmp_path / "lesson.pptx"))
        assert [t.id for t in templates] == ["lesson-1", "lesson-2", "lesson-3", "lesson-4"]
        assert [t.type for t in templates] == [
            SlideCategory.CONTENT, SlideCategory.COVER, SlideCategory.CONTENTS, SlideCategory.CONTENT,
        ]

    def test_roles_geometry_and_annotation(self, tmp_path):
        from src.parsers import load_pptx_templates

        template = load_pptx_templates(build_deck(tmp_path / "lesson.pptx"))[0]
        roles = [el.text_type for el in template.elements]
        assert roles == [
            TextRole.TITLE, TextRole.ITEM_TITLE, TextRole.ITEM_TITLE, TextRole.ITEM, TextRole.ITEM, None,
        ]
        assert template.item_capacity == 4
        assert template.annotation.content_type == ContentType.COMPARISON_ANALYSIS
        assert template.annotation.layout_type == LayoutType.COMPARISON

        title = template.elements[0]
        assert (title.left, title.top, title.width) == (96, 28.8, 768)
        assert title.font_size == 40
        assert title.content == "Slide title"
        assert template.elements[3].font_size == 20

        decoration = template.elements[-1]
        assert decoration.type == ElementType.SHAPE
        assert not decoration.is_text_bearing

    def test_layout_placeholders(self, tmp_path):
        from src.parsers import load_pptx_templates

        cover = load_pptx_templates(build_deck(tmp_path / "lesson.pptx"))[1]
        assert cover.name == "Title Slide"
        assert [el.text_type for el in cover.elements] == [TextRole.TITLE, TextRole.CONTENT]
        assert all(el.width > 0 for el in cover.elements)

    def test_groups(self, tmp_path):
        from src.parsers import load_pptx_templates

        contents = load_pptx_templates(build_deck(tmp_path / "lesson.pptx"))[2]
        assert [el.text_type for el in contents.elements] == [
            TextRole.ITEM_NUMBER, TextRole.ITEM, TextRole.ITEM_NUMBER, TextRole.ITEM,
        ]
        groups = [el.group_id for el in contents.elements]
        assert groups[0] == groups[1] != groups[2] == groups[3]
        assert groups[0] is not None

    def test_unknown_notes_values(self, tmp_path):
        from src.parsers import load_pptx_templates

        odd = load_pptx_templates(build_deck(tmp_path / "lesson.pptx"))[3]
        assert odd.type == SlideCategory.CONTENT
        assert odd.annotation is None
        assert odd.elements[0].text_type == TextRole.CONTENT

    def test_missing_file(self, tmp_path):
        from src.parsers import load_pptx_templates

        with pytest.raises(FileNotFoundError):
            load_pptx_templates(tmp_path / "missing.pptx")

    def test_empty_deck(self, tmp_path):
        from src.parsers import load_pptx_templates

        path = tmp_path / "empty.pptx"
        Presentation().save(str(path))
        with pytest.raises(ValueError):
            load_pptx_templates(path)

    def test_parse_notes_metadata(self):
        from src.parsers.pptx_template_loader import parse_notes_metadata

        assert parse_notes_metadata("type = cover;\nlayoutType=basic_matrix") == {
            "type": "cover", "layoutType": "basic_matrix",
        }
        assert parse_notes_metadata("") == {}


class TestTemplateDispatch:
    def test_build_library_and_reload(self, tmp_path):
        from src.parsers import build_library, load_templates

        first = build_deck(tmp_path / "a.pptx")
        second = build_deck(tmp_path / "b.pptx")
        library = build_library([first, second])
        assert len(library.templates) == 8
        assert library.source_files == [str(first), str(second)]

        saved = tmp_path / "library.json"
        library.save(saved)
        assert [t.id for t in load_templates(saved)] == [t.id for t in library.templates]
        assert len(load_templates(first)) == 4

    def test_unsupported_format(self, tmp_path):
        from src.parsers import load_templates

        f = tmp_path / "templates.xyz"
        f.write_text("data")
        with pytest.raises(ValueError, match="Unsupported"):
            load_templates(f)


class TestContentLoading:
    def test_list_and_wrapped_forms(self, tmp_path):
        from src.utils.file_utils import load_content_slides

        slides = [
            {"type": "cover", "data": {"title": "Rivers"}},
            {"type": "content", "title": "Flow", "items": [{"title": "Source", "text": "Springs"}]},
        ]
        bare = tmp_path / "bare.json"
        bare.write_text(json.dumps(slides))
        wrapped = tmp_path / "wrapped.json"
        wrapped.write_text(json.dumps({"slides": slides}))

        for path in (bare, wrapped):
            loaded = load_content_slides(path)
            assert [s.type for s in loaded] == [SlideCategory.COVER, SlideCategory.CONTENT]
            assert loaded[0].title == "Rivers"
            assert loaded[1].items[0].text == "Springs"

    def test_rejects_other_shapes(self, tmp_path):
        from src.utils.file_utils import load_content_slides

        f = tmp_path / "bad.json"
        f.write_text(json.dumps({"pages": []}))
        with pytest.raises(ValueError):
            load_content_slides(f)

    def test_library_round_trip_through_json(self, tmp_path):
        from src.utils.file_utils import load_json

        path = tmp_path / "lib.json"
        TemplateLibrary().save(path)
        assert load_json(path) == {"templates": [], "sourceFiles": []}
