"""Tests for Pydantic schema models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.schemas.content_schema import (
    ContentItem,
    ContentSlide,
    ContentType,
    LayoutType,
    SlideCategory,
)
from src.schemas.engine_config import EngineConfig, SmartMatchingConfig
from src.schemas.matching_schema import Available, DimensionScore, Unavailable
from src.schemas.pagination_schema import PaginationRule, PaginationStrategy
from src.schemas.template_schema import (
    ElementType,
    PlaceholderElement,
    Template,
    TemplateLibrary,
    TextRole,
)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class TestContentSchema:
    def test_enum_values(self):
        assert SlideCategory.CONTENT == "content"
        assert ContentType.CASE_ANALYSIS == "case_analysis"
        assert LayoutType.SWOT_ANALYSIS == "swot_analysis"

    def test_camel_case_payload(self):
        slide = ContentSlide.model_validate({
            "type": "content",
            "title": "Photosynthesis",
            "semanticFeatures": {"contentType": "concept_explanation", "layoutType": "comparison"},
            "items": [{"title": "Light", "text": "Captured by chlorophyll"}],
        })
        assert slide.semantic_features.content_type == ContentType.CONCEPT_EXPLANATION
        assert slide.semantic_features.layout_type == LayoutType.COMPARISON
        assert slide.item_count == 1

    def test_snake_case_construction(self):
        slide = ContentSlide(type=SlideCategory.CONTENT, semantic_features={"content_type": "case_analysis"})
        assert slide.semantic_features.content_type == ContentType.CASE_ANALYSIS

    def test_unwraps_data_envelope(self):
        slide = ContentSlide.model_validate({
            "type": "cover",
            "data": {"title": "Cells", "text": "Biology, grade 7"},
        })
        assert slide.type == SlideCategory.COVER
        assert slide.title == "Cells"
        assert slide.text == "Biology, grade 7"

    def test_string_items_become_titles(self):
        slide = ContentSlide.model_validate({"type": "contents", "items": ["Intro", "Methods"]})
        assert [item.title for item in slide.items] == ["Intro", "Methods"]
        assert all(item.text == "" for item in slide.items)

    def test_null_title_is_blank(self):
        item = ContentItem.model_validate({"title": None, "text": "Body"})
        assert item.title == ""
        assert not item.has_title
        assert item.has_text

    def test_titled_and_untitled_split(self):
        slide = ContentSlide(
            type=SlideCategory.CONTENT,
            items=[
                ContentItem(title="A", text="a"),
                ContentItem(title="  ", text="lead"),
                ContentItem(title="B", text="b"),
            ],
        )
        assert [i.title for i in slide.titled_items()] == ["A", "B"]
        assert [i.text for i in slide.untitled_items()] == ["lead"]

    def test_offset_defaults_to_none(self):
        assert ContentSlide(type=SlideCategory.CONTENT).offset is None


class TestTemplateSchema:
    def _template(self, roles):
        return Template(
            id="t",
            elements=[
                PlaceholderElement(id=str(i), text_type=role) for i, role in enumerate(roles)
            ],
        )

    def test_item_capacity_counts_items_and_item_titles(self):
        template = self._template([TextRole.TITLE, TextRole.ITEM_TITLE, TextRole.ITEM, TextRole.ITEM])
        assert template.item_capacity == 3

    def test_item_capacity_never_below_one(self):
        assert self._template([TextRole.TITLE, TextRole.CONTENT]).item_capacity == 1

    def test_untagged_shape_is_not_text_bearing(self):
        shape = PlaceholderElement(id="s", type=ElementType.SHAPE)
        tagged = PlaceholderElement(id="t", type=ElementType.SHAPE, text_type=TextRole.ITEM)
        image = PlaceholderElement(id="i", type=ElementType.IMAGE, text_type=TextRole.ITEM)
        assert not shape.is_text_bearing
        assert tagged.is_text_bearing
        assert not image.has_role(TextRole.ITEM)

    def test_library_save_and_load(self, tmp_path):
        library = TemplateLibrary(
            templates=[
                self._template([TextRole.TITLE]),
                Template(id="cover-1", type=SlideCategory.COVER),
            ],
            source_files=["lesson.pptx"],
        )
        path = tmp_path / "library.json"
        library.save(path)

        assert '"textType": "title"' in path.read_text()
        loaded = TemplateLibrary.load(path)
        assert [t.id for t in loaded.templates] == ["t", "cover-1"]
        assert loaded.find_by_id("cover-1").type == SlideCategory.COVER
        assert [t.id for t in loaded.find_by_type("cover")] == ["cover-1"]
        assert loaded.find_by_id("missing") is None

    def test_library_load_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TemplateLibrary.load(tmp_path / "nope.json")

    def test_group_by_type_keeps_order(self):
        library = TemplateLibrary(templates=[
            Template(id="c1"), Template(id="x", type=SlideCategory.END), Template(id="c2"),
        ])
        groups = library.group_by_type()
        assert [t.id for t in groups[SlideCategory.CONTENT]] == ["c1", "c2"]
        assert [t.id for t in groups[SlideCategory.END]] == ["x"]


class TestMatchingSchema:
    def test_available_score_bounds(self):
        with pytest.raises(ValidationError):
            Available(score=1.5)

    def test_dimension_score_requires_consistent_availability(self):
        with pytest.raises(ValidationError):
            DimensionScore(dimension_id="x", score=0.5, available=False)
        with pytest.raises(ValidationError):
            DimensionScore(dimension_id="x", available=True)

    def test_from_outcome(self):
        present = DimensionScore.from_outcome("a", Available(score=0.4), 0.3)
        absent = DimensionScore.from_outcome("b", Unavailable(reason="no tag"), 0.2)
        assert present.available and present.score == 0.4
        assert not absent.available and absent.score is None
        assert absent.weight == 0.2


class TestPaginationSchema:
    def test_split_points_must_increase(self):
        with pytest.raises(ValidationError):
            PaginationStrategy(split_points=[4, 3], max_items_per_page=4)
        with pytest.raises(ValidationError):
            PaginationStrategy(split_points=[0], max_items_per_page=4)

    def test_max_items_per_page_positive(self):
        with pytest.raises(ValidationError):
            PaginationStrategy(max_items_per_page=0)

    def test_rule_from_camel_case(self):
        rule = PaginationRule.model_validate({
            "name": "short",
            "condition": {"minItems": 5, "maxItems": 6, "contentType": ["content"]},
            "strategy": {"splitPoints": [3], "maxItemsPerPage": 4, "balanceStrategy": "front-heavy"},
            "priority": 120,
        })
        assert rule.condition.content_type == [SlideCategory.CONTENT]
        assert rule.strategy.balance_strategy == "front-heavy"
        assert rule.summary()["split_points"] == [3]


class TestEngineConfig:
    def test_default_weights_sum_to_one(self):
        config = EngineConfig()
        total = sum(d.weight for d in config.dimensions if d.enabled and d.id != "capacity")
        assert abs(total - 1.0) < 0.001

    def test_smart_matching_toggles(self):
        smart = SmartMatchingConfig()
        assert smart.is_enabled_for("content")
        assert not smart.is_enabled_for(SlideCategory.COVER)
        assert smart.is_enabled_for()
        assert not SmartMatchingConfig(enabled=False).is_enabled_for("content")

    def test_load_default_yaml(self):
        config = EngineConfig.from_yaml(PROJECT_ROOT / "config" / "default.yaml")
        defaults = EngineConfig()
        assert [(d.id, d.weight, d.required) for d in config.dimensions] == [
            (d.id, d.weight, d.required) for d in defaults.dimensions
        ]
        assert config.smart_matching == defaults.smart_matching
        assert config.layout_analysis == defaults.layout_analysis
        assert config.match_score == defaults.match_score
        assert config.pagination_rules is None

    def test_yaml_round_trip(self, tmp_path):
        config = EngineConfig()
        config.smart_matching.slide_types[SlideCategory.COVER] = True
        config.layout_analysis.comparison.horizontal_match_threshold = 80
        path = tmp_path / "engine.yaml"
        config.to_yaml(path)

        loaded = EngineConfig.from_yaml(path)
        assert loaded.smart_matching.is_enabled_for("cover")
        assert loaded.layout_analysis.comparison.horizontal_match_threshold == 80

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EngineConfig.from_yaml(tmp_path / "missing.yaml")

    def test_yaml_save_creates_directories(self, tmp_path):
        path = tmp_path / "nested" / "config" / "engine.yaml"
        EngineConfig().to_yaml(path)
        assert path.exists()
        assert "capacity" in [d.id for d in EngineConfig.from_yaml(path).dimensions]

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert EngineConfig.from_yaml(path).dimensions == EngineConfig().dimensions
