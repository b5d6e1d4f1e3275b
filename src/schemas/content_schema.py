"""Pydantic models for AI-produced slide content."""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from .base import CamelModel


class SlideCategory(str, Enum):
    """Slide categories shared by content slides and templates."""

    COVER = "cover"
    CONTENTS = "contents"
    TRANSITION = "transition"
    CONTENT = "content"
    END = "end"


class ContentType(str, Enum):
    """Pedagogical intent of a content slide."""

    LEARNING_OBJECTIVE = "learning_objective"
    LESSON_INTRODUCTION = "lesson_introduction"
    PROBLEM_GUIDANCE = "problem_guidance"
    CONCEPT_EXPLANATION = "concept_explanation"
    CASE_ANALYSIS = "case_analysis"
    COMPARISON_ANALYSIS = "comparison_analysis"
    INQUIRY_PRACTICE = "inquiry_practice"
    PROBLEM_DISCUSSION = "problem_discussion"
    CLASS_EXERCISE = "class_exercise"
    CONTENT_SUMMARY = "content_summary"
    EXTENSION_ENRICHMENT = "extension_enrichment"
    HOMEWORK_ASSIGNMENT = "homework_assignment"


class LayoutType(str, Enum):
    """Recommended visual arrangement, modelled on SmartArt families."""

    VERTICAL_LIST = "vertical_list"
    HORIZONTAL_LIST = "horizontal_list"
    MULTI_COLUMN_LIST = "multi_column_list"
    HORIZONTAL_PROCESS = "horizontal_process"
    VERTICAL_PROCESS = "vertical_process"
    STEP_PROCESS = "step_process"
    ALTERNATING_PROCESS = "alternating_process"
    BASIC_CYCLE = "basic_cycle"
    GENERAL_SPECIFIC = "general_specific"
    GENERAL_SPECIFIC_GENERAL = "general_specific_general"
    TREE_STRUCTURE = "tree_structure"
    BALANCE = "balance"
    FUNNEL = "funnel"
    INTERSECTING = "intersecting"
    BASIC_MATRIX = "basic_matrix"
    PYRAMID = "pyramid"
    INVERTED_PYRAMID = "inverted_pyramid"
    PICTURE_GRID = "picture_grid"
    PICTURE_COLLAGE = "picture_collage"
    HORIZONTAL_TIMELINE = "horizontal_timeline"
    VERTICAL_TIMELINE = "vertical_timeline"
    COMPARISON = "comparison"
    PRO_CON = "pro_con"
    BEFORE_AFTER = "before_after"
    SWOT_ANALYSIS = "swot_analysis"
    CAUSE_EFFECT = "cause_effect"
    MIND_MAP = "mind_map"


class SemanticFeatures(CamelModel):
    """Optional categorical tags the content generator attaches to a slide."""

    content_type: Optional[ContentType] = None
    layout_type: Optional[LayoutType] = None


class ContentItem(CamelModel):
    """One title/text pair of a content slide."""

    title: str = ""
    text: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("title", "text", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @property
    def has_title(self) -> bool:
        return bool(self.title.strip())

    @property
    def has_text(self) -> bool:
        return bool(self.text.strip())


class ContentSlide(CamelModel):
    """A single slide worth of generated content.

    ``items`` order only matters as a tie-break during pairing. Table-of-contents
    slides arrive as plain strings and are normalized into items whose
    ``title`` holds the entry.
    """

    type: SlideCategory
    title: str = ""
    text: str = Field(default="", description="Subtitle or lead text of cover/transition slides")
    semantic_features: Optional[SemanticFeatures] = None
    items: list[ContentItem] = Field(default_factory=list)
    offset: Optional[int] = Field(
        default=None,
        description="Number of items on earlier pages of the same paginated slide",
    )

    @model_validator(mode="before")
    @classmethod
    def _unwrap_data(cls, value):
        # Backend payloads nest everything but type/offset under "data".
        if isinstance(value, dict) and isinstance(value.get("data"), dict):
            unwrapped = {k: v for k, v in value.items() if k != "data"}
            unwrapped.update(value["data"])
            return unwrapped
        return value

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_string_items(cls, value):
        if not isinstance(value, list):
            return value
        return [
            {"title": item, "text": "", "metadata": {}} if isinstance(item, str) else item
            for item in value
        ]

    @property
    def item_count(self) -> int:
        return len(self.items)

    def titled_items(self) -> list[ContentItem]:
        """Items with a non-blank title, in original order."""
        return [item for item in self.items if item.has_title]

    def untitled_items(self) -> list[ContentItem]:
        """Items whose title is blank, in original order."""
        return [item for item in self.items if not item.has_title]
