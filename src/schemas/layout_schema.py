"""Pydantic models for layout analysis and placeholder pairing."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .content_schema import ContentItem
from .template_schema import PlaceholderElement


class LayoutPattern(str, Enum):
    """Geometric arrangement detected among a template's placeholders."""

    COMPARISON = "comparison"
    HORIZONTAL_LIST = "horizontal_list"
    GENERIC = "generic"


class LayoutAnalysisResult(BaseModel):
    """Partition of title/text placeholders by geometric role."""

    layout_type: LayoutPattern = LayoutPattern.GENERIC
    left_titles: list[PlaceholderElement] = Field(default_factory=list)
    right_titles: list[PlaceholderElement] = Field(default_factory=list)
    left_texts: list[PlaceholderElement] = Field(default_factory=list)
    right_texts: list[PlaceholderElement] = Field(default_factory=list)
    top_texts: list[PlaceholderElement] = Field(default_factory=list)
    bottom_texts: list[PlaceholderElement] = Field(default_factory=list)
    list_titles: Optional[list[PlaceholderElement]] = None
    list_texts: Optional[list[PlaceholderElement]] = None


class PairedElement(BaseModel):
    """A content item bound to a text placeholder and, optionally, a title placeholder."""

    title: Optional[PlaceholderElement] = None
    text: PlaceholderElement
    data_item: Optional[ContentItem] = None
