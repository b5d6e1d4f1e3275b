"""Engine configuration: feature toggles, dimension weights and geometry thresholds.

Everything tunable in the matching, layout and pagination engines lives here
and is passed explicitly to the components that need it. Defaults mirror
``config/default.yaml``.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from src.utils.file_utils import load_yaml, save_yaml

from .content_schema import SlideCategory
from .matching_schema import DimensionConfig
from .pagination_schema import PaginationRule


# ---------------------------------------------------------------------------
# Smart matching toggles
# ---------------------------------------------------------------------------

class FallbackConfig(BaseModel):
    """What happens when smart matching cannot produce a template."""

    enabled: bool = Field(default=True, description="Fall back to random selection on failure")
    log_failure: bool = Field(default=True, description="Log a warning when falling back")


def _default_slide_types() -> dict[SlideCategory, bool]:
    return {
        SlideCategory.COVER: False,
        SlideCategory.CONTENTS: False,
        SlideCategory.TRANSITION: False,
        SlideCategory.CONTENT: True,
        SlideCategory.END: False,
    }


class SmartMatchingConfig(BaseModel):
    """Per-category switch between scored matching and random selection."""

    enabled: bool = True
    slide_types: dict[SlideCategory, bool] = Field(default_factory=_default_slide_types)
    debug: bool = Field(default=False, description="Log per-candidate score breakdowns")
    fallback: FallbackConfig = Field(default_factory=FallbackConfig)

    def is_enabled_for(self, category: SlideCategory | str | None = None) -> bool:
        if not self.enabled:
            return False
        if category is None:
            return True
        return self.slide_types.get(SlideCategory(category), False)


# ---------------------------------------------------------------------------
# Dimension registry defaults
# ---------------------------------------------------------------------------

DEFAULT_DIMENSIONS: list[DimensionConfig] = [
    DimensionConfig(
        id="layoutType", name="Layout type", weight=0.10, order=1,
        description="Recommended layout vs. the template's annotated layout",
    ),
    DimensionConfig(
        id="contentType", name="Content type", weight=0.30, order=2,
        description="Content intent vs. the template's annotated content type",
    ),
    DimensionConfig(
        id="capacity", name="Capacity", weight=0.0, required=True, order=3,
        description="Hard filter: item count must fit the template's item slots",
    ),
    DimensionConfig(
        id="titleStructure", name="Title structure", weight=0.25, required=True, order=4,
        description="Titled items vs. itemTitle placeholders",
    ),
    DimensionConfig(
        id="textStructure", name="Text structure", weight=0.20, required=True, order=5,
        description="Items with body text vs. item/content placeholders",
    ),
    DimensionConfig(
        id="textAmount", name="Text amount", weight=0.15, required=True, order=6,
        description="Total characters vs. the template's estimated text capacity",
    ),
]


def _default_dimensions() -> list[DimensionConfig]:
    return [d.model_copy() for d in DEFAULT_DIMENSIONS]


# ---------------------------------------------------------------------------
# Layout analysis thresholds (pixels)
# ---------------------------------------------------------------------------

class HorizontalListThresholds(BaseModel):
    min_title_count: int = 3
    horizontal_match_threshold: float = 150
    top_text_min_width: float = 800


class ComparisonThresholds(BaseModel):
    title_count: int = 2
    horizontal_match_threshold: float = 100
    wide_text_min_width: float = 800


class LayoutAnalysisConfig(BaseModel):
    """Geometry thresholds for layout-pattern detection."""

    vertical_grouping_threshold: float = Field(
        default=50, description="Max top-edge difference for two elements to share a row"
    )
    horizontal_list: HorizontalListThresholds = Field(default_factory=HorizontalListThresholds)
    comparison: ComparisonThresholds = Field(default_factory=ComparisonThresholds)


class MatchScoreWeights(BaseModel):
    horizontal: float = 1.0
    vertical: float = 1.2
    width: float = 0.5
    center: float = 0.8


class MatchScoreConfig(BaseModel):
    """Parameters of the title/text placeholder compatibility score."""

    horizontal_distance: float = 150
    vertical_distance_max: float = 200
    center_distance: float = 100
    ideal_vertical_distance: float = 70
    decay: float = 50
    weights: MatchScoreWeights = Field(default_factory=MatchScoreWeights)


# ---------------------------------------------------------------------------
# Text fitting
# ---------------------------------------------------------------------------

class TextFitConfig(BaseModel):
    """Font shrinking applied when filling placeholders."""

    font_path: Optional[str] = Field(
        default=None, description="TrueType font used for measurement; heuristic when unset"
    )
    default_font_size: float = 16
    min_font_size: float = 10
    title_max_lines: int = 1
    item_max_lines: int = 4
    single_item_max_lines: int = 6


# ---------------------------------------------------------------------------
# Top-level configuration
# ---------------------------------------------------------------------------

class EngineConfig(BaseModel):
    """Complete engine configuration."""

    smart_matching: SmartMatchingConfig = Field(default_factory=SmartMatchingConfig)
    dimensions: list[DimensionConfig] = Field(default_factory=_default_dimensions)
    layout_analysis: LayoutAnalysisConfig = Field(default_factory=LayoutAnalysisConfig)
    match_score: MatchScoreConfig = Field(default_factory=MatchScoreConfig)
    text_fit: TextFitConfig = Field(default_factory=TextFitConfig)
    pagination_rules: Optional[list[PaginationRule]] = Field(
        default=None, description="Extra rules, merged with the built-in pagination rules"
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EngineConfig":
        """Load engine configuration from a YAML file."""
        return cls.model_validate(load_yaml(path))

    def to_yaml(self, path: str | Path) -> None:
        """Save engine configuration to a YAML file."""
        save_yaml(self.model_dump(mode="json", exclude_none=True, by_alias=True), path)
