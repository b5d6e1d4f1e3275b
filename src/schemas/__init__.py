from .content_schema import ContentItem, ContentSlide, ContentType, LayoutType, SemanticFeatures, SlideCategory
from .template_schema import (
    ElementType, ImageRole, PlaceholderElement, Template, TemplateAnnotation,
    TemplateLibrary, TextRole,
)
from .matching_schema import Available, DimensionConfig, DimensionScore, TemplateMatchResult, Unavailable
from .layout_schema import LayoutAnalysisResult, LayoutPattern, PairedElement
from .pagination_schema import PaginationCondition, PaginationRule, PaginationStrategy
from .plan_schema import SlideAssignment, TextFill
from .engine_config import (
    EngineConfig, LayoutAnalysisConfig, MatchScoreConfig, SmartMatchingConfig, TextFitConfig,
)

__all__ = [
    "ContentItem",
    "ContentSlide",
    "ContentType",
    "LayoutType",
    "SemanticFeatures",
    "SlideCategory",
    "ElementType",
    "ImageRole",
    "PlaceholderElement",
    "Template",
    "TemplateAnnotation",
    "TemplateLibrary",
    "TextRole",
    "Available",
    "DimensionConfig",
    "DimensionScore",
    "TemplateMatchResult",
    "Unavailable",
    "LayoutAnalysisResult",
    "LayoutPattern",
    "PairedElement",
    "PaginationCondition",
    "PaginationRule",
    "PaginationStrategy",
    "SlideAssignment",
    "TextFill",
    "EngineConfig",
    "LayoutAnalysisConfig",
    "MatchScoreConfig",
    "SmartMatchingConfig",
    "TextFitConfig",
]
