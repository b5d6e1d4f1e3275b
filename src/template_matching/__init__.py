"""Multi-dimensional template matching.

Use ``TemplateMatchingService.find_best_match`` to score a slide against
candidate templates, or ``TemplateSelector`` to honor per-category toggles.
"""

from .engine import PolynomialEngine
from .factory import DimensionFactory
from .fallback import FallbackMatcher
from .registry import DimensionRegistry
from .selector import TemplateSelector
from .service import TemplateMatchingService

__all__ = [
    "DimensionFactory",
    "DimensionRegistry",
    "FallbackMatcher",
    "PolynomialEngine",
    "TemplateMatchingService",
    "TemplateSelector",
]
