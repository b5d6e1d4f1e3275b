"""Dimension evaluator registry.

Maps dimension ids to evaluator factories. The mapping is static: adding a
dimension means adding a class here and an entry to the dimension configs.
"""

from typing import Callable

from .base import BaseDimension
from .capacity import CapacityDimension
from .categorical import ContentTypeDimension, LayoutTypeDimension
from .structure import TextStructureDimension, TitleStructureDimension
from .text_amount import TextAmountDimension

DIMENSION_EVALUATORS: dict[str, Callable[[], BaseDimension]] = {
    "capacity": CapacityDimension,
    "titleStructure": TitleStructureDimension,
    "textStructure": TextStructureDimension,
    "contentType": ContentTypeDimension,
    "layoutType": LayoutTypeDimension,
    "textAmount": TextAmountDimension,
}

__all__ = [
    "BaseDimension",
    "CapacityDimension",
    "TitleStructureDimension",
    "TextStructureDimension",
    "ContentTypeDimension",
    "LayoutTypeDimension",
    "TextAmountDimension",
    "DIMENSION_EVALUATORS",
]
