"""Pydantic models for declarative pagination rules."""

from typing import Any, Callable, Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel
from .content_schema import ContentItem, SlideCategory


class PaginationCondition(CamelModel):
    """When a rule applies. Unset fields do not constrain."""

    min_items: Optional[int] = Field(default=None, ge=0)
    max_items: Optional[int] = Field(default=None, ge=0)
    content_type: Optional[list[SlideCategory]] = Field(
        default=None, description="Slide categories the rule applies to"
    )
    template_type: Optional[str] = None
    custom_validator: Optional[Callable[[list[ContentItem]], bool]] = Field(
        default=None, exclude=True, description="Extra predicate over the items, code-only"
    )


class PaginationStrategy(CamelModel):
    """How a matching slide is cut into pages."""

    split_points: list[int] = Field(default_factory=list)
    max_items_per_page: int = Field(ge=1)
    balance_strategy: Literal["even", "front-heavy", "back-heavy"] = "even"
    preserve_structure: bool = True

    @field_validator("split_points")
    @classmethod
    def _strictly_increasing(cls, value: list[int]) -> list[int]:
        previous = 0
        for point in value:
            if point <= previous:
                raise ValueError(
                    f"split points must be positive and strictly increasing, got {value}"
                )
            previous = point
        return value


class PaginationRule(CamelModel):
    """A named condition/strategy pair. Higher priority wins."""

    name: str
    condition: PaginationCondition = Field(default_factory=PaginationCondition)
    strategy: PaginationStrategy
    priority: int = 0

    def summary(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "priority": self.priority,
            "split_points": self.strategy.split_points,
            "max_items_per_page": self.strategy.max_items_per_page,
        }
