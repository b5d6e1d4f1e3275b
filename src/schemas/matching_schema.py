"""Pydantic models for template matching outcomes and dimension configuration."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, model_validator

from .template_schema import Template


class Available(BaseModel):
    """A dimension produced a score for this (slide, template) pair."""

    kind: Literal["available"] = "available"
    score: float = Field(ge=0.0, le=1.0)


class Unavailable(BaseModel):
    """A dimension had nothing to say; it is excluded, not penalized."""

    kind: Literal["unavailable"] = "unavailable"
    reason: str = ""


DimensionOutcome = Union[Available, Unavailable]


class DimensionScore(BaseModel):
    """One dimension's contribution to a template's total score."""

    dimension_id: str
    score: Optional[float] = None
    weight: float = 0.0
    available: bool = False

    @model_validator(mode="after")
    def _score_matches_availability(self) -> "DimensionScore":
        if self.available != (self.score is not None):
            raise ValueError(
                f"Dimension '{self.dimension_id}': available={self.available} "
                f"but score={self.score}"
            )
        return self

    @classmethod
    def from_outcome(
        cls, dimension_id: str, outcome: DimensionOutcome, weight: float
    ) -> "DimensionScore":
        if isinstance(outcome, Available):
            return cls(dimension_id=dimension_id, score=outcome.score, weight=weight, available=True)
        return cls(dimension_id=dimension_id, weight=weight)


class TemplateMatchResult(BaseModel):
    """A scored candidate template."""

    template: Template
    total_score: float = Field(ge=0.0, le=1.0)
    dimension_scores: list[DimensionScore] = Field(default_factory=list)
    matched_dimensions: list[str] = Field(
        default_factory=list, description="Ids of the dimensions that contributed"
    )


class DimensionConfig(BaseModel):
    """Registry entry describing one dimension evaluator."""

    id: str
    name: str
    weight: float = Field(default=0.0, ge=0.0, le=1.0)
    required: bool = False
    enabled: bool = True
    order: int = 0
    description: str = ""
