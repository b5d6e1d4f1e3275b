"""Pydantic models for planned slides: chosen template plus text to place."""

from typing import Optional

from pydantic import BaseModel, Field

from .content_schema import ContentSlide
from .layout_schema import LayoutPattern, PairedElement
from .template_schema import Template, TextRole


class TextFill(BaseModel):
    """Replacement text for one placeholder of the chosen template."""

    element_id: str
    role: TextRole
    text: str
    font_size: Optional[float] = Field(
        default=None, description="Adapted font size in px; None keeps the template's"
    )


class SlideAssignment(BaseModel):
    """One output slide: its content, template and placeholder fills.

    Handed to the rendering collaborator, which substitutes ``fills`` into
    a copy of ``template`` and drops ``hidden_element_ids``.
    """

    index: int
    slide: ContentSlide
    template: Template
    layout_type: Optional[LayoutPattern] = None
    pairings: list[PairedElement] = Field(default_factory=list)
    fills: list[TextFill] = Field(default_factory=list)
    hidden_element_ids: list[str] = Field(
        default_factory=list, description="Unused item slots (and their groups)"
    )

    def fill_for(self, element_id: str) -> Optional[TextFill]:
        return next((f for f in self.fills if f.element_id == element_id), None)
