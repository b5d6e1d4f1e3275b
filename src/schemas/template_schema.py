"""Pydantic models for template slides and the template library."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field

from .base import CamelModel
from .content_schema import ContentType, LayoutType, SlideCategory


class ElementType(str, Enum):
    """Kinds of elements a template slide can hold."""

    TEXT = "text"
    SHAPE = "shape"
    IMAGE = "image"
    LINE = "line"
    CHART = "chart"
    TABLE = "table"


class TextRole(str, Enum):
    """Semantic role tag attached to a text-bearing placeholder."""

    TITLE = "title"
    CONTENT = "content"
    ITEM = "item"
    ITEM_TITLE = "itemTitle"
    ITEM_NUMBER = "itemNumber"
    PART_NUMBER = "partNumber"
    HEADER = "header"
    FOOTER = "footer"
    NOTES = "notes"


class ImageRole(str, Enum):
    """Semantic role tag attached to an image element."""

    BACKGROUND = "background"
    PAGE_FIGURE = "pageFigure"
    ITEM_FIGURE = "itemFigure"


class PlaceholderElement(CamelModel):
    """A positioned element of a template slide. Geometry is in pixels."""

    id: str
    type: ElementType = ElementType.TEXT
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    text_type: Optional[TextRole] = Field(
        default=None, description="Role tag for text-bearing elements"
    )
    image_type: Optional[ImageRole] = None
    font_size: Optional[float] = Field(default=None, description="Dominant font size in px")
    group_id: Optional[str] = None
    content: str = Field(default="", description="Placeholder text shipped with the template")

    @property
    def is_text_bearing(self) -> bool:
        """Text boxes, and shapes that carry a text role."""
        if self.type == ElementType.TEXT:
            return True
        return self.type == ElementType.SHAPE and self.text_type is not None

    def has_role(self, *roles: TextRole) -> bool:
        return self.is_text_bearing and self.text_type in roles

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2


class TemplateAnnotation(CamelModel):
    """Categorical tags a designer attached to a template."""

    content_type: Optional[ContentType] = None
    layout_type: Optional[LayoutType] = None


class Template(CamelModel):
    """A pre-designed slide. Read-only for the matching and layout engines."""

    id: str
    type: SlideCategory = SlideCategory.CONTENT
    name: str = ""
    elements: list[PlaceholderElement] = Field(default_factory=list)
    annotation: Optional[TemplateAnnotation] = None
    background: Optional[str] = Field(default=None, description="Background fill, e.g. '#ffffff'")

    def elements_with_role(self, *roles: TextRole) -> list[PlaceholderElement]:
        """Text-bearing elements tagged with any of ``roles``, in document order."""
        return [el for el in self.elements if el.has_role(*roles)]

    def text_elements(self) -> list[PlaceholderElement]:
        return [el for el in self.elements if el.is_text_bearing]

    @property
    def item_capacity(self) -> int:
        """Number of item slots, never less than one."""
        return max(len(self.elements_with_role(TextRole.ITEM, TextRole.ITEM_TITLE)), 1)


class TemplateLibrary(CamelModel):
    """All templates available to the engine, across every slide category."""

    templates: list[Template] = Field(default_factory=list)
    source_files: list[str] = Field(
        default_factory=list, description="Decks the templates were imported from"
    )

    def find_by_type(self, category: SlideCategory | str) -> list[Template]:
        """Find templates of a given slide category."""
        category = SlideCategory(category)
        return [t for t in self.templates if t.type == category]

    def find_by_id(self, template_id: str) -> Optional[Template]:
        return next((t for t in self.templates if t.id == template_id), None)

    def group_by_type(self) -> dict[SlideCategory, list[Template]]:
        """Bucket templates per category, keeping library order inside each bucket."""
        groups: dict[SlideCategory, list[Template]] = {}
        for template in self.templates:
            groups.setdefault(template.type, []).append(template)
        return groups

    def save(self, path: str | Path) -> None:
        """Serialize the library to a JSON file."""
        Path(path).write_text(
            self.model_dump_json(indent=2, by_alias=True, exclude_none=True)
        )

    @classmethod
    def load(cls, path: str | Path) -> "TemplateLibrary":
        """Load a library from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Template library not found: {path}")
        return cls.model_validate_json(path.read_text())
