"""Loader that turns PPTX slides into engine templates using python-pptx.

Each slide becomes one Template. Geometry is converted from EMU to pixels
(96 dpi). Role tags come from the shape name, either bracketed anywhere
(``"Box [itemTitle]"``) or as the leading word (``"itemTitle 2"``), falling
back to the placeholder type. The slide category and annotation are read
from a speaker-notes line such as::

    type=content; contentType=concept_explanation; layoutType=comparison
"""

import logging
import re
from pathlib import Path
from typing import Optional

from src.schemas.content_schema import ContentType, LayoutType, SlideCategory
from src.schemas.template_schema import (
    ElementType,
    ImageRole,
    PlaceholderElement,
    Template,
    TemplateAnnotation,
    TemplateLibrary,
    TextRole,
)

logger = logging.getLogger(__name__)

EMU_PER_PX = 9525
PT_TO_PX = 96 / 72

_BRACKET_TAG = re.compile(r"\[(\w+)\]")
_LEADING_WORD = re.compile(r"^([A-Za-z]+)")
_NOTES_PAIR = re.compile(r"(\w+)\s*=\s*([\w-]+)")

_TEXT_ROLES = {role.value.lower(): role for role in TextRole}
_IMAGE_ROLES = {role.value.lower(): role for role in ImageRole}


def _px(emu_value) -> float:
    if emu_value is None:
        return 0.0
    return round(emu_value / EMU_PER_PX, 2)


def _name_tag(name: str) -> Optional[str]:
    match = _BRACKET_TAG.search(name) or _LEADING_WORD.match(name.strip())
    return match.group(1).lower() if match else None


def _placeholder_role(shape) -> Optional[TextRole]:
    from pptx.enum.shapes import PP_PLACEHOLDER

    if not shape.is_placeholder:
        return None
    ph_type = shape.placeholder_format.type
    if ph_type in (PP_PLACEHOLDER.TITLE, PP_PLACEHOLDER.CENTER_TITLE):
        return TextRole.TITLE
    if ph_type in (PP_PLACEHOLDER.SUBTITLE, PP_PLACEHOLDER.BODY, PP_PLACEHOLDER.OBJECT):
        return TextRole.CONTENT
    if ph_type == PP_PLACEHOLDER.FOOTER:
        return TextRole.FOOTER
    if ph_type == PP_PLACEHOLDER.HEADER:
        return TextRole.HEADER
    return None


def _shape_type(shape):
    try:
        return shape.shape_type
    except NotImplementedError:
        # python-pptx does not classify every autoshape variant
        return None


def _element_type(shape) -> ElementType:
    from pptx.enum.shapes import MSO_SHAPE_TYPE

    shape_type = _shape_type(shape)
    if shape_type == MSO_SHAPE_TYPE.PICTURE:
        return ElementType.IMAGE
    if shape_type == MSO_SHAPE_TYPE.LINE:
        return ElementType.LINE
    if getattr(shape, "has_chart", False):
        return ElementType.CHART
    if getattr(shape, "has_table", False):
        return ElementType.TABLE
    if shape_type == MSO_SHAPE_TYPE.AUTO_SHAPE:
        return ElementType.SHAPE
    return ElementType.TEXT


def _largest_font_px(shape) -> Optional[float]:
    sizes = [
        run.font.size.pt
        for para in shape.text_frame.paragraphs
        for run in para.runs
        if run.font.size is not None
    ]
    return round(max(sizes) * PT_TO_PX, 2) if sizes else None


def shape_to_element(shape, group_id: Optional[str] = None) -> PlaceholderElement:
    """Convert one python-pptx shape into a placeholder element."""
    element_type = _element_type(shape)
    tag = _name_tag(shape.name)

    text_role = None
    image_role = None
    if element_type == ElementType.IMAGE:
        image_role = _IMAGE_ROLES.get(tag) if tag else None
    elif shape.has_text_frame:
        text_role = _TEXT_ROLES.get(tag) if tag else None
        if text_role is None:
            text_role = _placeholder_role(shape)

    has_text = shape.has_text_frame
    return PlaceholderElement(
        id=str(shape.shape_id),
        type=element_type,
        left=_px(shape.left),
        top=_px(shape.top),
        width=_px(shape.width),
        height=_px(shape.height),
        text_type=text_role,
        image_type=image_role,
        font_size=_largest_font_px(shape) if has_text else None,
        group_id=group_id,
        content=shape.text_frame.text if has_text else "",
    )


def _walk(shapes, group_id: Optional[str] = None):
    from pptx.enum.shapes import MSO_SHAPE_TYPE

    for shape in shapes:
        if _shape_type(shape) == MSO_SHAPE_TYPE.GROUP:
            yield from _walk(shape.shapes, group_id=str(shape.shape_id))
        else:
            yield shape, group_id


def parse_notes_metadata(notes: str) -> dict[str, str]:
    """Collect ``key=value`` pairs from speaker notes."""
    return {key: value for key, value in _NOTES_PAIR.findall(notes or "")}


def _annotation(meta: dict[str, str]) -> Optional[TemplateAnnotation]:
    content_type = meta.get("contentType")
    layout_type = meta.get("layoutType")
    if content_type is None and layout_type is None:
        return None
    try:
        return TemplateAnnotation(
            content_type=ContentType(content_type) if content_type else None,
            layout_type=LayoutType(layout_type) if layout_type else None,
        )
    except ValueError as e:
        logger.warning(f"Ignoring unknown annotation in notes ({e})")
        return None


def slide_to_template(slide, template_id: str) -> Template:
    notes = ""
    if slide.has_notes_slide and slide.notes_slide.notes_text_frame is not None:
        notes = slide.notes_slide.notes_text_frame.text
    meta = parse_notes_metadata(notes)

    category = SlideCategory.CONTENT
    if "type" in meta:
        try:
            category = SlideCategory(meta["type"])
        except ValueError:
            logger.warning(f"{template_id}: unknown slide type '{meta['type']}', using content")

    elements = [shape_to_element(shape, group_id) for shape, group_id in _walk(slide.shapes)]
    return Template(
        id=template_id,
        type=category,
        name=slide.slide_layout.name,
        elements=elements,
        annotation=_annotation(meta),
    )


def load_pptx_templates(path: str | Path) -> list[Template]:
    """Read every slide of a .pptx file as a template."""
    from pptx import Presentation

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Template deck not found: {path}")

    prs = Presentation(str(path))
    templates = [
        slide_to_template(slide, f"{path.stem}-{index}")
        for index, slide in enumerate(prs.slides, 1)
    ]
    if not templates:
        raise ValueError(f"No slides found in {path}")
    logger.info(f"Loaded {len(templates)} templates from {path.name}")
    return templates


def build_library(paths: list[str | Path]) -> TemplateLibrary:
    """Import several decks into one library, keeping deck order."""
    library = TemplateLibrary()
    for path in paths:
        library.templates.extend(load_pptx_templates(path))
        library.source_files.append(str(path))
    return library
