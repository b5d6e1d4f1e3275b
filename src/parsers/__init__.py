from pathlib import Path

from src.schemas.template_schema import Template, TemplateLibrary

from .pptx_template_loader import build_library, load_pptx_templates


def load_json_templates(path: Path) -> list[Template]:
    return TemplateLibrary.load(path).templates


_LOADER_MAP = {
    ".pptx": load_pptx_templates,
    ".json": load_json_templates,
}


def load_templates(path: str | Path) -> list[Template]:
    """Load templates from a deck or a saved library file.

    Dispatches to the appropriate loader based on file extension.
    Supported formats: .pptx, .json
    """
    path = Path(path)
    ext = path.suffix.lower()
    loader = _LOADER_MAP.get(ext)
    if loader is None:
        supported = ", ".join(sorted(_LOADER_MAP.keys()))
        raise ValueError(f"Unsupported template format '{ext}'. Supported: {supported}")
    return loader(path)


__all__ = ["build_library", "load_json_templates", "load_pptx_templates", "load_templates"]
