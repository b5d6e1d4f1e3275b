"""File I/O and path utilities."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from src.schemas.content_schema import ContentSlide

logger = logging.getLogger(__name__)


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def save_yaml(data: dict[str, Any], path: str | Path) -> None:
    """Save a dict to a YAML file."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)


def load_json(path: str | Path) -> Any:
    """Load a JSON file and return its contents."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def save_json(data: Any, path: str | Path, indent: int = 2) -> None:
    """Save data to a JSON file."""
    path = Path(path)
    ensure_directory(path.parent)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)


def find_pptx_files(directory: str | Path) -> list[Path]:
    """Recursively find all .pptx files in a directory."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    files = sorted(directory.rglob("*.pptx"))
    # Exclude lock/hidden files
    return [f for f in files if not f.name.startswith(("~", "."))]


def load_content_slides(path: str | Path) -> list["ContentSlide"]:
    """Load generated slide content from JSON.

    Accepts a bare list of slides or an object with a ``slides`` list.
    """
    from src.schemas.content_schema import ContentSlide

    data = load_json(path)
    if isinstance(data, dict):
        data = data.get("slides")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of slides in {path}")
    slides = [ContentSlide.model_validate(entry) for entry in data]
    logger.debug(f"Loaded {len(slides)} slides from {path}")
    return slides
