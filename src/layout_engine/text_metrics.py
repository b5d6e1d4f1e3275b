"""Text width measurement and font-size fitting for placeholders."""

import logging
import math
import unicodedata
from functools import lru_cache
from pathlib import Path
from typing import Optional, Protocol

from PIL import ImageFont

logger = logging.getLogger(__name__)

DEFAULT_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
]


class TextMeasurer(Protocol):
    """Anything that can report the rendered width of a single line, in px."""

    def measure_width(self, text: str, font_size: float) -> float: ...


class HeuristicTextMeasurer:
    """Width estimate from character classes, no font files needed.

    Wide (CJK, fullwidth) characters count as one em, everything else as
    ``narrow_ratio`` em.
    """

    def __init__(self, narrow_ratio: float = 0.55):
        self.narrow_ratio = narrow_ratio

    def measure_width(self, text: str, font_size: float) -> float:
        width = 0.0
        for char in text:
            if unicodedata.east_asian_width(char) in ("W", "F"):
                width += font_size
            else:
                width += font_size * self.narrow_ratio
        return width


class PillowTextMeasurer:
    """Measures with a real TrueType font through Pillow.

    Uses ``font_path`` when given, else the first installed candidate font,
    else Pillow's bundled default font.
    """

    def __init__(self, font_path: Optional[str | Path] = None):
        self.font_path = self._resolve(font_path)
        if self.font_path is None:
            logger.info("No TrueType font found, measuring with Pillow's default font")

    @staticmethod
    def _resolve(font_path: Optional[str | Path]) -> Optional[str]:
        if font_path is not None:
            if not Path(font_path).exists():
                raise FileNotFoundError(f"Font file not found: {font_path}")
            return str(font_path)
        for candidate in DEFAULT_FONT_CANDIDATES:
            if Path(candidate).exists():
                return candidate
        return None

    def _font(self, size: int):
        return _load_font(self.font_path, size)

    def measure_width(self, text: str, font_size: float) -> float:
        return float(self._font(max(1, round(font_size))).getlength(text))


@lru_cache(maxsize=64)
def _load_font(font_path: Optional[str], size: int):
    if font_path is not None:
        try:
            return ImageFont.truetype(font_path, size=size)
        except OSError as e:
            logger.warning(f"Could not load font {font_path}: {e}")
    return ImageFont.load_default(size=size)


def adapted_font_size(
    text: str,
    font_size: float,
    width: float,
    max_lines: int,
    measurer: Optional[TextMeasurer] = None,
    min_font_size: float = 10,
) -> float:
    """Largest size, at most ``font_size``, at which ``text`` wraps into ``max_lines``.

    Shrinks one px at a time at or below 22px and two px above; never goes
    below ``min_font_size``.
    """
    measurer = measurer or HeuristicTextMeasurer()
    if width <= 0:
        return font_size

    size = font_size
    while size >= min_font_size:
        lines = math.ceil(measurer.measure_width(text, size) / width)
        if lines <= max_lines:
            return size
        size -= 1 if size <= 22 else 2
    return min_font_size
