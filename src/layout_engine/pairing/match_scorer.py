"""Title/text placeholder compatibility score.

A text placeholder suits a title when it sits in the same column, starts a
short distance below it and shares its horizontal center. Hard cut-offs
return 0; otherwise each component decays exponentially with distance.
"""

import math
from typing import Optional

from src.schemas.engine_config import MatchScoreConfig
from src.schemas.template_schema import PlaceholderElement

_DEFAULT_CONFIG = MatchScoreConfig()


def calculate_layout_match_score(
    title: PlaceholderElement,
    text: PlaceholderElement,
    config: Optional[MatchScoreConfig] = None,
) -> float:
    config = config or _DEFAULT_CONFIG

    horizontal_distance = abs(title.left - text.left)
    if horizontal_distance > config.horizontal_distance:
        return 0.0

    vertical_distance = text.top - title.top
    if not 0 < vertical_distance < config.vertical_distance_max:
        return 0.0

    center_distance = abs(title.center_x - text.center_x)
    if center_distance > config.center_distance:
        return 0.0

    widest = max(title.width, text.width)
    width_ratio = min(title.width, text.width) / widest if widest > 0 else 1.0

    horizontal_score = 100 * math.exp(-horizontal_distance / config.decay)
    vertical_score = 100 * math.exp(
        -abs(vertical_distance - config.ideal_vertical_distance) / config.decay
    )
    width_score = 50 * width_ratio
    center_score = 50 * math.exp(-center_distance / config.decay)

    weights = config.weights
    return (
        horizontal_score * weights.horizontal
        + vertical_score * weights.vertical
        + width_score * weights.width
        + center_score * weights.center
    )
