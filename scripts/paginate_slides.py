#!/usr/bin/env python3
"""Split oversized content and table-of-contents slides across pages.

Applies the pagination rules (built-in plus any listed in the engine config)
and checks that every item survives in its original order.

Usage:
    python scripts/paginate_slides.py workspace/slides.json \
        -o workspace/slides_paginated.json [--config config/default.yaml] [--list-rules]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.pagination import PaginationProcessor
from src.schemas.engine_config import EngineConfig
from src.utils.file_utils import load_content_slides, save_json


def main():
    parser = argparse.ArgumentParser(description="Paginate generated slides")
    parser.add_argument("slides", type=Path, nargs="?", help="Path to generated slides JSON")
    parser.add_argument(
        "-o", "--output", type=Path,
        default=Path("workspace/slides_paginated.json"),
        help="Output path for paginated slides JSON",
    )
    parser.add_argument("--config", type=Path, default=None, help="Engine configuration YAML")
    parser.add_argument("--list-rules", action="store_true", help="Print active rules and exit")
    args = parser.parse_args()

    config = EngineConfig.from_yaml(args.config) if args.config else EngineConfig()
    processor = PaginationProcessor(config.pagination_rules)

    if args.list_rules:
        for rule in processor.describe_rules():
            print(
                f"  [{rule['priority']:3d}] {rule['name']:32s} split={rule['split_points']} "
                f"max/page={rule['max_items_per_page']}"
            )
        return

    if args.slides is None or not args.slides.exists():
        print(f"Error: Slides file not found: {args.slides}", file=sys.stderr)
        sys.exit(1)

    slides = load_content_slides(args.slides)
    paginated = processor.process_pagination(slides)

    if not processor.validate_pagination(slides, paginated):
        print("Error: pagination lost or reordered items", file=sys.stderr)
        sys.exit(1)

    stats = processor.get_pagination_stats(paginated)
    print(f"Input: {len(slides)} slides")
    print(f"Output: {stats['total_slides']} slides ({stats['paginated_slides']} paginated pages)")

    save_json(
        [s.model_dump(mode="json", by_alias=True, exclude_none=True) for s in paginated],
        args.output,
    )
    print(f"Written to: {args.output}")


if __name__ == "__main__":
    main()
