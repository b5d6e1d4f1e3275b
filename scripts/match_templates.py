#!/usr/bin/env python3
"""Plan a deck: paginate generated slides, pick templates and pair items.

Reads generated slide content (JSON) and a template library (JSON saved by
import_pptx_templates.py, or a .pptx deck directly), runs the slide planner
and writes one assignment per output slide: template id, detected layout,
placeholder fills and hidden item slots.

Usage:
    python scripts/match_templates.py workspace/slides.json template_library.json \
        -o workspace/slide_plan.json [--config config/default.yaml] [--seed 7] [--explain]
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.agents.slide_planner import SlidePlannerAgent
from src.parsers import load_templates
from src.schemas.content_schema import SlideCategory
from src.schemas.engine_config import EngineConfig
from src.template_matching import TemplateSelector
from src.utils.file_utils import load_content_slides, save_json

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "config" / "default.yaml"


def explain_matches(planner: SlidePlannerAgent, slides, templates) -> None:
    """Print the top three scored candidates for every content slide."""
    service = planner.selector.service
    candidates = [t for t in templates if t.type == SlideCategory.CONTENT]
    for number, slide in enumerate(slides, 1):
        if slide.type != SlideCategory.CONTENT:
            continue
        results = service.get_detailed_match(slide, candidates)
        if not results:
            print(f"  Slide {number:2d}: fallback ({service.fallback.get_fallback_reason(slide)})")
            continue
        top = service.engine.get_top_matches(results, 3)
        ranked = ", ".join(f"{r.template.id}={r.total_score:.2f}" for r in top)
        print(f"  Slide {number:2d}: {ranked}")


def main():
    parser = argparse.ArgumentParser(
        description="Select templates and pair content items with placeholders"
    )
    parser.add_argument("slides", type=Path, help="Path to generated slides JSON")
    parser.add_argument("templates", type=Path, help="Template library JSON or .pptx deck")
    parser.add_argument(
        "-o", "--output", type=Path,
        default=Path("workspace/slide_plan.json"),
        help="Output path for the slide plan JSON",
    )
    parser.add_argument(
        "--config", type=Path, default=DEFAULT_CONFIG,
        help="Engine configuration YAML (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for random template choices (default: derived from the content)",
    )
    parser.add_argument(
        "--explain", action="store_true",
        help="Print the top scored candidates for every content slide",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate inputs
    for path in (args.slides, args.templates, args.config):
        if not path.exists():
            print(f"Error: File not found: {path}", file=sys.stderr)
            sys.exit(1)

    # Load
    config = EngineConfig.from_yaml(args.config)
    slides = load_content_slides(args.slides)
    templates = load_templates(args.templates)
    rng = random.Random(args.seed) if args.seed is not None else None
    planner = SlidePlannerAgent(config, selector=TemplateSelector(config, rng=rng))

    print(f"Slides: {len(slides)} from {args.slides}")
    print(f"Templates: {len(templates)} from {args.templates}")
    if not planner.selector.service.factory.registry.validate_weights():
        print("Warning: dimension weights do not sum to 1.0", file=sys.stderr)

    # Plan
    plan = planner.plan(slides, templates)

    # Write
    save_json([a.model_dump(mode="json", exclude_none=True) for a in plan], args.output)
    print(f"\nPlanned {len(plan)} slides, written to: {args.output}")

    for assignment in plan:
        layout = assignment.layout_type.value if assignment.layout_type else "-"
        print(
            f"  Slide {assignment.index + 1:2d}: [{assignment.slide.type.value:10s}] "
            f"{assignment.template.id:24s} layout={layout:15s} fills={len(assignment.fills)}"
        )

    if args.explain:
        print("\nTop candidates:")
        explain_matches(planner, planner.paginator.process_pagination(slides), templates)


if __name__ == "__main__":
    main()
