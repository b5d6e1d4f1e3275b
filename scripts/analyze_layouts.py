#!/usr/bin/env python3
"""Classify the placeholder layout of every template in a library.

For each template, the item-title and item-text placeholders are run through
the layout analyzer and reported as comparison, horizontal_list or generic,
together with the template's item capacity and estimated text capacity.

Usage:
    python scripts/analyze_layouts.py template_library.json [-o workspace/layouts.json]
    python scripts/analyze_layouts.py templates/lesson.pptx --type content
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.layout_engine.analysis import analyze_template_layout
from src.parsers import load_templates
from src.schemas.content_schema import SlideCategory
from src.schemas.template_schema import Template, TextRole
from src.template_matching.dimensions import TextAmountDimension
from src.utils.file_utils import save_json


def describe_template(template: Template) -> dict:
    titles = template.elements_with_role(TextRole.ITEM_TITLE)
    texts = template.elements_with_role(TextRole.ITEM)
    layout = analyze_template_layout(titles, texts)
    return {
        "template_id": template.id,
        "type": template.type.value,
        "layout_type": layout.layout_type.value,
        "item_titles": len(titles),
        "item_texts": len(texts),
        "item_capacity": template.item_capacity,
        "text_capacity": TextAmountDimension.estimate_capacity(template),
        "top_captions": len(layout.top_texts),
        "bottom_captions": len(layout.bottom_texts),
    }


def main():
    parser = argparse.ArgumentParser(description="Classify template placeholder layouts")
    parser.add_argument("templates", type=Path, help="Template library JSON or .pptx deck")
    parser.add_argument(
        "--type", choices=[c.value for c in SlideCategory], default=None,
        help="Only analyze templates of this slide category",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write results as JSON")
    args = parser.parse_args()

    if not args.templates.exists():
        print(f"Error: File not found: {args.templates}", file=sys.stderr)
        sys.exit(1)

    templates = load_templates(args.templates)
    if args.type:
        templates = [t for t in templates if t.type == SlideCategory(args.type)]

    rows = [describe_template(t) for t in templates]
    counts = Counter(row["layout_type"] for row in rows)

    print(f"Analyzed {len(rows)} templates from {args.templates}")
    for layout_type, count in counts.most_common():
        print(f"  {layout_type:16s} {count}")
    print()
    for row in rows:
        print(
            f"  {row['template_id']:24s} [{row['type']:10s}] {row['layout_type']:16s} "
            f"titles={row['item_titles']} texts={row['item_texts']} "
            f"capacity={row['item_capacity']} chars~{row['text_capacity']}"
        )

    if args.output:
        save_json(rows, args.output)
        print(f"\nWritten to: {args.output}")


if __name__ == "__main__":
    main()
