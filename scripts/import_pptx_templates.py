#!/usr/bin/env python3
"""Import .pptx template decks into a template library JSON.

Every slide becomes a template. Tag placeholders by naming shapes after
their role (``itemTitle 1``, ``Box [item]``) and annotate slides with a
speaker-notes line such as ``type=content; contentType=case_analysis``.

Usage:
    python scripts/import_pptx_templates.py <template_dir_or_pptx> [-o template_library.json]
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.parsers import build_library
from src.utils.file_utils import find_pptx_files


def main():
    parser = argparse.ArgumentParser(description="Import PPTX decks as engine templates")
    parser.add_argument("source", type=Path, help="A .pptx file or a directory of them")
    parser.add_argument(
        "-o", "--output", type=Path,
        default=Path("template_library.json"),
        help="Output path for the template library JSON",
    )
    args = parser.parse_args()

    if args.source.is_dir():
        files = find_pptx_files(args.source)
    elif args.source.exists():
        files = [args.source]
    else:
        print(f"Error: Not found: {args.source}", file=sys.stderr)
        sys.exit(1)

    if not files:
        print(f"Error: No .pptx files in {args.source}", file=sys.stderr)
        sys.exit(1)

    library = build_library(files)
    untagged = [t.id for t in library.templates if not t.text_elements()]

    counts = Counter(t.type.value for t in library.templates)
    print(f"Imported {len(library.templates)} templates from {len(files)} files")
    for category, count in sorted(counts.items()):
        print(f"  {category:10s} {count}")
    if untagged:
        print(f"Warning: {len(untagged)} templates have no text placeholders: {', '.join(untagged)}")

    args.output.parent.mkdir(parents=True, exist_ok=True)
    library.save(args.output)
    print(f"Written to: {args.output}")


if __name__ == "__main__":
    main()
