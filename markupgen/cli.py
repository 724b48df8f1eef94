"""
Command Line Interface
======================

Render a JSON or YAML document to CSS or HTML.

    markupgen css styles.yaml
    markupgen html page.json --output page.html
    cat styles.json | markupgen css --format json
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from markupgen.config.logging import get_logger
from markupgen.core.dsl.loader import render_css_source, render_html_source
from markupgen.core.errors import MarkupError

logger = get_logger(__name__)

RENDERERS = {
    "css": render_css_source,
    "html": render_html_source,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markupgen", description="Render stylesheet and document trees to CSS or HTML"
    )
    parser.add_argument("target", choices=sorted(RENDERERS), help="Output language")
    parser.add_argument(
        "input", nargs="?", default="-", help="Source document, '-' for stdin (default)"
    )
    parser.add_argument(
        "--format",
        dest="source_format",
        choices=["auto", "json", "yaml"],
        default=None,
        help="Source format (default: configured format)",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.input == "-":
            content = sys.stdin.read()
        else:
            content = Path(args.input).read_text(encoding="utf-8")
        output = RENDERERS[args.target](content, args.source_format)
    except (MarkupError, OSError) as e:
        logger.error("Rendering failed", target=args.target, input=args.input, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
