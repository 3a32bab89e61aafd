"""Render a Granola document JSON file to Markdown."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError

from granola_notes.config import Settings
from granola_notes.renderers import MarkdownRenderer, RenderDepthError, RenderOptions


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert a Granola document to Markdown.")
    parser.add_argument("path", type=str, help="Path to a JSON document, or '-' for stdin.")
    parser.add_argument("--output", type=Path, default=None, help="Write Markdown here instead of stdout.")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Abort when the document nests deeper than this (default: unlimited).",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv(PROJECT_ROOT / ".env")
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("render_document")

    settings = Settings(render_max_depth=args.max_depth)
    renderer = MarkdownRenderer(options=RenderOptions(max_depth=settings.render_max_depth))

    if args.path == "-":
        source = sys.stdin.read()
    else:
        source = Path(args.path).read_text(encoding="utf-8")

    try:
        markdown = renderer.render_document(json.loads(source))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON document: {exc}") from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid document content: {exc}") from exc
    except RenderDepthError as exc:
        raise SystemExit(str(exc)) from exc

    if args.output:
        args.output.write_text(markdown, encoding="utf-8")
        logger.info("Wrote %d characters to %s", len(markdown), args.output)
    else:
        sys.stdout.write(markdown)


if __name__ == "__main__":
    main()
