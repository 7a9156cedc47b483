"""CLI entry point: python -m searchpages FILE [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from lxml import etree
from pydantic import ValidationError

from searchpages.export import to_jsonl
from searchpages.extractors import Segmenter, clean_region
from searchpages.nodes import parse_html
from searchpages.profiles import load_settings
from searchpages.settings import ExtractionSettings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="searchpages",
        description=(
            "Split a rendered HTML page into search-index page records.\n"
            "Prints one JSON object per record unless --clean is given."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE",
                        help="HTML file to read, or '-' for stdin")
    parser.add_argument("--fallback-selector", default=None, metavar="XPATH",
                        help="Content container used when the page has no marked "
                             "sections (default: //body, or the profile's value)")
    parser.add_argument("--clean", default=None, metavar="XPATH",
                        help="Print the cleaned-up text of the first match instead "
                             "of page records")
    parser.add_argument("--profile", default=None, metavar="YAML",
                        help="YAML extraction profile")
    parser.add_argument("--url", default="", metavar="URL",
                        help="Source URL: selects the profile domain block and is "
                             "stored on every record")
    parser.add_argument("--out", default=None, metavar="PATH",
                        help="Write JSONL here instead of stdout")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.profile, args.url) if args.profile else ExtractionSettings()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        print(f"ERROR: Could not load profile {args.profile}: {exc}", file=sys.stderr)
        return 1

    try:
        html = _read_input(args.file)
    except OSError as exc:
        print(f"ERROR: Could not read {args.file}: {exc}", file=sys.stderr)
        return 1

    doc = parse_html(html)

    try:
        if args.clean:
            text = clean_region(doc, args.clean, settings.non_content_tags)
            if text is None:
                logger.info("Nothing matched %s", args.clean)
                return 1
            print(text)
            return 0

        pages = Segmenter(settings=settings).extract_pages(doc, args.fallback_selector)
    except etree.XPathError as exc:
        print(f"ERROR: Invalid selector: {exc}", file=sys.stderr)
        return 1

    written = to_jsonl(pages, args.out, source_url=args.url)
    logger.info("Wrote %d pages from %s", written, args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
