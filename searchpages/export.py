"""searchpages.export — JSONL hand-off for the indexing stage.

Usage::

    from searchpages import extract_pages, parse_html
    from searchpages.export import to_jsonl

    pages = extract_pages(parse_html(html), "//main")
    to_jsonl(pages, "/tmp/pages.jsonl", source_url="https://example.com/docs")
"""

from __future__ import annotations

import json
import sys
import uuid
from collections.abc import Iterable
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

if TYPE_CHECKING:
    from searchpages.items import PageRecord


def page_to_document(page: PageRecord, source_url: str = "") -> dict[str, Any]:
    """Return the JSON object written for *page*: ``id``, optional ``url``, then fields."""
    doc: dict[str, Any] = {"id": str(uuid.uuid4())}
    if source_url:
        doc["url"] = source_url
    doc.update(page.to_dict())
    return doc


def write_jsonl(pages: Iterable[PageRecord], fh: IO[str], source_url: str = "") -> int:
    """Write one JSON line per page to the open text stream *fh*."""
    total = 0
    for page in pages:
        fh.write(json.dumps(page_to_document(page, source_url), ensure_ascii=False) + "\n")
        total += 1
    return total


def to_jsonl(
    pages: Iterable[PageRecord],
    path: str | Path | None,
    source_url: str = "",
) -> int:
    """Write *pages* to a JSONL file, or to stdout when *path* is None or ``-``.

    Args:
        pages:      Records from :func:`~searchpages.extract_pages`.
        path:       Output file path (created/overwritten).
        source_url: URL of the originating document, stored on every line.

    Returns:
        Number of records written.
    """
    if path is None or str(path) == "-":
        return write_jsonl(pages, sys.stdout, source_url)

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as fh:
        return write_jsonl(pages, fh, source_url)
