"""Text cleaning for XPath-selected regions.

:func:`clean_region` is the one-call entry point: it strips non-content
elements (``script``, ``style``, ``svg``, ``path``) from the whole document
and returns the whitespace-normalised text of the first matching element.

The stripping pass is destructive.  Callers that still need the removed
nodes must parse a fresh document first.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from searchpages.nodes import HtmlDocument, HtmlNode
from searchpages.settings import NON_CONTENT_TAGS

logger = logging.getLogger(__name__)

_NEWLINES_RE = re.compile(r"(\r\n|\n)+")
_SPACES_RE = re.compile(r"[ \t]+")


# ---------------------------------------------------------------------------
# Whitespace
# ---------------------------------------------------------------------------

def normalize_whitespace(text: str | None) -> str | None:
    """Collapse runs of line breaks to ``\\n``, then runs of spaces/tabs to ``" "``.

    ``None`` passes through unchanged.
    """
    if text is None:
        return None
    text = _NEWLINES_RE.sub("\n", text)
    return _SPACES_RE.sub(" ", text)


# ---------------------------------------------------------------------------
# Node selection / removal
# ---------------------------------------------------------------------------

def safe_select(doc: HtmlDocument, xpath: str) -> list[HtmlNode]:
    """Null-safe document query: an empty list when nothing matches."""
    return doc.query(xpath)


def first_inner_text(doc: HtmlDocument, xpath: str) -> str | None:
    """Return the inner text of the first element matching *xpath*, or None."""
    node = doc.query_one(xpath)
    return node.inner_text if node is not None else None


def remove_nodes(doc: HtmlDocument, xpath: str) -> int:
    """Remove every element matching *xpath*; return the number of matches."""
    nodes = safe_select(doc, xpath)
    for node in nodes:
        node.remove()
    logger.debug("Removed %d nodes matching %s", len(nodes), xpath)
    return len(nodes)


def remove_nodes_of_type(doc: HtmlDocument, *tag_names: str) -> int:
    """Remove every element whose tag is one of *tag_names*, anywhere in *doc*."""
    if not tag_names:
        return 0
    return remove_nodes(doc, _union_selector(tag_names))


def strip_non_content_nodes(
    doc: HtmlDocument,
    tag_names: Iterable[str] = NON_CONTENT_TAGS,
) -> int:
    """Destructively remove script/style/vector-graphics elements from *doc*."""
    return remove_nodes_of_type(doc, *tag_names)


def _union_selector(tag_names: Iterable[str]) -> str:
    return " | ".join(f"//{t}" for t in tag_names)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def clean_region(
    doc: HtmlDocument | None,
    xpath: str,
    tag_names: Iterable[str] = NON_CONTENT_TAGS,
) -> str | None:
    """Return the cleaned-up text of the first element matching *xpath*.

    Mutates *doc*: all non-content elements are removed from the entire
    document before the region is read, not just from the region itself.

    Args:
        doc:       Parsed document.  ``None`` (or an empty document) returns
                   ``None`` without touching anything.
        xpath:     Selector for the region to read.
        tag_names: Element names to strip first.

    Returns:
        Normalised text, or ``None`` when no element matches *xpath*.
    """
    if doc is None or doc.root is None:
        return None

    strip_non_content_nodes(doc, tag_names)
    return normalize_whitespace(first_inner_text(doc, xpath))
