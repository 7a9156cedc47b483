"""searchpages.nodes — Structural-query layer over a parsed HTML tree.

The extraction code never touches lxml directly; it talks to the
:class:`HtmlNode` protocol so any tree library that can answer XPath queries
can be substituted.  :class:`LxmlNode` is the built-in implementation.

Usage::

    from searchpages.nodes import parse_html

    doc = parse_html("<html><body><h1>Hi</h1></body></html>")
    heading = doc.root.query_one(".//h1")
    print(heading.inner_text)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import lxml.html
from bs4 import BeautifulSoup
from bs4.dammit import EncodingDetector, UnicodeDammit
from lxml import etree

logger = logging.getLogger(__name__)

# lxml refuses str input that still carries an XML encoding declaration.
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------

@runtime_checkable
class HtmlNode(Protocol):
    """A single element of a parsed document."""

    @property
    def tag(self) -> str:
        """Lower-case element name."""
        ...

    @property
    def inner_text(self) -> str:
        """Concatenated text content of the whole subtree, markup stripped."""
        ...

    def query(self, selector: str) -> list[HtmlNode]:
        """Return every element matching *selector*, in document order."""
        ...

    def query_one(self, selector: str) -> HtmlNode | None:
        """Return the first element matching *selector*, or None."""
        ...

    def attribute(self, name: str) -> str | None:
        """Return the value of attribute *name*, or None when absent."""
        ...

    def remove(self) -> None:
        """Detach this element and its subtree from the parent."""
        ...


# ---------------------------------------------------------------------------
# lxml implementation
# ---------------------------------------------------------------------------

class LxmlNode:
    """:class:`HtmlNode` backed by an ``lxml.html.HtmlElement``."""

    __slots__ = ("_element",)

    def __init__(self, element: lxml.html.HtmlElement) -> None:
        self._element = element

    def __repr__(self) -> str:
        return f"<LxmlNode {self.tag}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LxmlNode):
            return NotImplemented
        return self._element is other._element

    def __hash__(self) -> int:
        return id(self._element)

    @property
    def element(self) -> lxml.html.HtmlElement:
        return self._element

    @property
    def tag(self) -> str:
        return str(self._element.tag).lower()

    @property
    def inner_text(self) -> str:
        return str(self._element.text_content())

    def query(self, selector: str) -> list[HtmlNode]:
        # XPath may also yield strings, numbers or comments; only elements count.
        results = self._element.xpath(selector)
        if not isinstance(results, list):
            return []
        return [LxmlNode(r) for r in results if isinstance(r, lxml.html.HtmlElement)]

    def query_one(self, selector: str) -> HtmlNode | None:
        matches = self.query(selector)
        return matches[0] if matches else None

    def attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def remove(self) -> None:
        if self._element.getparent() is None:
            logger.debug("Refusing to remove parentless <%s>", self.tag)
            return
        # drop_tree() keeps the element's tail text attached to the parent.
        self._element.drop_tree()


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

@dataclass
class HtmlDocument:
    """A parsed document.  ``root`` is None when the input held no markup."""

    root: HtmlNode | None

    def query(self, selector: str) -> list[HtmlNode]:
        """Null-safe document-level query."""
        if self.root is None:
            return []
        return self.root.query(selector)

    def query_one(self, selector: str) -> HtmlNode | None:
        if self.root is None:
            return None
        return self.root.query_one(selector)


def parse_html(html: str | bytes | BeautifulSoup) -> HtmlDocument:
    """Parse *html* into an :class:`HtmlDocument`.

    Accepts ``str``, raw ``bytes`` (decoded with :func:`decode_html`) or an
    already-built BeautifulSoup tree, which is re-serialised and parsed by
    lxml so XPath queries work on it.
    Empty or whitespace-only input yields a document with ``root=None``.
    """
    if isinstance(html, BeautifulSoup):
        html = html.decode()
    elif isinstance(html, bytes):
        html = decode_html(html)

    html = _XML_DECLARATION_RE.sub("", html, count=1)
    if not html.strip():
        return HtmlDocument(root=None)

    try:
        element = lxml.html.document_fromstring(html)
    except etree.ParserError as exc:
        logger.debug("lxml produced no document: %s", exc)
        return HtmlDocument(root=None)
    return HtmlDocument(root=LxmlNode(element))


def decode_html(raw: bytes) -> str:
    """Decode *raw* page bytes to text.

    A byte-order mark or a declared ``<meta charset>`` / XML encoding wins;
    otherwise UTF-8 is assumed.  Undecodable bytes become U+FFFD.
    """
    declared = EncodingDetector.find_declared_encoding(raw, is_html=True)
    dammit = UnicodeDammit(
        raw,
        known_definite_encodings=[declared] if declared else [],
        user_encodings=["utf-8"],
        is_html=True,
    )
    if dammit.unicode_markup is not None:
        return dammit.unicode_markup
    return raw.decode("utf-8", errors="replace")
