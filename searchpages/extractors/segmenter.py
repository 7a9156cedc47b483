"""Split an HTML document into indexable page records.

Region selection:
    marked sections (``ocr-component-name`` = section-master / interactive-demo)
    → caller's fallback selector, only when no section is marked

Per-region field priority:
    title        first <h1> → first <h2> → unset
    destination  first <a href="#..."> → unset
    image        first <img> (src + alt) → page og:image / twitter:image → unset
"""

from __future__ import annotations

import logging

from searchpages.items import PageRecord
from searchpages.nodes import HtmlDocument, HtmlNode
from searchpages.plugins import FieldExtractor, PageContext, get_field_extractors
from searchpages.settings import ExtractionSettings, xpath_literal

logger = logging.getLogger(__name__)

_TITLE_SELECTORS: tuple[str, ...] = (".//h1", ".//h2")
_BOOKMARK_ANCHOR_SELECTOR = ".//a[starts-with(@href, '#')]"
_IMAGE_SELECTOR = ".//img"


# ---------------------------------------------------------------------------
# Default field extraction
# ---------------------------------------------------------------------------

class DefaultFieldExtractor:
    """Heading / bookmark / image rules used when no plugin is registered.

    Subclass and override one of the ``*_for`` methods to change a single
    field while keeping the rest.
    """

    name = "default"
    priority = 0

    def build_record(self, region: HtmlNode, context: PageContext) -> PageRecord:
        fields: dict[str, str] = {"content": region.inner_text}

        title = self.title_for(region)
        if title is not None:
            fields["title"] = title

        destination = self.destination_for(region)
        if destination is not None:
            fields["destination_url"] = destination

        fields.update(self.image_for(region, context))
        return PageRecord(**fields)

    def title_for(self, region: HtmlNode) -> str | None:
        for selector in _TITLE_SELECTORS:
            heading = region.query_one(selector)
            if heading is not None:
                return heading.inner_text
        return None

    def destination_for(self, region: HtmlNode) -> str | None:
        # Same-page bookmark; the href is kept verbatim, target not checked.
        anchor = region.query_one(_BOOKMARK_ANCHOR_SELECTOR)
        if anchor is None:
            return None
        return anchor.attribute("href") or ""

    def image_for(self, region: HtmlNode, context: PageContext) -> dict[str, str]:
        image = region.query_one(_IMAGE_SELECTOR)
        if image is not None:
            return {
                "image_preview_url": image.attribute("src") or "",
                "alt_text": image.attribute("alt") or "",
            }
        if context.preview_image:
            return {"image_preview_url": context.preview_image}
        return {}


# ---------------------------------------------------------------------------
# Segmenter
# ---------------------------------------------------------------------------

class Segmenter:
    """Turns one parsed document into an ordered list of :class:`PageRecord`.

    Args:
        field_extractor: Strategy that builds each record.  Defaults to the
                         highest-priority registered plugin, else
                         :class:`DefaultFieldExtractor`.
        settings:        Marker attribute/values and preview-image meta keys.
    """

    def __init__(
        self,
        field_extractor: FieldExtractor | None = None,
        settings: ExtractionSettings | None = None,
    ) -> None:
        self._field_extractor = field_extractor
        self._settings = settings or ExtractionSettings()

    @property
    def field_extractor(self) -> FieldExtractor:
        if self._field_extractor is not None:
            return self._field_extractor
        plugins = get_field_extractors()
        return plugins[0] if plugins else DefaultFieldExtractor()

    def preview_image(self, doc: HtmlDocument) -> str | None:
        """Return the page-level og:image (or twitter:image) value, if declared."""
        for attr, value in self._settings.preview_image_meta:
            meta = doc.query_one(f"//meta[@{attr}={xpath_literal(value)}]")
            if meta is not None:
                return meta.attribute("content") or ""
        return None

    def regions(self, doc: HtmlDocument, fallback_selector: str) -> list[HtmlNode]:
        """Marked sections if any exist, otherwise *fallback_selector* matches."""
        sections = doc.query(self._settings.section_selector)
        if sections:
            return sections
        logger.debug("No marked sections; falling back to %s", fallback_selector)
        return doc.query(fallback_selector)

    def extract_pages(
        self,
        doc: HtmlDocument | None,
        fallback_selector: str | None = None,
    ) -> list[PageRecord]:
        """Build one record per region of *doc*, in document order."""
        if doc is None or doc.root is None:
            return []

        if fallback_selector is None:
            fallback_selector = self._settings.fallback_selector
        preview = self.preview_image(doc)
        extractor = self.field_extractor

        pages = [
            extractor.build_record(region, PageContext(preview_image=preview, region_index=i))
            for i, region in enumerate(self.regions(doc, fallback_selector))
        ]
        logger.debug("Extracted %d pages using %s", len(pages), extractor.name)
        return pages


def extract_pages(
    doc: HtmlDocument | None,
    fallback_selector: str | None = None,
    field_extractor: FieldExtractor | None = None,
) -> list[PageRecord]:
    """Split *doc* into page records.

    Args:
        doc:               Parsed document (see :func:`searchpages.parse_html`).
        fallback_selector: XPath of the content container(s) used only when
                           the document has no marked sections.  Defaults to
                           ``//body``.
        field_extractor:   Optional strategy overriding the field rules.

    Returns:
        List of :class:`~searchpages.items.PageRecord`; empty when *doc* is
        empty or neither query matches.
    """
    return Segmenter(field_extractor=field_extractor).extract_pages(doc, fallback_selector)
