"""searchpages.plugins — Extension point registry for custom field extraction.

Usage::

    from searchpages import register_field_extractor
    from searchpages.items import PageRecord

    class KeepFirstParagraph:
        name = "first_paragraph"
        priority = 10

        def build_record(self, region, context):
            para = region.query_one(".//p")
            return PageRecord(content=para.inner_text if para else region.inner_text)

    register_field_extractor(KeepFirstParagraph())

The ``FieldExtractor`` contract is a ``runtime_checkable`` ``Protocol`` so a
plugin never needs to inherit from a base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from searchpages.items import PageRecord
    from searchpages.nodes import HtmlNode

# ---------------------------------------------------------------------------
# Protocol definitions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PageContext:
    """Document-level facts shared by every region of one extraction call."""

    # og:image / twitter:image value, None when the page declares none.
    preview_image: str | None = None
    region_index: int = 0


@runtime_checkable
class FieldExtractor(Protocol):
    """Builds one :class:`~searchpages.items.PageRecord` from a region node."""

    name: str
    priority: int  # Higher = preferred among registered plugins

    def build_record(self, region: HtmlNode, context: PageContext) -> PageRecord:
        """Return the record for *region*."""
        ...


# ---------------------------------------------------------------------------
# Module-level registry
# ---------------------------------------------------------------------------

_registry: dict[str, list[FieldExtractor]] = {
    "field_extractors": [],
}


def register_field_extractor(plugin: FieldExtractor) -> None:
    """Register a custom :class:`FieldExtractor`."""
    _registry["field_extractors"].append(plugin)


def get_field_extractors() -> list[FieldExtractor]:
    """Return all registered field extractors, highest priority first."""
    return sorted(_registry["field_extractors"], key=lambda p: p.priority, reverse=True)


def clear_plugins() -> None:
    """Remove all registered plugins. Primarily for use in tests."""
    for value in _registry.values():
        value.clear()
