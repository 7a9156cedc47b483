"""searchpages - split rendered HTML into search-index page records.

Quick usage::

    from searchpages import extract_pages, parse_html

    doc = parse_html(html)
    for page in extract_pages(doc, "//body"):
        print(page.title, page.destination_url)

Cleaning a single region (destructive: strips script/style/svg/path from
the whole document first)::

    from searchpages import clean_region

    text = clean_region(parse_html(html), "//main")

Plugin extension point::

    from searchpages import register_field_extractor

    class TitleFromAria:
        name = "aria_title"
        priority = 10
        def build_record(self, region, context):
            ...

    register_field_extractor(TitleFromAria())
"""

from searchpages.export import to_jsonl
from searchpages.extractors import (
    DefaultFieldExtractor,
    Segmenter,
    clean_region,
    extract_pages,
    normalize_whitespace,
    remove_nodes_of_type,
    strip_non_content_nodes,
)
from searchpages.items import PageRecord
from searchpages.nodes import HtmlDocument, HtmlNode, parse_html
from searchpages.plugins import (
    FieldExtractor,
    PageContext,
    clear_plugins,
    get_field_extractors,
    register_field_extractor,
)
from searchpages.settings import ExtractionSettings

__version__ = "0.1.0"
__all__ = [
    "DefaultFieldExtractor",
    "ExtractionSettings",
    "FieldExtractor",
    "HtmlDocument",
    "HtmlNode",
    "PageContext",
    "PageRecord",
    "Segmenter",
    "clean_region",
    "clear_plugins",
    "extract_pages",
    "get_field_extractors",
    "normalize_whitespace",
    "parse_html",
    "register_field_extractor",
    "remove_nodes_of_type",
    "strip_non_content_nodes",
    "to_jsonl",
]
