"""Tests for searchpages.extractors.normalizer."""

from __future__ import annotations

import pytest

from searchpages.extractors.normalizer import (
    clean_region,
    first_inner_text,
    normalize_whitespace,
    remove_nodes,
    remove_nodes_of_type,
    safe_select,
    strip_non_content_nodes,
)
from searchpages.nodes import HtmlDocument, parse_html

# ---------------------------------------------------------------------------
# normalize_whitespace
# ---------------------------------------------------------------------------

def test_normalize_crlf_runs_and_spaces():
    assert normalize_whitespace("a\r\n\r\nb   c") == "a\nb c"


def test_normalize_tabs_collapse_to_space():
    assert normalize_whitespace("a\t\t b") == "a b"


def test_normalize_mixed_newlines():
    assert normalize_whitespace("a\n\r\n\nb") == "a\nb"


def test_normalize_none_passes_through():
    assert normalize_whitespace(None) is None


def test_normalize_empty_string():
    assert normalize_whitespace("") == ""


def test_newlines_separated_by_spaces_are_not_merged():
    # Line breaks collapse before spaces, so " " keeps the two breaks apart.
    assert normalize_whitespace("a\n  \nb") == "a\n \nb"


@pytest.mark.parametrize(
    "text",
    ["", "plain", "a\r\n\r\nb   c", "  lead\t\ttrail  ", "x\n \n \ny", "\r\n\r\n"],
)
def test_normalize_is_idempotent(text):
    once = normalize_whitespace(text)
    assert normalize_whitespace(once) == once


# ---------------------------------------------------------------------------
# Node removal
# ---------------------------------------------------------------------------

class TestNodeRemoval:
    def test_remove_nodes_of_type(self, plain_html):
        doc = parse_html(plain_html)
        removed = remove_nodes_of_type(doc, "script", "svg")
        assert removed == 3
        assert safe_select(doc, "//script | //svg") == []

    def test_remove_nodes_of_type_without_tags(self, plain_html):
        doc = parse_html(plain_html)
        assert remove_nodes_of_type(doc) == 0
        assert len(safe_select(doc, "//script")) == 2

    def test_removal_keeps_following_text(self):
        doc = parse_html("<html><body><p>before<script>x()</script>after</p></body></html>")
        remove_nodes_of_type(doc, "script")
        assert first_inner_text(doc, "//p") == "beforeafter"

    def test_nested_matches_removed(self, plain_html):
        doc = parse_html(plain_html)
        strip_non_content_nodes(doc)
        assert safe_select(doc, "//path") == []
        assert safe_select(doc, "//style | //script | //svg") == []

    def test_remove_nodes_by_xpath(self, plain_html):
        doc = parse_html(plain_html)
        assert remove_nodes(doc, "//footer") == 1
        assert "Copyright" not in doc.root.inner_text

    def test_root_is_never_removed(self):
        doc = parse_html("<html><body>x</body></html>")
        remove_nodes(doc, "/html")
        assert doc.root is not None
        assert doc.root.inner_text == "x"

    def test_safe_select_on_empty_document(self):
        assert safe_select(HtmlDocument(root=None), "//p") == []


# ---------------------------------------------------------------------------
# clean_region
# ---------------------------------------------------------------------------

class TestCleanRegion:
    def test_strips_scripts_and_vectors(self, plain_html):
        text = clean_region(parse_html(plain_html), "//main")
        assert text is not None
        assert "tracking" not in text
        assert "M0 0" not in text
        assert "Release notes" in text
        assert "Version 2.0 adds search." in text
        assert "Version 1.9 fixes bugs." in text

    def test_output_is_normalised(self, plain_html):
        text = clean_region(parse_html(plain_html), "//main")
        assert "\t" not in text
        assert "  " not in text
        assert "\n\n" not in text

    def test_only_first_match_returned(self):
        html = "<html><body><p>first</p><p>second</p></body></html>"
        assert clean_region(parse_html(html), "//p") == "first"

    def test_removal_is_document_wide(self, plain_html):
        doc = parse_html(plain_html)
        clean_region(doc, "//footer")
        assert safe_select(doc, "//head/script") == []

    def test_no_match_returns_none(self, plain_html):
        assert clean_region(parse_html(plain_html), "//article") is None

    def test_none_document(self):
        assert clean_region(None, "//body") is None

    def test_empty_document(self):
        assert clean_region(parse_html("   "), "//body") is None

    def test_custom_tag_list(self, plain_html):
        doc = parse_html(plain_html)
        text = clean_region(doc, "//body", tag_names=("footer",))
        assert "Copyright" not in text
        assert len(safe_select(doc, "//script")) == 2
