"""Extraction settings for searchpages.

Module-level constants hold the built-in defaults; :class:`ExtractionSettings`
bundles them into a validated object that YAML profiles can override (see
:mod:`searchpages.profiles`).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Section markers
# ---------------------------------------------------------------------------
# Elements carrying one of these marker values become their own page record.
SECTION_ELEMENT = "div"
SECTION_MARKER_ATTRIBUTE = "ocr-component-name"
SECTION_MARKER_VALUES: tuple[str, ...] = ("section-master", "interactive-demo")

# Used when a document has no marked sections at all.
DEFAULT_FALLBACK_SELECTOR = "//body"

# ---------------------------------------------------------------------------
# Document-level preview image
# ---------------------------------------------------------------------------
# (attribute, value) pairs of <meta> tags, tried in order.
PREVIEW_IMAGE_META: tuple[tuple[str, str], ...] = (
    ("property", "og:image"),
    ("name", "twitter:image"),
)

# ---------------------------------------------------------------------------
# Cleaning
# ---------------------------------------------------------------------------
NON_CONTENT_TAGS: tuple[str, ...] = ("script", "style", "svg", "path")


class ExtractionSettings(BaseModel):
    """Tunable knobs for one extraction run."""

    model_config = ConfigDict(extra="forbid")

    section_element: str = SECTION_ELEMENT
    section_marker_attribute: str = SECTION_MARKER_ATTRIBUTE
    section_marker_values: tuple[str, ...] = SECTION_MARKER_VALUES
    fallback_selector: str = DEFAULT_FALLBACK_SELECTOR
    preview_image_meta: tuple[tuple[str, str], ...] = PREVIEW_IMAGE_META
    non_content_tags: tuple[str, ...] = NON_CONTENT_TAGS

    @field_validator("section_element", "section_marker_attribute", "fallback_selector")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @property
    def section_selector(self) -> str:
        """XPath matching every marked section element."""
        if not self.section_marker_values:
            # Nothing is marked, so every document takes the fallback path.
            return f"//{self.section_element}[false()]"
        attr = self.section_marker_attribute
        clauses = " or ".join(f"@{attr}={xpath_literal(v)}" for v in self.section_marker_values)
        return f"//{self.section_element}[{clauses}]"


def xpath_literal(value: str) -> str:
    """Quote *value* as an XPath 1.0 string literal."""
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"
