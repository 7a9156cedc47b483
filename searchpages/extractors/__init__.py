"""Extraction sub-package: page segmentation and region text cleaning."""

from .normalizer import (
    clean_region,
    first_inner_text,
    normalize_whitespace,
    remove_nodes,
    remove_nodes_of_type,
    safe_select,
    strip_non_content_nodes,
)
from .segmenter import DefaultFieldExtractor, Segmenter, extract_pages

__all__ = [
    "DefaultFieldExtractor",
    "Segmenter",
    "clean_region",
    "extract_pages",
    "first_inner_text",
    "normalize_whitespace",
    "remove_nodes",
    "remove_nodes_of_type",
    "safe_select",
    "strip_non_content_nodes",
]
