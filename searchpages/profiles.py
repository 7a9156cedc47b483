"""YAML-based extraction profiles.

A profile file has a ``default`` block and optional per-domain overrides::

    default:
      fallback_selector: //main
    domains:
      docs.example.com:
        section_marker_values: [section-master, interactive-demo, faq]

The longest domain key that matches the URL's host (exactly or as a parent
domain) wins and is layered over ``default``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml

from searchpages.settings import ExtractionSettings

logger = logging.getLogger(__name__)


def _domain_overrides(domains: Any, host: str) -> dict[str, Any]:
    """Return the block of the longest domain key covering *host*."""
    if not host or not isinstance(domains, dict):
        return {}

    best_key = ""
    best_cfg: dict[str, Any] = {}
    for key, cfg in domains.items():
        if not isinstance(key, str) or not isinstance(cfg, dict):
            continue
        key_lower = key.lower()
        covers = host == key_lower or host.endswith("." + key_lower)
        if covers and len(key_lower) > len(best_key):
            best_key, best_cfg = key_lower, cfg

    if best_key:
        logger.debug("Profile domain %r matched %s", best_key, host)
    return best_cfg


def load_settings(path: str | Path, url: str = "") -> ExtractionSettings:
    """Load the profile at *path* and return the settings that apply to *url*.

    Raises:
        OSError:                  the file cannot be read.
        yaml.YAMLError:           the file is not valid YAML.
        pydantic.ValidationError: the merged profile holds unusable values.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        data = {}

    merged: dict[str, Any] = {}
    default = data.get("default")
    if isinstance(default, dict):
        merged.update(default)
    merged.update(_domain_overrides(data.get("domains"), urlparse(url).netloc.lower()))
    return ExtractionSettings(**merged)
