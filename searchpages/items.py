"""Pydantic schema for the page records handed to the search indexer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Page record
# ---------------------------------------------------------------------------

class PageRecord(BaseModel):
    """One indexable unit cut out of an HTML document.

    Optional fields are only *set* when the extractor found a value for them.
    :meth:`to_dict` drops unset fields, so "no anchor" is an absent key while
    an anchor with an empty ``href`` is present as ``""``.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: str
    title: str | None = None
    destination_url: str | None = Field(default=None, alias="destinationURL")
    image_preview_url: str | None = Field(default=None, alias="imagePreviewUrl")
    alt_text: str | None = Field(default=None, alias="altText")

    @property
    def has_local_image(self) -> bool:
        """True when the preview image came from an ``<img>`` inside the region."""
        return "alt_text" in self.model_fields_set

    def to_dict(self) -> dict[str, Any]:
        """Serialise with the indexer's field names, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_unset=True)
