"""Base model for Refuge Restrooms API records.

Every response model inherits from :class:`RestroomBaseModel` which
provides:

* A ``model_validator(mode="before")`` that drops placeholder values
  (``None``, blank strings, NaN) so the field default is used.
* A ``raw`` dict that captures the original payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pyrestroom._normalize import is_placeholder


class RestroomBaseModel(BaseModel):
    """Base for API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _clean_placeholders(cls, values: Any) -> Any:
        """Strip placeholder values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if not is_placeholder(value)}
        # Keep a caller-supplied raw (kwargs construction); otherwise stash the payload.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
