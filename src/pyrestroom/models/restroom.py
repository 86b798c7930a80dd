"""Restroom model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyrestroom._normalize import safe_bool, safe_float, safe_int, safe_str
from pyrestroom.models._base import RestroomBaseModel


class Restroom(RestroomBaseModel):
    """A single restroom returned by the ``by_location`` lookup.

    Fields are mapped from the Refuge Restrooms ``/api/v1/restrooms``
    record shape.
    """

    id: int
    """Identity of the restroom record."""
    name: str = ""
    """Display name (usually the business or venue)."""
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    distance: float | None = None
    """Distance in miles from the queried coordinates."""
    bearing: float | None = None
    """Bearing in degrees from the queried coordinates."""
    accessible: bool = False
    """ADA accessible."""
    unisex: bool = False
    changing_table: bool = False
    comment: str | None = None
    directions: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    upvote: int = 0
    downvote: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    approved: bool = Field(default=True, validation_alias=AliasChoices("approved", "is_approved"))

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> int:
        parsed = safe_int(value)
        if parsed is None:
            raise ValueError(f"restroom id must be numeric, got {value!r}")
        return parsed

    @field_validator("name", "street", "city", "state", "country", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("comment", "directions", "created_at", "updated_at", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("distance", "bearing", "latitude", "longitude", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("upvote", "downvote", mode="before")
    @classmethod
    def _coerce_votes(cls, value: Any) -> int:
        return safe_int(value) or 0

    @field_validator("accessible", "unisex", "changing_table", "approved", mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return safe_bool(value)

    @property
    def address(self) -> str:
        """Street, city and state joined for display, skipping blanks."""
        return ", ".join(part for part in (self.street, self.city, self.state) if part)
