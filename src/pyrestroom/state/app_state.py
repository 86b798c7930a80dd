"""Application state snapshots."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyrestroom.models.location import Coordinate
from pyrestroom.models.restroom import Restroom


class RestroomState(BaseModel):
    """Restroom slice: the latest lookup result and its status."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    restrooms: tuple[Restroom, ...] = ()
    location: Coordinate | None = None
    is_loading: bool = False
    error: str | None = None


class AppState(BaseModel):
    """Aggregate root held by the store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    restroom: RestroomState = Field(default_factory=RestroomState)
