"""Actions dispatched to the store.

Actions are immutable value objects. Reducers switch on their type;
middleware reacts to them with side effects.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from pyrestroom.models.location import Coordinate
from pyrestroom.models.restroom import Restroom


class Action(BaseModel):
    """Base for everything the store accepts."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str


class FetchRestroomsAction(Action):
    """Request a restroom lookup around a position."""

    type: Literal["fetch_restrooms"] = "fetch_restrooms"
    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.lat, longitude=self.lng)


class SetRestroomsAction(Action):
    """Replace the restroom list with a lookup result."""

    type: Literal["set_restrooms"] = "set_restrooms"
    restrooms: tuple[Restroom, ...] = ()


class FetchRestroomsFailedAction(Action):
    """A lookup started by :class:`FetchRestroomsAction` failed."""

    type: Literal["fetch_restrooms_failed"] = "fetch_restrooms_failed"
    lat: float
    lng: float
    message: str


RestroomAction = FetchRestroomsAction | SetRestroomsAction | FetchRestroomsFailedAction
