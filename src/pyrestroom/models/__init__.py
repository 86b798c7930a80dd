"""Data models for Refuge Restrooms API responses."""

from pyrestroom.models._base import RestroomBaseModel
from pyrestroom.models.location import Coordinate
from pyrestroom.models.restroom import Restroom

__all__ = [
    "Coordinate",
    "Restroom",
    "RestroomBaseModel",
]
