"""Geographic coordinate model."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from pyrestroom._constants import EARTH_RADIUS_M


class Coordinate(BaseModel):
    """A WGS84 position in decimal degrees."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    def distance_to(self, other: Coordinate) -> float:
        """Great-circle distance to *other* in metres (haversine)."""
        phi1 = math.radians(self.latitude)
        phi2 = math.radians(other.latitude)
        d_phi = phi2 - phi1
        d_lambda = math.radians(other.longitude - self.longitude)
        a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
        return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))
