"""Restroom lookup endpoint.

Endpoint:
  - /api/v1/restrooms/by_location (GET, JSON array ordered by distance)
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from pyrestroom._constants import BY_LOCATION_ENDPOINT
from pyrestroom._transport import Transport
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import RestroomApiError
from pyrestroom.models.location import Coordinate
from pyrestroom.models.restroom import Restroom

_logger = logging.getLogger(__name__)


def build_by_location_params(
    config: RestroomConfig,
    coordinate: Coordinate,
    *,
    page: int | None = None,
    per_page: int | None = None,
    offset: int | None = None,
    ada: bool | None = None,
    unisex: bool | None = None,
) -> dict[str, str]:
    """Build the query string for a ``by_location`` lookup.

    Arguments left as ``None`` fall back to *config*. The ``ada`` and
    ``unisex`` filters are only sent when enabled.
    """
    params: dict[str, str] = {
        "lat": repr(coordinate.latitude),
        "lng": repr(coordinate.longitude),
        "page": str(config.page if page is None else page),
        "per_page": str(config.per_page if per_page is None else per_page),
        "offset": str(config.offset if offset is None else offset),
    }
    if config.ada if ada is None else ada:
        params["ada"] = "true"
    if config.unisex if unisex is None else unisex:
        params["unisex"] = "true"
    return params


def _parse_restrooms(endpoint: str, decoded: Any) -> list[Restroom]:
    if isinstance(decoded, dict):
        message = decoded.get("error") or decoded.get("errors") or decoded
        raise RestroomApiError(f"{endpoint} failed: {message}", endpoint=endpoint)
    if not isinstance(decoded, list):
        raise RestroomApiError(
            f"{endpoint} returned {type(decoded).__name__}, expected a list",
            endpoint=endpoint,
        )

    restrooms: list[Restroom] = []
    for index, item in enumerate(decoded):
        if not isinstance(item, dict):
            _logger.debug("Skipping non-object entry %d from %s: %r", index, endpoint, item)
            continue
        try:
            restrooms.append(Restroom.model_validate(item))
        except ValidationError as exc:
            raise RestroomApiError(f"{endpoint} returned an invalid restroom at index {index}: {exc}", endpoint=endpoint) from exc
    return restrooms


async def fetch_restrooms_by_location(
    config: RestroomConfig,
    transport: Transport,
    coordinate: Coordinate,
    *,
    page: int | None = None,
    per_page: int | None = None,
    offset: int | None = None,
    ada: bool | None = None,
    unisex: bool | None = None,
) -> list[Restroom]:
    """Fetch restrooms near *coordinate*.

    Parameters
    ----------
    config : RestroomConfig
        Client configuration (paging and filter defaults).
    transport : Transport
        HTTP transport.
    coordinate : Coordinate
        Query position.

    Returns
    -------
    list[Restroom]
        Restrooms in the order the API returned them (nearest first).

    Raises
    ------
    RestroomApiError
        If the payload is not a list of restroom objects.
    RestroomTransportError
        On network or HTTP failures.
    """
    endpoint = BY_LOCATION_ENDPOINT
    params = build_by_location_params(
        config,
        coordinate,
        page=page,
        per_page=per_page,
        offset=offset,
        ada=ada,
        unisex=unisex,
    )
    decoded = await transport.get_json(endpoint, params)
    restrooms = _parse_restrooms(endpoint, decoded)
    _logger.debug("%s returned %d restrooms", endpoint, len(restrooms))
    return restrooms
