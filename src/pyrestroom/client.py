"""High-level async client for the Refuge Restrooms API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyrestroom._api import restrooms as _restrooms_api
from pyrestroom._transport import HttpTransport, Transport
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import RestroomError
from pyrestroom.models.location import Coordinate
from pyrestroom.models.restroom import Restroom

_logger = logging.getLogger(__name__)


class RestroomClient:
    """Async client for the Refuge Restrooms API.

    Usage::

        async with RestroomClient(config) as client:
            restrooms = await client.fetch_restrooms(52.37, 4.90)
    """

    def __init__(
        self,
        config: RestroomConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or RestroomConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None

    @property
    def config(self) -> RestroomConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> RestroomClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise RestroomError("Client not initialized. Use 'async with RestroomClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def fetch_restrooms(
        self,
        latitude: float,
        longitude: float,
        *,
        page: int | None = None,
        per_page: int | None = None,
        offset: int | None = None,
        ada: bool | None = None,
        unisex: bool | None = None,
    ) -> list[Restroom]:
        """Fetch restrooms near a position, nearest first.

        Filters and paging left as ``None`` use the client configuration.
        """
        transport = self._require_transport()
        coordinate = Coordinate(latitude=latitude, longitude=longitude)
        return await _restrooms_api.fetch_restrooms_by_location(
            self._config,
            transport,
            coordinate,
            page=page,
            per_page=per_page,
            offset=offset,
            ada=ada,
            unisex=unisex,
        )
