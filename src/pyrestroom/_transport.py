"""HTTP transport for the Refuge Restrooms JSON API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyrestroom._redact import redact_for_log
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import RestroomTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        ...


class HttpTransport:
    """Plain JSON-over-HTTP transport backed by an ``aiohttp`` session."""

    def __init__(
        self,
        config: RestroomConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        """GET *endpoint* with query *params* and return the decoded JSON body."""
        headers: dict[str, str] = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        url = f"{self._config.base_url}{endpoint}"

        _logger.debug("GET %s params=%s", url, redact_for_log(dict(params)))

        try:
            async with self._http.get(url, params=dict(params), headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                if resp.status != 200:
                    text = body.decode("utf-8", errors="replace")
                    raise RestroomTransportError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except RestroomTransportError:
            raise
        except asyncio.TimeoutError as exc:
            raise RestroomTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise RestroomTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            text = body.decode(resp.charset or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            raise RestroomTransportError(
                f"Undecodable body from {endpoint}: {body[:64]!r}",
                status_code=200,
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(text)
        except ValueError as exc:
            # JSONDecodeError, and int conversion limits on oversized numbers.
            raise RestroomTransportError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=200,
                endpoint=endpoint,
            ) from exc
