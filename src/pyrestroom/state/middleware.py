"""Middleware: side effects triggered by dispatched actions."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import Any, Protocol

from pyrestroom._redact import redact_for_log
from pyrestroom.exceptions import RestroomError
from pyrestroom.models.restroom import Restroom
from pyrestroom.state.actions import (
    Action,
    FetchRestroomsAction,
    FetchRestroomsFailedAction,
    SetRestroomsAction,
)
from pyrestroom.state.app_state import AppState
from pyrestroom.state.store import Dispatch, Middleware

_logger = logging.getLogger(__name__)


class RestroomFetcher(Protocol):
    """What the restrooms middleware needs from a client."""

    async def fetch_restrooms(self, latitude: float, longitude: float) -> list[Restroom]: ...


def restrooms_middleware(client: RestroomFetcher) -> Middleware[AppState]:
    """Look up restrooms for every :class:`FetchRestroomsAction`.

    One request per action: no retry, no timeout beyond the client's own,
    no cancellation of superseded lookups. Failures are logged and turned
    into :class:`FetchRestroomsFailedAction`.
    """

    async def _fetch(action: FetchRestroomsAction, dispatch: Dispatch) -> None:
        try:
            restrooms = await client.fetch_restrooms(action.lat, action.lng)
        except RestroomError as exc:
            _logger.warning("Restroom lookup failed: %s", exc)
            dispatch(FetchRestroomsFailedAction(lat=action.lat, lng=action.lng, message=str(exc)))
            return
        dispatch(SetRestroomsAction(restrooms=tuple(restrooms)))

    def middleware(_state: AppState, action: Action, dispatch: Dispatch) -> Awaitable[None] | None:
        if isinstance(action, FetchRestroomsAction):
            return _fetch(action, dispatch)
        return None

    return middleware


def logging_middleware(_state: Any, action: Action, _dispatch: Dispatch) -> None:
    if not _logger.isEnabledFor(logging.DEBUG):
        return
    payload = action.model_dump(mode="json", exclude={"type"})
    if isinstance(action, SetRestroomsAction):
        # The full list is noise; ids are enough to follow the flow.
        payload = {"restroom_ids": [restroom.id for restroom in action.restrooms]}
    _logger.debug("dispatch %s %s", action.type, redact_for_log(payload))
