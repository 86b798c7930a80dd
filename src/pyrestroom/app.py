"""Wiring for the nearby-restrooms store."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from pyrestroom.state.app_state import AppState
from pyrestroom.state.middleware import RestroomFetcher, logging_middleware, restrooms_middleware
from pyrestroom.state.reducers import app_reducer
from pyrestroom.state.store import Middleware, Store


def initial_state() -> AppState:
    """State at launch: empty restroom list, nothing loading."""
    return AppState()


def create_store(
    client: RestroomFetcher,
    *,
    state: AppState | None = None,
    middlewares: Sequence[Middleware[AppState]] = (),
    loop: asyncio.AbstractEventLoop | None = None,
) -> Store[AppState]:
    """Build the application store backed by *client*.

    Built-in middleware runs first (action logging, then the restroom
    lookup), followed by *middlewares* in order.
    """
    return Store(
        app_reducer,
        state if state is not None else initial_state(),
        (logging_middleware, restrooms_middleware(client), *middlewares),
        loop=loop,
    )
