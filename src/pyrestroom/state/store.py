"""Unidirectional state container.

The store is the only place state is replaced. ``dispatch`` runs, in order:

1. the reducer, producing a complete new snapshot,
2. the swap to that snapshot,
3. observer notification,
4. every middleware, which may hand back an awaitable effect.

Effects run as tasks on the store's event loop and may dispatch further
actions when they complete.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, TypeVar

from pyrestroom.exceptions import StoreError
from pyrestroom.state.actions import Action

_logger = logging.getLogger(__name__)

S = TypeVar("S")

Reducer = Callable[[S, Action], S]
Dispatch = Callable[[Action], None]
Observer = Callable[[S], None]
Middleware = Callable[[S, Action, Dispatch], Awaitable[None] | None]


class Store(Generic[S]):
    """Holds the current state and routes actions through reducer and middleware.

    The store is not thread-safe. Call ``dispatch`` from the thread running
    the store's event loop; other threads go through
    :meth:`dispatch_threadsafe`.
    """

    def __init__(
        self,
        reducer: Reducer[S],
        state: S,
        middlewares: Sequence[Middleware[S]] = (),
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._reducer = reducer
        self._state = state
        self._middlewares: tuple[Middleware[S], ...] = tuple(middlewares)
        self._observers: list[Observer[S]] = []
        self._loop = loop
        self._reducing = False
        self._effects: set[asyncio.Task[Any]] = set()

    @property
    def state(self) -> S:
        return self._state

    @property
    def pending_effects(self) -> int:
        return len(self._effects)

    def subscribe(self, observer: Observer[S]) -> Callable[[], None]:
        """Register *observer* for new states; returns an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._observers.remove(observer)

        return unsubscribe

    def dispatch(self, action: Action) -> None:
        """Reduce *action*, notify observers, then run every middleware.

        Effects returned by middleware are scheduled only after all middleware
        has run. If an effect is returned while no event loop is bound, every
        effect of this dispatch is discarded and ``StoreError`` is raised; the
        new state has already been applied and observers notified.
        """
        if self._reducing:
            raise StoreError(f"Reducers may not dispatch actions (got {action.type!r})")
        if self._loop is None:
            with contextlib.suppress(RuntimeError):
                self._loop = asyncio.get_running_loop()

        self._reducing = True
        try:
            new_state = self._reducer(self._state, action)
        finally:
            self._reducing = False

        self._state = new_state
        for observer in tuple(self._observers):
            observer(new_state)

        effects: list[Awaitable[None]] = []
        for middleware in self._middlewares:
            effect = middleware(new_state, action, self.dispatch)
            if effect is not None and inspect.isawaitable(effect):
                effects.append(effect)
        if effects:
            self._schedule(effects, action)

    def dispatch_threadsafe(self, action: Action) -> None:
        """Post *action* onto the store's loop from any thread."""
        if self._loop is None:
            raise StoreError("Store is not bound to an event loop; dispatch once from the loop or pass loop=")
        self._loop.call_soon_threadsafe(self.dispatch, action)

    async def wait_idle(self) -> None:
        """Wait until all scheduled effects, including ones they started, finish."""
        while self._effects:
            await asyncio.gather(*tuple(self._effects), return_exceptions=True)

    def _bind_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            try:
                self._loop = asyncio.get_running_loop()
            except RuntimeError as exc:
                raise StoreError("Middleware returned an effect but no event loop is running") from exc
        return self._loop

    def _schedule(self, effects: Sequence[Awaitable[None]], action: Action) -> None:
        try:
            loop = self._bind_loop()
        except StoreError:
            for effect in effects:
                if inspect.iscoroutine(effect):
                    effect.close()
            raise

        for effect in effects:
            task = loop.create_task(_run_effect(effect))
            self._effects.add(task)
            task.add_done_callback(functools.partial(self._effect_done, action))

    def _effect_done(self, action: Action, finished: asyncio.Task[Any]) -> None:
        self._effects.discard(finished)
        if finished.cancelled():
            _logger.debug("Effect for %s cancelled", action.type)
            return
        exc = finished.exception()
        if exc is not None:
            _logger.error("Effect for %s failed", action.type, exc_info=exc)


async def _run_effect(effect: Awaitable[None]) -> None:
    await effect
