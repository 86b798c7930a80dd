"""Location updates → restroom lookups.

:class:`LocationManager` is the seam where a platform location source
plugs in. Every accepted fix becomes a :class:`FetchRestroomsAction`.
A failure stops the manager for good; there is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable

from pyrestroom.models.location import Coordinate
from pyrestroom.state.actions import FetchRestroomsAction
from pyrestroom.state.store import Dispatch

_logger = logging.getLogger(__name__)


class LocationManager:
    """Forward location fixes to the store.

    Parameters
    ----------
    dispatch : Dispatch
        Usually ``store.dispatch``, or ``store.dispatch_threadsafe`` when
        fixes arrive on a foreign thread.
    distance_filter : float
        Minimum movement in metres since the last dispatched fix before a
        new lookup is triggered. ``0`` forwards every fix.
    """

    def __init__(self, dispatch: Dispatch, *, distance_filter: float = 0.0) -> None:
        if distance_filter < 0:
            raise ValueError(f"distance_filter must be >= 0, got {distance_filter}")
        self._dispatch = dispatch
        self._distance_filter = distance_filter
        self._running = False
        self._last: Coordinate | None = None
        self._error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def last_location(self) -> Coordinate | None:
        return self._last

    @property
    def error(self) -> BaseException | None:
        return self._error

    def start(self) -> None:
        self._running = True
        self._error = None

    def stop(self) -> None:
        self._running = False

    def update(self, latitude: float, longitude: float) -> bool:
        """Handle one location fix. Returns whether a lookup was dispatched."""
        if not self._running:
            return False
        coordinate = Coordinate(latitude=latitude, longitude=longitude)
        if (
            self._last is not None
            and self._distance_filter > 0
            and self._last.distance_to(coordinate) < self._distance_filter
        ):
            _logger.debug("Ignoring fix within %.0f m of the last lookup", self._distance_filter)
            return False
        self._last = coordinate
        self._dispatch(FetchRestroomsAction(lat=coordinate.latitude, lng=coordinate.longitude))
        return True

    def fail(self, error: BaseException) -> None:
        """Location source reported an error: stop listening."""
        _logger.warning("Location updates stopped: %s", error)
        self._error = error
        self._running = False

    async def track(self, updates: AsyncIterable[Coordinate]) -> None:
        """Start and feed every coordinate from *updates* until it ends or fails.

        Only errors raised by *updates* itself stop the manager through
        :meth:`fail`; errors from ``dispatch`` propagate to the caller.
        """
        self.start()
        iterator = aiter(updates)
        while self._running:
            try:
                coordinate = await anext(iterator)
            except StopAsyncIteration:
                return
            except Exception as exc:
                self.fail(exc)
                return
            if not self._running:
                break
            self.update(coordinate.latitude, coordinate.longitude)
