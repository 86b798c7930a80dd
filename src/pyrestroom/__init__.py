"""pyrestroom - Async nearby-restroom lookups with a unidirectional state store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrestroom")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrestroom.app import create_store, initial_state
from pyrestroom.client import RestroomClient
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import (
    RestroomApiError,
    RestroomConfigError,
    RestroomError,
    RestroomTransportError,
    StoreError,
)
from pyrestroom.location import LocationManager
from pyrestroom.models import Coordinate, Restroom
from pyrestroom.state.actions import (
    Action,
    FetchRestroomsAction,
    FetchRestroomsFailedAction,
    SetRestroomsAction,
)
from pyrestroom.state.app_state import AppState, RestroomState
from pyrestroom.state.reducers import app_reducer, restroom_reducer
from pyrestroom.state.store import Store

__all__ = [
    "__version__",
    "Action",
    "AppState",
    "Coordinate",
    "FetchRestroomsAction",
    "FetchRestroomsFailedAction",
    "LocationManager",
    "Restroom",
    "RestroomApiError",
    "RestroomClient",
    "RestroomConfig",
    "RestroomConfigError",
    "RestroomError",
    "RestroomState",
    "RestroomTransportError",
    "SetRestroomsAction",
    "Store",
    "StoreError",
    "app_reducer",
    "create_store",
    "initial_state",
    "restroom_reducer",
]
