"""Pure reducers: ``(state, action) -> state``.

Reducers never mutate their input and never perform I/O. When an action
does not concern a slice, the very same object is returned so observers
can cheaply detect "no change" with ``is``.
"""

from __future__ import annotations

from pyrestroom.state.actions import (
    Action,
    FetchRestroomsAction,
    FetchRestroomsFailedAction,
    SetRestroomsAction,
)
from pyrestroom.state.app_state import AppState, RestroomState


def restroom_reducer(state: RestroomState, action: Action) -> RestroomState:
    if isinstance(action, SetRestroomsAction):
        return state.model_copy(
            update={
                "restrooms": tuple(action.restrooms),
                "is_loading": False,
                "error": None,
            }
        )
    if isinstance(action, FetchRestroomsAction):
        return state.model_copy(
            update={
                "location": action.coordinate,
                "is_loading": True,
                "error": None,
            }
        )
    if isinstance(action, FetchRestroomsFailedAction):
        return state.model_copy(update={"is_loading": False, "error": action.message})
    return state


def app_reducer(state: AppState, action: Action) -> AppState:
    restroom = restroom_reducer(state.restroom, action)
    if restroom is state.restroom:
        return state
    return state.model_copy(update={"restroom": restroom})
