"""State/store layer.

A single store holds the immutable :class:`AppState`. Dispatched actions
are reduced into a new snapshot; middleware observes the same actions and
may start async effects that dispatch follow-up actions.
"""
