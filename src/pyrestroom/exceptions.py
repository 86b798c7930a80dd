"""Custom exception hierarchy for pyrestroom."""

from __future__ import annotations


class RestroomError(Exception):
    """Base exception for all pyrestroom errors."""


class RestroomConfigError(RestroomError):
    """Invalid or missing configuration."""


class RestroomTransportError(RestroomError):
    """HTTP-level failure (network, timeout, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class RestroomApiError(RestroomError):
    """API answered, but not with a list of restrooms."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
    ) -> None:
        self.endpoint = endpoint
        super().__init__(message)


class StoreError(RestroomError):
    """Store used outside its contract (e.g. dispatching from a reducer)."""
