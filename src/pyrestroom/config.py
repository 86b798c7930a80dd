"""Client configuration for pyrestroom."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyrestroom._constants import (
    BASE_URL,
    DEFAULT_PER_PAGE,
    DEFAULT_REQUEST_TIMEOUT,
    MAX_PER_PAGE,
    USER_AGENT,
)
from pyrestroom.exceptions import RestroomConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class RestroomConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL. Defaults to the public Refuge Restrooms host.
    per_page : int
        Number of restrooms requested per lookup (1-100).
    page : int
        Result page, starting at 1.
    offset : int
        Number of results to skip before the page starts.
    ada : bool
        Only return ADA accessible restrooms.
    unisex : bool
        Only return unisex restrooms.
    request_timeout : float
        Total HTTP request timeout in seconds.
    user_agent : str
        User-Agent header sent with every request.
    distance_filter : float
        Minimum movement in metres before a new location update triggers
        another lookup. ``0`` dispatches on every update.
    """

    base_url: str = BASE_URL
    per_page: int = DEFAULT_PER_PAGE
    page: int = 1
    offset: int = 0
    ada: bool = False
    unisex: bool = False
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT
    distance_filter: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise RestroomConfigError(f"per_page must be between 1 and {MAX_PER_PAGE}, got {self.per_page}")
        if self.page < 1:
            raise RestroomConfigError(f"page must be >= 1, got {self.page}")
        if self.offset < 0:
            raise RestroomConfigError(f"offset must be >= 0, got {self.offset}")
        if self.request_timeout <= 0:
            raise RestroomConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.distance_filter < 0:
            raise RestroomConfigError(f"distance_filter must be >= 0, got {self.distance_filter}")

    @classmethod
    def from_env(cls, **overrides: Any) -> RestroomConfig:
        """Create configuration from environment variables.

        Reads optional ``RESTROOM_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        RestroomConfig
            Populated configuration.

        Raises
        ------
        RestroomConfigError
            If a numeric variable cannot be parsed or a value is out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("RESTROOM_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url.rstrip("/")
        user_agent = env.get("RESTROOM_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        _ENV_NUMERIC_MAP = {
            "RESTROOM_PER_PAGE": ("per_page", int),
            "RESTROOM_PAGE": ("page", int),
            "RESTROOM_OFFSET": ("offset", int),
            "RESTROOM_REQUEST_TIMEOUT": ("request_timeout", float),
            "RESTROOM_DISTANCE_FILTER": ("distance_filter", float),
        }
        for env_key, (field_name, convert) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = convert(val)
            except ValueError as exc:
                raise RestroomConfigError(f"{env_key} is not a valid number: {val!r}") from exc

        if "ada" not in overrides:
            config_kwargs["ada"] = _env_bool(env.get("RESTROOM_ADA"), False)
        if "unisex" not in overrides:
            config_kwargs["unisex"] = _env_bool(env.get("RESTROOM_UNISEX"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
