from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pyrestroom._api.restrooms import build_by_location_params, fetch_restrooms_by_location
from pyrestroom._constants import BY_LOCATION_ENDPOINT
from pyrestroom.config import RestroomConfig
from pyrestroom.exceptions import RestroomApiError
from pyrestroom.models.location import Coordinate

AMSTERDAM = Coordinate(latitude=52.3676, longitude=4.9041)


class _FakeTransport:
    def __init__(self, payload: Any) -> None:
        self._payload = payload
        self.requests: list[tuple[str, dict[str, str]]] = []

    async def get_json(self, endpoint: str, params: Mapping[str, str]) -> Any:
        self.requests.append((endpoint, dict(params)))
        return self._payload


def test_params_use_config_defaults() -> None:
    params = build_by_location_params(RestroomConfig(), AMSTERDAM)

    assert params == {
        "lat": "52.3676",
        "lng": "4.9041",
        "page": "1",
        "per_page": "10",
        "offset": "0",
    }


def test_params_overrides_and_filters() -> None:
    config = RestroomConfig(unisex=True, per_page=25)

    params = build_by_location_params(config, AMSTERDAM, page=3, ada=True)
    assert params["page"] == "3"
    assert params["per_page"] == "25"
    assert params["ada"] == "true"
    assert params["unisex"] == "true"

    # Explicit False beats the config flag.
    assert "unisex" not in build_by_location_params(config, AMSTERDAM, unisex=False)


@pytest.mark.asyncio
async def test_fetch_parses_records_in_order() -> None:
    transport = _FakeTransport(
        [
            {"id": 2, "name": "Near", "distance": 0.1},
            {"id": 1, "name": "Far", "distance": 2.5},
        ]
    )

    restrooms = await fetch_restrooms_by_location(RestroomConfig(), transport, AMSTERDAM)

    assert [r.name for r in restrooms] == ["Near", "Far"]
    assert transport.requests[0][0] == BY_LOCATION_ENDPOINT
    assert transport.requests[0][1]["lat"] == "52.3676"


@pytest.mark.asyncio
async def test_fetch_skips_non_object_entries() -> None:
    transport = _FakeTransport([{"id": 5}, "garbage", None, 7])

    restrooms = await fetch_restrooms_by_location(RestroomConfig(), transport, AMSTERDAM)

    assert [r.id for r in restrooms] == [5]


@pytest.mark.asyncio
async def test_fetch_empty_list() -> None:
    assert await fetch_restrooms_by_location(RestroomConfig(), _FakeTransport([]), AMSTERDAM) == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"errors": ["lat is invalid"]},
        {"error": "Not found"},
        "nope",
    ],
)
async def test_fetch_rejects_non_list_payloads(payload: Any) -> None:
    with pytest.raises(RestroomApiError) as exc_info:
        await fetch_restrooms_by_location(RestroomConfig(), _FakeTransport(payload), AMSTERDAM)

    assert exc_info.value.endpoint == BY_LOCATION_ENDPOINT


@pytest.mark.asyncio
async def test_fetch_rejects_invalid_record() -> None:
    with pytest.raises(RestroomApiError, match="index 1"):
        await fetch_restrooms_by_location(RestroomConfig(), _FakeTransport([{"id": 1}, {"name": "no id"}]), AMSTERDAM)


@pytest.mark.asyncio
async def test_fetch_tolerates_oversized_numbers() -> None:
    transport = _FakeTransport([{"id": 1, "upvote": 10**400}, {"id": 2, "distance": 10**400}])

    restrooms = await fetch_restrooms_by_location(RestroomConfig(), transport, AMSTERDAM)

    assert [(r.id, r.upvote, r.distance) for r in restrooms] == [(1, 0, None), (2, 0, None)]


@pytest.mark.asyncio
async def test_fetch_oversized_id_is_api_error() -> None:
    with pytest.raises(RestroomApiError, match="index 0"):
        await fetch_restrooms_by_location(RestroomConfig(), _FakeTransport([{"id": 10**400}]), AMSTERDAM)
