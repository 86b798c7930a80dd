#!/usr/bin/env python3
"""List restrooms near a position.

This is the terminal version of the single-screen app: a store observer
renders the restroom list every time state changes, and location fixes
are fed through :class:`pyrestroom.LocationManager`.

Usage
-----
One-shot lookup::

    python scripts/nearby_restrooms.py --lat 52.3676 --lng 4.9041

Follow mode reads ``lat,lng`` lines from stdin, one fix per line::

    printf '52.37,4.90\n52.38,4.91\n' | python scripts/nearby_restrooms.py --follow

Options::

    --ada                Only ADA accessible restrooms
    --unisex             Only unisex restrooms
    --per-page N         Number of results (default: RESTROOM_PER_PAGE or 10)
    --distance-filter M  Follow mode: ignore fixes closer than M metres
    --json               Print the final state as JSON
    --verbose, -v        Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import AsyncIterator
from typing import Any

from pyrestroom import (
    AppState,
    Coordinate,
    LocationManager,
    RestroomClient,
    RestroomConfig,
    create_store,
)

_logger = logging.getLogger("nearby_restrooms")


def _render(state: AppState) -> None:
    slice_ = state.restroom
    if slice_.is_loading:
        where = slice_.location
        if where is not None:
            print(f"Looking up restrooms near {where.latitude:.4f}, {where.longitude:.4f} ...")
        return
    if slice_.error:
        print(f"Lookup failed: {slice_.error}", file=sys.stderr)
        return
    if not slice_.restrooms:
        print("No restrooms found.")
        return
    print(f"{len(slice_.restrooms)} restrooms:")
    for restroom in slice_.restrooms:
        distance = f"{restroom.distance:.2f} mi" if restroom.distance is not None else "?"
        flags = "".join(
            (
                " [accessible]" if restroom.accessible else "",
                " [unisex]" if restroom.unisex else "",
            )
        )
        print(f"  {distance:>9}  {restroom.name}{flags}")
        if restroom.address:
            print(f"             {restroom.address}")
        if restroom.comment:
            print(f"             \"{restroom.comment}\"")


async def _stdin_fixes() -> AsyncIterator[Coordinate]:
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            return
        line = line.strip()
        if not line:
            continue
        lat_text, _, lng_text = line.partition(",")
        yield Coordinate(latitude=float(lat_text), longitude=float(lng_text))


async def main() -> int:
    parser = argparse.ArgumentParser(description="List restrooms near a position.")
    parser.add_argument("--lat", type=float, help="Latitude in decimal degrees")
    parser.add_argument("--lng", type=float, help="Longitude in decimal degrees")
    parser.add_argument("--follow", action="store_true", help="Read lat,lng fixes from stdin")
    parser.add_argument("--ada", action="store_true", help="Only ADA accessible restrooms")
    parser.add_argument("--unisex", action="store_true", help="Only unisex restrooms")
    parser.add_argument("--per-page", type=int, help="Number of results")
    parser.add_argument("--distance-filter", type=float, help="Ignore fixes closer than this many metres")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print final state as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    if not args.follow and (args.lat is None or args.lng is None):
        parser.error("--lat and --lng are required unless --follow is given")

    overrides: dict[str, Any] = {}
    if args.ada:
        overrides["ada"] = True
    if args.unisex:
        overrides["unisex"] = True
    if args.per_page is not None:
        overrides["per_page"] = args.per_page
    if args.distance_filter is not None:
        overrides["distance_filter"] = args.distance_filter
    config = RestroomConfig.from_env(**overrides)

    async with RestroomClient(config) as client:
        store = create_store(client)
        if not args.json_mode:
            store.subscribe(_render)

        manager = LocationManager(store.dispatch, distance_filter=config.distance_filter)
        if args.follow:
            await manager.track(_stdin_fixes())
        else:
            manager.start()
            manager.update(args.lat, args.lng)
        await store.wait_idle()

    if args.json_mode:
        print(json.dumps(store.state.model_dump(mode="json", exclude={"restroom": {"restrooms": {"__all__": {"raw"}}}}), indent=2))

    if manager.error is not None:
        _logger.error("Location input failed: %s", manager.error)
        return 1
    return 1 if store.state.restroom.error else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
