# -*- coding: utf-8 -*-
"""
mapdex CLI - Inspect installed maps and check them for updates.

Usage::

    python -m mapdex games
    python -m mapdex maps --maps-dir ~/triplea/downloadedMaps
    python -m mapdex find "Big World 1942"
    python -m mapdex check --force
    python -m mapdex config --threshold-days 3 --write

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import argparse
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path
from typing import List, Optional


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mapdex",
        description="mapdex — Catalog installed maps and check for updates.",
    )
    parser.add_argument(
        "--maps-dir",
        type=Path,
        default=None,
        help="Folder holding downloaded maps (default: resolved from "
             "MAPDEX_MAPS_DIR or ~/.mapdex/config.json).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to mapdex_config.json.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("games", help="List installed games, sorted.")
    commands.add_parser("maps", help="List installed maps and versions.")

    find = commands.add_parser("find", help="Print the location of a game.")
    find.add_argument("game", help="Exact game name.")

    check = commands.add_parser("check", help="List out of date maps.")
    check.add_argument(
        "--force",
        action="store_true",
        help="Check even if the last check was recent.",
    )
    check.add_argument(
        "--listing-url",
        default=None,
        help="Override the map listing URL.",
    )
    config = commands.add_parser(
        "config", help="Show or save the mapdex configuration."
    )
    config.add_argument("--listing-url", default=None, help="Map listing URL.")
    config.add_argument(
        "--timeout", type=float, default=None, help="HTTP timeout in seconds."
    )
    config.add_argument(
        "--threshold-days",
        type=int,
        default=None,
        help="Minimum days between update checks.",
    )
    config.add_argument(
        "--write",
        action="store_true",
        help="Save the resulting configuration to the config file.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from mapdex.catalog.index import MapCatalogIndex
    from mapdex.catalog.resolver import resolve_maps_dir, resolve_state_path
    from mapdex.catalog.scheduler import JsonStateStore, UpdateScheduler
    from mapdex.catalog.updater import MapUpdateCheck
    from mapdex.core.config import load_config

    config = load_config(args.config)

    if args.command == "config":
        overrides = {
            "listing_url": args.listing_url,
            "update_timeout": args.timeout,
            "update_threshold_days": args.threshold_days,
        }
        config = replace(
            config, **{k: v for k, v in overrides.items() if v is not None}
        )
        if args.write:
            path = config.save(args.config)
            print(f"Wrote {path}", file=sys.stderr)
        for key, value in asdict(config).items():
            print(f"{key} = {value}")
        return 0

    maps_dir = args.maps_dir or resolve_maps_dir()

    if args.command == "check":
        scheduler = UpdateScheduler(
            JsonStateStore(resolve_state_path()),
            threshold_days=config.update_threshold_days,
        )
        check = MapUpdateCheck(
            maps_dir,
            scheduler,
            listing_url=args.listing_url or config.listing_url,
            timeout=config.update_timeout,
        )
        for update in check.run_detailed(force=args.force):
            print(
                f"{update.map_name}\t"
                f"{update.installed_version} -> {update.latest_version}"
            )
        return 0

    if not maps_dir.is_dir():
        print(f"Error: maps folder not found: {maps_dir}", file=sys.stderr)
        return 1

    index = MapCatalogIndex.build(maps_dir)

    if args.command == "games":
        for name in index.sorted_game_names():
            print(name)
        return 0

    if args.command == "maps":
        for description, location in index.entries():
            print(f"{description.map_name}\t{description.version}\t{location}")
        return 0

    # find
    location = index.find_game_location(args.game)
    if location is None:
        print(f"Error: game not installed: {args.game}", file=sys.stderr)
        return 1
    print(location.to_uri())
    return 0


if __name__ == "__main__":
    sys.exit(main())
