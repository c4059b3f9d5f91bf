# -*- coding: utf-8 -*-
"""
Map Listing Client - Fetch the remotely published list of maps.

The listing is a YAML (or JSON) document holding a sequence of map
entries, each with at least ``mapName`` and ``version``::

    - mapName: Big World
      version: 5
      url: https://example.org/big_world-master.zip
      description: A big world.

Any failure to fetch or parse the listing is logged and reported as an
empty listing, which callers treat as "skip the update check this time".

Dependencies
------------
requests
pyyaml

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

# Standard library
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

# Third-party
import requests
import yaml

logger = logging.getLogger(__name__)


_USER_AGENT = "mapdex"


@dataclass(frozen=True)
class MapListing:
    """One map offered for download.

    Attributes
    ----------
    map_name : str
        Map name as published in the listing.
    version : Optional[int]
        Published version, None if the listing omits it.
    url : str
        Download URL.
    description : str
        Human-readable description.
    """

    map_name: str
    version: Optional[int] = None
    url: str = ""
    description: str = ""


def fetch_map_listing(url: str, timeout: float = 10.0) -> List[MapListing]:
    """Download and parse the map listing.

    Parameters
    ----------
    url : str
        Listing URL.
    timeout : float
        HTTP request timeout in seconds.

    Returns
    -------
    List[MapListing]
        Parsed rows, or an empty list if the listing is unavailable.
    """
    logger.info("Fetching map listing from %s", url)
    try:
        resp = requests.get(
            url, timeout=timeout, headers={"User-Agent": _USER_AGENT}
        )
        resp.raise_for_status()
        data = yaml.safe_load(resp.text)
    except (requests.RequestException, yaml.YAMLError) as e:
        logger.warning("Failed to get list of most recent maps: %s", e)
        return []

    listings = parse_listing(data)
    logger.info("Map listing fetched: %d map(s)", len(listings))
    return listings


def parse_listing(data: Any) -> List[MapListing]:
    """Convert a loaded listing document into MapListing rows.

    Rows that are not mappings or lack a map name are skipped.
    """
    if not isinstance(data, list):
        logger.warning(
            "Unexpected map listing structure: %s", type(data).__name__
        )
        return []

    listings: List[MapListing] = []
    for row in data:
        if not isinstance(row, dict):
            logger.debug("Skipping map listing row: %r", row)
            continue
        map_name = row.get("mapName")
        if not isinstance(map_name, str) or not map_name.strip():
            logger.debug("Skipping map listing row without mapName: %r", row)
            continue
        listings.append(MapListing(
            map_name=map_name,
            version=_as_version(row.get("version")),
            url=str(row.get("url") or ""),
            description=str(row.get("description") or ""),
        ))
    return listings


def listing_versions(listings: Iterable[MapListing]) -> Dict[str, int]:
    """Map name to version for every listed map that has a version."""
    return {
        listing.map_name: listing.version
        for listing in listings
        if listing.version is not None
    }


def _as_version(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
