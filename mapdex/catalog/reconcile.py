# -*- coding: utf-8 -*-
"""
Version Reconciler - Compare installed map versions with the map listing.

Installed maps and listing entries are named by two independently
maintained conventions (``Big World`` vs ``big_world-master``), so the
out-of-date check matches them on a normalized name. The download list
classification, which works on listing rows directly, matches on the
exact map name.

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
from typing import Collection, Iterable, List, Mapping

# mapdex internal
from mapdex.catalog.index import MapCatalogIndex
from mapdex.catalog.listing import MapListing
from mapdex.catalog.models import MapUpdate


LEGACY_PROPERTIES_SUFFIX = ".zip.properties"
LEGACY_BRANCH_SUFFIX = "-master"


def normalize_name(name: str) -> str:
    """Normalize a map name for cross-convention comparison.

    Strips a ``.zip.properties`` suffix, then a ``-master`` suffix,
    replaces spaces with underscores and lowercases. The steps repeat
    until the name stops changing, so normalizing twice gives the same
    result as normalizing once.

    Parameters
    ----------
    name : str

    Returns
    -------
    str
    """
    previous = None
    while name != previous:
        previous = name
        if name.endswith(LEGACY_PROPERTIES_SUFFIX):
            name = name[:-len(LEGACY_PROPERTIES_SUFFIX)]
        if name.endswith(LEGACY_BRANCH_SUFFIX):
            name = name[:-len(LEGACY_BRANCH_SUFFIX)]
        name = name.replace(" ", "_").lower()
    return name


def compute_out_of_date(
    installed: Mapping[str, int],
    available: Mapping[str, int],
) -> List[str]:
    """Find installed maps for which the listing has a newer version.

    Parameters
    ----------
    installed : Mapping[str, int]
        Installed map name to version.
    available : Mapping[str, int]
        Listing map name to version.

    Returns
    -------
    List[str]
        Listing-side names (not normalized) whose version is strictly
        greater than the installed one, without duplicates, in the
        iteration order of ``installed``.
    """
    return [update.map_name for update in find_out_of_date(installed, available)]


def find_out_of_date(
    installed: Mapping[str, int],
    available: Mapping[str, int],
) -> List[MapUpdate]:
    """Like :func:`compute_out_of_date`, keeping the matched versions.

    Each installed map is matched with the first listing entry whose
    normalized name is equal; no further entries are considered for it.
    Maps present on only one side are ignored. When several installed
    maps match the same listing entry, it is reported once, with the
    first of them that is older.

    Returns
    -------
    List[MapUpdate]
        One update per out-of-date listing name, carrying the version of
        the installed map it was matched with.
    """
    normalized_available = [
        (normalize_name(name), name, version)
        for name, version in available.items()
    ]

    updates: List[MapUpdate] = []
    reported = set()
    for installed_name, installed_version in installed.items():
        wanted = normalize_name(installed_name)
        for normalized, available_name, available_version in normalized_available:
            if normalized != wanted:
                continue
            if (
                available_version is not None
                and installed_version is not None
                and available_version > installed_version
                and available_name not in reported
            ):
                reported.add(available_name)
                updates.append(MapUpdate(
                    map_name=available_name,
                    installed_version=installed_version,
                    latest_version=available_version,
                ))
            break
    return updates


class DownloadList:
    """Split a map listing into not installed, installed and out of date.

    Parameters
    ----------
    listings : Iterable[MapListing]
        Rows of the remote map listing.
    index : MapCatalogIndex
        Installed maps.
    """

    def __init__(
        self,
        listings: Iterable[MapListing],
        index: MapCatalogIndex,
    ) -> None:
        self._available: List[MapListing] = []
        self._installed: List[MapListing] = []
        self._out_of_date: List[MapListing] = []

        for listing in listings:
            installed_version = index.version_of(listing.map_name)
            if installed_version is None:
                self._available.append(listing)
                continue
            self._installed.append(listing)
            if listing.version is not None and listing.version > installed_version:
                self._out_of_date.append(listing)

    @property
    def available(self) -> List[MapListing]:
        """Listed maps that are not installed."""
        return list(self._available)

    @property
    def installed(self) -> List[MapListing]:
        return list(self._installed)

    @property
    def out_of_date(self) -> List[MapListing]:
        """Installed maps with a newer listed version."""
        return list(self._out_of_date)

    def available_excluding(
        self, excluded: Collection[MapListing]
    ) -> List[MapListing]:
        return [listing for listing in self._available if listing not in excluded]

    def out_of_date_excluding(
        self, excluded: Collection[MapListing]
    ) -> List[MapListing]:
        return [listing for listing in self._out_of_date if listing not in excluded]

    def __repr__(self) -> str:
        return (
            f"DownloadList(available={len(self._available)}, "
            f"installed={len(self._installed)}, "
            f"out_of_date={len(self._out_of_date)})"
        )
