# -*- coding: utf-8 -*-
"""
Map Update Check - Find installed maps with a newer version online.

Ties the pieces together: the scheduler decides whether a check is due,
the remote map listing is fetched, the maps folder is indexed and the
reconciler picks the maps whose listed version is newer. Prompting the
user and downloading the updates are left to the caller.

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
from pathlib import Path
from typing import Callable, List

logger = logging.getLogger(__name__)

# mapdex internal
from mapdex.catalog.index import MapCatalogIndex
from mapdex.catalog.listing import MapListing, fetch_map_listing, listing_versions
from mapdex.catalog.models import MapUpdate
from mapdex.catalog.reconcile import find_out_of_date
from mapdex.catalog.scheduler import UpdateScheduler
from mapdex.core.archive import ArchiveFactory, ZipArchive


ListingFetcher = Callable[[str, float], List[MapListing]]


class MapUpdateCheck:
    """Runnable check for out-of-date installed maps.

    Parameters
    ----------
    maps_dir : Path
        Folder holding downloaded maps.
    scheduler : UpdateScheduler
        Decides whether a check is due.
    listing_url : str
        URL of the remote map listing.
    timeout : float
        HTTP request timeout in seconds. Default 10.0.
    fetcher : ListingFetcher
        Fetches the listing. Defaults to fetch_map_listing.
    archive_factory : ArchiveFactory
        Opens map zips. Defaults to ZipArchive.
    """

    def __init__(
        self,
        maps_dir: Path,
        scheduler: UpdateScheduler,
        listing_url: str,
        timeout: float = 10.0,
        fetcher: ListingFetcher = fetch_map_listing,
        archive_factory: ArchiveFactory = ZipArchive,
    ) -> None:
        self._maps_dir = Path(maps_dir)
        self._scheduler = scheduler
        self._listing_url = listing_url
        self._timeout = timeout
        self._fetcher = fetcher
        self._archive_factory = archive_factory

    def run(self, force: bool = False) -> List[str]:
        """Return the listing names of installed maps that are out of date.

        Parameters
        ----------
        force : bool
            Skip the scheduler and check now. The last check time is
            still reset.

        Returns
        -------
        List[str]
            Empty when no check was due, the listing was unavailable, or
            every installed map is current.
        """
        return [update.map_name for update in self.run_detailed(force=force)]

    def run_detailed(self, force: bool = False) -> List[MapUpdate]:
        """Like :meth:`run`, with installed and latest versions.

        Returns
        -------
        List[MapUpdate]
        """
        if force:
            self._scheduler.mark_checked()
        elif not self._scheduler.is_check_due():
            logger.debug("Map update check not due yet")
            return []

        available = listing_versions(
            self._fetcher(self._listing_url, self._timeout)
        )
        if not available:
            # Fetch failures are already logged by the fetcher.
            logger.info("No map listing available, skipping update check")
            return []

        installed = MapCatalogIndex.build(
            self._maps_dir, archive_factory=self._archive_factory
        ).name_to_version()

        updates = find_out_of_date(installed, available)
        if updates:
            logger.info(
                "Out of date maps: %s", ", ".join(u.map_name for u in updates)
            )
        else:
            logger.info("All installed maps are up to date")
        return updates
