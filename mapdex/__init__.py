# -*- coding: utf-8 -*-
"""
mapdex - Map catalog and update checker.

Catalogs locally installed map packages (folders, zips and standalone
``map.yml`` descriptors), reconciles their versions against a remotely
published map listing, and decides when that reconciliation is due.

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

__version__ = "0.1.0"

from mapdex.catalog.index import GameLocation, MapCatalogIndex
from mapdex.catalog.models import MapDescription, MapGame
from mapdex.catalog.reconcile import (
    compute_out_of_date,
    find_out_of_date,
    normalize_name,
)
from mapdex.catalog.scheduler import UpdateScheduler

__all__: list = [
    "GameLocation",
    "MapCatalogIndex",
    "MapDescription",
    "MapGame",
    "UpdateScheduler",
    "compute_out_of_date",
    "find_out_of_date",
    "normalize_name",
]
