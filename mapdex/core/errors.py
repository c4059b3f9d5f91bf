# -*- coding: utf-8 -*-
"""
Errors - Exception hierarchy for mapdex.

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


class MapdexError(Exception):
    """Base exception for mapdex operations."""


class ArchiveReadError(MapdexError):
    """Raised when a map archive cannot be opened or enumerated."""
