# -*- coding: utf-8 -*-
"""
Catalog Module - Installed map catalog and update checking.

Reads and writes ``map.yml`` descriptors, generates them for legacy map
zips, indexes the installed maps folder, and compares installed map
versions with the remote map listing.

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
