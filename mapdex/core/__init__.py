# -*- coding: utf-8 -*-
"""
Core Module - Non-domain plumbing for mapdex.

Contains the error hierarchy, the zip archive reader and the user
configuration loader.

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
