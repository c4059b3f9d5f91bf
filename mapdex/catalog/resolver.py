# -*- coding: utf-8 -*-
"""
Path Resolver - Locate the maps folder and the mapdex state file.

Resolves the maps folder using a priority chain:
1. MAPDEX_MAPS_DIR environment variable (highest priority)
2. ~/.mapdex/config.json "maps_dir" field
3. ~/.mapdex/downloadedMaps (default fallback)

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
import json
import os
from pathlib import Path


_ENV_VAR = "MAPDEX_MAPS_DIR"
_CONFIG_DIR = ".mapdex"
_CONFIG_FILE = "config.json"
_DEFAULT_MAPS_DIR = "downloadedMaps"
_STATE_FILE = "state.json"


def resolve_maps_dir() -> Path:
    """Resolve the folder holding downloaded maps.

    Priority:
    1. ``MAPDEX_MAPS_DIR`` environment variable
    2. ``~/.mapdex/config.json`` → ``maps_dir`` field
    3. ``~/.mapdex/downloadedMaps`` (default)

    Returns
    -------
    Path
        Resolved maps folder. It may not exist.
    """
    # Priority 1: Environment variable
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        return Path(env_path)

    config_dir = Path.home() / _CONFIG_DIR

    # Priority 2: Config file
    config_path = config_dir / _CONFIG_FILE
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            maps_dir = config.get('maps_dir')
            if maps_dir:
                return Path(maps_dir)
        except (json.JSONDecodeError, OSError, AttributeError):
            pass

    # Priority 3: Default location
    return config_dir / _DEFAULT_MAPS_DIR


def resolve_state_path() -> Path:
    """Return the JSON file holding the last update check time."""
    return Path.home() / _CONFIG_DIR / _STATE_FILE
