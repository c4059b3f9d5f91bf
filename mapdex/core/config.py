# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for mapdex.

Provides a MapdexConfig dataclass with default values for the remote
map listing URL, the HTTP timeout and the update check interval. Loads
from ~/.mapdex/mapdex_config.json if it exists, otherwise uses sensible
defaults.

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
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".mapdex"
_CONFIG_FILE = _CONFIG_DIR / "mapdex_config.json"

DEFAULT_LISTING_URL = (
    "https://raw.githubusercontent.com/triplea-game/triplea/master/"
    "triplea_maps.yaml"
)


@dataclass
class MapdexConfig:
    """Global mapdex configuration with defaults.

    Attributes
    ----------
    listing_url : str
        URL of the remote map listing (YAML or JSON).
    update_timeout : float
        HTTP timeout for the map listing fetch in seconds.
    update_threshold_days : int
        Minimum number of days between two map update checks.
    """

    listing_url: str = DEFAULT_LISTING_URL
    update_timeout: float = 10.0
    update_threshold_days: int = 7

    def save(self, path: Optional[Path] = None) -> Path:
        """Save config to JSON file and return the path written."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)
        return path


def load_config(path: Optional[Path] = None) -> MapdexConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.mapdex/mapdex_config.json.

    Returns
    -------
    MapdexConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return MapdexConfig(**{
                k: v for k, v in data.items()
                if k in MapdexConfig.__dataclass_fields__
            })
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return MapdexConfig()
