# -*- coding: utf-8 -*-
"""
Shared fixtures for mapdex tests: building map zips and game XMLs.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

Created
-------
2026-10-19
"""

import struct
import zipfile
from pathlib import Path
from typing import Dict, Optional

import pytest


_GAME_XML = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE game SYSTEM "game.dtd">
<game>
    <info name="{game_name}" version="1.0"/>
    <propertyList>
        <property name="{property_name}" value="{map_name}" editable="false"/>
        <property name="neutralCharge" value="3" editable="false"/>
    </propertyList>
</game>
"""


def _game_xml(
    map_name: str,
    game_name: str,
    property_name: str = "mapName",
) -> str:
    return _GAME_XML.format(
        map_name=map_name, game_name=game_name, property_name=property_name,
    )


@pytest.fixture
def game_xml():
    """Render a minimal game XML declaring a map name and game name."""
    return _game_xml


@pytest.fixture
def make_zip():
    """Write a zip file from a {entry name: text} mapping."""

    def _make_zip(path: Path, entries: Optional[Dict[str, str]] = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, 'w', zipfile.ZIP_DEFLATED) as zf:
            for name, content in (entries or {}).items():
                zf.writestr(name, content)
        return path

    return _make_zip


@pytest.fixture
def scramble_entry():
    """Corrupt the compressed bytes of one entry of a deflated zip in place."""

    def _scramble(path: Path, name: str) -> Path:
        with zipfile.ZipFile(path) as zf:
            info = zf.getinfo(name)
        data = bytearray(path.read_bytes())
        # Local file header: 30 fixed bytes, then file name and extra field.
        header = info.header_offset
        name_len, extra_len = struct.unpack('<HH', data[header + 26:header + 30])
        start = header + 30 + name_len + extra_len
        for i in range(start, start + info.compress_size):
            data[i] ^= 0xA5
        path.write_bytes(bytes(data))
        return path

    return _scramble


@pytest.fixture
def maps_dir(tmp_path):
    """Empty downloaded maps folder."""
    path = tmp_path / "downloadedMaps"
    path.mkdir()
    return path
