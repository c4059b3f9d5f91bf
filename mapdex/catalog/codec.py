# -*- coding: utf-8 -*-
"""
Descriptor Codec - Conversion between ``map.yml`` text and MapDescription.

Decoding is fail-soft: a document that is not YAML, or whose values have
the wrong shape, decodes to ``MapDescription.EMPTY`` instead of raising,
so that one malformed file cannot abort the scan of a maps folder.
Unknown keys are ignored. Encoding emits only the recognised keys.

Dependencies
------------
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
from typing import IO, Any, Dict, List, Optional, Union

# Third-party
import yaml

# mapdex internal
from mapdex.catalog.models import DecodeResult, MapDescription, MapGame, YamlKeys


class _StructureError(ValueError):
    """A YAML value does not have the shape the descriptor expects."""


def parse(raw: Union[str, bytes]) -> DecodeResult:
    """Decode and validate a ``map.yml`` document.

    Parameters
    ----------
    raw : Union[str, bytes]
        YAML document text.

    Returns
    -------
    DecodeResult
        Successful only if the document decodes to a valid description.
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError:
        return DecodeResult.failure(DecodeResult.MALFORMED_YAML)

    try:
        description = _from_data(data)
    except _StructureError:
        return DecodeResult.failure(DecodeResult.UNEXPECTED_STRUCTURE)

    if not description.is_valid():
        return DecodeResult.failure(
            DecodeResult.INVALID_DESCRIPTION, description
        )
    return DecodeResult.success(description)


def decode(raw: Union[str, bytes]) -> MapDescription:
    """Decode a ``map.yml`` document without validating it.

    Parameters
    ----------
    raw : Union[str, bytes]
        YAML document text.

    Returns
    -------
    MapDescription
        The parsed description, possibly invalid. ``MapDescription.EMPTY``
        if the text is not YAML or a value has the wrong shape.
    """
    return parse(raw).description


def parse_stream(stream: IO) -> DecodeResult:
    """Like :func:`parse`, reading a text or binary file object."""
    return parse(stream.read())


def decode_stream(stream: IO) -> MapDescription:
    """Like :func:`decode`, reading a text or binary file object."""
    return parse_stream(stream).description


def encode(description: MapDescription) -> str:
    """Dump a description to ``map.yml`` text.

    Parameters
    ----------
    description : MapDescription

    Returns
    -------
    str
        YAML string with keys ``map_name``, ``version`` and ``games``.
        Non-ASCII characters are written as escapes so that line-break
        characters such as NEL survive a reload.
    """
    return yaml.safe_dump(
        to_dict(description),
        default_flow_style=False,
        sort_keys=False,
    )


def to_dict(description: MapDescription) -> Dict[str, Any]:
    return {
        YamlKeys.MAP_NAME: description.map_name,
        YamlKeys.VERSION: description.version,
        YamlKeys.GAMES_LIST: [
            {
                YamlKeys.GAME_NAME: game.name,
                YamlKeys.XML_PATH: game.xml_path,
            }
            for game in description.games
        ],
    }


def _from_data(data: Any) -> MapDescription:
    if data is None:
        return MapDescription.EMPTY
    if not isinstance(data, dict):
        raise _StructureError(f"expected a mapping, got {type(data).__name__}")

    return MapDescription(
        map_name=_string(data, YamlKeys.MAP_NAME),
        version=_version(data),
        games=_games(data),
    )


def _string(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _StructureError(f"{key!r} must be a string")
    return value


def _version(data: Dict[str, Any]) -> Optional[int]:
    value = data.get(YamlKeys.VERSION)
    if value is None:
        return None
    # bool is an int subclass; 'version: yes' is not a version
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _StructureError(f"{YamlKeys.VERSION!r} must be a non-negative integer")
    return value


def _games(data: Dict[str, Any]) -> List[MapGame]:
    value = data.get(YamlKeys.GAMES_LIST)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _StructureError(f"{YamlKeys.GAMES_LIST!r} must be a list")

    games = []
    for entry in value:
        if not isinstance(entry, dict):
            raise _StructureError("each game must be a mapping")
        games.append(MapGame(
            name=_string(entry, YamlKeys.GAME_NAME),
            xml_path=_string(entry, YamlKeys.XML_PATH),
        ))
    return games
