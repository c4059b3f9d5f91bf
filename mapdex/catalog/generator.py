# -*- coding: utf-8 -*-
"""
Legacy Descriptor Generator - Build ``map.yml`` for maps that lack one.

Older map zips carry no ``map.yml``. For those, a description is
synthesized from the game XML files inside the zip (map name and game
names) and from the ``<zip>.properties`` file written next to the zip
when it was downloaded (map version). The result is written next to the
zip as ``<zip>.yml`` so the work is done only once.

Dependencies
------------
pyyaml
packaging

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
import xml.etree.ElementTree as ElementTree
import zipfile
from pathlib import Path
from typing import IO, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Third-party
from packaging.version import InvalidVersion, Version

# mapdex internal
from mapdex.catalog import codec
from mapdex.catalog.models import MAP_YAML_SUFFIX, MapDescription, MapGame
from mapdex.core.archive import ArchiveFactory, ZipArchive
from mapdex.core.errors import ArchiveReadError


GAME_XML_SUFFIX = ".xml"
PROPERTIES_SUFFIX = ".properties"
VERSION_PROPERTY = "map.version"
MAP_NAME_PROPERTY = "mapName"


def generate_description(
    archive_path: Path,
    output_path: Optional[Path] = None,
    archive_factory: ArchiveFactory = ZipArchive,
) -> Optional[MapDescription]:
    """Synthesize a description for a legacy map zip and write it to disk.

    Parameters
    ----------
    archive_path : Path
        Map zip without an embedded ``map.yml``.
    output_path : Optional[Path]
        Where to write the generated YAML. Defaults to the zip path with
        ``.yml`` appended.
    archive_factory : ArchiveFactory
        Opens the zip. Defaults to ZipArchive.

    Returns
    -------
    Optional[MapDescription]
        The description that was written, which may still be invalid
        (e.g. a zip without game XMLs). None if the zip could not be
        read or the file could not be written.
    """
    archive_path = Path(archive_path)
    output_path = output_path or sibling_yaml_path(archive_path)

    try:
        description = _describe_archive(archive_path, archive_factory)
    except (ArchiveReadError, zipfile.BadZipFile, OSError) as e:
        logger.error("Failed to read map zip %s: %s", archive_path, e)
        return None

    try:
        output_path.write_text(codec.encode(description), encoding='utf-8')
    except OSError as e:
        logger.error(
            "Failed to write generated map yaml %s: %s", output_path, e
        )
        return None

    logger.info("Wrote map yaml for file: %s", archive_path)
    return description


def sibling_yaml_path(archive_path: Path) -> Path:
    """Return ``<archive>.yml``, the generated descriptor location."""
    return archive_path.with_name(archive_path.name + MAP_YAML_SUFFIX)


def read_download_version(archive_path: Path) -> int:
    """Read the major map version from the download properties file.

    The file sits next to the zip as ``<zip>.properties`` and holds a
    ``map.version`` entry such as ``3.1``.

    Parameters
    ----------
    archive_path : Path

    Returns
    -------
    int
        Major version component, or 0 if the file, the key or a
        parsable version is missing.
    """
    properties_path = archive_path.with_name(
        archive_path.name + PROPERTIES_SUFFIX
    )
    if not properties_path.is_file():
        return 0

    try:
        properties = parse_properties(
            properties_path.read_text(encoding='utf-8', errors='replace')
        )
    except OSError as e:
        logger.warning("Failed to read %s: %s", properties_path, e)
        return 0

    raw_version = properties.get(VERSION_PROPERTY)
    if not raw_version:
        return 0
    try:
        return Version(raw_version).major
    except InvalidVersion:
        logger.warning(
            "Unparsable %s %r in %s", VERSION_PROPERTY, raw_version,
            properties_path,
        )
        return 0


def parse_properties(text: str) -> Dict[str, str]:
    """Parse Java ``.properties`` text into a dict.

    Supports ``key=value`` and ``key: value`` lines and ``#``/``!``
    comments. Line continuations and escapes are not needed for the
    download properties file and are not handled.
    """
    properties: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line[0] in '#!':
            continue
        separators = [i for i in (line.find('='), line.find(':')) if i >= 0]
        if separators:
            split_at = min(separators)
            key, value = line[:split_at], line[split_at + 1:]
        else:
            key, value = line, ""
        properties[key.strip()] = value.strip()
    return properties


def read_game_xml(stream: IO[bytes]) -> Tuple[Optional[str], Optional[str]]:
    """Extract the map name and game name from a game XML document.

    The game name is the ``name`` attribute of ``<info>``; the map name
    is the value of the ``mapName`` property.

    Parameters
    ----------
    stream : IO[bytes]

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(map_name, game_name)``, either None when not declared.

    Raises
    ------
    ElementTree.ParseError
        If the document is not well-formed XML.
    """
    root = ElementTree.parse(stream).getroot()

    game_name = None
    info = root.find('info')
    if info is not None:
        game_name = info.get('name')

    map_name = None
    for prop in root.iter('property'):
        if prop.get('name') != MAP_NAME_PROPERTY:
            continue
        map_name = prop.get('value')
        if map_name is None:
            value = prop.find('value')
            if value is not None and value.text:
                map_name = value.text.strip()
        break

    return map_name, game_name


def _describe_archive(
    archive_path: Path,
    archive_factory: ArchiveFactory,
) -> MapDescription:
    map_name = ""
    games: List[MapGame] = []

    with archive_factory(archive_path) as archive:
        xml_entries = [
            name for name in archive.list_entries()
            if name.lower().endswith(GAME_XML_SUFFIX)
        ]
        for entry in xml_entries:
            try:
                with archive.open_entry(entry) as stream:
                    entry_map_name, game_name = read_game_xml(stream)
            except ElementTree.ParseError as e:
                logger.warning(
                    "Skipping unparsable game XML %s in %s: %s",
                    entry, archive_path, e,
                )
                continue

            if not game_name:
                logger.debug(
                    "No game name in %s in %s, skipping", entry, archive_path
                )
                continue
            # Every XML of a map declares the same map name; last one wins.
            if entry_map_name:
                map_name = entry_map_name
            games.append(MapGame(name=game_name, xml_path=entry))

    return MapDescription(
        map_name=map_name,
        version=read_download_version(archive_path),
        games=tuple(games),
    )
