# -*- coding: utf-8 -*-
"""
Descriptor Locator - Find and read the ``map.yml`` of an installed map.

A map in the maps folder is a directory, a zip, or a standalone ``.yml``
file. Directories are expected to have ``map.yml`` at their root; a
directory without one is assumed to be a map in development and is
skipped. Zips are read from their embedded ``map.yml``, then from a
previously generated ``<zip>.yml`` next to them, and as a last resort a
``<zip>.yml`` is generated from the zip contents.

Every description produced here is validated; invalid ones are logged
with their source and contents and reported as not found.

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
import zipfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# mapdex internal
from mapdex.catalog import codec
from mapdex.catalog.generator import generate_description, sibling_yaml_path
from mapdex.catalog.models import (
    MAP_YAML_FILE_NAME,
    MAP_YAML_SUFFIX,
    DecodeResult,
    MapDescription,
)
from mapdex.core.archive import ArchiveFactory, ZipArchive
from mapdex.core.errors import ArchiveReadError


ZIP_SUFFIX = ".zip"


def read_description(
    path: Path,
    archive_factory: ArchiveFactory = ZipArchive,
) -> Optional[MapDescription]:
    """Read the description of a map folder, map zip or ``.yml`` file.

    Parameters
    ----------
    path : Path
        Entry of the maps folder.
    archive_factory : ArchiveFactory
        Opens map zips. Defaults to ZipArchive.

    Returns
    -------
    Optional[MapDescription]
        A valid description, or None if none was found or it was invalid.
    """
    path = Path(path)

    if path.is_dir():
        return _read_from_folder(path)
    if path.is_file() and path.name.endswith(MAP_YAML_SUFFIX):
        return _read_from_yaml_file(path)
    if path.is_file() and path.name.lower().endswith(ZIP_SUFFIX):
        return _read_from_zip(path, archive_factory)
    return None


def _read_from_folder(folder: Path) -> Optional[MapDescription]:
    yaml_path = folder / MAP_YAML_FILE_NAME
    if not yaml_path.is_file():
        logger.debug("No %s in %s, skipping", MAP_YAML_FILE_NAME, folder)
        return None
    return _read_from_yaml_file(yaml_path)


def _read_from_yaml_file(yaml_path: Path) -> Optional[MapDescription]:
    try:
        with open(yaml_path, 'rb') as f:
            result = codec.parse_stream(f)
    except OSError as e:
        logger.error("Error reading file %s: %s", yaml_path, e)
        return None
    return _accept(yaml_path, result)


def _read_from_zip(
    zip_path: Path,
    archive_factory: ArchiveFactory,
) -> Optional[MapDescription]:
    try:
        with archive_factory(zip_path) as archive:
            if archive.entry_exists(MAP_YAML_FILE_NAME):
                with archive.open_entry(MAP_YAML_FILE_NAME) as stream:
                    result = codec.parse_stream(stream)
                return _accept(zip_path, result)
    except (ArchiveReadError, zipfile.BadZipFile, OSError) as e:
        logger.error("Error reading zip %s: %s", zip_path, e)
        return None

    generated_path = sibling_yaml_path(zip_path)
    if generated_path.is_file():
        return _read_from_yaml_file(generated_path)

    generated = generate_description(
        zip_path, generated_path, archive_factory=archive_factory
    )
    if generated is None:
        return None
    return _accept(generated_path, _validated(generated))


def _validated(description: MapDescription) -> DecodeResult:
    if description.is_valid():
        return DecodeResult.success(description)
    return DecodeResult.failure(DecodeResult.INVALID_DESCRIPTION, description)


def _accept(source: Path, result: DecodeResult) -> Optional[MapDescription]:
    if result.ok:
        return result.description
    logger.warning(
        "Invalid map description YML (%s) file detected: %s (%s)\n"
        "Check the file carefully and correct any mistakes.\n"
        "Data parsed:\n%r",
        MAP_YAML_FILE_NAME, source, result.error, result.description,
    )
    return None
