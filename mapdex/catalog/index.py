# -*- coding: utf-8 -*-
"""
Map Catalog Index - Snapshot of the maps installed in the maps folder.

Scans the direct children of the maps folder once, reads the description
of each, and answers game and version queries from that snapshot without
further I/O. Rebuild the index to observe later changes on disk.

Entries are kept ordered by location so that lookups which can match
several maps (duplicate game or map names) always resolve the same way:
the map whose location sorts first wins.

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
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from urllib.parse import quote

logger = logging.getLogger(__name__)

# mapdex internal
from mapdex.catalog.models import MAP_YAML_SUFFIX, MapDescription
from mapdex.catalog.reader import ZIP_SUFFIX, read_description
from mapdex.core.archive import ArchiveFactory, ZipArchive


@dataclass(frozen=True)
class GameLocation:
    """Where a game XML lives: a path inside a map folder or map zip.

    Attributes
    ----------
    package : Path
        The map folder or map zip.
    game_path : str
        Path of the game XML relative to the package root.
    is_archive : bool
        True if ``package`` is a zip.
    """

    package: Path
    game_path: str
    is_archive: bool

    def to_uri(self) -> str:
        """Render as a URI, ``zip:<zip uri>!/<path>`` for archives."""
        if self.is_archive:
            return (
                f"zip:{self.package.absolute().as_uri()}!/"
                f"{quote(self.game_path)}"
            )
        return (self.package / self.game_path).absolute().as_uri()


class MapCatalogIndex:
    """Immutable index of installed map descriptions and their locations.

    Parameters
    ----------
    entries : Iterable[Tuple[MapDescription, Path]]
        Description and the folder, zip or ``.yml`` file it was read
        from. When the same description appears at several locations,
        the location that sorts first is kept.
    """

    def __init__(self, entries: Iterable[Tuple[MapDescription, Path]]) -> None:
        ordered = sorted(
            ((description, Path(location)) for description, location in entries),
            key=lambda entry: str(entry[1]),
        )
        snapshot: Dict[MapDescription, Path] = {}
        for description, location in ordered:
            snapshot.setdefault(description, location)
        self._entries: Tuple[Tuple[MapDescription, Path], ...] = tuple(
            snapshot.items()
        )

    @classmethod
    def build(
        cls,
        maps_dir: Path,
        archive_factory: ArchiveFactory = ZipArchive,
    ) -> 'MapCatalogIndex':
        """Scan a maps folder and index every map found.

        Parameters
        ----------
        maps_dir : Path
            Folder holding downloaded maps. Only direct children are
            inspected.
        archive_factory : ArchiveFactory
            Opens map zips. Defaults to ZipArchive.

        Returns
        -------
        MapCatalogIndex
        """
        maps_dir = Path(maps_dir)
        if not maps_dir.is_dir():
            logger.warning("Maps folder does not exist: %s", maps_dir)
            return cls([])

        found: List[Tuple[MapDescription, Path]] = []
        for child in sorted(maps_dir.iterdir()):
            description = read_description(child, archive_factory=archive_factory)
            if description is not None:
                found.append((description, child))

        index = cls(found)
        index._warn_duplicate_names()
        logger.info("Indexed %d map(s) in %s", len(index), maps_dir)
        return index

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MapDescription]:
        return (description for description, _ in self._entries)

    def entries(self) -> List[Tuple[MapDescription, Path]]:
        """Return ``(description, location)`` pairs in lookup order."""
        return list(self._entries)

    def location_of(self, description: MapDescription) -> Optional[Path]:
        for candidate, location in self._entries:
            if candidate == description:
                return location
        return None

    def sorted_game_names(self) -> List[str]:
        """All game names across all maps, sorted, duplicates kept."""
        return sorted(
            game.name
            for description, _ in self._entries
            for game in description.games
        )

    def has_game(self, game_name: str) -> bool:
        return self.find_game_location(game_name) is not None

    def find_game_location(self, game_name: str) -> Optional[GameLocation]:
        """Locate the game XML of the first map declaring this game.

        Parameters
        ----------
        game_name : str
            Exact game name.

        Returns
        -------
        Optional[GameLocation]
            None if no installed map has a game with this name.
        """
        for description, location in self._entries:
            xml_path = description.game_xml_path(game_name)
            if xml_path is not None:
                package, is_archive = _package_root(location)
                return GameLocation(
                    package=package,
                    game_path=xml_path,
                    is_archive=is_archive,
                )
        return None

    def name_to_version(self) -> Dict[str, int]:
        """Map name to version for every indexed map.

        If two maps share a name, the one first in lookup order is kept.
        """
        versions: Dict[str, int] = {}
        for description, _ in self._entries:
            versions.setdefault(description.map_name, description.version)
        return versions

    def version_of(self, map_name: str) -> Optional[int]:
        for description, _ in self._entries:
            if description.map_name == map_name:
                return description.version
        return None

    def _warn_duplicate_names(self) -> None:
        seen: Dict[str, Path] = {}
        for description, location in self._entries:
            first = seen.setdefault(description.map_name, location)
            if first != location:
                logger.warning(
                    "Map %r is installed more than once (%s, %s); using %s",
                    description.map_name, first, location, first,
                )

    def __repr__(self) -> str:
        return f"MapCatalogIndex({len(self)} map(s))"


def _package_root(location: Path) -> Tuple[Path, bool]:
    # A generated <zip>.yml describes the zip next to it; any other
    # standalone .yml describes the folder it sits in.
    name = location.name.lower()
    if name.endswith(ZIP_SUFFIX + MAP_YAML_SUFFIX):
        return location.with_name(location.name[:-len(MAP_YAML_SUFFIX)]), True
    if name.endswith(MAP_YAML_SUFFIX):
        return location.parent, False
    return location, name.endswith(ZIP_SUFFIX)
