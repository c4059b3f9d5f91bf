# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for map descriptors.

Defines the MapDescription and MapGame value types parsed from a
``map.yml`` file, the DecodeResult returned by the schema-validated
decode step, and the MapUpdate reported by the update check.

Example ``map.yml``::

    map_name: Big World
    version: 3
    games:
    - name: Big World 1942
      xml_path: map/games/big_world_1942.xml

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
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Tuple


MAP_YAML_FILE_NAME = "map.yml"
MAP_YAML_SUFFIX = ".yml"


class YamlKeys:
    """Keys recognised in a ``map.yml`` document."""

    MAP_NAME = "map_name"
    VERSION = "version"
    GAMES_LIST = "games"
    GAME_NAME = "name"
    XML_PATH = "xml_path"


@dataclass(frozen=True)
class MapGame:
    """One playable game within a map.

    Parameters
    ----------
    name : str
        Display name of the game.
    xml_path : str
        Path of the game XML file, relative to the map root.
    """

    name: str = ""
    xml_path: str = ""

    def is_valid(self) -> bool:
        return bool(self.name.strip()) and bool(self.xml_path.strip())


@dataclass(frozen=True)
class MapDescription:
    """Parsed contents of a ``map.yml`` file.

    Instances are immutable values: two descriptions are equal when all
    fields are equal, and they can be used as dictionary keys.

    Parameters
    ----------
    map_name : str
        Display name of the map.
    version : Optional[int]
        Download version of the map. None when the file did not declare
        one.
    games : Tuple[MapGame, ...]
        Games contained in the map, in file order. Any iterable is
        accepted and stored as a tuple.
    """

    map_name: str = ""
    version: Optional[int] = None
    games: Tuple[MapGame, ...] = ()

    EMPTY: ClassVar['MapDescription']

    def __post_init__(self) -> None:
        if not isinstance(self.games, tuple):
            object.__setattr__(self, 'games', tuple(self.games))

    def is_valid(self) -> bool:
        """Check that the description is usable.

        A description is valid when it has a non-blank map name, a
        version, at least one game, and every game has a non-blank name
        and xml path.

        Returns
        -------
        bool
        """
        return (
            bool(self.map_name.strip())
            and self.version is not None
            and len(self.games) > 0
            and all(game.is_valid() for game in self.games)
        )

    def game_xml_path(self, game_name: str) -> Optional[str]:
        """Return the xml path of the game with this exact name, if any."""
        for game in self.games:
            if game.name == game_name:
                return game.xml_path
        return None

    def game_names(self) -> Tuple[str, ...]:
        return tuple(game.name for game in self.games)

    @classmethod
    def of(
        cls,
        map_name: str,
        version: Optional[int],
        games: Iterable[Tuple[str, str]],
    ) -> 'MapDescription':
        """Build a description from ``(game name, xml path)`` pairs."""
        return cls(
            map_name=map_name,
            version=version,
            games=tuple(MapGame(name, path) for name, path in games),
        )


MapDescription.EMPTY = MapDescription()


class DecodeResult:
    """Outcome of decoding a ``map.yml`` document.

    Either a valid description (``ok`` is True) or a failure carrying
    whatever was parsed together with the reason it was rejected.

    Parameters
    ----------
    description : MapDescription
        The parsed description. ``MapDescription.EMPTY`` when nothing
        could be parsed.
    error : Optional[str]
        Reason the document was rejected, None on success.
    """

    MALFORMED_YAML = "malformed yaml"
    UNEXPECTED_STRUCTURE = "unexpected structure"
    INVALID_DESCRIPTION = "invalid description"

    def __init__(
        self,
        description: MapDescription,
        error: Optional[str] = None,
    ) -> None:
        self.description = description
        self.error = error

    @classmethod
    def success(cls, description: MapDescription) -> 'DecodeResult':
        return cls(description)

    @classmethod
    def failure(
        cls,
        error: str,
        description: MapDescription = MapDescription.EMPTY,
    ) -> 'DecodeResult':
        return cls(description, error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeResult):
            return NotImplemented
        return (self.description, self.error) == (other.description, other.error)

    def __hash__(self) -> int:
        return hash((self.description, self.error))

    def __repr__(self) -> str:
        if self.ok:
            return f"DecodeResult(ok, {self.description!r})"
        return f"DecodeResult(failed: {self.error}, {self.description!r})"


class MapUpdate:
    """An installed map for which the listing has a newer version.

    Parameters
    ----------
    map_name : str
        Map name as published in the listing.
    installed_version : Optional[int]
        Version of the installed map.
    latest_version : Optional[int]
        Version offered by the listing.
    """

    def __init__(
        self,
        map_name: str,
        installed_version: Optional[int],
        latest_version: Optional[int],
    ) -> None:
        self.map_name = map_name
        self.installed_version = installed_version
        self.latest_version = latest_version

    def __repr__(self) -> str:
        return (
            f"MapUpdate({self.map_name!r}: "
            f"{self.installed_version} → {self.latest_version})"
        )
