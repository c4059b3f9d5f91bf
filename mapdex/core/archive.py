# -*- coding: utf-8 -*-
"""
Archive Reader - Read-only access to map zip archives.

Provides the ZipArchive class used by the catalog to list entries, test
for an entry and open an entry of a map zip. Any object satisfying the
ArchiveReader protocol can be injected in its place.

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
import io
import zipfile
import zlib
from pathlib import Path
from typing import IO, Callable, List, Protocol

# mapdex internal
from mapdex.core.errors import ArchiveReadError


class ArchiveReader(Protocol):
    """Capabilities the catalog needs from an opened archive."""

    def __enter__(self) -> 'ArchiveReader': ...

    def __exit__(self, exc_type, exc, tb) -> None: ...

    def list_entries(self) -> List[str]: ...

    def entry_exists(self, name: str) -> bool: ...

    def open_entry(self, name: str) -> IO[bytes]: ...


ArchiveFactory = Callable[[Path], ArchiveReader]


class ZipArchive:
    """A zip file opened for reading.

    Use as a context manager so the underlying file handle is released
    on every exit path::

        with ZipArchive(path) as archive:
            names = archive.list_entries()

    Parameters
    ----------
    path : Path
        Path to the zip file.

    Raises
    ------
    ArchiveReadError
        If the file cannot be opened or is not a valid zip.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            self._zip = zipfile.ZipFile(self.path, 'r')
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveReadError(
                f"Cannot open archive {self.path}: {e}"
            ) from e

    def __enter__(self) -> 'ZipArchive':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying file handle."""
        self._zip.close()

    def list_entries(self) -> List[str]:
        """Return the names of all file entries, directories excluded.

        Returns
        -------
        List[str]
            Entry names relative to the archive root, in archive order.
        """
        return [
            info.filename for info in self._zip.infolist()
            if not info.is_dir()
        ]

    def entry_exists(self, name: str) -> bool:
        """Return True if the archive has an entry with this exact name."""
        try:
            self._zip.getinfo(name)
        except KeyError:
            return False
        return True

    def open_entry(self, name: str) -> IO[bytes]:
        """Read an entry and return it as a binary stream.

        The entry is decompressed in full before returning, so corrupt or
        truncated data is reported here rather than by a later read.

        Parameters
        ----------
        name : str
            Entry name relative to the archive root.

        Returns
        -------
        IO[bytes]
            In-memory stream of the entry contents.

        Raises
        ------
        ArchiveReadError
            If the entry does not exist or cannot be decompressed.
        """
        try:
            with self._zip.open(name, 'r') as stream:
                data = stream.read()
        except KeyError as e:
            raise ArchiveReadError(
                f"No entry {name!r} in archive {self.path}"
            ) from e
        except (zipfile.BadZipFile, zlib.error, EOFError, OSError) as e:
            raise ArchiveReadError(
                f"Cannot read entry {name!r} in archive {self.path}: {e}"
            ) from e
        return io.BytesIO(data)

    def __repr__(self) -> str:
        return f"ZipArchive({str(self.path)!r})"
