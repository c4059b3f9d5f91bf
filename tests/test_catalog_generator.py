# -*- coding: utf-8 -*-
"""
Tests for mapdex.catalog.generator — legacy map.yml generation.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

Created
-------
2026-10-19
"""

import io
from unittest.mock import MagicMock, patch

import pytest

from mapdex.catalog import codec
from mapdex.catalog.generator import (
    generate_description,
    parse_properties,
    read_download_version,
    read_game_xml,
    sibling_yaml_path,
)
from mapdex.catalog.models import MapDescription, MapGame
from mapdex.core.errors import ArchiveReadError


@pytest.fixture
def legacy_zip(tmp_path, make_zip, game_xml):
    """Map zip with two game XMLs and a 3.1 download properties file."""
    path = make_zip(tmp_path / "big_world.zip", {
        "big_world/games/big_world_1942.xml": game_xml("Big World", "Big World 1942"),
        "big_world/games/big_world_1939.xml": game_xml("Big World", "Big World 1939"),
        "big_world/polygons.txt": "",
    })
    (tmp_path / "big_world.zip.properties").write_text(
        "#Download properties\nmap.version=3.1\n", encoding='utf-8'
    )
    return path


class TestGenerateDescription:

    def test_generates_and_writes_sibling(self, legacy_zip):
        description = generate_description(legacy_zip)

        assert description == MapDescription(
            map_name="Big World",
            version=3,
            games=(
                MapGame("Big World 1942", "big_world/games/big_world_1942.xml"),
                MapGame("Big World 1939", "big_world/games/big_world_1939.xml"),
            ),
        )
        written = legacy_zip.parent / "big_world.zip.yml"
        assert written.is_file()
        assert written.read_text(encoding='utf-8') == codec.encode(description)
        assert codec.decode(written.read_text(encoding='utf-8')) == description

    def test_custom_output_path(self, legacy_zip, tmp_path):
        output = tmp_path / "elsewhere.yml"
        description = generate_description(legacy_zip, output)
        assert output.is_file()
        assert not sibling_yaml_path(legacy_zip).exists()
        assert description is not None

    def test_last_map_name_wins(self, tmp_path, make_zip, game_xml):
        path = make_zip(tmp_path / "m.zip", {
            "a.xml": game_xml("First Name", "Game A"),
            "b.xml": game_xml("Second Name", "Game B"),
        })
        assert generate_description(path).map_name == "Second Name"

    def test_uppercase_xml_extension(self, tmp_path, make_zip, game_xml):
        path = make_zip(tmp_path / "m.zip", {"GAME.XML": game_xml("M", "G")})
        assert generate_description(path).games == (MapGame("G", "GAME.XML"),)

    def test_version_defaults_to_zero(self, tmp_path, make_zip, game_xml):
        path = make_zip(tmp_path / "m.zip", {"g.xml": game_xml("M", "G")})
        assert generate_description(path).version == 0

    def test_unparsable_xml_skipped(self, tmp_path, make_zip, game_xml):
        path = make_zip(tmp_path / "m.zip", {
            "broken.xml": "<game><info name=",
            "good.xml": game_xml("M", "G"),
        })
        description = generate_description(path)
        assert description.games == (MapGame("G", "good.xml"),)

    def test_xml_without_game_info_skipped(self, tmp_path, make_zip, game_xml):
        path = make_zip(tmp_path / "m.zip", {
            "resources.xml": "<resources><item/></resources>",
            "good.xml": game_xml("M", "G"),
        })
        assert generate_description(path).game_names() == ("G",)

    def test_no_xml_yields_invalid_description(self, tmp_path, make_zip):
        path = make_zip(tmp_path / "m.zip", {"readme.txt": "hi"})
        description = generate_description(path)
        assert description is not None
        assert not description.is_valid()

    def test_unreadable_zip_returns_none(self, tmp_path):
        path = tmp_path / "broken.zip"
        path.write_bytes(b"not a zip")
        assert generate_description(path) is None
        assert not sibling_yaml_path(path).exists()

    def test_corrupt_game_xml_entry_returns_none(
        self, tmp_path, make_zip, game_xml, scramble_entry
    ):
        path = make_zip(tmp_path / "m.zip", {
            "games/a.xml": game_xml("M", "A"),
            "games/b.xml": game_xml("M", "B"),
        })
        scramble_entry(path, "games/b.xml")
        assert generate_description(path) is None
        assert not sibling_yaml_path(path).exists()

    def test_write_failure_returns_none(self, legacy_zip, tmp_path):
        output = tmp_path / "missing_dir" / "out.yml"
        assert generate_description(legacy_zip, output) is None

    def test_archive_factory_is_used(self, tmp_path, game_xml):
        archive = MagicMock()
        archive.__enter__.return_value = archive
        archive.list_entries.return_value = ["g.xml", "notes.txt"]
        archive.open_entry.side_effect = lambda name: io.BytesIO(
            game_xml("M", "G").encode('utf-8')
        )
        factory = MagicMock(return_value=archive)

        path = tmp_path / "m.zip"
        description = generate_description(path, archive_factory=factory)

        factory.assert_called_once_with(path)
        archive.open_entry.assert_called_once_with("g.xml")
        archive.__exit__.assert_called_once()
        assert description.games == (MapGame("G", "g.xml"),)

    def test_archive_read_error_returns_none(self, tmp_path):
        factory = MagicMock(side_effect=ArchiveReadError("boom"))
        assert generate_description(tmp_path / "m.zip", archive_factory=factory) is None


class TestReadDownloadVersion:

    @pytest.mark.parametrize("content, expected", [
        ("map.version=3.1\n", 3),
        ("map.version = 12.0.4\n", 12),
        ("map.version: 2\n", 2),
        ("# comment\nother=1\n", 0),
        ("map.version=\n", 0),
        ("map.version=not-a-version\n", 0),
    ])
    def test_versions(self, tmp_path, content, expected):
        zip_path = tmp_path / "m.zip"
        (tmp_path / "m.zip.properties").write_text(content, encoding='utf-8')
        assert read_download_version(zip_path) == expected

    def test_missing_file(self, tmp_path):
        assert read_download_version(tmp_path / "m.zip") == 0


class TestParseProperties:

    def test_comments_and_separators(self):
        text = "# c\n! c\n\na=1\nb: 2\nc = x=y\nflag\n"
        assert parse_properties(text) == {
            "a": "1", "b": "2", "c": "x=y", "flag": "",
        }


class TestReadGameXml:

    def test_reads_names(self, game_xml):
        stream = io.BytesIO(game_xml("Map", "Game").encode('utf-8'))
        assert read_game_xml(stream) == ("Map", "Game")

    def test_map_name_as_child_value(self):
        xml = (
            b'<game><info name="G"/><propertyList>'
            b'<property name="mapName"><value> M </value></property>'
            b'</propertyList></game>'
        )
        assert read_game_xml(io.BytesIO(xml)) == ("M", "G")

    def test_missing_map_name(self, game_xml):
        stream = io.BytesIO(game_xml("Map", "Game", property_name="other").encode())
        assert read_game_xml(stream) == (None, "Game")
