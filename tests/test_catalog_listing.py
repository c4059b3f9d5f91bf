# -*- coding: utf-8 -*-
"""
Tests for mapdex.catalog.listing — fetching and parsing the map listing.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

Created
-------
2026-10-19
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from mapdex.catalog.listing import (
    MapListing,
    fetch_map_listing,
    listing_versions,
    parse_listing,
)


LISTING_YAML = """\
- mapName: Big World
  version: 4
  url: https://example.org/big_world.zip
  description: <b>Big</b> world
- mapName: Napoleonic Empires
  version: "7"
  url: https://example.org/napoleonic_empires.zip
- mapName: Work In Progress
  url: https://example.org/wip.zip
"""


def _response(text, status_error=None):
    resp = MagicMock()
    resp.text = text
    resp.raise_for_status.side_effect = status_error
    return resp


class TestFetchMapListing:

    @patch("mapdex.catalog.listing.requests.get")
    def test_fetch(self, mock_get):
        mock_get.return_value = _response(LISTING_YAML)

        listings = fetch_map_listing("https://example.org/maps.yaml", timeout=3.0)

        assert listings == [
            MapListing("Big World", 4, "https://example.org/big_world.zip", "<b>Big</b> world"),
            MapListing("Napoleonic Empires", 7, "https://example.org/napoleonic_empires.zip"),
            MapListing("Work In Progress", None, "https://example.org/wip.zip"),
        ]
        args, kwargs = mock_get.call_args
        assert args == ("https://example.org/maps.yaml",)
        assert kwargs["timeout"] == 3.0
        assert "User-Agent" in kwargs["headers"]

    @patch("mapdex.catalog.listing.requests.get")
    def test_json_listing(self, mock_get):
        mock_get.return_value = _response('[{"mapName": "A", "version": 2}]')
        assert fetch_map_listing("https://example.org/maps.json") == [
            MapListing("A", 2),
        ]

    @patch("mapdex.catalog.listing.requests.get")
    def test_network_error(self, mock_get, caplog):
        mock_get.side_effect = requests.ConnectionError("offline")
        with caplog.at_level(logging.WARNING, logger="mapdex.catalog.listing"):
            assert fetch_map_listing("https://example.org/maps.yaml") == []
        assert "Failed to get list of most recent maps" in caplog.text

    @patch("mapdex.catalog.listing.requests.get")
    def test_http_error(self, mock_get):
        mock_get.return_value = _response(
            "", status_error=requests.HTTPError("404 Not Found")
        )
        assert fetch_map_listing("https://example.org/maps.yaml") == []

    @patch("mapdex.catalog.listing.requests.get")
    def test_malformed_yaml(self, mock_get):
        mock_get.return_value = _response("- mapName: [unclosed\n")
        assert fetch_map_listing("https://example.org/maps.yaml") == []

    @patch("mapdex.catalog.listing.requests.get")
    def test_unexpected_document(self, mock_get):
        mock_get.return_value = _response("just: a mapping\n")
        assert fetch_map_listing("https://example.org/maps.yaml") == []


class TestParseListing:

    @pytest.mark.parametrize("data", [None, "text", 3, {"mapName": "A"}])
    def test_not_a_list(self, data):
        assert parse_listing(data) == []

    def test_skips_bad_rows(self):
        data = [
            "not a row",
            {"version": 3},
            {"mapName": "  ", "version": 3},
            {"mapName": 12, "version": 3},
            {"mapName": "Good", "version": 1},
        ]
        assert parse_listing(data) == [MapListing("Good", 1)]

    @pytest.mark.parametrize("raw,expected", [
        (3, 3),
        ("12", 12),
        (" 5 ", 5),
        (True, None),
        (1.5, None),
        ("1.2", None),
        ("v3", None),
        (None, None),
    ])
    def test_versions(self, raw, expected):
        assert parse_listing([{"mapName": "M", "version": raw}])[0].version == expected


class TestListingVersions:

    def test_drops_unversioned(self):
        listings = [MapListing("A", 1), MapListing("B", None), MapListing("C", 0)]
        assert listing_versions(listings) == {"A": 1, "C": 0}

    def test_empty(self):
        assert listing_versions([]) == {}
