"""
Tests for the SdmcPathResolver.
"""

import json

import pytest

from bundlecmd.adapters.paths.sdmc_path_resolver import SdmcPathResolver
from bundlecmd.exceptions import PlaceholderError

DATA = {
    "name": "Theme Pack",
    "version": 3,
    "enabled": True,
    "files": [{"path": "/themes/red.cfg"}, {"path": "/themes/blue.cfg"}],
    "nested": {"value": None},
}


@pytest.fixture
def resolver(volume, mock_logger):
    return SdmcPathResolver(volume, mock_logger)


@pytest.fixture
def data_source(local):
    with open(local("config/data.json"), "w") as f:
        json.dump(DATA, f)
    return "sdmc:/config/data.json"


class TestPreprocess:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("/switch/app.nro", "sdmc:/switch/app.nro"),
            ("sdmc:/switch/app.nro", "sdmc:/switch/app.nro"),
            ("'/my folder/x'", "sdmc:/my folder/x"),
            ('"sdmc:/a"', "sdmc:/a"),
            ("Nintendo/save", "sdmc:/Nintendo/save"),
            ("//Nintendo/save", "sdmc:/Nintendo/save"),
            ("/./Nintendo/./save/", "sdmc:/Nintendo/save/"),
            ("sdmc:Nintendo/save", "sdmc:/Nintendo/save"),
            ("sdmc://switch//app.nro", "sdmc:/switch/app.nro"),
            ("/switch/../Nintendo/", "sdmc:/switch/../Nintendo/"),
            ("", "sdmc:/"),
            ("sdmc:", "sdmc:/"),
        ],
    )
    def test_preprocess_path(self, resolver, raw, expected):
        assert resolver.preprocess_path(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("https://example.com/a.zip", "https://example.com/a.zip"),
            ("http://example.com/a.zip", "http://example.com/a.zip"),
            ("example.com/a.zip", "https://example.com/a.zip"),
            ("'example.com/a b.zip'", "https://example.com/a b.zip"),
        ],
    )
    def test_preprocess_url(self, resolver, raw, expected):
        assert resolver.preprocess_url(raw) == expected


class TestResolvePlaceholder:
    def test_resolve_key(self, resolver, data_source):
        assert (
            resolver.resolve_placeholder("/themes/{json_data(name)}/", data_source)
            == "/themes/Theme Pack/"
        )

    def test_resolve_array_index_and_several_markers(self, resolver, data_source):
        arg = "{json_data(files, 1, path)}-v{json_data(version)}"
        assert resolver.resolve_placeholder(arg, data_source) == "/themes/blue.cfg-v3"

    def test_booleans_render_lowercase(self, resolver, data_source):
        assert resolver.resolve_placeholder("{json_data(enabled)}", data_source) == "true"

    @pytest.mark.parametrize(
        "arg",
        ["{json_data(missing)}", "{json_data(files, 9, path)}", "{json_data(nested, value)}"],
    )
    def test_unresolved_marker_is_kept(self, resolver, data_source, mock_logger, arg):
        assert resolver.resolve_placeholder(arg, data_source) == arg
        mock_logger.warning.assert_called_once()

    def test_missing_data_source(self, resolver):
        with pytest.raises(PlaceholderError, match="JSON data source not found"):
            resolver.resolve_placeholder("{json_data(name)}", "sdmc:/nope.json")

    def test_invalid_json(self, resolver, local):
        with open(local("config/bad.json"), "w") as f:
            f.write("{not json")

        with pytest.raises(PlaceholderError, match="Invalid JSON"):
            resolver.resolve_placeholder("{json_data(name)}", "sdmc:/config/bad.json")

    def test_data_source_outside_root(self, resolver, sdmc_root):
        with open(sdmc_root + "-data.json", "w") as f:
            json.dump(DATA, f)

        with pytest.raises(PlaceholderError, match="outside of the storage root"):
            resolver.resolve_placeholder("{json_data(name)}", "sdmc:/../sdmc-data.json")
