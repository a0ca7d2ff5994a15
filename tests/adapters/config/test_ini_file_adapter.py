"""
Tests for the IniFileAdapter.
"""

import configparser
import os

import pytest

from bundlecmd.adapters.config.ini_file_adapter import IniFileAdapter
from bundlecmd.exceptions import IniFileError

SETTINGS = "sdmc:/config/settings.ini"


@pytest.fixture
def adapter(volume, mock_logger):
    return IniFileAdapter(volume, mock_logger)


def read(path):
    with open(path) as f:
        return f.read()


def parse(path):
    parser = configparser.ConfigParser(interpolation=None)
    parser.optionxform = str
    parser.read(path)
    return {name: dict(parser[name]) for name in parser.sections()}


class TestIniFileAdapter:
    def test_set_existing_value_keeps_layout(self, adapter, local):
        adapter.set_value(SETTINGS, "general", "volume", "9")

        assert read(local("config/settings.ini")) == (
            "; device settings\n[general]\ntheme=dark\nvolume = 9\n\n[network]\nproxy=off\n"
        )

    def test_set_new_key_in_existing_section(self, adapter, local):
        adapter.set_value(SETTINGS, "general", "language", "en US")

        assert read(local("config/settings.ini")) == (
            "; device settings\n[general]\ntheme=dark\nvolume = 5\nlanguage=en US\n\n"
            "[network]\nproxy=off\n"
        )

    def test_set_value_in_new_section(self, adapter, local):
        adapter.set_value(SETTINGS, "overlay", "key_combo", "L+R")

        data = parse(local("config/settings.ini"))
        assert data["overlay"] == {"key_combo": "L+R"}
        assert data["general"]["theme"] == "dark"

    def test_set_value_creates_file(self, adapter, local):
        adapter.set_value("sdmc:/config/new/app.ini", "main", "enabled", "true")

        assert read(local("config/new/app.ini")) == "[main]\nenabled=true\n"

    def test_same_key_in_other_section_untouched(self, adapter, local):
        adapter.set_value(SETTINGS, "network", "theme", "none")

        data = parse(local("config/settings.ini"))
        assert data["general"]["theme"] == "dark"
        assert data["network"]["theme"] == "none"

    def test_rename_key(self, adapter, local):
        adapter.rename_key(SETTINGS, "general", "volume", "master_volume")

        content = read(local("config/settings.ini"))
        assert "master_volume = 5\n" in content
        assert "\nvolume" not in content

    def test_rename_missing_key_is_noop(self, adapter, local):
        before = read(local("config/settings.ini"))

        adapter.rename_key(SETTINGS, "general", "missing", "other")
        adapter.rename_key(SETTINGS, "nosection", "theme", "other")

        assert read(local("config/settings.ini")) == before

    def test_set_value_write_error(self, adapter, local):
        os.makedirs(local("config/locked.ini"))

        with pytest.raises(IniFileError, match="Failed to set \\[s\\] k"):
            adapter.set_value("sdmc:/config/locked.ini", "s", "k", "v")

    @pytest.mark.parametrize("path", ["sdmc:/../outside.ini", "sdmc:/config/../../outside.ini"])
    def test_writes_outside_root_are_refused(self, adapter, sdmc_root, path):
        outside = os.path.join(os.path.dirname(sdmc_root), "outside.ini")

        with pytest.raises(IniFileError, match="outside of the storage root"):
            adapter.set_value(path, "s", "k", "v")
        with pytest.raises(IniFileError, match="outside of the storage root"):
            adapter.rename_key(path, "s", "k", "other")

        assert not os.path.exists(outside)
