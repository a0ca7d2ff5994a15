"""
Pytest configuration and shared fixtures.
"""

import os
from unittest.mock import MagicMock

import pytest

from bundlecmd.config.settings import Settings
from bundlecmd.container import DependencyContainer
from bundlecmd.ports.config.ini_store_port import IniStorePort
from bundlecmd.ports.device.power_control_port import PowerControlPort
from bundlecmd.ports.files.file_operations_port import FileOperationsPort
from bundlecmd.ports.hex.hex_editor_port import HexEditorPort
from bundlecmd.ports.network.network_port import NetworkPort
from bundlecmd.ports.paths.path_resolver_port import PathResolverPort
from bundlecmd.utils.volume import VolumeMapper


@pytest.fixture
def sdmc_root(tmp_path):
    """
    Create a temporary storage root laid out like the device's SD card.

    Returns:
        Path to the storage root
    """
    root = tmp_path / "sdmc"
    (root / "switch" / ".packages" / "demo").mkdir(parents=True)
    (root / "config").mkdir()
    (root / "Nintendo" / "save").mkdir(parents=True)

    (root / "switch" / "app.nro").write_bytes(b"NRO0")
    (root / "config" / "settings.ini").write_text(
        "; device settings\n[general]\ntheme=dark\nvolume = 5\n\n[network]\nproxy=off\n"
    )
    (root / "Nintendo" / "save" / "slot0.bin").write_bytes(b"\x00" * 8)
    return str(root)


@pytest.fixture
def volume(sdmc_root):
    """VolumeMapper rooted at the temporary storage root."""
    return VolumeMapper(sdmc_root)


@pytest.fixture
def local(sdmc_root):
    """Build a local path below the storage root from '/'-separated parts."""

    def _local(relative: str) -> str:
        return os.path.join(sdmc_root, *relative.split("/"))

    return _local


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def collaborators():
    """
    Create mocked collaborator ports for the command dispatcher.

    The path resolver mock mimics the real preprocessing: quotes are stripped
    and the ``sdmc:`` prefix is added when missing.
    """
    path_resolver = MagicMock(spec=PathResolverPort)

    def preprocess(raw):
        raw = raw.strip("'\"")
        return raw if raw.startswith("sdmc:") else "sdmc:" + raw

    path_resolver.preprocess_path.side_effect = preprocess
    path_resolver.preprocess_url.side_effect = lambda raw: raw.strip("'\"")
    path_resolver.resolve_placeholder.side_effect = (
        lambda arg, source: arg.replace("{json_data(name)}", "resolved")
    )
    return {
        "path_resolver": path_resolver,
        "file_operations": MagicMock(spec=FileOperationsPort),
        "ini_store": MagicMock(spec=IniStorePort),
        "hex_editor": MagicMock(spec=HexEditorPort),
        "network": MagicMock(spec=NetworkPort),
        "power_control": MagicMock(spec=PowerControlPort),
    }


@pytest.fixture
def dependency_container(sdmc_root, mock_logger):
    """
    Create a dependency container rooted at the temporary storage root.

    Returns:
        DependencyContainer instance with mocked logger
    """
    app_settings = Settings()
    app_settings.sdmc_root = sdmc_root
    app_settings.reboot_command = ""
    app_settings.shutdown_command = ""
    container = DependencyContainer(app_settings)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
