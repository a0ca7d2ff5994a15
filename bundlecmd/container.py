"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from bundlecmd.adapters.config.ini_file_adapter import IniFileAdapter
from bundlecmd.adapters.device.local_power_adapter import LocalPowerAdapter
from bundlecmd.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from bundlecmd.adapters.hex.binary_patch_adapter import BinaryPatchAdapter
from bundlecmd.adapters.network.http_network_adapter import HttpNetworkAdapter
from bundlecmd.adapters.paths.sdmc_path_resolver import SdmcPathResolver
from bundlecmd.config.settings import Settings, settings
from bundlecmd.ports.config.ini_store_port import IniStorePort
from bundlecmd.ports.device.power_control_port import PowerControlPort
from bundlecmd.ports.files.file_operations_port import FileOperationsPort
from bundlecmd.ports.hex.hex_editor_port import HexEditorPort
from bundlecmd.ports.network.network_port import NetworkPort
from bundlecmd.ports.paths.path_resolver_port import PathResolverPort
from bundlecmd.use_cases.commands.execute_commands import ExecuteCommandsUseCase
from bundlecmd.use_cases.commands.parse_commands import ParseCommandsUseCase
from bundlecmd.use_cases.commands.run_package import RunPackageUseCase
from bundlecmd.utils.volume import VolumeMapper


def _flush_log_handlers() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self._settings = app_settings or settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_volume(self) -> VolumeMapper:
        """
        Get the mapper between ``sdmc:/`` paths and the local storage root.

        Returns:
            VolumeMapper rooted at the configured sdmc root
        """
        if "volume" not in self._instances:
            self._instances["volume"] = VolumeMapper(self._settings.sdmc_root)
        return self._instances["volume"]

    def get_path_resolver(self) -> PathResolverPort:
        """
        Get path resolver adapter instance.

        Returns:
            PathResolverPort implementation
        """
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = SdmcPathResolver(
                self.get_volume(), self._logger
            )
        return self._instances["path_resolver"]

    def get_file_operations(self) -> FileOperationsPort:
        """
        Get file operations adapter instance.

        Returns:
            FileOperationsPort implementation
        """
        if "file_operations" not in self._instances:
            self._instances["file_operations"] = LocalFileSystemAdapter(
                self.get_volume(), self._logger
            )
        return self._instances["file_operations"]

    def get_ini_store(self) -> IniStorePort:
        """
        Get INI store adapter instance.

        Returns:
            IniStorePort implementation
        """
        if "ini_store" not in self._instances:
            self._instances["ini_store"] = IniFileAdapter(
                self.get_volume(), self._logger
            )
        return self._instances["ini_store"]

    def get_hex_editor(self) -> HexEditorPort:
        """
        Get binary patch adapter instance.

        Returns:
            HexEditorPort implementation
        """
        if "hex_editor" not in self._instances:
            self._instances["hex_editor"] = BinaryPatchAdapter(
                self.get_volume(), self._logger
            )
        return self._instances["hex_editor"]

    def get_network(self) -> NetworkPort:
        """
        Get network adapter instance.

        Returns:
            NetworkPort implementation
        """
        if "network" not in self._instances:
            self._instances["network"] = HttpNetworkAdapter(
                self.get_volume(),
                timeout=self._settings.download_timeout,
                user_agent=self._settings.user_agent,
                logger=self._logger,
            )
        return self._instances["network"]

    def get_power_control(self) -> PowerControlPort:
        """
        Get power control adapter instance.

        Returns:
            PowerControlPort implementation
        """
        if "power_control" not in self._instances:
            power_control = LocalPowerAdapter(
                reboot_command=self._settings.reboot_command,
                shutdown_command=self._settings.shutdown_command,
                logger=self._logger,
            )
            power_control.register_teardown("log handlers", _flush_log_handlers)
            self._instances["power_control"] = power_control
        return self._instances["power_control"]

    def get_execute_commands_use_case(self) -> ExecuteCommandsUseCase:
        """
        Get the command dispatcher with injected collaborators.

        Returns:
            Configured ExecuteCommandsUseCase
        """
        if "execute_commands_use_case" not in self._instances:
            self._instances["execute_commands_use_case"] = ExecuteCommandsUseCase(
                path_resolver=self.get_path_resolver(),
                file_operations=self.get_file_operations(),
                ini_store=self.get_ini_store(),
                hex_editor=self.get_hex_editor(),
                network=self.get_network(),
                power_control=self.get_power_control(),
                logger=self._logger,
            )
        return self._instances["execute_commands_use_case"]

    def get_parse_commands_use_case(self) -> ParseCommandsUseCase:
        """
        Get the command package loader.

        Returns:
            Configured ParseCommandsUseCase
        """
        if "parse_commands_use_case" not in self._instances:
            self._instances["parse_commands_use_case"] = ParseCommandsUseCase(
                self._logger
            )
        return self._instances["parse_commands_use_case"]

    def get_run_package_use_case(self) -> RunPackageUseCase:
        """
        Get the package runner with injected dependencies.

        Returns:
            Configured RunPackageUseCase
        """
        if "run_package_use_case" not in self._instances:
            self._instances["run_package_use_case"] = RunPackageUseCase(
                self.get_parse_commands_use_case(),
                self.get_execute_commands_use_case(),
                self._logger,
            )
        return self._instances["run_package_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
