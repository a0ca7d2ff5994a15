"""
INI store port interface defining the contract for key/value config files.
"""

from abc import ABC, abstractmethod


class IniStorePort(ABC):
    """Port interface for small persisted key/value configuration files."""

    @abstractmethod
    def set_value(self, path: str, section: str, key: str, value: str) -> None:
        """
        Set a key's value, creating the key, section or file when missing.

        Raises:
            IniFileError: If the file cannot be written
        """
        pass

    @abstractmethod
    def rename_key(self, path: str, section: str, key: str, new_key: str) -> None:
        """
        Rename a key within a section, keeping its value.

        Raises:
            IniFileError: If the file cannot be written
        """
        pass
