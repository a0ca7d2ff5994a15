"""
File operations port interface defining the contract for filesystem primitives.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FileOperationsPort(ABC):
    """Port interface for filesystem operations on virtual ``sdmc:/`` paths."""

    @abstractmethod
    def create_dir(self, path: str) -> None:
        """
        Create a directory, including missing parents.

        Args:
            path: Directory path to create

        Raises:
            FileOperationError: If the directory cannot be created
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or directory.

        Args:
            source: File or directory to copy
            destination: Target path; a trailing '/' marks a folder to copy into

        Raises:
            FileOperationError: If copying fails
        """
        pass

    @abstractmethod
    def copy_by_pattern(self, pattern: str, destination: str) -> None:
        """
        Copy every file or directory matching a wildcard pattern into a folder.

        Args:
            pattern: Wildcard source pattern (e.g. "sdmc:/mods/*.ips")
            destination: Destination folder

        Raises:
            FileOperationError: If copying fails
        """
        pass

    @abstractmethod
    def mirror_copy(self, source: str, destination: Optional[str] = None) -> None:
        """
        Copy every file under ``source`` to the same relative path under ``destination``.

        Args:
            source: Source tree
            destination: Target tree root (defaults to the storage root)

        Raises:
            FileOperationError: If copying fails
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> None:
        """
        Delete a file or directory tree. Missing paths are ignored.

        Raises:
            FileOperationError: If deletion fails
        """
        pass

    @abstractmethod
    def delete_by_pattern(self, pattern: str) -> None:
        """
        Delete every file or directory matching a wildcard pattern.

        Raises:
            FileOperationError: If deletion fails
        """
        pass

    @abstractmethod
    def mirror_delete(self, source: str, destination: Optional[str] = None) -> None:
        """
        Delete every file under ``destination`` whose relative path exists under ``source``.

        Args:
            source: Reference tree listing the files to remove
            destination: Target tree root (defaults to the storage root)

        Raises:
            FileOperationError: If deletion fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Move or rename a file or directory.

        Raises:
            FileOperationError: If moving fails
        """
        pass

    @abstractmethod
    def move_by_pattern(self, pattern: str, destination: str) -> None:
        """
        Move every file or directory matching a wildcard pattern into a folder.

        Raises:
            FileOperationError: If moving fails
        """
        pass
