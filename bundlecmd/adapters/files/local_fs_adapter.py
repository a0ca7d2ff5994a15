"""
Local file system adapter implementation for file operations.
"""

import glob
import logging
import os
import shutil
from typing import Optional

from typing_extensions import override

from bundlecmd.exceptions import FileOperationError
from bundlecmd.ports.files.file_operations_port import FileOperationsPort
from bundlecmd.utils.volume import STORAGE_ROOT, VolumeMapper


class LocalFileSystemAdapter(FileOperationsPort):
    """Local file system implementation of the file operations port."""

    def __init__(self, volume: VolumeMapper, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            volume: Mapper from ``sdmc:/`` paths to the local storage root
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._volume = volume
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _to_local(self, path: str) -> str:
        """
        Map a virtual path to a local one, keeping any trailing separator.

        Raises:
            FileOperationError: If the path escapes the storage root
        """
        try:
            return self._volume.to_local_checked(path)
        except ValueError as e:
            raise FileOperationError(str(e))

    def _validate_source(self, local_path: str, path: str) -> None:
        """
        Validate that a source path exists.

        Raises:
            FileOperationError: If the source does not exist
        """
        if not os.path.exists(local_path.rstrip(os.sep) or local_path):
            raise FileOperationError(f"Source does not exist: {path}")

    def _validate_directory(self, local_path: str, path: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Raises:
            FileOperationError: If directory does not exist or is not a directory
        """
        if not os.path.exists(local_path):
            raise FileOperationError(f"Directory does not exist: {path}")

        if not os.path.isdir(local_path):
            raise FileOperationError(f"Path is not a directory: {path}")

    def _expand(self, pattern: str) -> list[str]:
        """
        Expand a wildcard pattern into matching local paths inside the storage root.

        A trailing '/' in the pattern restricts matches to directories.
        """
        local_pattern = self._to_local(pattern)
        matches = []
        for match in sorted(glob.glob(local_pattern)):
            if not self._volume.is_within_root(match):
                self._logger.warning(f"Skipping match outside storage root: {match}")
                continue
            matches.append(match)
        return matches

    @staticmethod
    def _target(source: str, destination: str, into_folder: bool) -> str:
        if into_folder:
            return os.path.join(destination, os.path.basename(source.rstrip(os.sep)))
        return destination.rstrip(os.sep) or destination

    def _copy_local(self, source: str, destination: str, into_folder: bool) -> None:
        source = source.rstrip(os.sep) or source
        target = self._target(source, destination, into_folder)
        if os.path.isdir(source):
            shutil.copytree(source, target, dirs_exist_ok=True)
        else:
            os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
            shutil.copy2(source, target)
        self._logger.debug(f"Copied {source} -> {target}")

    def _move_local(self, source: str, destination: str, into_folder: bool) -> None:
        source = source.rstrip(os.sep) or source
        target = self._target(source, destination, into_folder)
        if os.path.isdir(source) and os.path.isdir(target):
            # Merge into the existing directory, then drop the emptied source
            for entry in os.listdir(source):
                self._move_local(os.path.join(source, entry), target + os.sep, True)
            os.rmdir(source)
        else:
            os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
            if os.path.isfile(source) and os.path.isdir(target):
                shutil.rmtree(target)
            shutil.move(source, target)
        self._logger.debug(f"Moved {source} -> {target}")

    def _delete_local(self, local_path: str) -> None:
        local_path = local_path.rstrip(os.sep) or local_path
        if os.path.isdir(local_path) and not os.path.islink(local_path):
            shutil.rmtree(local_path)
        elif os.path.lexists(local_path):
            os.remove(local_path)
        else:
            self._logger.debug(f"Nothing to delete at {local_path}")
            return
        self._logger.debug(f"Deleted {local_path}")

    def _walk_files(self, local_dir: str) -> list[str]:
        """Return paths of all files under ``local_dir``, relative to it."""
        relative_paths: list[str] = []
        for dirpath, _, filenames in os.walk(local_dir):
            for filename in filenames:
                full_path = os.path.join(dirpath, filename)
                relative_paths.append(os.path.relpath(full_path, local_dir))
        return sorted(relative_paths)

    @override
    def create_dir(self, path: str) -> None:
        try:
            local = self._to_local(path)
            os.makedirs(local, exist_ok=True)
            self._logger.info(f"Created directory: {path}")
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(f"Failed to create directory {path}: {str(e)}")

    @override
    def copy(self, source: str, destination: str) -> None:
        try:
            local_source = self._to_local(source)
            self._validate_source(local_source, source)
            self._copy_local(
                local_source, self._to_local(destination), destination.endswith("/")
            )
            self._logger.info(f"Copied {source} to {destination}")
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def copy_by_pattern(self, pattern: str, destination: str) -> None:
        try:
            local_destination = self._to_local(destination)
            matches = self._expand(pattern)
            for match in matches:
                self._copy_local(match, local_destination, True)
            self._logger.info(
                f"Copied {len(matches)} entries matching '{pattern}' to {destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to copy files matching {pattern} to {destination}: {str(e)}"
            )

    @override
    def mirror_copy(self, source: str, destination: Optional[str] = None) -> None:
        destination = destination or STORAGE_ROOT
        try:
            local_source = self._to_local(source)
            local_destination = self._to_local(destination)
            self._validate_directory(local_source, source)
            relative_paths = self._walk_files(local_source)
            for relative in relative_paths:
                target = os.path.join(local_destination, relative)
                os.makedirs(os.path.dirname(target), exist_ok=True)
                shutil.copy2(os.path.join(local_source, relative), target)
            self._logger.info(
                f"Mirrored {len(relative_paths)} files from {source} to {destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to mirror {source} to {destination}: {str(e)}"
            )

    @override
    def delete(self, path: str) -> None:
        try:
            self._delete_local(self._to_local(path))
            self._logger.info(f"Deleted {path}")
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(f"Failed to delete {path}: {str(e)}")

    @override
    def delete_by_pattern(self, pattern: str) -> None:
        try:
            matches = self._expand(pattern)
            for match in matches:
                self._delete_local(match)
            self._logger.info(f"Deleted {len(matches)} entries matching '{pattern}'")
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to delete files matching {pattern}: {str(e)}"
            )

    @override
    def mirror_delete(self, source: str, destination: Optional[str] = None) -> None:
        destination = destination or STORAGE_ROOT
        try:
            local_source = self._to_local(source)
            local_destination = self._to_local(destination)
            self._validate_directory(local_source, source)
            removed = 0
            for relative in self._walk_files(local_source):
                target = os.path.join(local_destination, relative)
                if os.path.isfile(target):
                    os.remove(target)
                    removed += 1
            self._logger.info(
                f"Removed {removed} mirrored files of {source} from {destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to mirror-delete {source} from {destination}: {str(e)}"
            )

    @override
    def move(self, source: str, destination: str) -> None:
        try:
            local_source = self._to_local(source)
            self._validate_source(local_source, source)
            self._move_local(
                local_source, self._to_local(destination), destination.endswith("/")
            )
            self._logger.info(f"Moved {source} to {destination}")
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to move {source} to {destination}: {str(e)}"
            )

    @override
    def move_by_pattern(self, pattern: str, destination: str) -> None:
        try:
            local_destination = self._to_local(destination)
            matches = self._expand(pattern)
            for match in matches:
                self._move_local(match, local_destination, True)
            self._logger.info(
                f"Moved {len(matches)} entries matching '{pattern}' to {destination}"
            )
        except FileOperationError:
            raise
        except Exception as e:
            raise FileOperationError(
                f"Failed to move files matching {pattern} to {destination}: {str(e)}"
            )
