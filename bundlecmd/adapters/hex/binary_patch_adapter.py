"""
Binary patch adapter writing hex payloads into local files in place.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from bundlecmd.exceptions import HexEditError
from bundlecmd.ports.hex.hex_editor_port import HexEditorPort
from bundlecmd.utils.hex_encoding import hex_to_bytes
from bundlecmd.utils.volume import VolumeMapper


class BinaryPatchAdapter(HexEditorPort):
    """In-place binary patch engine for files on the storage volume."""

    def __init__(self, volume: VolumeMapper, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter.

        Args:
            volume: Mapper from ``sdmc:/`` paths to the local storage root
            logger: Logger instance to use for logging
        """
        self._volume = volume
        self._logger = logger or logging.getLogger(__name__)

    def _local_file(self, path: str) -> str:
        try:
            local_path = self._volume.to_local_checked(path)
        except ValueError as e:
            raise HexEditError(str(e))
        if not os.path.isfile(local_path):
            raise HexEditError(f"File does not exist: {path}")
        return local_path

    @staticmethod
    def _parse_offset(offset: str) -> int:
        try:
            value = int(offset.strip(), 10)
        except ValueError:
            raise HexEditError(f"Invalid offset: {offset}")
        if value < 0:
            raise HexEditError(f"Offset must not be negative: {offset}")
        return value

    @staticmethod
    def _parse_hex(hex_data: str) -> bytes:
        try:
            payload = hex_to_bytes(hex_data)
        except ValueError as e:
            raise HexEditError(f"Invalid hex data {hex_data!r}: {e}")
        if not payload:
            raise HexEditError("Hex data must not be empty")
        return payload

    def _write_at(self, local_path: str, position: int, payload: bytes) -> None:
        size = os.path.getsize(local_path)
        if position + len(payload) > size:
            raise HexEditError(
                f"Patch of {len(payload)} bytes at offset {position} exceeds file size {size}"
            )
        with open(local_path, "r+b") as f:
            f.seek(position)
            f.write(payload)

    @staticmethod
    def _find_all(data: bytes, needle: bytes) -> list[int]:
        positions: list[int] = []
        start = data.find(needle)
        while start != -1:
            positions.append(start)
            start = data.find(needle, start + len(needle))
        return positions

    @override
    def patch_at_offset(self, path: str, offset: str, hex_data: str) -> None:
        try:
            local_path = self._local_file(path)
            position = self._parse_offset(offset)
            self._write_at(local_path, position, self._parse_hex(hex_data))
            self._logger.info(f"Patched {path} at offset {position}")
        except HexEditError:
            raise
        except Exception as e:
            raise HexEditError(f"Failed to patch {path} at offset {offset}: {str(e)}")

    @override
    def patch_at_pattern_offset(
        self, path: str, pattern: str, offset: str, hex_data: str
    ) -> None:
        try:
            local_path = self._local_file(path)
            with open(local_path, "rb") as f:
                data = f.read()
            anchor = data.find(pattern.encode("utf-8"))
            if anchor == -1 or not pattern:
                raise HexEditError(f"Pattern {pattern!r} not found in {path}")
            position = anchor + self._parse_offset(offset)
            self._write_at(local_path, position, self._parse_hex(hex_data))
            self._logger.info(
                f"Patched {path} at offset {position} (anchor {pattern!r} + {offset})"
            )
        except HexEditError:
            raise
        except Exception as e:
            raise HexEditError(
                f"Failed to patch {path} relative to {pattern!r}: {str(e)}"
            )

    @override
    def find_replace(
        self,
        path: str,
        search_hex: str,
        replacement_hex: str,
        occurrence: Optional[str] = None,
    ) -> None:
        try:
            local_path = self._local_file(path)
            search = self._parse_hex(search_hex)
            replacement = self._parse_hex(replacement_hex)
            if len(search) != len(replacement):
                raise HexEditError(
                    f"Search ({len(search)} bytes) and replacement ({len(replacement)} bytes) differ in length"
                )
            nth = self._parse_offset(occurrence) if occurrence is not None else 0

            with open(local_path, "rb") as f:
                positions = self._find_all(f.read(), search)
            if nth:
                positions = positions[nth - 1 : nth]
            if not positions:
                self._logger.warning(
                    f"No match for {search_hex} in {path} (occurrence {occurrence or 'all'})"
                )
                return

            with open(local_path, "r+b") as f:
                for position in positions:
                    f.seek(position)
                    f.write(replacement)
            self._logger.info(f"Replaced {len(positions)} occurrence(s) in {path}")
        except HexEditError:
            raise
        except Exception as e:
            raise HexEditError(f"Failed to replace {search_hex} in {path}: {str(e)}")
