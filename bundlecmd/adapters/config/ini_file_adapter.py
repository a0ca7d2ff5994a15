"""
INI file adapter editing key/value config files in place.

Edits are line based so comments, blank lines and ordering survive a
rewrite, which configparser would not preserve.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from bundlecmd.exceptions import IniFileError
from bundlecmd.ports.config.ini_store_port import IniStorePort
from bundlecmd.utils.volume import VolumeMapper

COMMENT_PREFIXES = (";", "#")


def _section_name(line: str) -> Optional[str]:
    stripped = line.strip()
    if stripped.startswith("[") and stripped.endswith("]"):
        return stripped[1:-1].strip()
    return None


def _key_name(line: str) -> Optional[str]:
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIXES) or "=" not in stripped:
        return None
    return stripped.split("=", 1)[0].strip()


class IniFileAdapter(IniStorePort):
    """Line-preserving INI implementation of the key/value store port."""

    def __init__(self, volume: VolumeMapper, logger: Optional[logging.Logger] = None):
        """
        Initialize the adapter.

        Args:
            volume: Mapper from ``sdmc:/`` paths to the local storage root
            logger: Logger instance to use for logging
        """
        self._volume = volume
        self._logger = logger or logging.getLogger(__name__)

    def _read_lines(self, local_path: str) -> list[str]:
        if not os.path.exists(local_path):
            return []
        with open(local_path, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    def _write_lines(self, local_path: str, lines: list[str]) -> None:
        os.makedirs(os.path.dirname(local_path) or ".", exist_ok=True)
        with open(local_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")

    def _to_local(self, path: str) -> str:
        try:
            return self._volume.to_local_checked(path)
        except ValueError as e:
            raise IniFileError(str(e))

    @staticmethod
    def _section_bounds(lines: list[str], section: str) -> Optional[tuple[int, int]]:
        """Return (header index, end index) of a section, or None if absent."""
        start = None
        for index, line in enumerate(lines):
            name = _section_name(line)
            if name is None:
                continue
            if start is not None:
                return start, index
            if name == section:
                start = index
        if start is None:
            return None
        return start, len(lines)

    @staticmethod
    def _find_key(lines: list[str], bounds: tuple[int, int], key: str) -> Optional[int]:
        for index in range(bounds[0] + 1, bounds[1]):
            if _key_name(lines[index]) == key:
                return index
        return None

    @override
    def set_value(self, path: str, section: str, key: str, value: str) -> None:
        local_path = self._to_local(path)
        try:
            lines = self._read_lines(local_path)
            bounds = self._section_bounds(lines, section)
            if bounds is None:
                if lines and lines[-1].strip():
                    lines.append("")
                lines.extend([f"[{section}]", f"{key}={value}"])
            else:
                index = self._find_key(lines, bounds, key)
                if index is None:
                    # Insert after the last non-blank line of the section
                    insert_at = bounds[1]
                    while insert_at > bounds[0] + 1 and not lines[insert_at - 1].strip():
                        insert_at -= 1
                    lines.insert(insert_at, f"{key}={value}")
                else:
                    line = lines[index]
                    separator = line.index("=")
                    rest = line[separator + 1 :]
                    spacing = rest[: len(rest) - len(rest.lstrip())]
                    lines[index] = line[: separator + 1] + spacing + value
            self._write_lines(local_path, lines)
            self._logger.info(f"Set [{section}] {key} in {path}")
        except IniFileError:
            raise
        except Exception as e:
            raise IniFileError(
                f"Failed to set [{section}] {key} in {path}: {str(e)}"
            )

    @override
    def rename_key(self, path: str, section: str, key: str, new_key: str) -> None:
        local_path = self._to_local(path)
        try:
            lines = self._read_lines(local_path)
            bounds = self._section_bounds(lines, section)
            index = self._find_key(lines, bounds, key) if bounds else None
            if index is None:
                self._logger.debug(f"No key {key} in [{section}] of {path}")
                return
            line = lines[index]
            separator = line.index("=")
            before = line[:separator]
            indent = before[: len(before) - len(before.lstrip())]
            spacing = before[len(before.rstrip()) :]
            lines[index] = indent + new_key + spacing + line[separator:]
            self._write_lines(local_path, lines)
            self._logger.info(f"Renamed [{section}] {key} to {new_key} in {path}")
        except IniFileError:
            raise
        except Exception as e:
            raise IniFileError(
                f"Failed to rename [{section}] {key} in {path}: {str(e)}"
            )
