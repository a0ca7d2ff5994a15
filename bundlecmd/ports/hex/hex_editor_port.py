"""
Hex editor port interface defining the contract for binary patches.
"""

from abc import ABC, abstractmethod
from typing import Optional


class HexEditorPort(ABC):
    """Port interface for in-place binary file patching."""

    @abstractmethod
    def patch_at_offset(self, path: str, offset: str, hex_data: str) -> None:
        """
        Overwrite bytes at an absolute offset.

        Args:
            path: File to patch
            offset: Decimal byte offset
            hex_data: Replacement bytes as a hex string

        Raises:
            HexEditError: If the patch cannot be applied
        """
        pass

    @abstractmethod
    def patch_at_pattern_offset(
        self, path: str, pattern: str, offset: str, hex_data: str
    ) -> None:
        """
        Overwrite bytes at an offset relative to the first match of an ASCII anchor.

        Args:
            path: File to patch
            pattern: ASCII anchor text
            offset: Decimal offset added to the anchor position
            hex_data: Replacement bytes as a hex string

        Raises:
            HexEditError: If the anchor is missing or the patch cannot be applied
        """
        pass

    @abstractmethod
    def find_replace(
        self,
        path: str,
        search_hex: str,
        replacement_hex: str,
        occurrence: Optional[str] = None,
    ) -> None:
        """
        Replace a byte sequence with another of the same length.

        Args:
            path: File to patch
            search_hex: Bytes to find, as a hex string
            replacement_hex: Replacement bytes, as a hex string
            occurrence: 1-based match to replace; None or "0" replaces all

        Raises:
            HexEditError: If the operands are invalid or the file cannot be patched
        """
        pass
