"""
Path resolver port interface: operand normalization and placeholder substitution.
"""

from abc import ABC, abstractmethod


class PathResolverPort(ABC):
    """Port interface for turning raw command operands into usable paths and URLs."""

    @abstractmethod
    def preprocess_path(self, raw: str) -> str:
        """
        Normalize a raw path operand into an absolute virtual path.

        Args:
            raw: Operand as tokenized, possibly quoted

        Returns:
            Absolute ``sdmc:/`` path
        """
        pass

    @abstractmethod
    def preprocess_url(self, raw: str) -> str:
        """
        Normalize a raw URL operand.

        Args:
            raw: Operand as tokenized, possibly quoted or missing its scheme

        Returns:
            Absolute http(s) URL
        """
        pass

    @abstractmethod
    def resolve_placeholder(self, arg: str, data_source_path: str) -> str:
        """
        Substitute ``{json_data(...)}`` markers using the active data source.

        Args:
            arg: Command argument containing one or more markers
            data_source_path: JSON document selected by the last json_data command

        Returns:
            The argument with resolvable markers replaced

        Raises:
            PlaceholderError: If the data source cannot be read
        """
        pass
