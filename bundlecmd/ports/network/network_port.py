"""
Network port interface defining the contract for downloads and archive extraction.
"""

from abc import ABC, abstractmethod


class NetworkPort(ABC):
    """Port interface for fetching remote files and unpacking archives."""

    @abstractmethod
    def download(self, url: str, destination: str) -> None:
        """
        Download a URL to a file.

        Args:
            url: Absolute http(s) URL
            destination: Target file, or folder when it ends with '/'

        Raises:
            DownloadError: If the download fails
        """
        pass

    @abstractmethod
    def unzip(self, archive: str, destination: str) -> None:
        """
        Extract a zip archive into a folder.

        Raises:
            ArchiveError: If the archive is invalid or cannot be extracted
        """
        pass
