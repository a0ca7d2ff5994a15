"""
HTTP download and zip extraction adapter.
"""

from __future__ import annotations

import logging
import os
import shutil
import urllib.error
import urllib.request
import zipfile
from typing import Optional
from urllib.parse import unquote, urlparse

from typing_extensions import override

from bundlecmd.exceptions import ArchiveError, DownloadError
from bundlecmd.ports.network.network_port import NetworkPort
from bundlecmd.utils.volume import VolumeMapper

CHUNK_SIZE = 64 * 1024


class HttpNetworkAdapter(NetworkPort):
    """Fetch files over http(s) with urllib and unpack zip archives."""

    def __init__(
        self,
        volume: VolumeMapper,
        timeout: int = 30,
        user_agent: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._volume = volume
        self._timeout = timeout
        self._user_agent = user_agent or "bundlecmd/0.1"
        self._logger = logger or logging.getLogger(__name__)

    # ---------------- private helpers ----------------
    def _validate_url(self, url: str) -> None:
        p = urlparse(url)
        if p.scheme not in ("http", "https"):
            raise DownloadError("Only http/https URLs are supported")
        if not p.netloc:
            raise DownloadError(f"Invalid URL: missing host in {url}")

    @staticmethod
    def _file_name(url: str) -> str:
        name = os.path.basename(unquote(urlparse(url).path))
        return name or "download"

    def _destination_file(self, url: str, destination: str) -> str:
        try:
            local = self._volume.to_local_checked(destination)
        except ValueError as e:
            raise DownloadError(str(e))
        if destination.endswith("/"):
            local = os.path.join(local, self._file_name(url))
            if not self._volume.is_within_root(local):
                raise DownloadError(f"Download target escapes {destination}: {url}")
        return local

    # ---------------- port ----------------
    @override
    def download(self, url: str, destination: str) -> None:
        self._validate_url(url)
        target = self._destination_file(url, destination)
        partial = target + ".tmp"
        headers = {"User-Agent": self._user_agent, "Accept": "*/*"}
        req = urllib.request.Request(url, headers=headers, method="GET")
        try:
            os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
            with urllib.request.urlopen(req, timeout=self._timeout) as resp:  # nosec - package-controlled URL
                with open(partial, "wb") as out:
                    shutil.copyfileobj(resp, out, CHUNK_SIZE)
            os.replace(partial, target)
            self._logger.info(f"Downloaded {url} to {destination}")
        except urllib.error.HTTPError as e:
            self._discard(partial)
            raise DownloadError(f"HTTP error {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            self._discard(partial)
            raise DownloadError(f"URL error: {e.reason}")
        except Exception as e:
            self._discard(partial)
            raise DownloadError(f"Download of {url} failed: {e}")

    @override
    def unzip(self, archive: str, destination: str) -> None:
        try:
            local_archive = self._volume.to_local_checked(archive)
            local_destination = os.path.abspath(
                self._volume.to_local_checked(destination)
            )
        except ValueError as e:
            raise ArchiveError(str(e))
        try:
            if not os.path.isfile(local_archive):
                raise ArchiveError(f"Archive does not exist: {archive}")
            with zipfile.ZipFile(local_archive) as zf:
                for member in zf.namelist():
                    target = os.path.abspath(os.path.join(local_destination, member))
                    if os.path.commonpath([local_destination, target]) != local_destination:
                        raise ArchiveError(f"Archive member escapes destination: {member}")
                os.makedirs(local_destination, exist_ok=True)
                zf.extractall(local_destination)
                count = len(zf.namelist())
            self._logger.info(f"Extracted {count} entries from {archive} to {destination}")
        except ArchiveError:
            raise
        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Invalid zip archive {archive}: {e}")
        except Exception as e:
            raise ArchiveError(f"Failed to extract {archive}: {str(e)}")

    def _discard(self, partial: str) -> None:
        try:
            os.remove(partial)
        except FileNotFoundError:
            pass
        except OSError as e:
            self._logger.warning(f"Could not remove partial download {partial}: {e}")
