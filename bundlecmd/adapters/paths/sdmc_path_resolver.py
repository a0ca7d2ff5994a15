"""
Path resolver for the ``sdmc:`` volume with JSON data-source placeholders.
"""

import json
import logging
import re
from typing import Any, Optional

from typing_extensions import override

from bundlecmd.exceptions import PlaceholderError
from bundlecmd.ports.paths.path_resolver_port import PathResolverPort
from bundlecmd.utils.hex_encoding import remove_quotes
from bundlecmd.utils.volume import STORAGE_ROOT, VolumeMapper

VOLUME_PREFIX = "sdmc:"
URL_SCHEMES = ("http://", "https://")
DEFAULT_URL_SCHEME = "https://"

# {json_data(key, 0, other_key)}
PLACEHOLDER_PATTERN = re.compile(r"\{json_data\(([^)]*)\)\}")


class SdmcPathResolver(PathResolverPort):
    """Resolve command operands against the ``sdmc:/`` virtual volume."""

    def __init__(
        self,
        volume: VolumeMapper,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            volume: Mapper used to read JSON data sources from local storage
            logger: Logger instance to use for logging
        """
        self._volume = volume
        self._logger = logger or logging.getLogger(__name__)

    @override
    def preprocess_path(self, raw: str) -> str:
        path = remove_quotes(raw.strip())
        if path.startswith(VOLUME_PREFIX):
            path = path[len(VOLUME_PREFIX) :]
        # Every spelling of a location maps to one form: "sdmc:/a/b" for
        # "a/b", "//a//b" and "/./a/b". ".." is kept for the safety gate.
        segments = [segment for segment in path.split("/") if segment not in ("", ".")]
        canonical = STORAGE_ROOT + "/".join(segments)
        if segments and path.endswith("/"):
            canonical += "/"
        return canonical

    @override
    def preprocess_url(self, raw: str) -> str:
        url = remove_quotes(raw.strip())
        if not url.startswith(URL_SCHEMES):
            url = DEFAULT_URL_SCHEME + url
        return url

    @override
    def resolve_placeholder(self, arg: str, data_source_path: str) -> str:
        document = self._load_document(data_source_path)

        def substitute(match: re.Match) -> str:
            keys = [key.strip() for key in match.group(1).split(",")]
            value = self._walk(document, keys)
            if value is None:
                self._logger.warning(
                    f"Unresolved placeholder {match.group(0)} in {data_source_path}"
                )
                return match.group(0)
            return value

        return PLACEHOLDER_PATTERN.sub(substitute, arg)

    def _load_document(self, data_source_path: str) -> Any:
        """
        Read a JSON data source.

        Raises:
            PlaceholderError: If the file is missing or not valid JSON
        """
        try:
            local_path = self._volume.to_local_checked(data_source_path)
        except ValueError as e:
            raise PlaceholderError(str(e))
        try:
            with open(local_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError:
            raise PlaceholderError(f"JSON data source not found: {data_source_path}")
        except json.JSONDecodeError as e:
            raise PlaceholderError(f"Invalid JSON in {data_source_path}: {e}")
        except OSError as e:
            raise PlaceholderError(f"Cannot read {data_source_path}: {e}")
        return document

    @staticmethod
    def _walk(document: Any, keys: list[str]) -> Optional[str]:
        node = document
        for key in keys:
            if isinstance(node, dict):
                if key not in node:
                    return None
                node = node[key]
            elif isinstance(node, list):
                try:
                    node = node[int(key)]
                except (ValueError, IndexError):
                    return None
            else:
                return None
        if isinstance(node, bool):
            return "true" if node else "false"
        if isinstance(node, (str, int, float)):
            return str(node)
        return None
