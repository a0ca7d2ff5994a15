"""Safety gate for destructive (delete / move) command targets.

Paths use the device's virtual volume notation (``sdmc:/...``). A path is
dangerous when expanding it could reach outside the intended target or into a
storage region that must never be bulk-modified.

Two tiers of regions exist:
- ultra-protected: rejected for any suffix;
- protected: only reachable through a relative suffix without traversal
  tokens, never as the bare region root or a root-level wildcard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

STORAGE_ROOT = "sdmc:/"
VOLUME_SEPARATOR = ":/"

PROTECTED_FOLDERS: tuple[str, ...] = (
    "sdmc:/Nintendo/",
    "sdmc:/emuMMC/",
    "sdmc:/atmosphere/",
    "sdmc:/bootloader/",
    "sdmc:/switch/",
    "sdmc:/config/",
    "sdmc:/",
)

ULTRA_PROTECTED_FOLDERS: tuple[str, ...] = (
    "sdmc:/Nintendo/",
    "sdmc:/emuMMC/",
)

# Parent traversal and home expansion
DANGEROUS_TOKENS: tuple[str, ...] = ("..", "~")

# Appended to a protected root, these match everything directly inside it
DANGEROUS_ROOT_WILDCARDS: tuple[str, ...] = ("*", "*/")


def split_segments(relative_path: str) -> tuple[str, ...]:
    """Split on '/' and drop empty segments (repeated or trailing slashes)."""
    return tuple(segment for segment in relative_path.split("/") if segment)


@dataclass(frozen=True)
class SegmentedPath:
    """A candidate path, split once and shared by every rule."""

    raw: str
    # Segments after each protected prefix the path starts with
    protected_suffixes: tuple[tuple[str, tuple[str, ...]], ...]
    # Segments after the storage root marker, None when the marker is absent
    root_segments: Optional[tuple[str, ...]]

    @classmethod
    def from_path(cls, path: str) -> "SegmentedPath":
        suffixes = tuple(
            (prefix, split_segments(path[len(prefix) :]))
            for prefix in PROTECTED_FOLDERS
            if path.startswith(prefix)
        )
        root_segments = None
        if path.startswith(STORAGE_ROOT):
            root_segments = split_segments(path[len(STORAGE_ROOT) :])
        return cls(raw=path, protected_suffixes=suffixes, root_segments=root_segments)


def _under_ultra_protected(path: SegmentedPath) -> bool:
    return any(path.raw.startswith(folder) for folder in ULTRA_PROTECTED_FOLDERS)


def _is_protected_root(path: SegmentedPath) -> bool:
    return path.raw in PROTECTED_FOLDERS


def _protected_suffix_has_token(path: SegmentedPath) -> bool:
    return any(
        token in segment
        for _, segments in path.protected_suffixes
        for segment in segments
        for token in DANGEROUS_TOKENS
    )


def _protected_root_wildcard(path: SegmentedPath) -> bool:
    return any(
        path.raw == folder + wildcard
        for folder in PROTECTED_FOLDERS
        for wildcard in DANGEROUS_ROOT_WILDCARDS
    )


def _storage_root_token_segment(path: SegmentedPath) -> bool:
    if path.root_segments is None:
        return False
    return any(segment in DANGEROUS_TOKENS for segment in path.root_segments)


def _wildcard_in_volume(path: SegmentedPath) -> bool:
    index = path.raw.find(VOLUME_SEPARATOR)
    if index == -1:
        return False
    return "*" in path.raw[: index + len(VOLUME_SEPARATOR)]


def _contains_token(path: SegmentedPath) -> bool:
    return any(token in path.raw for token in DANGEROUS_TOKENS)


# Evaluated in order; the first rule returning True rejects the path.
RULES: tuple[tuple[str, Callable[[SegmentedPath], bool]], ...] = (
    ("ultra_protected_folder", _under_ultra_protected),
    ("protected_folder_root", _is_protected_root),
    ("protected_folder_traversal", _protected_suffix_has_token),
    ("protected_folder_wildcard", _protected_root_wildcard),
    ("storage_root_traversal", _storage_root_token_segment),
    ("volume_wildcard", _wildcard_in_volume),
    ("dangerous_token", _contains_token),
)


def first_violation(path: str) -> Optional[str]:
    """Return the name of the first rule rejecting ``path``, or None if it is safe."""
    segmented = SegmentedPath.from_path(path)
    for name, rule in RULES:
        if rule(segmented):
            return name
    return None


def is_dangerous(path: str) -> bool:
    """Return True when ``path`` must not reach a destructive operation."""
    return first_violation(path) is not None
