from __future__ import annotations

import os

"""Mapping between ``sdmc:/`` virtual paths and a local directory.

The device's removable storage is modelled as a local folder (the "sdmc
root"). Virtual paths keep their trailing '/' when mapped, since a trailing
slash marks a folder destination for copy and move.
"""

STORAGE_ROOT = "sdmc:/"


class VolumeMapper:
    def __init__(self, root: str):
        self.root = os.path.abspath(os.path.expanduser(root))

    def to_local(self, virtual_path: str) -> str:
        if virtual_path.startswith(STORAGE_ROOT):
            relative = virtual_path[len(STORAGE_ROOT) :]
        elif virtual_path.startswith("sdmc:"):
            relative = virtual_path[len("sdmc:") :].lstrip("/")
        else:
            # Already a local path
            return virtual_path
        local = os.path.join(self.root, *[p for p in relative.split("/") if p])
        if virtual_path.endswith("/") and not local.endswith(os.sep):
            local += os.sep
        return local

    def to_local_checked(self, virtual_path: str) -> str:
        """Map like to_local, raising ValueError when the result leaves the root."""
        local = self.to_local(virtual_path)
        if not self.is_within_root(local):
            raise ValueError(f"Path is outside of the storage root: {virtual_path}")
        return local

    def is_within_root(self, local_path: str) -> bool:
        p = os.path.abspath(local_path)
        try:
            return os.path.commonpath([self.root, p]) == self.root
        except ValueError:
            return False
