"""Command engine for packaged file, config and binary-patch operations."""

__version__ = "0.1.0"
