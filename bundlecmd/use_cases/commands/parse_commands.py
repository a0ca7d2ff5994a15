"""
Use case for turning command text and package files into tokenized commands.

A package file is INI-shaped: each ``[section]`` names an action and every
non-comment line below it is one command, e.g.::

    [Install theme]
    download https://example.com/theme.zip /config/themes/
    unzip /config/themes/theme.zip '/atmosphere/contents/'
"""

import logging
import os
from typing import Optional

from bundlecmd.entities.command import Command
from bundlecmd.exceptions import PackageError

COMMENT_PREFIXES = (";", "#")
QUOTE_CHARS = ("'", '"')


def tokenize_command_line(line: str) -> list[str]:
    """
    Split a command line on whitespace, keeping quoted groups together.

    Quotes are kept in the tokens; they are stripped later when operands are
    normalized.

    Args:
        line: Raw command line

    Returns:
        List of tokens, verb first
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: Optional[str] = None
    for char in line.strip():
        if quote:
            current.append(char)
            if char == quote:
                quote = None
        elif char in QUOTE_CHARS:
            quote = char
            current.append(char)
        elif char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


def _is_comment(line: str) -> bool:
    return line.startswith(COMMENT_PREFIXES)


def parse_command_lines(text: str) -> list[Command]:
    """Tokenize one command per non-blank, non-comment line."""
    commands: list[Command] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or _is_comment(line):
            continue
        commands.append(Command.from_tokens(tokenize_command_line(line)))
    return commands


class ParseCommandsUseCase:
    """Use case for loading command packages from local files."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the use case.

        Args:
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)

    def parse_lines(self, lines: list[str]) -> list[Command]:
        """Tokenize ad-hoc command lines."""
        return parse_command_lines("\n".join(lines))

    def load_package(self, path: str) -> dict[str, list[Command]]:
        """
        Load a package file into its sections.

        Args:
            path: Local path of the package file

        Returns:
            Mapping of section name to its commands, in file order

        Raises:
            PackageError: If the file cannot be read
        """
        if not os.path.isfile(path):
            raise PackageError(f"Package file does not exist: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except Exception as e:
            raise PackageError(f"Failed to read package {path}: {str(e)}")

        sections: dict[str, list[Command]] = {}
        current: Optional[list[Command]] = None
        for raw in text.splitlines():
            line = raw.strip()
            if not line or _is_comment(line):
                continue
            if line.startswith("[") and line.endswith("]"):
                current = sections.setdefault(line[1:-1].strip(), [])
                continue
            if current is None:
                self._logger.debug(f"Ignoring command outside of a section: {line}")
                continue
            current.append(Command.from_tokens(tokenize_command_line(line)))

        self._logger.info(f"Loaded {len(sections)} sections from {path}")
        return sections
