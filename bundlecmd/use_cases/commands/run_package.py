"""
Use case for running one section of a command package.
"""

import logging
from typing import Optional

from bundlecmd.exceptions import PackageError
from bundlecmd.use_cases.commands.execute_commands import ExecuteCommandsUseCase
from bundlecmd.use_cases.commands.parse_commands import ParseCommandsUseCase


class RunPackageUseCase:
    """Use case for loading a package file and executing a named section."""

    def __init__(
        self,
        parse_commands: ParseCommandsUseCase,
        execute_commands: ExecuteCommandsUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            parse_commands: Package loader
            execute_commands: Command dispatcher
            logger: Logger instance to use for logging
        """
        self._parse_commands = parse_commands
        self._execute_commands = execute_commands
        self._logger = logger or logging.getLogger(__name__)

    def list_sections(self, package_path: str) -> list[str]:
        """Return the section names of a package, in file order."""
        return list(self._parse_commands.load_package(package_path))

    def execute(self, package_path: str, section: str) -> int:
        """
        Execute the commands of one package section.

        Args:
            package_path: Local path of the package file
            section: Section to run

        Returns:
            Number of commands handed to the dispatcher

        Raises:
            PackageError: If the package or section cannot be found
        """
        sections = self._parse_commands.load_package(package_path)
        if section not in sections:
            raise PackageError(f"Section '{section}' not found in {package_path}")
        commands = sections[section]
        self._logger.info(
            f"Running section '{section}' of {package_path} ({len(commands)} commands)"
        )
        self._execute_commands.execute(commands)
        return len(commands)
