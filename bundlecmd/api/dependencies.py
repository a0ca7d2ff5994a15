"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from bundlecmd.container import container
from bundlecmd.ports.paths.path_resolver_port import PathResolverPort
from bundlecmd.use_cases.commands.execute_commands import ExecuteCommandsUseCase
from bundlecmd.use_cases.commands.parse_commands import ParseCommandsUseCase
from bundlecmd.use_cases.commands.run_package import RunPackageUseCase


def get_execute_commands_uc() -> ExecuteCommandsUseCase:
    """
    Get the command dispatcher from the container.

    Returns:
        ExecuteCommandsUseCase: The command dispatcher instance
    """
    return container.get_execute_commands_use_case()


def get_parse_commands_uc() -> ParseCommandsUseCase:
    """
    Get the command parser from the container.

    Returns:
        ParseCommandsUseCase: The command parser instance
    """
    return container.get_parse_commands_use_case()


def get_run_package_uc() -> RunPackageUseCase:
    """
    Get the package runner from the container.

    Returns:
        RunPackageUseCase: The package runner instance
    """
    return container.get_run_package_use_case()


def get_path_resolver() -> PathResolverPort:
    """
    Get the path resolver from the container.

    Returns:
        PathResolverPort: The path resolver instance
    """
    return container.get_path_resolver()
