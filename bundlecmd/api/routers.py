"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from bundlecmd.api.dependencies import (
    get_execute_commands_uc,
    get_parse_commands_uc,
    get_path_resolver,
    get_run_package_uc,
)
from bundlecmd.api.schemas import (
    ErrorResponse,
    ExecuteCommandsRequest,
    ExecuteCommandsResponse,
    PackageSectionsResponse,
    PathCheckResponse,
)
from bundlecmd.entities.command import Command
from bundlecmd.utils.path_safety import first_violation

router = APIRouter()


@router.post(
    "/commands/execute",
    response_model=ExecuteCommandsResponse,
    responses={400: {"model": ErrorResponse}},
)
def execute_commands(body: ExecuteCommandsRequest):
    """
    Execute a command list.

    Args:
        body: Either pre-tokenized commands or raw command lines

    Returns:
        ExecuteCommandsResponse: Number of commands handed to the dispatcher

    Raises:
        HTTPException: If a collaborator fails while executing
    """
    try:
        if body.commands is not None:
            commands = [Command.from_tokens(c) for c in body.commands]
        else:
            commands = get_parse_commands_uc().parse_lines(body.lines or [])
        get_execute_commands_uc().execute(commands)
        return ExecuteCommandsResponse(status="ok", count=len(commands))
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/paths/check",
    response_model=PathCheckResponse,
    responses={400: {"model": ErrorResponse}},
)
def check_path(path: str = Query(..., description="Path operand to check")):
    """
    Report whether delete/move commands would refuse a path.

    Args:
        path: Raw path operand, as it would appear in a command

    Returns:
        PathCheckResponse: The preprocessed path and the safety verdict
    """
    try:
        resolved = get_path_resolver().preprocess_path(path)
        rule = first_violation(resolved)
        return PathCheckResponse(path=resolved, dangerous=rule is not None, rule=rule)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get(
    "/packages/sections",
    response_model=PackageSectionsResponse,
    responses={400: {"model": ErrorResponse}},
)
def list_package_sections(
    path: str = Query(..., description="Local path of the package file"),
):
    """
    List the sections of a package file.

    Raises:
        HTTPException: If the package cannot be loaded
    """
    try:
        sections = get_run_package_uc().list_sections(path)
        return PackageSectionsResponse(path=path, sections=sections)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))
