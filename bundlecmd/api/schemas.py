"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class ExecuteCommandsRequest(BaseModel):
    """Schema for a command execution request."""

    commands: Optional[List[List[str]]] = Field(
        None, description="Pre-tokenized commands, verb first"
    )
    lines: Optional[List[str]] = Field(
        None, description="Raw command lines, one command per line"
    )

    @model_validator(mode="after")
    def check_one_source(self):
        if self.commands is None and self.lines is None:
            raise ValueError("Provide either 'commands' or 'lines'")
        if self.commands is not None and self.lines is not None:
            raise ValueError("Provide only one of 'commands' or 'lines'")
        return self


class ExecuteCommandsResponse(BaseModel):
    """Schema for a command execution response."""

    status: str = Field("ok", description="Execution status")
    count: int = Field(..., description="Number of commands handed to the dispatcher")


class PathCheckResponse(BaseModel):
    """Schema for a path safety verdict."""

    path: str = Field(..., description="Checked path, after preprocessing")
    dangerous: bool = Field(..., description="Whether destructive operations are refused")
    rule: Optional[str] = Field(None, description="First rule rejecting the path")


class PackageSectionsResponse(BaseModel):
    """Schema for the sections of a package file."""

    path: str = Field(..., description="Package file path")
    sections: List[str] = Field(..., description="Section names in file order")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
