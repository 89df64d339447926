from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .newline_append import AppendFailure, append_with_newline

APPEND_FILE_DESCRIPTION = (
    "Append text to a file ensuring exactly one newline before appended content."
)


def register_tools(mcp: FastMCP) -> None:
    """Register the newline-ensuring append tool with the MCP server."""

    @mcp.tool(description=APPEND_FILE_DESCRIPTION)
    def append_file(
        content: Annotated[str, Field(description="The text to append to the file.")],
        absolute_path: Annotated[str, Field(description="The path to the file to append to.")],
    ) -> str:
        """
        Purpose
            Add text to the end of an existing file so it starts on its own line.

        Rules & Constraints
            The path must be absolute
            The file must already exist; it is never created
            A newline is inserted first only if the file is non-empty and
            does not already end with one

        Args:
            content: The text to append to the file
            absolute_path: The path to the file to append to

        Returns:
            Confirmation message with the number of content bytes appended
        """
        outcome = append_with_newline(absolute_path, content)
        if isinstance(outcome, AppendFailure):
            raise ToolError(outcome.message)
        return f"Successfully appended {outcome.bytes_appended} bytes to {absolute_path}."
