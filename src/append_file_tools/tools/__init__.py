"""
Tool registration for the append_file MCP server.

Usage:
    from fastmcp import FastMCP
    from append_file_tools.tools import register_all_tools

    mcp = FastMCP("my-server")
    register_all_tools(mcp)
"""
import logging

from fastmcp import FastMCP

from .file_system_toolkits import append_file

logger = logging.getLogger(__name__)

TOOL_NAMES = ["append_file"]


def register_all_tools(mcp: FastMCP) -> list[str]:
    """
    Register every tool with the MCP server.

    Args:
        mcp: FastMCP server instance

    Returns:
        Names of the registered tools
    """
    append_file.register_tools(mcp)
    logger.debug(f"Registered tools: {TOOL_NAMES}")
    return list(TOOL_NAMES)
