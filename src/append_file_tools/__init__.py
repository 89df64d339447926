"""
Append File Tools - an MCP server for newline-ensuring file appends.

Usage:
    from fastmcp import FastMCP
    from append_file_tools.tools import register_all_tools

    mcp = FastMCP("append_file")
    register_all_tools(mcp)
"""

__version__ = "1.0.0"

# Utilities
from .utils import get_env_var

# Core operation
from .tools.file_system_toolkits.append_file.newline_append import (
    AppendFailure,
    AppendOutcome,
    AppendRequest,
    AppendSuccess,
    append_with_newline,
    needs_newline,
)

# MCP registration
from .tools import register_all_tools

__all__ = [
    # Version
    "__version__",
    # Utilities
    "get_env_var",
    # Core operation
    "AppendRequest",
    "AppendOutcome",
    "AppendSuccess",
    "AppendFailure",
    "append_with_newline",
    "needs_newline",
    # MCP registration
    "register_all_tools",
]
