#!/usr/bin/env python3
"""
append_file MCP Server

Exposes the newline-ensuring append tool via Model Context Protocol using FastMCP.

Usage:
    # Run with STDIO transport (how MCP hosts usually launch it)
    python mcp_server.py --stdio

    # Run with HTTP transport
    python mcp_server.py

    # Run with custom port
    python mcp_server.py --port 8001

Environment Variables:
    MCP_PORT   - HTTP server port (default: 4001)
    MCP_HOST   - HTTP server host (default: 0.0.0.0)
    LOG_LEVEL  - Logging level for stderr logs (default: INFO)
"""
import argparse
import logging
import sys

# Suppress FastMCP banner in STDIO mode
if "--stdio" in sys.argv:
    # Monkey-patch rich Console to redirect to stderr
    import rich.console
    _original_console_init = rich.console.Console.__init__

    def _patched_console_init(self, *args, **kwargs):
        kwargs['file'] = sys.stderr  # Force all rich output to stderr
        _original_console_init(self, *args, **kwargs)

    rich.console.Console.__init__ = _patched_console_init

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from append_file_tools import __version__, get_env_var
from append_file_tools.tools import register_all_tools

logger = logging.getLogger("mcp_server")

SERVER_NAME = "append_file"

mcp = FastMCP(SERVER_NAME, version=__version__)

tools = register_all_tools(mcp)
# STDIO mode requires clean stdout for JSON-RPC
print(f"[MCP] Registered {len(tools)} tools: {tools}", file=sys.stderr)


@mcp.custom_route("/health", methods=["GET"])
async def health_check(request: Request) -> PlainTextResponse:
    """Health check endpoint for container orchestration."""
    return PlainTextResponse("OK")


@mcp.custom_route("/", methods=["GET"])
async def index(request: Request) -> PlainTextResponse:
    """Landing page for browser visits."""
    return PlainTextResponse("Welcome to the append_file MCP Server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="append_file MCP Server")
    parser.add_argument(
        "--port",
        type=int,
        default=int(get_env_var("MCP_PORT", "4001")),
        help="HTTP server port (default: 4001)",
    )
    parser.add_argument(
        "--host",
        default=get_env_var("MCP_HOST", "0.0.0.0"),
        help="HTTP server host (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Use STDIO transport instead of HTTP",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the MCP server."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=get_env_var("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.stdio:
            # STDIO mode: only JSON-RPC messages go to stdout
            print(f"{SERVER_NAME} MCP Server running on stdio", file=sys.stderr)
            mcp.run(transport="stdio")
        else:
            print(f"[MCP] Starting HTTP server on {args.host}:{args.port}", file=sys.stderr)
            mcp.run(transport="http", host=args.host, port=args.port)
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
