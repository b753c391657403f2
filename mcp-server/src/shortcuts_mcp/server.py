"""Shortcuts MCP Server.

Exposes the macOS ``shortcuts`` command-line tool over MCP: list, search,
check and run the user's shortcuts.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from shortcuts_mcp import __version__
from shortcuts_mcp.executor.bridge import ShortcutsBridge
from shortcuts_mcp.tools.dispatcher import (
    EXISTS_TOOL,
    LIST_FOLDERS_TOOL,
    LIST_TOOL,
    RUN_TOOL,
    SEARCH_TOOL,
    dispatch_tool_call,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "shortcuts-mcp"

server = Server(SERVER_NAME, version=__version__)


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    tools = [
        Tool(
            name=LIST_TOOL,
            description="List all available shortcuts on this Mac.",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        Tool(
            name=LIST_FOLDERS_TOOL,
            description="List all shortcut folders.",
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        Tool(
            name=SEARCH_TOOL,
            description="Search for shortcuts by name.",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Text to search for in shortcut names",
                    },
                },
                "required": ["query"],
            },
        ),
        Tool(
            name=RUN_TOOL,
            description=(
                "Run a shortcut by name. Can optionally pass input text or a file path. "
                "This is a powerful tool that can trigger any automation the user has created."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Name of the shortcut to run (exact match)",
                    },
                    "input": {
                        "type": "string",
                        "description": "Text input to pass to the shortcut (optional)",
                    },
                    "input_file": {
                        "type": "string",
                        "description": "Path to file to use as input (optional)",
                    },
                    "output_type": {
                        "type": "string",
                        "description": (
                            "Output format: 'public.plain-text', 'public.html', "
                            "'public.json', etc. (optional)"
                        ),
                    },
                },
                "required": ["name"],
            },
        ),
        Tool(
            name=EXISTS_TOOL,
            description="Check if a shortcut exists by name.",
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Name of the shortcut to check",
                    },
                },
                "required": ["name"],
            },
        ),
    ]
    return tools


# Arguments are validated by the dispatcher so error text stays consistent.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    """Handle tool calls."""
    bridge = ShortcutsBridge()
    return await dispatch_tool_call(bridge, name, arguments)


async def run_server() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Shortcuts MCP server v{__version__} running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Entry point."""
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
