"""MCP tools for the shortcuts runner."""

from shortcuts_mcp.tools.dispatcher import (
    TOOL_NAMES,
    dispatch_tool_call,
    handle_tool_call,
)

__all__ = [
    "TOOL_NAMES",
    "dispatch_tool_call",
    "handle_tool_call",
]
