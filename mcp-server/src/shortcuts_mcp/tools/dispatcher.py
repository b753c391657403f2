"""Tool call dispatch: maps MCP tool names to bridge calls."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.types import CallToolResult, TextContent

from shortcuts_mcp.executor.bridge import ShortcutsBridge
from shortcuts_mcp.utils.validation import (
    ExistsArguments,
    RunArguments,
    SearchArguments,
    parse_arguments,
)

logger = logging.getLogger(__name__)

LIST_TOOL = "shortcuts_list"
LIST_FOLDERS_TOOL = "shortcuts_list_folders"
SEARCH_TOOL = "shortcuts_search"
RUN_TOOL = "shortcuts_run"
EXISTS_TOOL = "shortcuts_exists"

TOOL_NAMES = (LIST_TOOL, LIST_FOLDERS_TOOL, SEARCH_TOOL, RUN_TOOL, EXISTS_TOOL)


async def handle_tool_call(
    bridge: ShortcutsBridge,
    name: str,
    arguments: dict[str, Any] | None,
) -> str:
    """Run a tool and return its JSON text. Raises on any failure."""
    result: Any = None

    if name == LIST_TOOL:
        shortcuts = await bridge.list_shortcuts()
        result = {
            "count": len(shortcuts),
            "shortcuts": [s.name for s in shortcuts],
        }

    elif name == LIST_FOLDERS_TOOL:
        result = {"folders": await bridge.list_folders()}

    elif name == SEARCH_TOOL:
        args = parse_arguments(SearchArguments, arguments)
        shortcuts = await bridge.search_shortcuts(args.query)
        result = {
            "query": args.query,
            "count": len(shortcuts),
            "shortcuts": [s.name for s in shortcuts],
        }

    elif name == RUN_TOOL:
        args = parse_arguments(RunArguments, arguments)
        logger.info(f"Running shortcut: {args.name}")
        run_result = await bridge.run_shortcut(args.name, args.to_options())
        result = run_result.model_dump(exclude_none=True)

    elif name == EXISTS_TOOL:
        args = parse_arguments(ExistsArguments, arguments)
        details = await bridge.get_shortcut_details(args.name)
        result = details.model_dump(exclude_none=True)

    else:
        raise ValueError(f"Unknown tool: {name}")

    return json.dumps(result, indent=2)


async def dispatch_tool_call(
    bridge: ShortcutsBridge,
    name: str,
    arguments: dict[str, Any] | None,
) -> CallToolResult:
    """Run a tool, turning every failure into an error result."""
    try:
        text = await handle_tool_call(bridge, name, arguments)
    except Exception as e:
        logger.error(f"Error executing tool {name}: {e}")
        return CallToolResult(
            content=[TextContent(type="text", text=f"Error: {e}")],
            isError=True,
        )

    return CallToolResult(content=[TextContent(type="text", text=text)])
