"""Bridge to the shortcuts command-line tool."""

from shortcuts_mcp.executor.bridge import ExecutionError, ShortcutsBridge
from shortcuts_mcp.executor.protocol import ProcessResult, ShortcutsCommand

__all__ = [
    "ExecutionError",
    "ShortcutsBridge",
    "ProcessResult",
    "ShortcutsCommand",
]
