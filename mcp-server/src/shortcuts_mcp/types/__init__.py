"""Type definitions."""

from shortcuts_mcp.types.models import RunOptions, RunResult, Shortcut, ShortcutDetails

__all__ = [
    "RunOptions",
    "RunResult",
    "Shortcut",
    "ShortcutDetails",
]
