"""Utility functions."""

from shortcuts_mcp.utils.validation import (
    ToolArgumentError,
    ValidationError,
    parse_arguments,
)

__all__ = [
    "ToolArgumentError",
    "ValidationError",
    "parse_arguments",
]
