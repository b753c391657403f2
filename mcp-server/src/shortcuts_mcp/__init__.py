"""MCP server for the macOS shortcuts runner."""

__version__ = "1.0.0"
