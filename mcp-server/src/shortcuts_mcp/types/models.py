"""Type definitions for shortcuts, run options, and run results."""

from __future__ import annotations

from pydantic import BaseModel


class Shortcut(BaseModel):
    """A named automation known to the shortcuts runner."""

    name: str
    folder: str | None = None

    def matches(self, name: str) -> bool:
        """Case-insensitive exact name match."""
        return self.name.casefold() == name.casefold()

    def contains(self, query: str) -> bool:
        """Case-insensitive substring match on the name."""
        return query.casefold() in self.name.casefold()


class RunOptions(BaseModel):
    """Optional inputs for running a shortcut.

    ``input`` is piped to stdin only when no ``input_file`` is given.
    """

    input: str | None = None
    input_file: str | None = None
    output_type: str | None = None


class RunResult(BaseModel):
    """Outcome of a shortcut run."""

    success: bool
    output: str | None = None
    error: str | None = None


class ShortcutDetails(BaseModel):
    """Existence check result for a shortcut name."""

    exists: bool
    name: str
    error: str | None = None
