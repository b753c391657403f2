"""Protocol definitions for shortcuts CLI communication."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ShortcutsCommand:
    """Command line to send to the shortcuts executable."""

    command: str
    args: list[str] = field(default_factory=list)
    flags: dict[str, str | None] = field(default_factory=dict)

    def to_argv(self, executable: str) -> list[str]:
        """Convert to an argument vector.

        Flags with a ``None`` value are skipped, flags with an empty string
        are passed bare (``--folders``).
        """
        argv = [executable, self.command, *self.args]
        for flag, value in self.flags.items():
            if value is None:
                continue
            argv.append(flag)
            if value:
                argv.append(value)
        return argv


@dataclass
class ProcessResult:
    """Captured output of a finished shortcuts process."""

    returncode: int | None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False
    overflowed: str | None = None
