"""Shortcuts CLI bridge - spawns the ``shortcuts`` executable per call."""

from __future__ import annotations

import asyncio
import logging
import os
import signal

from shortcuts_mcp.executor.protocol import ProcessResult, ShortcutsCommand
from shortcuts_mcp.types.models import RunOptions, RunResult, Shortcut, ShortcutDetails

logger = logging.getLogger(__name__)

SHORTCUTS_EXECUTABLE = "shortcuts"
LIST_TIMEOUT = 30.0
RUN_TIMEOUT = 120.0
MAX_BUFFER = 10 * 1024 * 1024

READ_CHUNK_SIZE = 64 * 1024
KILL_WAIT = 5.0


class ExecutionError(RuntimeError):
    """The shortcuts executable failed, timed out, or produced too much output."""


class _BufferExceeded(Exception):
    pass


class ShortcutsBridge:
    """Bridge to the shortcuts command-line tool.

    Holds configuration only. Every method spawns its own process, so
    concurrent calls share nothing.
    """

    def __init__(
        self,
        executable: str = SHORTCUTS_EXECUTABLE,
        list_timeout: float = LIST_TIMEOUT,
        run_timeout: float = RUN_TIMEOUT,
        max_buffer: int = MAX_BUFFER,
    ) -> None:
        self.executable = executable
        self.list_timeout = list_timeout
        self.run_timeout = run_timeout
        self.max_buffer = max_buffer

    async def list_shortcuts(self) -> list[Shortcut]:
        """List all shortcuts, one per non-empty output line."""
        try:
            stdout = await self._check_output(ShortcutsCommand("list"))
        except (ExecutionError, OSError) as e:
            raise ExecutionError(f"Failed to list shortcuts: {e}") from e

        return [Shortcut(name=name) for name in _split_lines(stdout)]

    async def list_folders(self) -> list[str]:
        """List shortcut folders.

        Older versions of the runner don't support ``--folders``, so any
        failure yields an empty list.
        """
        try:
            stdout = await self._check_output(
                ShortcutsCommand("list", flags={"--folders": ""})
            )
        except (ExecutionError, OSError) as e:
            logger.debug(f"Folder listing unavailable: {e}")
            return []

        return _split_lines(stdout)

    async def run_shortcut(
        self,
        name: str,
        options: RunOptions | None = None,
    ) -> RunResult:
        """Run a shortcut by name. Never raises; failures are in the result."""
        options = options or RunOptions()
        command = ShortcutsCommand(
            "run",
            args=[name],
            flags={
                "--input-path": options.input_file or None,
                "--output-type": options.output_type or None,
            },
        )
        input_text = options.input if not options.input_file else None

        try:
            result = await self._execute(
                command,
                timeout=self.run_timeout,
                input_text=input_text or None,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to start shortcut '{name}': {e}")
            return RunResult(success=False, error=str(e))

        if result.timed_out:
            logger.warning(f"Shortcut '{name}' timed out after {self.run_timeout:g}s")
            return RunResult(
                success=False,
                error=result.stderr.strip()
                or f"Shortcut timed out after {self.run_timeout:g} seconds",
            )

        if result.returncode == 0:
            return RunResult(
                success=True,
                output=result.stdout.strip() or "Shortcut completed successfully",
            )

        logger.warning(f"Shortcut '{name}' exited with code {result.returncode}")
        return RunResult(
            success=False,
            error=result.stderr.strip() or f"Shortcut exited with code {result.returncode}",
        )

    async def get_shortcut_details(self, name: str) -> ShortcutDetails:
        """Check whether a shortcut exists (case-insensitive exact match)."""
        try:
            shortcuts = await self.list_shortcuts()
        except ExecutionError as e:
            return ShortcutDetails(exists=False, name=name, error=str(e))

        for shortcut in shortcuts:
            if shortcut.matches(name):
                return ShortcutDetails(exists=True, name=shortcut.name)

        return ShortcutDetails(exists=False, name=name, error="Shortcut not found")

    async def search_shortcuts(self, query: str) -> list[Shortcut]:
        """Find shortcuts whose name contains ``query``, ignoring case."""
        shortcuts = await self.list_shortcuts()
        return [s for s in shortcuts if s.contains(query)]

    async def _check_output(self, command: ShortcutsCommand) -> str:
        """Run an enumeration command and return stdout, raising on failure."""
        argv_text = " ".join(command.to_argv(self.executable))
        result = await self._execute(
            command,
            timeout=self.list_timeout,
            max_buffer=self.max_buffer,
        )

        if result.timed_out:
            raise ExecutionError(
                f"Command timed out after {self.list_timeout:g} seconds: {argv_text}"
            )
        if result.overflowed:
            raise ExecutionError(f"{result.overflowed} maxBuffer length exceeded")
        if result.returncode != 0:
            message = f"Command failed: {argv_text}"
            stderr = result.stderr.strip()
            if stderr:
                message = f"{message}\n{stderr}"
            raise ExecutionError(message)

        return result.stdout

    async def _execute(
        self,
        command: ShortcutsCommand,
        timeout: float,
        input_text: str | None = None,
        max_buffer: int | None = None,
    ) -> ProcessResult:
        """Spawn the executable and collect its output.

        Raises OSError if the process cannot be started and ValueError if the
        input can't be encoded. Timeouts and buffer overflows kill the whole
        process group and are reported on the result.
        """
        argv = command.to_argv(self.executable)
        input_bytes = input_text.encode() if input_text else None
        logger.debug(f"Running: {argv}")

        process = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )

        stdout = bytearray()
        stderr = bytearray()

        async def feed() -> None:
            assert process.stdin is not None
            try:
                if input_bytes:
                    process.stdin.write(input_bytes)
                    await process.stdin.drain()
            except (BrokenPipeError, ConnectionResetError):
                # Exited without reading its input.
                logger.debug(f"{command.command}: stdin closed before input was consumed")
            finally:
                process.stdin.close()

        async def drain(name: str, stream: asyncio.StreamReader | None, sink: bytearray) -> None:
            if stream is None:
                return
            while True:
                chunk = await stream.read(READ_CHUNK_SIZE)
                if not chunk:
                    return
                sink.extend(chunk)
                if max_buffer is not None and len(sink) > max_buffer:
                    raise _BufferExceeded(name)

        tasks = [
            asyncio.ensure_future(feed()),
            asyncio.ensure_future(drain("stdout", process.stdout, stdout)),
            asyncio.ensure_future(drain("stderr", process.stderr, stderr)),
        ]
        finished = False
        timed_out = False
        overflowed: str | None = None

        async def communicate() -> None:
            await asyncio.gather(*tasks)
            await process.wait()

        try:
            await asyncio.wait_for(communicate(), timeout=timeout)
            finished = True
        except asyncio.TimeoutError:
            timed_out = True
        except _BufferExceeded as e:
            overflowed = str(e)
        finally:
            for task in tasks:
                task.cancel()
            if not finished:
                await _kill(process)

        return ProcessResult(
            returncode=process.returncode,
            stdout=stdout.decode(errors="replace"),
            stderr=stderr.decode(errors="replace"),
            timed_out=timed_out,
            overflowed=overflowed,
        )


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill the process group and reap the leader.

    Reaping is bounded: a descendant that escaped the group can keep the
    pipes open, and ``wait()`` only returns once they close.
    """
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    try:
        await asyncio.wait_for(process.wait(), timeout=KILL_WAIT)
    except asyncio.TimeoutError:
        logger.warning(f"Process {process.pid} did not release its pipes after being killed")


def _split_lines(text: str) -> list[str]:
    """Split output on newlines into stripped, non-empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]
