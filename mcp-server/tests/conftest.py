from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from shortcuts_mcp.executor.bridge import ShortcutsBridge

FAKE_SHORTCUTS = """\
echo "$*" >> "{calls}"
case "$1" in
  list)
    if [ "$2" = "--folders" ]; then
      printf 'Work\\nHome\\n'
      exit 0
    fi
    printf 'Morning Routine\\n\\nFoo\\nfoo bar\\n  Resize Image  \\n'
    ;;
  run)
    case "$2" in
      Done) echo "Done" ;;
      Silent) ;;
      Echo) shift 2; printf 'args:%s\\n' "$*"; cat ;;
      Fail) exit 1 ;;
      Broken) echo "Something went wrong" >&2; exit 3 ;;
      Slow) exec sleep 5 ;;
      *) echo "The shortcut could not be found." >&2; exit 1 ;;
    esac
    ;;
  *)
    echo "unknown command $1" >&2
    exit 64
    ;;
esac
"""


@pytest.fixture
def make_executable(tmp_path: Path) -> Callable[[str], str]:
    """Write a /bin/sh script and return its path."""

    def _make(body: str, name: str = "shortcuts") -> str:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + textwrap.dedent(body))
        path.chmod(0o755)
        return str(path)

    return _make


@pytest.fixture
def calls_log(tmp_path: Path) -> Path:
    return tmp_path / "calls.log"


@pytest.fixture
def fake_shortcuts(make_executable: Callable[[str], str], calls_log: Path) -> str:
    return make_executable(FAKE_SHORTCUTS.format(calls=calls_log))


@pytest.fixture
def bridge(fake_shortcuts: str) -> ShortcutsBridge:
    return ShortcutsBridge(executable=fake_shortcuts, list_timeout=5.0, run_timeout=5.0)
