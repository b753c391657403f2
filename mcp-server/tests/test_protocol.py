from __future__ import annotations

from shortcuts_mcp.executor.protocol import ShortcutsCommand


def test_to_argv_plain_command() -> None:
    assert ShortcutsCommand("list").to_argv("shortcuts") == ["shortcuts", "list"]


def test_to_argv_bare_flag() -> None:
    cmd = ShortcutsCommand("list", flags={"--folders": ""})

    assert cmd.to_argv("shortcuts") == ["shortcuts", "list", "--folders"]


def test_to_argv_skips_unset_flags() -> None:
    cmd = ShortcutsCommand(
        "run",
        args=["My Shortcut"],
        flags={"--input-path": None, "--output-type": "public.json"},
    )

    assert cmd.to_argv("/usr/bin/shortcuts") == [
        "/usr/bin/shortcuts",
        "run",
        "My Shortcut",
        "--output-type",
        "public.json",
    ]
