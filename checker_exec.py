from __future__ import annotations

import os
import subprocess
from collections.abc import Iterable

from checker_version import LauncherError

EXEC_MODES = ("spawn", "system")


def construct_command(args: Iterable[str]) -> str:
    # Only `"` is escaped: backslashes and `$`/backticks still reach the shell.
    return " ".join('"' + arg.replace('"', '\\"') + '"' for arg in args)


def execute_system(args: Iterable[str]) -> int:
    """
    Compatibility mode: run through os.system() as one shell string.

    The child shares the terminal with no extra pipes. Returns whatever
    os.system() reports (a wait status on POSIX).
    """
    return os.system(construct_command(args))


def execute(args: list[str]) -> int:
    """
    Spawn args directly with inherited stdin/stdout/stderr; blocks until exit.

    Ctrl-C goes to the whole foreground group, so the child sees it too; we keep
    waiting and return whatever the child decides to exit with.
    """
    with subprocess.Popen(args) as proc:
        while True:
            try:
                return proc.wait()
            except KeyboardInterrupt:
                continue


def run(args: list[str], mode: str = "spawn") -> int:
    if mode == "spawn":
        try:
            return execute(args)
        except FileNotFoundError as ex:
            raise LauncherError(f"required command not found: {args[0]}") from ex
        except OSError as ex:
            raise LauncherError(f"could not run {args[0]}: {ex}") from ex
    if mode == "system":
        return execute_system(args)
    raise LauncherError(f"unknown exec mode: {mode} (expected one of: {', '.join(EXEC_MODES)})")


def exit_code(status: int, mode: str) -> int:
    """Process exit code for a status returned by run(); death by signal N gives 128 + N."""
    if mode == "system" and os.name == "posix":
        status = os.waitstatus_to_exitcode(status)
    if status < 0:
        return 128 - status
    return status
